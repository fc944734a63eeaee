"""
Filtering of canonical component lists for display and export.
"""

import logging
from collections.abc import Sequence

from ...shared.caching import ResultCache, compute_cache_key
from ...shared.models import ComponentModel, FilterState

logger = logging.getLogger(__name__)


def matches_filters(component: ComponentModel, filters: FilterState) -> bool:
    """Check a single component against the active filters.

    Search is a case-insensitive substring match on the name; the list
    filters match when empty or when they contain the component's value.
    """
    term = filters.search_term.strip().lower()
    if term and term not in component.name.lower():
        return False
    if filters.types and component.type.value not in filters.types:
        return False
    if filters.licenses and component.license not in filters.licenses:
        return False
    if filters.risk_levels and component.risk_level.value not in filters.risk_levels:
        return False
    return True


def filter_components(
    components: Sequence[ComponentModel], filters: FilterState
) -> list[ComponentModel]:
    """Return the components passing the filters, in input order."""
    if filters.is_empty:
        return list(components)
    return [component for component in components if matches_filters(component, filters)]


class ComponentFilter:
    """Filters component lists, memoizing results by a hash of the inputs."""

    def __init__(self, cache: ResultCache[list[ComponentModel]] | None = None):
        self.cache = cache if cache is not None else ResultCache()

    @staticmethod
    def cache_key(components: Sequence[ComponentModel], filters: FilterState) -> str:
        return compute_cache_key(
            [component.to_dict() for component in components],
            {
                "types": sorted(filters.types),
                "licenses": sorted(filters.licenses),
                "risk_levels": sorted(filters.risk_levels),
                "search_term": filters.search_term.strip().lower(),
            },
        )

    def apply(
        self, components: Sequence[ComponentModel], filters: FilterState
    ) -> list[ComponentModel]:
        """Filter components, reusing a previous result for identical inputs.

        Args:
            components: Canonical component list
            filters: Active filters

        Returns:
            A fresh list of the matching components
        """
        key = self.cache_key(components, filters)
        result = self.cache.get_or_compute(key, lambda: filter_components(components, filters))
        logger.debug(f"Filter kept {len(result)}/{len(components)} components")
        return list(result)

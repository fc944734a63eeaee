"""
Merging of multiple SBOM component lists into one canonical set.

Components are identified by ``name@version``. The first occurrence of a key
establishes the canonical entry; later occurrences are folded into it:

* dependency and vulnerability lists are unioned (first-seen order kept)
* risk level and CVE count take the maximum across occurrences
* description, license and publisher keep the first non-empty value
* metadata is shallow-merged, later values only filling gaps

Merging never fails on well-typed input.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import replace

from ...shared.models import ComponentModel, RiskLevel, VulnerabilityModel

logger = logging.getLogger(__name__)

UNKNOWN_LICENSE = "Unknown"


def is_placeholder_description(component: ComponentModel) -> bool:
    """Check whether a description is empty or only the generic ``<type> component`` text."""
    description = component.description.strip()
    return not description or description == f"{component.type.value} component"


def _is_placeholder_license(license_name: str) -> bool:
    return not license_name.strip() or license_name.strip() == UNKNOWN_LICENSE


def _copy_component(component: ComponentModel, new_id: str) -> ComponentModel:
    """Copy a component with its own deduplicated lists."""
    return replace(
        component,
        id=new_id,
        dependencies=list(dict.fromkeys(component.dependencies)),
        vulnerabilities=_union_vulnerabilities([], component.vulnerabilities),
        metadata=dict(component.metadata),
    )


def _union_vulnerabilities(
    existing: list[VulnerabilityModel], incoming: Iterable[VulnerabilityModel]
) -> list[VulnerabilityModel]:
    merged = list(existing)
    seen = {vuln.id for vuln in merged}
    for vuln in incoming:
        if vuln.id not in seen:
            seen.add(vuln.id)
            merged.append(replace(vuln))
    return merged


def _merge_into(existing: ComponentModel, component: ComponentModel) -> None:
    """Fold a duplicate occurrence into the canonical entry in place."""
    existing.dependencies = list(dict.fromkeys([*existing.dependencies, *component.dependencies]))
    existing.vulnerabilities = _union_vulnerabilities(
        existing.vulnerabilities, component.vulnerabilities
    )
    existing.risk_level = RiskLevel.highest(existing.risk_level, component.risk_level)
    existing.cve_count = max(existing.cve_count, component.cve_count)

    if is_placeholder_description(existing) and not is_placeholder_description(component):
        existing.description = component.description
    if _is_placeholder_license(existing.license) and not _is_placeholder_license(
        component.license
    ):
        existing.license = component.license
    if not existing.publisher and component.publisher:
        existing.publisher = component.publisher

    for key, value in component.metadata.items():
        if value is not None and existing.metadata.get(key) is None:
            existing.metadata[key] = value


def _unique_id(component_id: str, source_index: int, issued: set[str]) -> str:
    """Return an id not yet issued, suffixing the source index on collision."""
    if component_id not in issued:
        return component_id
    candidate = f"{component_id}-{source_index}"
    suffix = 1
    while candidate in issued:
        candidate = f"{component_id}-{source_index}-{suffix}"
        suffix += 1
    return candidate


def merge_sboms(sources: Sequence[Sequence[ComponentModel]]) -> list[ComponentModel]:
    """Merge several component lists into one canonical, deduplicated list.

    Args:
        sources: Component lists in priority order

    Returns:
        Canonical components in first-insertion order of their keys
    """
    merged: dict[str, ComponentModel] = {}
    issued_ids: set[str] = set()
    duplicates = 0

    for source_index, components in enumerate(sources):
        for component in components:
            key = component.key
            existing = merged.get(key)

            if existing is None:
                new_id = _unique_id(component.id, source_index, issued_ids)
                if new_id != component.id:
                    logger.debug(f"Renamed colliding id {component.id!r} to {new_id!r} ({key})")
                issued_ids.add(new_id)
                merged[key] = _copy_component(component, new_id)
            else:
                duplicates += 1
                _merge_into(existing, component)

    logger.debug(
        f"Merged {len(sources)} source(s) into {len(merged)} components "
        f"({duplicates} duplicate occurrence(s) folded)"
    )
    return list(merged.values())


def deduplicate_components(components: Sequence[ComponentModel]) -> list[ComponentModel]:
    """Deduplicate a single component list by ``name@version``.

    Args:
        components: Possibly repetitive component list

    Returns:
        Deduplicated components using the same merge policy as merge_sboms
    """
    return merge_sboms([components])

"""
Tests for component filtering.
"""

from sbom_visualizer.pipeline.sbom.filtering import (
    ComponentFilter,
    filter_components,
    matches_filters,
)
from sbom_visualizer.shared.models import FilterState


class TestMatchesFilters:
    """Tests for matches_filters."""

    def test_empty_filter_matches_everything(self, sample_components) -> None:
        assert all(matches_filters(c, FilterState()) for c in sample_components)

    def test_search_is_case_insensitive_substring(self, sample_components) -> None:
        """Test name search ignores case."""
        filters = FilterState(search_term="  PARSER ")
        assert [c.id for c in sample_components if matches_filters(c, filters)] == ["lib-2"]

    def test_combined_filters(self, sample_components) -> None:
        """Test every active filter must match."""
        filters = FilterState(types=["library"], risk_levels=["high", "low"])
        assert [c.id for c in filter_components(sample_components, filters)] == ["lib-2"]

    def test_license_filter(self, sample_components) -> None:
        filters = FilterState(licenses=["MIT"])
        assert [c.id for c in filter_components(sample_components, filters)] == ["app-1", "dep-1"]


class TestComponentFilter:
    """Tests for the memoizing ComponentFilter."""

    def test_identical_inputs_hit_cache(self, sample_components) -> None:
        """Test the second identical request is served from the cache."""
        component_filter = ComponentFilter()
        filters = FilterState(types=["library"])

        first = component_filter.apply(sample_components, filters)
        second = component_filter.apply(sample_components, filters)

        assert [c.id for c in first] == [c.id for c in second] == ["lib-1", "lib-2"]
        assert component_filter.cache.hits == 1
        assert component_filter.cache.misses == 1

    def test_returns_fresh_lists(self, sample_components) -> None:
        """Test callers cannot corrupt the cached result."""
        component_filter = ComponentFilter()
        filters = FilterState(search_term="http")

        first = component_filter.apply(sample_components, filters)
        first.clear()

        assert len(component_filter.apply(sample_components, filters)) == 1

    def test_changed_components_miss_cache(self, sample_components) -> None:
        """Test modified input components produce a new key."""
        component_filter = ComponentFilter()
        filters = FilterState(risk_levels=["low"])
        component_filter.apply(sample_components, filters)

        sample_components[0].name = "renamed-app"
        component_filter.apply(sample_components, filters)

        assert component_filter.cache.misses == 2

    def test_filter_order_does_not_matter(self, sample_components) -> None:
        """Test equivalent filters share a cache key."""
        forward = FilterState(types=["library", "dependency"])
        backward = FilterState(types=["dependency", "library"])
        assert ComponentFilter.cache_key(sample_components, forward) == ComponentFilter.cache_key(
            sample_components, backward
        )

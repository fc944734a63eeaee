"""
SBOM input processing: reading, merging and filtering component lists.
"""

from .filtering import ComponentFilter, filter_components, matches_filters
from .merging import deduplicate_components, merge_sboms
from .parsing import (
    load_component_list,
    parse_component_list,
    parse_sbom_document,
    validate_sbom_document,
    write_component_list,
)

__all__ = [
    "ComponentFilter",
    "deduplicate_components",
    "filter_components",
    "load_component_list",
    "matches_filters",
    "merge_sboms",
    "parse_component_list",
    "parse_sbom_document",
    "validate_sbom_document",
    "write_component_list",
]

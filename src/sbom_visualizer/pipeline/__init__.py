"""
Pipeline module: everything between raw SBOM input and the canonical
component list handed to the visualization layer.
"""

from .generation import generation_failure, generation_success, run_generator
from .sbom import (
    ComponentFilter,
    deduplicate_components,
    filter_components,
    load_component_list,
    merge_sboms,
    parse_component_list,
    parse_sbom_document,
    validate_sbom_document,
    write_component_list,
)

__all__ = [
    "ComponentFilter",
    "deduplicate_components",
    "filter_components",
    "generation_failure",
    "generation_success",
    "load_component_list",
    "merge_sboms",
    "parse_component_list",
    "parse_sbom_document",
    "run_generator",
    "validate_sbom_document",
    "write_component_list",
]

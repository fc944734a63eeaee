"""
SBOM Visualizer - dependency tree rendering for Software Bills of Materials.

This package provides functionality for:
- Reading CycloneDX documents and plain component lists
- Merging several SBOMs into one canonical, deduplicated component set
- Building cycle-safe dependency tree forests
- Laying trees out without overlap and exporting them as standalone HTML
"""

from .pipeline import merge_sboms
from .shared.exceptions import SBOMVisualizerError
from .shared.models import ComponentModel, ExportOptions, FilterState, TreeNode
from .visualization import (
    build_forest,
    download_html,
    export_document,
    layout_forest,
    render_dependency_tree,
)

__version__ = "0.1.0"

__all__ = [
    "ComponentModel",
    "ExportOptions",
    "FilterState",
    "SBOMVisualizerError",
    "TreeNode",
    "build_forest",
    "download_html",
    "export_document",
    "layout_forest",
    "merge_sboms",
    "render_dependency_tree",
]

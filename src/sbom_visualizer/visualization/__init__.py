"""
SBOM Visualization Module

This module builds hierarchical dependency trees from canonical component
lists, lays them out, and exports them as standalone HTML documents.
"""

from .core import UnifiedVisualizer
from .engines import HierarchicalEngine, TreeLayoutEngine, build_forest, layout_forest
from .exporter import (
    TransientDocument,
    TreeExporter,
    calculate_statistics,
    download_html,
    export_document,
    get_risk_color,
    get_type_color,
)
from .unified import create_tree_export, render_dependency_tree, validate_sbom_file

__all__ = [
    # Primary interface
    "render_dependency_tree",
    "create_tree_export",
    "validate_sbom_file",
    "export_document",
    "download_html",
    # Core components
    "UnifiedVisualizer",
    "HierarchicalEngine",
    "TreeLayoutEngine",
    "TreeExporter",
    "TransientDocument",
    "build_forest",
    "layout_forest",
    "calculate_statistics",
    "get_risk_color",
    "get_type_color",
]

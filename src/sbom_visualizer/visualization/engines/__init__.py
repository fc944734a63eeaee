"""
Visualization engines for tree building and layout.

This module provides the engines behind the dependency tree export: the
hierarchical engine turns components into a tree forest, and the layout
engine positions that forest (or lays components out as a matrix).
"""

from .hierarchical_engine import HierarchicalEngine, build_dependency_graph, build_forest
from .layout_engine import (
    MatrixLayout,
    TreeLayoutEngine,
    collect_edges,
    forest_bounds,
    iter_nodes,
    layout_forest,
    matrix_layout,
)

__all__ = [
    "HierarchicalEngine",
    "MatrixLayout",
    "TreeLayoutEngine",
    "build_dependency_graph",
    "build_forest",
    "collect_edges",
    "forest_bounds",
    "iter_nodes",
    "layout_forest",
    "matrix_layout",
]

"""
Layered tree layout and adjacency-matrix layout for SBOM visualizations.

Tree layout assigns ``x`` purely from depth and ``y`` from a cursor that
advances one row per leaf across the whole forest; internal nodes sit at the
midpoint of their first and last child. Leaves therefore never share a row.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from ...shared.models import ComponentModel, LayoutConfig, TreeEdge, TreeNode
from .hierarchical_engine import build_dependency_graph

logger = logging.getLogger(__name__)


class TreeLayoutEngine:
    """Positions the nodes of a tree forest."""

    def __init__(self, config: LayoutConfig | None = None):
        """Initialize the layout engine.

        Args:
            config: Geometry settings (defaults to LayoutConfig())
        """
        self.config = config or LayoutConfig()

    def layout(self, forest: list[TreeNode]) -> list[TreeNode]:
        """Assign x/y to every node in the forest in a single traversal.

        Only coordinates are modified; the tree structure is untouched.

        Args:
            forest: Root nodes, in display order

        Returns:
            The same forest, positioned
        """
        cfg = self.config
        cursor = cfg.base_offset
        node_count = 0

        for tree_index, root in enumerate(forest):
            if tree_index > 0:
                cursor += cfg.tree_gap

            stack: list[tuple[TreeNode, bool]] = [(root, False)]
            while stack:
                node, expanded = stack.pop()
                if expanded:
                    node.y = (node.children[0].y + node.children[-1].y) / 2
                    continue

                node_count += 1
                node.x = cfg.base_offset + node.level * cfg.level_gap
                if node.is_leaf:
                    node.y = cursor + cfg.node_height / 2
                    cursor += cfg.row_height
                else:
                    stack.append((node, True))
                    stack.extend((child, False) for child in reversed(node.children))

        logger.debug(f"Positioned {node_count} nodes in {len(forest)} tree(s)")
        return forest


def layout_forest(forest: list[TreeNode], config: LayoutConfig | None = None) -> list[TreeNode]:
    """Position a forest with the default tree layout engine."""
    return TreeLayoutEngine(config).layout(forest)


def iter_nodes(forest: Sequence[TreeNode]):
    """Yield every node of the forest in pre-order, tree by tree."""
    for root in forest:
        yield from root.walk()


def collect_edges(forest: Sequence[TreeNode], config: LayoutConfig | None = None) -> list[TreeEdge]:
    """Build drawable edges from each node's right edge to its children.

    Args:
        forest: Positioned forest
        config: Geometry settings used for the node width

    Returns:
        One edge per parent/child pair, in pre-order
    """
    cfg = config or LayoutConfig()
    return [
        TreeEdge(
            source=node.id,
            target=child.id,
            source_x=node.x + cfg.node_width,
            source_y=node.y,
            target_x=child.x,
            target_y=child.y,
        )
        for node in iter_nodes(forest)
        for child in node.children
    ]


def forest_bounds(
    forest: Sequence[TreeNode], config: LayoutConfig | None = None
) -> tuple[float, float]:
    """Compute the canvas size needed to draw a positioned forest.

    Returns:
        (width, height); an empty forest gets a minimal one-node canvas
    """
    cfg = config or LayoutConfig()
    max_x = cfg.base_offset
    max_y = cfg.base_offset
    for node in iter_nodes(forest):
        max_x = max(max_x, node.x)
        max_y = max(max_y, node.y)
    return (
        max_x + cfg.node_width + cfg.canvas_margin,
        max_y + cfg.node_height + cfg.canvas_margin,
    )


@dataclass
class MatrixLayout:
    """Geometry of an adjacency-matrix rendering."""

    labels: list[str] = field(default_factory=list)
    ids: list[str] = field(default_factory=list)
    edges: set[tuple[int, int]] = field(default_factory=set)
    origin_x: float = 0.0
    origin_y: float = 0.0
    cell_size: float = 24.0
    width: float = 0.0
    height: float = 0.0


def matrix_layout(
    components: Sequence[ComponentModel],
    cell_size: float = 24.0,
    label_width: float = 180.0,
    margin: float = 20.0,
) -> MatrixLayout:
    """Lay out the components as an adjacency matrix.

    Row ``i`` / column ``j`` is filled when component ``i`` depends on
    component ``j``. Dangling dependency ids are not drawn.

    Args:
        components: Canonical component list (defines row/column order)
        cell_size: Side of a matrix cell
        label_width: Space reserved for row and column labels
        margin: Outer margin

    Returns:
        MatrixLayout describing labels, filled cells and canvas size
    """
    graph = build_dependency_graph(components)
    ids = list(dict.fromkeys(component.id for component in components))
    names = {component.id: component.name for component in components}
    position = {component_id: index for index, component_id in enumerate(ids)}

    edges = {(position[source], position[target]) for source, target in graph.edges()}
    size = len(ids) * cell_size
    return MatrixLayout(
        labels=[names[component_id] for component_id in ids],
        ids=ids,
        edges=edges,
        origin_x=margin + label_width,
        origin_y=margin + label_width,
        cell_size=cell_size,
        width=2 * margin + label_width + size,
        height=2 * margin + label_width + size,
    )

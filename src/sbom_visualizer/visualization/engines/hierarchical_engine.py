"""
Hierarchical engine for SBOM dependency trees.

This engine turns a canonical component list into a forest of TreeNode
objects. Cycle detection is scoped to the current root-to-node path: each
child branch receives its own copy of the ancestor set, so a component
reached through two different parents (a diamond) appears once under each
of them, while a component that depends on one of its own ancestors is cut
off at that point.
"""

import logging
from collections.abc import Sequence

import networkx as nx

from ...shared.models import ComponentModel, ComponentType, TreeNode


def build_dependency_graph(components: Sequence[ComponentModel]) -> nx.DiGraph:
    """Create a directed graph of component ids with an edge per dependency.

    Dangling dependency ids (not present in the component list) are left out.

    Args:
        components: Canonical component list

    Returns:
        NetworkX directed graph keyed by component id
    """
    graph = nx.DiGraph()
    for component in components:
        graph.add_node(component.id, name=component.name, type=component.type.value)

    for component in components:
        for dep_id in component.dependencies:
            if dep_id in graph:
                graph.add_edge(component.id, dep_id)

    return graph


class HierarchicalEngine:
    """Engine for building tree forests from canonical component lists."""

    def __init__(self, max_nodes: int | None = None):
        """Initialize the hierarchical engine.

        Args:
            max_nodes: Optional cap on TreeNode instances per build (None = no cap)
        """
        self.logger = logging.getLogger(__name__)
        self.max_nodes = max_nodes

    def find_root_ids(self, components: Sequence[ComponentModel]) -> list[str]:
        """Find root component ids.

        Roots are components no other component depends on. When every
        component is depended upon (e.g. the whole set is one cycle), the
        application components are used instead, and failing that the first
        component.

        Args:
            components: Canonical component list

        Returns:
            Root ids in component order
        """
        if not components:
            return []

        graph = build_dependency_graph(components)
        graph.remove_edges_from(list(nx.selfloop_edges(graph)))

        roots = [c.id for c in components if graph.in_degree(c.id) == 0]
        if roots:
            return list(dict.fromkeys(roots))

        applications = [c.id for c in components if c.type == ComponentType.APPLICATION]
        if applications:
            self.logger.debug("No dependency-free components, using applications as roots")
            return list(dict.fromkeys(applications))

        return [components[0].id]

    def build_forest(
        self,
        components: Sequence[ComponentModel],
        roots: Sequence[str] | None = None,
        root_id: str | None = None,
    ) -> list[TreeNode]:
        """Build one tree per root.

        Args:
            components: Canonical component list
            roots: Explicit root ids (default: discovered with find_root_ids)
            root_id: Single designated root, takes precedence over roots

        Returns:
            List of root TreeNodes; roots missing from the components are skipped
        """
        index = {component.id: component for component in components}

        if root_id is not None:
            root_ids: Sequence[str] = [root_id]
        elif roots is not None:
            root_ids = roots
        else:
            root_ids = self.find_root_ids(components)

        budget = [self.max_nodes] if self.max_nodes is not None else None
        forest = []
        for rid in root_ids:
            node = self._build_subtree(rid, index, budget)
            if node is not None:
                forest.append(node)

        if budget is not None and budget[0] <= 0:
            self.logger.warning(
                f"Node cap of {self.max_nodes} reached; deeper occurrences were not materialized"
            )

        self.logger.debug(
            f"Built forest with {len(forest)} root(s) from {len(components)} components"
        )
        return forest

    def _build_subtree(
        self,
        root_id: str,
        index: dict[str, ComponentModel],
        budget: list[int] | None,
    ) -> TreeNode | None:
        """Build the tree rooted at root_id.

        Uses an explicit stack of ``(component_id, parent, level, ancestors)``
        frames, so the depth of the tree is not bounded by the interpreter
        recursion limit. Frames are expanded in pre-order and each child frame
        carries its own ancestor set.

        Args:
            root_id: Component to materialize as the root
            index: id -> component lookup for this build
            budget: Remaining node allowance, shared across the build

        Returns:
            TreeNode, or None when the root id is dangling or the budget is exhausted
        """
        root: TreeNode | None = None
        stack: list[tuple[str, TreeNode | None, int, frozenset[str]]] = [
            (root_id, None, 0, frozenset())
        ]

        while stack:
            component_id, parent, level, ancestors = stack.pop()
            if component_id in ancestors:
                continue

            component = index.get(component_id)
            if component is None:
                continue

            if budget is not None:
                if budget[0] <= 0:
                    continue
                budget[0] -= 1

            node = TreeNode.from_component(component, level)
            if parent is None:
                root = node
            else:
                parent.add_child(node)

            path = ancestors | {component_id}
            stack.extend(
                (dep_id, node, level + 1, path) for dep_id in reversed(component.dependencies)
            )

        return root


def build_forest(
    components: Sequence[ComponentModel],
    roots: Sequence[str] | None = None,
    root_id: str | None = None,
    max_nodes: int | None = None,
) -> list[TreeNode]:
    """Build a tree forest from a canonical component list.

    See HierarchicalEngine.build_forest.
    """
    return HierarchicalEngine(max_nodes=max_nodes).build_forest(
        components, roots=roots, root_id=root_id
    )

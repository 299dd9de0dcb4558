"""Test fixtures for levelgraph consumers.

These fixtures provide controlled access to internal graph state for
testing purposes without exposing implementation details as part of the
public API.
"""

from typing import Any, Dict, List, Tuple

from ..graph import Graph


class GraphTestHelper:
    """Public test fixture for graph verification.

    Example:
        graph = build_graph("A", links)
        helper = GraphTestHelper(graph)

        assert helper.check_invariants() == []
        assert helper.levels()["D"] == 2
    """

    def __init__(self, graph: Graph):
        self._graph = graph

    def levels(self) -> Dict[Any, int]:
        """Return every participant's current level."""
        return {node.participant: node.level for node in self._graph._arena}

    def edges(self) -> List[Tuple[Any, Any]]:
        """Return every (parent, child) link in creation order of the parents."""
        return [
            (node.participant, child.participant)
            for node in self._graph._arena
            for child in node.children
        ]

    def node_count(self) -> int:
        """Return how many nodes the arena holds."""
        return len(self._graph._arena)

    def check_invariants(self) -> List[str]:
        """Check the structural invariants of the graph.

        Returns:
            List of problems found (empty if the graph is consistent)
        """
        problems = []
        arena = self._graph._arena
        root = self._graph._root

        if root.level != 0:
            problems.append(f"root {root} is not at level 0")
        if len(arena) != self._graph.size():
            problems.append(f"arena holds {len(arena)} nodes, index holds {self._graph.size()}")

        for node in arena:
            if node is root:
                if node.parent_ids:
                    problems.append(f"root {node} has parents")
                continue
            if not node.parent_ids:
                problems.append(f"{node} has no parent")
                continue
            expected = node.max_parent_level() + 1
            if node.level != expected:
                problems.append(f"{node} should be at level {expected}")
            for parent in node.parents:
                if node.node_id not in parent.child_ids:
                    problems.append(f"{parent} does not list {node} as a child")

        return problems

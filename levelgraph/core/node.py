"""Node and NodeArena for levelgraph.

Nodes live in a NodeArena and refer to their neighbours by integer id only;
no node owns another. A node's level is one more than the highest level of
its parents (the root stays at 0) and is kept up to date on every new link.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional

from .consumer import Action
from .traverser import DepthFirstWalker
from ..config import TraversalDirection

logger = logging.getLogger(__name__)


class Node:
    """A vertex wrapping a participant with its computed level.

    Parents and children are insertion-ordered sets of node ids. Levels are
    always driven from the parent side: ``add_parent`` may raise this node's
    level and ripple the increase to its descendants, ``add_child`` never
    touches levels.
    """

    def __init__(self, node_id: int, participant: Any, arena: "NodeArena"):
        self.node_id = node_id
        self.participant = participant
        self.level = 0
        self._arena = arena
        self._parents: Dict[int, None] = {}
        self._children: Dict[int, None] = {}

    @property
    def parent_ids(self) -> List[int]:
        return list(self._parents)

    @property
    def child_ids(self) -> List[int]:
        return list(self._children)

    @property
    def parents(self) -> List["Node"]:
        return self._arena.parents_of(self)

    @property
    def children(self) -> List["Node"]:
        return self._arena.children_of(self)

    def is_root(self) -> bool:
        return not self._parents

    def max_parent_level(self) -> Optional[int]:
        """Highest level among the parents, or None for a parentless node."""
        if not self._parents:
            return None
        return max(self._arena[parent_id].level for parent_id in self._parents)

    def add_parent(self, parent: "Node") -> bool:
        """Link ``parent`` as a parent of this node.

        Sinks this node below the parent if needed and propagates the new
        level to the descendants.

        Args:
            parent: Node to link

        Returns:
            True if the link is new, False if it already existed
        """
        if parent.node_id in self._parents:
            return False

        self._parents[parent.node_id] = None
        if parent.level >= self.level:
            old_level = self.level
            self.level = parent.level + 1
            logger.debug(f"{self} sank from level {old_level} below parent {parent}")
            self.update_child_level()
        return True

    def add_child(self, child: "Node") -> bool:
        """Link ``child`` as a child of this node. Idempotent.

        Returns:
            True if the link is new, False if it already existed
        """
        if child.node_id in self._children:
            return False
        self._children[child.node_id] = None
        return True

    def update_child_level(self) -> None:
        """Push this node's level down to its descendants.

        Walks depth-first, since a breadth-first walk filters on the very
        levels being rewritten here. A descendant whose level already sits
        below all of its parents needs no update, and neither does anything
        under it, so that branch is pruned.
        """
        def visit(node: "Node") -> Action:
            if node is self:
                return Action.CONTINUE

            parent_max_level = node.max_parent_level()
            if node.level <= parent_max_level:
                node.level = parent_max_level + 1
                return Action.CONTINUE
            return Action.OVER_SELF

        DepthFirstWalker(self._arena).walk(self, visit, TraversalDirection.FORWARD)

    def __eq__(self, other: object) -> bool:
        """Nodes are equal if they wrap the same participant at the same level."""
        if not isinstance(other, Node):
            return NotImplemented
        return self.level == other.level and self.participant == other.participant

    def __hash__(self) -> int:
        return hash(self.participant)

    def __str__(self) -> str:
        return f"({self.participant},{self.level})"

    def __repr__(self) -> str:
        return (f"Node(id={self.node_id}, participant={self.participant!r}, "
                f"level={self.level})")


class NodeArena:
    """Owner of every node in a graph, addressed by integer id.

    Ids are handed out in creation order and never reused.
    """

    def __init__(self):
        self._nodes: List[Node] = []

    def create(self, participant: Any) -> Node:
        node = Node(len(self._nodes), participant, self)
        self._nodes.append(node)
        return node

    def parents_of(self, node: Node) -> List[Node]:
        return [self._nodes[node_id] for node_id in node.parent_ids]

    def children_of(self, node: Node) -> List[Node]:
        return [self._nodes[node_id] for node_id in node.child_ids]

    def __getitem__(self, node_id: int) -> Node:
        return self._nodes[node_id]

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

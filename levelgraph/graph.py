"""Level-aware influence graph.

A simplified DAG without edge objects: participants are linked parent to
child, and each one sits on a level one below its deepest parent. Scanning
respects levels, so a participant is never visited before every parent that
determines its level, even if a shorter path from the root reaches it::

             A     <------- level 0
           |   |
           B   |   <------- level 1
           |   |
           C   |   <------- level 2
           |   |
             D     <------- level 3

The scan order is A B C D, not A B D C. D is a child of A, but it is two
levels further down, so the scan reaches it through C.

Example:
    >>> graph = Graph("A")
    >>> graph.add("B")
    True
    >>> graph.insert("B", "C")
    True
    >>> graph.scan(lambda parents, participant, g: Action.CONTINUE)
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Union

from .config import GraphConfig, TraversalDirection, TraversalMode
from .core.consumer import Action, ConsumerFunc
from .core.node import Node, NodeArena
from .core.participant import participant_sort_key
from .core.traverser import BreadthFirstWalker, DepthFirstWalker, create_walker
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

# Default for parent and start arguments, meaning the root participant.
_ROOT = object()


class Graph:
    """Influence graph rooted at a single participant.

    The graph owns every node through a NodeArena and finds them through an
    identity index keyed by participant. It is append-only: participants
    and links can be added, never removed.
    """

    def __init__(self, root: Any, config: Optional[GraphConfig] = None):
        """Create a graph holding only its root participant.

        Args:
            root: Root participant, the source of influence (level 0)
            config: Optional GraphConfig

        Raises:
            ConfigurationError: If the config does not validate
        """
        self.config = config or GraphConfig()
        problems = self.config.validate()
        if problems:
            raise ConfigurationError(problems)

        self._arena = NodeArena()
        self._index: Dict[Any, int] = {}
        self._root = self._register(root)

    # Queries

    @property
    def root(self) -> Any:
        """The root participant."""
        return self._root.participant

    def size(self) -> int:
        """Return the number of participants, root included."""
        return len(self._index)

    def level(self) -> int:
        """Return the number of levels in use."""
        return max(node.level for node in self._arena) + 1

    def empty(self) -> bool:
        """Check whether nothing is influenced yet.

        Returns:
            True if the root is the only participant
        """
        return self.size() == 1

    def participants(self) -> List[Any]:
        """Return all participants in the order they were added."""
        return [node.participant for node in self._arena]

    def level_of(self, participant: Any) -> Optional[int]:
        node = self._find(participant)
        return node.level if node is not None else None

    def parents_of(self, participant: Any) -> List[Any]:
        node = self._find(participant)
        if node is None:
            return []
        return [parent.participant for parent in node.parents]

    def children_of(self, participant: Any) -> List[Any]:
        node = self._find(participant)
        if node is None:
            return []
        return [child.participant for child in node.children]

    def ancestors(self, participant: Any) -> List[Any]:
        """Return every participant the given one is reachable from.

        Empty for the root and for unknown participants.
        """
        return self._reachable(participant, TraversalDirection.REVERSE)

    def descendants(self, participant: Any) -> List[Any]:
        """Return every participant reachable from the given one."""
        return self._reachable(participant, TraversalDirection.FORWARD)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, participant: Any) -> bool:
        return participant in self._index

    # Insertion

    def add(self, target: Any, parent: Any = _ROOT) -> bool:
        """Add ``target`` under ``parent``, or under the root if no parent is given.

        Returns:
            True on success, False if the link is rejected (see ``insert``)
        """
        if parent is _ROOT:
            parent = self._root.participant
        return self.insert(parent, target)

    def insert(self, parent: Any, target: Any) -> bool:
        """Link ``target`` as a child of ``parent``.

        The target is created if it is new. An existing target gains an
        extra parent, which may push it (and its descendants) down.

        Insertion fails when:
        - parent and target are the same participant
        - the parent is not in the graph
        - the target is already an ancestor of the parent (a cycle)

        Args:
            parent: Participant to attach to
            target: Participant to add

        Returns:
            True if linked, False if rejected (the graph is left unchanged)
        """
        if parent == target:
            logger.debug(f"Rejected {parent!r} -> {target!r}: self-parenting")
            return False

        parent_node = self._find(parent)
        if parent_node is None:
            logger.debug(f"Rejected {parent!r} -> {target!r}: parent not in graph")
            return False

        target_node = self._find(target)
        if target_node is not None:
            if self._is_ancestor(target_node, parent_node):
                logger.debug(f"Rejected {parent!r} -> {target!r}: would create a cycle")
                return False
        else:
            # A brand-new node cannot be an ancestor of anything.
            target_node = self._register(target)

        target_node.add_parent(parent_node)
        parent_node.add_child(target_node)
        return True

    # Scanning

    def scan(self, consumer: ConsumerFunc, start: Any = _ROOT) -> None:
        """Scan the graph level by level, visiting each participant once.

        ::

                A
             |     |
             B     C
               |
               D

        The scan order is A B C D.

        Args:
            consumer: Called as ``consumer(parents, participant, graph)``;
                ``parents`` is empty for the root. Its Action steers the scan.
            start: Participant to start from (defaults to the root). Scanning
                from an unknown participant does nothing.

        Raises:
            InvalidActionError: If the consumer returns anything but an Action
        """
        start_node = self._start_node(start)
        if start_node is None:
            return

        def visit(node: Node) -> Action:
            parents = [parent.participant for parent in node.parents]
            return consumer(parents, node.participant, self)

        BreadthFirstWalker(self._arena).walk(start_node, visit, TraversalDirection.FORWARD)

    def scan_no_root(self, consumer: ConsumerFunc) -> None:
        """Scan from the root without calling ``consumer`` for the root itself."""
        def skip_root(parents: List[Any], participant: Any, graph: "Graph") -> Action:
            if not parents:
                return Action.CONTINUE
            return consumer(parents, participant, graph)

        self.scan(skip_root)

    def walk(self,
             visitor: Callable[[Any, int], Action],
             start: Any = _ROOT,
             direction: TraversalDirection = TraversalDirection.FORWARD,
             mode: Union[TraversalMode, str] = TraversalMode.BREADTH_FIRST) -> None:
        """Run the raw walk over participants.

        Unlike ``scan`` this can walk towards the root and depth-first.

        Args:
            visitor: Called as ``visitor(participant, level)``
            start: Participant to start from (defaults to the root)
            direction: FORWARD (children) or REVERSE (parents)
            mode: BREADTH_FIRST or DEPTH_FIRST
        """
        start_node = self._start_node(start)
        if start_node is None:
            return
        create_walker(mode, self._arena).walk(
            start_node,
            lambda node: visitor(node.participant, node.level),
            direction,
        )

    # Equality and printing

    def __eq__(self, other: object) -> bool:
        """Graphs are equal when every level holds the same participants.

        Only (participant, level) pairs are compared; who is whose parent
        beyond that is not.
        """
        if self is other:
            return True
        if not isinstance(other, Graph):
            return NotImplemented

        if self.size() != other.size():
            return False
        if self.level() != other.level():
            return False

        this_levels = self._level_buckets()
        other_levels = other._level_buckets()
        for this_nodes, other_nodes in zip(this_levels, other_levels):
            if not self._equal_nodes(this_nodes, other_nodes):
                return False
        return True

    __hash__ = None

    def __str__(self) -> str:
        """Render the graph as an indented tree.

        Participants with several parents appear once per path.
        """
        render = self.config.render
        lines: List[str] = []

        def visit(node: Node) -> Action:
            line = render.indent * node.level
            if node is not self._root:
                line += render.branch_marker
            if node.level > 0:
                line += render.connector
            lines.append(line + str(node))
            return Action.CONTINUE

        DepthFirstWalker(self._arena).walk(self._root, visit, TraversalDirection.FORWARD)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Graph(root={self.root!r}, size={self.size()}, levels={self.level()})"

    # Internals

    def _register(self, participant: Any) -> Node:
        node = self._arena.create(participant)
        self._index[participant] = node.node_id
        logger.debug(f"Registered participant {participant!r} as node {node.node_id}")
        return node

    def _start_node(self, start: Any) -> Optional[Node]:
        if start is _ROOT:
            return self._root
        return self._find(start)

    def _find(self, participant: Any) -> Optional[Node]:
        node_id = self._index.get(participant)
        if node_id is None:
            return None
        return self._arena[node_id]

    def _is_ancestor(self, candidate: Node, node: Node) -> bool:
        """Check whether ``candidate`` is ``node`` or one of its ancestors."""
        found = False

        def probe(current: Node) -> Action:
            nonlocal found
            if current is candidate:
                found = True
                return Action.OVER
            return Action.CONTINUE

        DepthFirstWalker(self._arena, deduplicate=self.config.dedupe_cycle_probe).walk(
            node, probe, TraversalDirection.REVERSE)
        return found

    def _reachable(self, participant: Any, direction: TraversalDirection) -> List[Any]:
        start_node = self._find(participant)
        if start_node is None:
            return []

        reached: List[Any] = []

        def collect(node: Node) -> Action:
            if node is not start_node:
                reached.append(node.participant)
            return Action.CONTINUE

        DepthFirstWalker(self._arena, deduplicate=True).walk(start_node, collect, direction)
        return reached

    def _level_buckets(self) -> List[List[Node]]:
        """Group nodes by level in one breadth-first walk from the root."""
        buckets: Dict[int, List[Node]] = {}

        def group(node: Node) -> Action:
            buckets.setdefault(node.level, []).append(node)
            return Action.CONTINUE

        BreadthFirstWalker(self._arena).walk(self._root, group, TraversalDirection.FORWARD)
        return [buckets.get(level, []) for level in range(self.level())]

    @staticmethod
    def _equal_nodes(this_nodes: List[Node], other_nodes: List[Node]) -> bool:
        if len(this_nodes) != len(other_nodes):
            return False

        def sort_key(node: Node) -> Any:
            return participant_sort_key(node.participant)

        return sorted(this_nodes, key=sort_key) == sorted(other_nodes, key=sort_key)

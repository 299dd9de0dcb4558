"""Graph walking strategies for levelgraph.

Every algorithm in the library (cycle probing, level propagation, scanning,
equality and printing) is built on one parameterised walk: a start node, a
direction (children or parents), a mode (breadth- or depth-first) and a
visitor returning an ``Action``. Walkers use explicit queues and stacks, so
graph depth never turns into Python call depth.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Callable, Deque, List, Optional, Set, Union, TYPE_CHECKING

from .consumer import Action
from ..config import TraversalDirection, TraversalMode
from ..errors import InvalidActionError

if TYPE_CHECKING:
    from .node import Node, NodeArena


NodeVisitor = Callable[["Node"], Action]

# A forward breadth-first walk only follows links whose level step is exactly this.
LEVEL_STEP = 1


class NodeWalker(ABC):
    """Abstract base class for walk strategies.

    Walkers implement the order in which nodes are visited. Navigation
    (who is a parent or child of whom) is delegated to the NodeArena, the
    single owner of every node.
    """

    def __init__(self, arena: "NodeArena", deduplicate: bool = False):
        """Initialize walker with an arena.

        Args:
            arena: NodeArena holding the nodes being walked
            deduplicate: Visit each node at most once per walk
        """
        self.arena = arena
        self.deduplicate = deduplicate

    @abstractmethod
    def walk(self,
             start: "Node",
             visitor: NodeVisitor,
             direction: TraversalDirection = TraversalDirection.FORWARD) -> None:
        """Walk the graph from ``start``, calling ``visitor`` on every visited node.

        Args:
            start: Node the walk begins with (it is visited first)
            visitor: Called per node; its Action steers the walk
            direction: FORWARD follows children, REVERSE follows parents

        Raises:
            InvalidActionError: If the visitor returns anything but an Action
        """
        pass

    def _neighbours(self, node: "Node", direction: TraversalDirection) -> List["Node"]:
        if direction is TraversalDirection.REVERSE:
            return self.arena.parents_of(node)
        return self.arena.children_of(node)

    @staticmethod
    def _visit(visitor: NodeVisitor, node: "Node") -> Action:
        action = visitor(node)
        if not isinstance(action, Action):
            raise InvalidActionError(action)
        return action


class BreadthFirstWalker(NodeWalker):
    """Breadth-first, level-ordered walk.

    Each node is enqueued at most once. Walking forward, a child is only
    enqueued from a parent exactly one level above it, so a node reached
    early through a shortcut waits until the parent that determines its
    level has been visited::

             A      level 0
            / \\
           B   \\    level 1
           |    |
           C    |   level 2
            \\  /
              D     level 3

    The visiting order is A B C D, never A B D C.
    """

    def __init__(self, arena: "NodeArena", deduplicate: bool = True):
        # Breadth-first walks always deduplicate.
        super().__init__(arena, deduplicate=True)

    def walk(self,
             start: "Node",
             visitor: NodeVisitor,
             direction: TraversalDirection = TraversalDirection.FORWARD) -> None:
        queue: Deque["Node"] = deque([start])
        enqueued: Set[int] = {start.node_id}

        while queue:
            node = queue.popleft()
            action = self._visit(visitor, node)

            if action is Action.OVER:
                return
            if action is Action.OVER_SELF:
                continue

            for neighbour in self._neighbours(node, direction):
                if (direction is TraversalDirection.FORWARD
                        and neighbour.level - node.level != LEVEL_STEP):
                    continue
                if neighbour.node_id in enqueued:
                    continue
                enqueued.add(neighbour.node_id)
                queue.append(neighbour)


class DepthFirstWalker(NodeWalker):
    """Depth-first walk on an explicit stack.

    Neighbours are pushed in stored order and popped last-in-first-out.
    Without deduplication a node is visited once per path that reaches it,
    and nothing guarantees its other ancestors were visited first. This is
    the walk used for level propagation, which must not depend on levels
    that are being rewritten.
    """

    def walk(self,
             start: "Node",
             visitor: NodeVisitor,
             direction: TraversalDirection = TraversalDirection.FORWARD) -> None:
        stack: List["Node"] = [start]
        seen: Optional[Set[int]] = {start.node_id} if self.deduplicate else None

        while stack:
            node = stack.pop()
            action = self._visit(visitor, node)

            if action is Action.OVER:
                return
            if action is Action.OVER_SELF:
                continue

            for neighbour in self._neighbours(node, direction):
                if seen is not None:
                    if neighbour.node_id in seen:
                        continue
                    seen.add(neighbour.node_id)
                stack.append(neighbour)


def create_walker(mode: Union[TraversalMode, str],
                  arena: "NodeArena",
                  deduplicate: Optional[bool] = None) -> NodeWalker:
    """Create a walker instance by mode.

    Args:
        mode: TraversalMode or one of its names (bfs, breadth_first, dfs, depth_first)
        arena: NodeArena holding the nodes
        deduplicate: Depth-first only; breadth-first walks always deduplicate

    Returns:
        NodeWalker instance

    Raises:
        ValueError: If the mode name is not recognized
    """
    strategies = {
        'bfs': BreadthFirstWalker,
        'breadth_first': BreadthFirstWalker,
        'dfs': DepthFirstWalker,
        'depth_first': DepthFirstWalker,
    }

    if isinstance(mode, TraversalMode):
        key = mode.value
    else:
        key = str(mode).lower()
    if key not in strategies:
        raise ValueError(
            f"Unknown traversal mode: {mode}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[key](arena, deduplicate=bool(deduplicate))


def walk(arena: "NodeArena",
         start: "Node",
         visitor: NodeVisitor,
         direction: TraversalDirection = TraversalDirection.FORWARD,
         mode: Union[TraversalMode, str] = TraversalMode.BREADTH_FIRST,
         deduplicate: Optional[bool] = None) -> None:
    """Walk from ``start`` with the given direction and mode.

    Example:
        >>> walk(arena, node, lambda n: Action.CONTINUE,
        ...      direction=TraversalDirection.REVERSE,
        ...      mode=TraversalMode.DEPTH_FIRST)
    """
    create_walker(mode, arena, deduplicate).walk(start, visitor, direction)

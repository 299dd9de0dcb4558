"""Consumer contract for graph scans.

A consumer is called once per node visited by ``Graph.scan`` with the
node's parent participants, its own participant and the graph, and returns
an ``Action`` that steers the walk. Any callable with that shape works;
``GraphConsumer`` subclasses give the common collecting patterns a home.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from ..graph import Graph


class Action(Enum):
    """Traversal control returned by visitors and consumers."""
    CONTINUE = "continue"     # Expand this node's neighbours
    OVER = "over"             # Abort the whole walk
    OVER_SELF = "over_self"   # Do not expand this node, keep walking elsewhere


ConsumerFunc = Callable[[Sequence[Any], Any, "Graph"], Action]


class GraphConsumer(ABC):
    """Abstract base class for scan consumers.

    Instances are callable, so they can be handed to ``Graph.scan`` exactly
    like a plain function.
    """

    @abstractmethod
    def accept(self, parents: List[Any], participant: Any, graph: "Graph") -> Action:
        """Process one scanned participant.

        Args:
            parents: Parent participants of the node (empty for the root)
            participant: The participant being visited
            graph: The graph being scanned

        Returns:
            Action deciding how the scan proceeds
        """
        pass

    def __call__(self, parents: List[Any], participant: Any, graph: "Graph") -> Action:
        return self.accept(parents, participant, graph)


class CustomConsumer(GraphConsumer):
    """Wraps a plain function as a consumer."""

    def __init__(self, func: ConsumerFunc):
        self.func = func

    def accept(self, parents: List[Any], participant: Any, graph: "Graph") -> Action:
        return self.func(parents, participant, graph)


class ParticipantCollector(GraphConsumer):
    """Records participants in the order they are scanned.

    Optionally stops after ``limit`` participants.
    """

    def __init__(self, limit: Optional[int] = None):
        self.limit = limit
        self.participants: List[Any] = []

    def accept(self, parents: List[Any], participant: Any, graph: "Graph") -> Action:
        self.participants.append(participant)
        if self.limit is not None and len(self.participants) >= self.limit:
            return Action.OVER
        return Action.CONTINUE


class LevelCollector(GraphConsumer):
    """Groups scanned participants by their level."""

    def __init__(self):
        self.levels: Dict[int, List[Any]] = {}

    def accept(self, parents: List[Any], participant: Any, graph: "Graph") -> Action:
        level = graph.level_of(participant)
        self.levels.setdefault(level, []).append(participant)
        return Action.CONTINUE

    def as_lists(self) -> List[List[Any]]:
        """Return the groups ordered by level."""
        return [self.levels[level] for level in sorted(self.levels)]


class ParentsCollector(GraphConsumer):
    """Maps each scanned participant to the parents it was reported with."""

    def __init__(self):
        self.parents: Dict[Any, List[Any]] = {}

    def accept(self, parents: List[Any], participant: Any, graph: "Graph") -> Action:
        self.parents[participant] = list(parents)
        return Action.CONTINUE

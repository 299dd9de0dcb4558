"""levelgraph - level-aware influence graphs.

levelgraph models who is affected, and in which order, after a root
participant changes. Participants are linked parent to child without edge
objects; every participant sits one level below its deepest parent, and
scans visit the graph strictly level by level.

    from levelgraph import Graph, Action

    graph = Graph("A")
    graph.add("B")
    graph.insert("B", "C")
    graph.scan(lambda parents, participant, g: Action.CONTINUE)
"""

__version__ = "0.1.0"

from .core import (
    Action,
    GraphConsumer,
    CustomConsumer,
    ParticipantCollector,
    LevelCollector,
    ParentsCollector,
    Participant,
    SimpleParticipant,
    participant_id,
    participant_sort_key,
    NodeWalker,
    BreadthFirstWalker,
    DepthFirstWalker,
    create_walker,
    walk,
)
from .config import (
    GraphConfig,
    RenderConfig,
    TraversalDirection,
    TraversalMode,
)
from .errors import (
    LevelGraphError,
    InvalidActionError,
    LinkRejectedError,
    ConfigurationError,
)
from .graph import Graph
from .api import (
    build_graph,
    scan_order,
    group_by_level,
    find_participants,
    count_participants,
    get_leaf_participants,
    get_graph_stats,
)

__all__ = [
    "__version__",
    # Core
    'Graph',
    'Action',
    'GraphConsumer',
    'CustomConsumer',
    'ParticipantCollector',
    'LevelCollector',
    'ParentsCollector',
    'Participant',
    'SimpleParticipant',
    'participant_id',
    'participant_sort_key',
    'NodeWalker',
    'BreadthFirstWalker',
    'DepthFirstWalker',
    'create_walker',
    'walk',
    # Config
    'GraphConfig',
    'RenderConfig',
    'TraversalDirection',
    'TraversalMode',
    # Errors
    'LevelGraphError',
    'InvalidActionError',
    'LinkRejectedError',
    'ConfigurationError',
    # API
    'build_graph',
    'scan_order',
    'group_by_level',
    'find_participants',
    'count_participants',
    'get_leaf_participants',
    'get_graph_stats',
]

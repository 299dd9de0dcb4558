"""Core components of levelgraph: participants, nodes, walkers and consumers."""

from .consumer import (
    Action,
    GraphConsumer,
    CustomConsumer,
    ParticipantCollector,
    LevelCollector,
    ParentsCollector,
)
from .participant import Participant, SimpleParticipant, participant_id, participant_sort_key
from .node import Node, NodeArena
from .traverser import (
    NodeWalker,
    BreadthFirstWalker,
    DepthFirstWalker,
    create_walker,
    walk,
)

__all__ = [
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
    'Node',
    'NodeArena',
    'NodeWalker',
    'BreadthFirstWalker',
    'DepthFirstWalker',
    'create_walker',
    'walk',
]

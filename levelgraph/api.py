"""High-level API for levelgraph.

This module provides simple, functional interfaces for common graph
operations. These functions wrap the object-oriented Graph API for ease of
use in simple cases.
"""

import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from .config import GraphConfig
from .core.consumer import Action, LevelCollector, ParticipantCollector
from .core.participant import participant_sort_key
from .errors import LinkRejectedError
from .graph import Graph, _ROOT

logger = logging.getLogger(__name__)


def build_graph(
    root: Any,
    links: Iterable[Tuple[Any, Any]],
    config: Optional[GraphConfig] = None,
    strict: bool = False
) -> Graph:
    """Build a graph from ``(parent, target)`` pairs.

    Links are inserted in order, so a parent must already be linked (or be
    the root) by the time it is used.

    Args:
        root: Root participant
        links: Iterable of (parent, target) pairs
        config: Optional GraphConfig
        strict: Raise on the first rejected link instead of skipping it

    Returns:
        The built Graph

    Raises:
        LinkRejectedError: If ``strict`` and a link is rejected

    Example:
        >>> graph = build_graph("A", [("A", "B"), ("A", "C"), ("B", "D")])
        >>> graph.level()
        3
    """
    graph = Graph(root, config=config)
    skipped = 0
    for parent, target in links:
        if graph.insert(parent, target):
            continue
        if strict:
            raise LinkRejectedError(parent, target)
        skipped += 1

    if skipped:
        logger.info(f"Built graph rooted at {root!r}, skipped {skipped} rejected links")
    return graph


def scan_order(graph: Graph, start: Any = _ROOT, include_root: bool = True) -> List[Any]:
    """Return participants in scan order.

    Args:
        graph: Graph to scan
        start: Participant to start from (defaults to the root)
        include_root: Include the root participant when the scan starts at
            the root, whether by default or by naming it. A non-root start is
            always included.

    Returns:
        List of participants, each listed once
    """
    collector = ParticipantCollector()
    from_root = start is _ROOT or graph.level_of(start) == 0
    if from_root and not include_root:
        graph.scan_no_root(collector)
    else:
        graph.scan(collector, start=start)
    return collector.participants


def group_by_level(graph: Graph) -> List[List[Any]]:
    """Return participants grouped by level, sorted by id within each level.

    Example:
        >>> group_by_level(build_graph("A", [("A", "C"), ("A", "B")]))
        [['A'], ['B', 'C']]
    """
    collector = LevelCollector()
    graph.scan(collector)
    return [sorted(group, key=participant_sort_key) for group in collector.as_lists()]


def find_participants(graph: Graph, predicate: Callable[[Any], bool]) -> List[Any]:
    """Find participants matching a predicate, in scan order."""
    return [participant for participant in scan_order(graph) if predicate(participant)]


def count_participants(graph: Graph, include_root: bool = True) -> int:
    """Count participants reached by a scan from the root."""
    return len(scan_order(graph, include_root=include_root))


def get_leaf_participants(graph: Graph) -> List[Any]:
    """Return participants without children, in scan order."""
    leaves: List[Any] = []

    def collect(parents: List[Any], participant: Any, inner: Graph) -> Action:
        if not inner.children_of(participant):
            leaves.append(participant)
        return Action.CONTINUE

    graph.scan(collect)
    return leaves


def get_graph_stats(graph: Graph) -> Dict[str, Any]:
    """Get statistics about a graph.

    Returns:
        Dictionary with:
        - total_participants: Participants including the root
        - levels: Number of levels
        - leaf_participants: Participants without children
        - multi_parent_participants: Participants with more than one parent
        - level_sizes: Participant count per level, from level 0 down

    Example:
        >>> stats = get_graph_stats(graph)
        >>> print(f"Levels: {stats['levels']}")
    """
    stats = {
        'total_participants': 0,
        'levels': graph.level(),
        'leaf_participants': 0,
        'multi_parent_participants': 0,
        'level_sizes': [0] * graph.level(),
    }

    def collect(parents: List[Any], participant: Any, inner: Graph) -> Action:
        stats['total_participants'] += 1
        stats['level_sizes'][inner.level_of(participant)] += 1
        if not inner.children_of(participant):
            stats['leaf_participants'] += 1
        if len(parents) > 1:
            stats['multi_parent_participants'] += 1
        return Action.CONTINUE

    graph.scan(collect)
    return stats

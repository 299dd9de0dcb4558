#!/usr/bin/env python3
"""Demo script for level-ordered influence scanning in levelgraph.

A configuration service changes; this script shows which services are
affected and the order in which they should be redeployed.
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from levelgraph import (
    Action,
    SimpleParticipant,
    build_graph,
    get_graph_stats,
    group_by_level,
)


def build_services():
    """Build a small service dependency graph rooted at the config service."""
    services = {
        name: SimpleParticipant(index, name=name)
        for index, name in enumerate(["config", "auth", "catalog", "search", "gateway"])
    }
    links = [
        ("config", "auth"),
        ("config", "catalog"),
        ("catalog", "search"),
        ("auth", "gateway"),
        ("search", "gateway"),
        ("config", "gateway"),
    ]
    return build_graph(
        services["config"],
        [(services[parent], services[target]) for parent, target in links],
    )


def demo_redeploy_order(graph):
    """Show the order affected services are visited in."""
    print("\n=== Redeploy Order ===")

    def report(parents, participant, inner):
        waits_for = ", ".join(str(parent) for parent in parents) or "nothing"
        print(f"  level {inner.level_of(participant)}: {participant} (waits for {waits_for})")
        return Action.CONTINUE

    graph.scan_no_root(report)


def demo_levels(graph):
    """Show participants grouped into deployment waves."""
    print("\n=== Deployment Waves ===")
    for level, group in enumerate(group_by_level(graph)):
        print(f"  wave {level}: {', '.join(str(p) for p in group)}")


def main():
    logging.basicConfig(level=logging.INFO)
    graph = build_services()

    print("=== Influence Tree ===")
    print(graph)

    demo_redeploy_order(graph)
    demo_levels(graph)

    stats = get_graph_stats(graph)
    print(f"\n{stats['total_participants']} services across {stats['levels']} levels")
    return 0


if __name__ == "__main__":
    sys.exit(main())

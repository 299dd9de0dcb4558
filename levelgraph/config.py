"""Configuration system for levelgraph.

This module defines how users choose walk direction and mode, how the
graph renders itself as text, and how insertion probes for cycles.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class TraversalDirection(Enum):
    """Which links a walk follows."""
    FORWARD = "forward"     # Parent -> children
    REVERSE = "reverse"     # Child -> parents


class TraversalMode(Enum):
    """How a walk orders the nodes it visits."""
    BREADTH_FIRST = "bfs"   # Queue, level filtered, each node at most once
    DEPTH_FIRST = "dfs"     # Stack, once per path unless deduplicated


@dataclass
class RenderConfig:
    """Configuration for the text tree produced by ``str(graph)``.

    A non-root line looks like ``<indent * level><branch_marker><connector>(participant,level)``.
    """

    indent: str = "   "          # Repeated once per level
    branch_marker: str = "L"     # Prefix of every non-root line
    connector: str = "---"       # Between marker and node for level > 0

    def validate(self) -> List[str]:
        """Validate render settings.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        if not self.indent:
            errors.append("indent cannot be empty")
        if "\n" in self.indent or "\n" in self.branch_marker or "\n" in self.connector:
            errors.append("render markers cannot contain newlines")
        return errors


@dataclass
class GraphConfig:
    """Complete configuration for a Graph.

    Attributes:
        render: Text tree settings
        dedupe_cycle_probe: Visit each ancestor at most once when checking
            whether an insertion would close a cycle
    """

    render: RenderConfig = field(default_factory=RenderConfig)
    dedupe_cycle_probe: bool = True

    @classmethod
    def ascii_tree(cls) -> 'GraphConfig':
        """Create config rendering the default ``L---`` tree."""
        return cls()

    @classmethod
    def compact(cls) -> 'GraphConfig':
        """Create config rendering a narrow tree.

        Returns:
            GraphConfig with single-space indentation and short markers
        """
        return cls(render=RenderConfig(indent=" ", branch_marker="+", connector="-"))

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        errors.extend(self.render.validate())
        if not isinstance(self.dedupe_cycle_probe, bool):
            errors.append("dedupe_cycle_probe must be a bool")
        return errors

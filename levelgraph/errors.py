"""Exceptions raised by levelgraph.

Expected insertion failures (self-parenting, unknown parent, would-be
cycles) are reported as ``False`` from ``Graph.insert``. The exceptions here
cover contract violations and the strict high-level API.
"""

from typing import Any, List


class LevelGraphError(Exception):
    """Base class for all levelgraph errors."""
    pass


class InvalidActionError(LevelGraphError, ValueError):
    """Raised when a visitor or consumer returns something that is not an Action."""

    def __init__(self, action: Any):
        self.action = action
        super().__init__(
            f"Error action: {action!r}. "
            f"Visitors must return Action.CONTINUE, Action.OVER or Action.OVER_SELF"
        )


class LinkRejectedError(LevelGraphError):
    """Raised by strict graph building when a link cannot be inserted."""

    def __init__(self, parent: Any, target: Any):
        self.parent = parent
        self.target = target
        super().__init__(f"Cannot link {parent!r} -> {target!r}")


class ConfigurationError(LevelGraphError):
    """Raised when a GraphConfig fails validation."""

    def __init__(self, problems: List[str]):
        self.problems = problems
        super().__init__(f"Invalid configuration: {'; '.join(problems)}")

"""Participant abstraction for levelgraph.

A participant is the opaque identity a graph node wraps. The graph only
needs value-based equality, a compatible hash and an orderable identifier
used as a deterministic sort key. Plain hashable values such as strings or
integers already satisfy this and can be used directly.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Tuple


class Participant(ABC):
    """Abstract base class for graph participants.

    Subclasses only need to provide ``identifier()``. Equality, hashing and
    ordering are all derived from it, so two participant objects with the
    same identifier are the same vertex as far as the graph is concerned.
    """

    @abstractmethod
    def identifier(self) -> Any:
        """Return the orderable identifier of this participant.

        The identifier must be:
        - Stable for the lifetime of the participant
        - Hashable
        - Comparable with the identifiers of other participants in the
          same graph (used for sorting level buckets)

        Returns:
            Orderable, hashable identifier
        """
        pass

    def __str__(self) -> str:
        return str(self.identifier())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.identifier()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Participant):
            return NotImplemented
        return self.identifier() == other.identifier()

    def __hash__(self) -> int:
        return hash(self.identifier())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Participant):
            return NotImplemented
        return self.identifier() < other.identifier()


class SimpleParticipant(Participant):
    """Participant identified by an id with an optional display name and attributes.

    Example:
        >>> service = SimpleParticipant("svc-1", name="billing")
        >>> str(service)
        'billing'
    """

    def __init__(self, participant_id: Any, name: Optional[str] = None,
                 attributes: Optional[Dict[str, Any]] = None):
        self._id = participant_id
        self.name = name
        self.attributes = attributes or {}

    def identifier(self) -> Any:
        return self._id

    def __str__(self) -> str:
        return self.name if self.name is not None else str(self._id)


def participant_id(participant: Any) -> Any:
    """Return the orderable id of a participant.

    ``Participant`` instances are keyed by ``identifier()``; any other value
    is its own key.
    """
    if isinstance(participant, Participant):
        return participant.identifier()
    return participant


def participant_sort_key(participant: Any) -> Tuple[Any, str]:
    """Return a deterministic sort key for a participant.

    Ties between different participants sharing an id (``"A"`` and
    ``SimpleParticipant("A")``) are broken by type name.
    """
    return participant_id(participant), type(participant).__name__

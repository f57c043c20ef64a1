"""
Base entity for aggregates that raise domain events.

An entity exclusively owns the list of domain events it has queued.
The list only grows until the persistence layer publishes the events and
drains it with ``clear_domain_events``.
"""

from typing import Generic, Tuple, TypeVar

from core.domain.events import DomainEvent

TId = TypeVar("TId")


class BaseEntity(Generic[TId]):
    """
    Base class for entities with identity and pending domain events.

    Subclasses are dataclasses declaring an ``id`` field; ``__post_init__``
    sets up the event queue.
    """

    id: TId

    def __post_init__(self):
        """Initialize the pending event queue."""
        self._domain_events = []

    @property
    def domain_events(self) -> Tuple[DomainEvent, ...]:
        """Read-only view of queued domain events, oldest first."""
        return tuple(self._domain_events)

    def queue_domain_event(self, event: DomainEvent) -> None:
        """
        Queue a domain event unless it is already pending.

        Args:
            event: Domain event to queue
        """
        if event not in self._domain_events:
            self._domain_events.append(event)

    def clear_domain_events(self) -> None:
        """Drop all pending domain events."""
        self._domain_events.clear()

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self):
        return hash((self.__class__, self.id))

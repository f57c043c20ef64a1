"""
Domain events base classes and infrastructure.

Domain events represent something that happened in the domain.
They are used for decoupling modules and enabling event-driven architecture.
"""

import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, Optional


class DomainEvent(ABC):
    """
    Base class for all domain events.

    Domain events are immutable records that represent something that
    happened in the domain. Attributes are fixed once the event is built.
    """

    def __init__(
        self,
        aggregate_id: str,
        event_id: Optional[uuid.UUID] = None,
        raised_on: Optional[datetime] = None,
    ):
        """
        Initialize domain event.

        Args:
            aggregate_id: Identifier of the aggregate that raised the event
            event_id: Event UUID (generated if not provided)
            raised_on: When the event was raised (now if not provided)
        """
        object.__setattr__(self, "event_id", event_id or uuid.uuid4())
        object.__setattr__(self, "raised_on", raised_on or datetime.now(timezone.utc))
        object.__setattr__(self, "aggregate_id", aggregate_id)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    @property
    def event_type(self) -> str:
        """Event type name."""
        return self.__class__.__name__

    def __eq__(self, other):
        if not isinstance(other, DomainEvent):
            return NotImplemented
        return self.event_id == other.event_id

    def __hash__(self):
        return hash(self.event_id)

    def __repr__(self):
        return f"{self.event_type}(aggregate_id={self.aggregate_id!r})"

    def to_dict(self) -> Dict[str, Any]:
        """Convert event to dictionary for serialization."""
        return {
            "event_id": str(self.event_id),
            "raised_on": self.raised_on.isoformat(),
            "aggregate_id": self.aggregate_id,
            "event_type": self.event_type,
        }


class EventHandler(ABC):
    """
    Base class for event handlers.

    Event handlers process domain events asynchronously.
    """

    @abstractmethod
    async def handle(self, event: DomainEvent) -> None:
        """
        Handle a domain event.

        Args:
            event: The domain event to handle
        """
        pass


class EventBus(ABC):
    """
    Abstract event bus for publishing and subscribing to domain events.
    """

    @abstractmethod
    async def publish(self, event: DomainEvent) -> None:
        """
        Publish a domain event.

        Args:
            event: The domain event to publish
        """
        pass

    @abstractmethod
    def subscribe(self, event_type: type, handler: EventHandler) -> None:
        """
        Subscribe to a domain event type.

        Args:
            event_type: The type of event to subscribe to
            handler: The handler to call when event is published
        """
        pass

"""
In-memory implementation of the Repository port.

Specifications run with ``Specification.evaluate``. Used by unit tests
and by anything that needs a repository without a database.
"""

import logging
from typing import Any, Dict, List, Optional, TypeVar

from core.domain.events import EventBus
from core.infrastructure.repositories.event_publishing import publish_domain_events
from core.ports.repository import Repository
from core.specifications.specification import Specification

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InMemoryRepository(Repository[T]):
    """
    Dictionary-backed repository keyed by entity id.

    Insertion order is preserved, so unordered queries return entities in
    the order they were added.
    """

    def __init__(self, event_bus: Optional[EventBus] = None, items: Optional[List[T]] = None):
        if event_bus is None:
            from core.infrastructure.events import event_bus as default_bus

            event_bus = default_bus
        self._event_bus = event_bus
        self._items: Dict[Any, T] = {}
        for item in items or []:
            self._items[item.id] = item

    @property
    def items(self) -> List[T]:
        return list(self._items.values())

    async def add(self, entity: T) -> T:
        if entity.id in self._items:
            raise ValueError(f"Entity with id {entity.id} already exists")
        self._items[entity.id] = entity
        await publish_domain_events(entity, self._event_bus)
        return entity

    async def get_by_id(self, entity_id: Any) -> Optional[T]:
        return self._items.get(entity_id)

    async def update(self, entity: T) -> T:
        if entity.id not in self._items:
            raise KeyError(entity.id)
        self._items[entity.id] = entity
        await publish_domain_events(entity, self._event_bus)
        return entity

    async def delete(self, entity: T) -> None:
        if self._items.pop(entity.id, None) is None:
            logger.warning("Delete of unknown entity %s ignored", entity.id)
            return
        await publish_domain_events(entity, self._event_bus)

    async def list(self, specification: Optional[Specification[T]] = None) -> List[T]:
        if specification is None:
            return self.items
        return specification.evaluate(self.items)

    async def count(self, specification: Optional[Specification[T]] = None) -> int:
        if specification is None:
            return len(self._items)
        return len(specification.evaluate(self.items, evaluate_paging=False))

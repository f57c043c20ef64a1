"""
Generic repository port (interface).

Repositories persist aggregates and run specifications against them.
Implementations are in the infrastructure layer.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, List, Optional, TypeVar

from core.specifications.specification import Specification

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """
    Abstract repository for an aggregate type.

    Write operations publish the aggregate's queued domain events once
    the change is stored, then clear them.
    """

    @abstractmethod
    async def add(self, entity: T) -> T:
        """
        Store a new entity.

        Args:
            entity: Entity to store

        Returns:
            Stored entity
        """
        pass

    @abstractmethod
    async def get_by_id(self, entity_id: Any) -> Optional[T]:
        """
        Find an entity by ID.

        Args:
            entity_id: Entity identifier

        Returns:
            Entity or None if not found
        """
        pass

    @abstractmethod
    async def update(self, entity: T) -> T:
        """
        Store changes to an existing entity.

        Args:
            entity: Entity to store

        Returns:
            Stored entity
        """
        pass

    @abstractmethod
    async def delete(self, entity: T) -> None:
        """
        Remove an entity.

        Args:
            entity: Entity to remove
        """
        pass

    @abstractmethod
    async def list(self, specification: Optional[Specification[T]] = None) -> List[T]:
        """
        List entities matching a specification.

        Args:
            specification: Criteria, ordering and paging (all entities when None)

        Returns:
            Matching entities
        """
        pass

    @abstractmethod
    async def count(self, specification: Optional[Specification[T]] = None) -> int:
        """
        Count entities matching a specification, ignoring its paging.

        Args:
            specification: Criteria (all entities when None)

        Returns:
            Number of matching entities
        """
        pass

    async def any(self, specification: Optional[Specification[T]] = None) -> bool:
        """Return True if at least one entity matches."""
        return await self.count(specification) > 0

    async def first_or_default(self, specification: Specification[T]) -> Optional[T]:
        """Return the first matching entity, or None."""
        items = await self.list(specification)
        return items[0] if items else None

"""
Django ORM implementation of the Repository port.

Subclasses bind a model class and convert between models and domain
entities. Specifications run with ``Specification.apply``.
"""

from abc import abstractmethod
from typing import Any, Generic, List, Optional, Type, TypeVar

from asgiref.sync import sync_to_async
from django.db import models, transaction

from core.domain.events import EventBus
from core.infrastructure.repositories.event_publishing import publish_domain_events
from core.ports.repository import Repository
from core.specifications.specification import Specification

T = TypeVar("T")
M = TypeVar("M", bound=models.Model)


class DjangoRepository(Repository[T], Generic[T, M]):
    """
    Django ORM repository base.

    This adapter:
    1. Converts Django models to domain entities
    2. Converts domain entities to Django models
    3. Translates specifications into queryset operations
    4. Publishes domain events after each write
    """

    model_class: Type[M]

    def __init__(self, event_bus: Optional[EventBus] = None):
        if event_bus is None:
            from core.infrastructure.events import event_bus as default_bus

            event_bus = default_bus
        self._event_bus = event_bus

    @abstractmethod
    def _to_domain(self, model: M) -> T:
        """Convert a Django model to a domain entity."""

    @abstractmethod
    def _to_model(self, entity: T, model: M) -> M:
        """Copy a domain entity's state onto a Django model."""

    def _queryset(self):
        # pylint: disable=no-member
        return self.model_class.objects.all()

    def _save(self, entity: T, adding: bool = False) -> M:
        with transaction.atomic():
            if adding:
                model = self.model_class(id=entity.id)
            else:
                # Update the stored row in place
                model = self._queryset().select_for_update().get(id=entity.id)
            self._to_model(entity, model)
            model.save()
        return model

    async def add(self, entity: T) -> T:
        """
        Insert a new entity.

        Args:
            entity: Entity to store

        Returns:
            The same entity, with its events published and cleared
        """
        await sync_to_async(self._save)(entity, True)
        await publish_domain_events(entity, self._event_bus)
        return entity

    async def get_by_id(self, entity_id: Any) -> Optional[T]:
        """
        Find an entity by ID.

        Args:
            entity_id: Entity UUID

        Returns:
            Entity or None if not found
        """
        try:
            model = await sync_to_async(self._queryset().get)(id=entity_id)
        except self.model_class.DoesNotExist:
            return None
        return self._to_domain(model)

    async def update(self, entity: T) -> T:
        """
        Store changes to an existing entity.

        Args:
            entity: Entity to store

        Returns:
            The same entity, with its events published and cleared

        Raises:
            DoesNotExist: If the entity was never stored
        """
        await sync_to_async(self._save)(entity)
        await publish_domain_events(entity, self._event_bus)
        return entity

    async def delete(self, entity: T) -> None:
        """
        Delete an entity.

        Args:
            entity: Entity to delete
        """
        qs = self._queryset().filter(id=entity.id)
        await sync_to_async(qs.delete)()
        await publish_domain_events(entity, self._event_bus)

    async def list(self, specification: Optional[Specification[T]] = None) -> List[T]:
        """
        List entities matching a specification.

        Args:
            specification: Criteria, includes, ordering and paging

        Returns:
            Matching entities
        """
        qs = self._queryset()
        if specification is not None:
            qs = specification.apply(qs)
        result = await sync_to_async(list)(qs)
        return [self._to_domain(model) for model in result]

    async def count(self, specification: Optional[Specification[T]] = None) -> int:
        """
        Count entities matching a specification's criteria.

        Args:
            specification: Criteria (ordering and paging are ignored)

        Returns:
            Number of matching entities
        """
        qs = self._queryset()
        if specification is not None:
            qs = specification.apply_criteria(qs)
        return await sync_to_async(qs.count)()

    async def any(self, specification: Optional[Specification[T]] = None) -> bool:
        qs = self._queryset()
        if specification is not None:
            qs = specification.apply_criteria(qs)
        return await sync_to_async(qs.exists)()

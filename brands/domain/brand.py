"""
Brand domain entity.

This is the core domain entity representing a catalog brand.
It contains business logic and is independent of infrastructure.
"""

import uuid
from dataclasses import dataclass, field
from typing import Optional

from brands.domain.events import BrandCreated, BrandDeleted, BrandUpdated
from core.domain.entity import BaseEntity
from core.domain.exceptions import DomainValidationError


def same_text(current: Optional[str], incoming: Optional[str]) -> bool:
    """Compare two optional strings ignoring case."""
    if current is None or incoming is None:
        return current is incoming
    return current.lower() == incoming.lower()


@dataclass(eq=False)
class Brand(BaseEntity[uuid.UUID]):
    """
    Brand aggregate root.

    Brands are mutable aggregates: ``update`` changes the instance in
    place and queues a ``BrandUpdated`` event when something changed.
    Instantiating the class directly rehydrates a stored brand without
    validation or events; use ``Brand.create`` for new brands.
    """

    name: str
    description: Optional[str] = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    @classmethod
    def create(
        cls,
        name: str,
        description: Optional[str] = None,
        brand_id: Optional[uuid.UUID] = None,
    ) -> "Brand":
        """
        Create a new Brand entity.

        Args:
            name: Brand display name
            description: Optional description
            brand_id: Optional UUID (generated if not provided)

        Returns:
            Brand entity instance with a queued BrandCreated event

        Raises:
            DomainValidationError: If the name is missing or blank
        """
        if name is None or not name.strip():
            raise DomainValidationError("Name cannot be null or whitespace.", field="name")

        brand = cls(name=name, description=description, id=brand_id or uuid.uuid4())
        brand.queue_domain_event(BrandCreated(brand))
        return brand

    def update(self, name: Optional[str], description: Optional[str]) -> "Brand":
        """
        Update the brand in place.

        ``name=None`` keeps the current name. ``description=None`` clears
        the description.

        Args:
            name: New name, or None to keep the current one
            description: New description, or None to clear it

        Returns:
            This brand

        Raises:
            DomainValidationError: If a blank name is supplied
        """
        if name is not None and not name.strip():
            raise DomainValidationError("Name cannot be empty or whitespace.", field="name")

        is_updated = False

        if name is not None and not same_text(self.name, name):
            self.name = name
            is_updated = True

        if not same_text(self.description, description):
            self.description = description
            is_updated = True

        if is_updated:
            self.queue_domain_event(BrandUpdated(self))

        return self

    def mark_deleted(self) -> None:
        """Queue a ``BrandDeleted`` event ahead of removal."""
        self.queue_domain_event(BrandDeleted(self))

"""
Product domain entity.

This is the core domain entity representing a catalog product.
It contains business logic and is independent of infrastructure.
"""

import uuid
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Optional

from brands.domain.brand import Brand, same_text
from brands.domain.events import ProductCreated, ProductDeleted, ProductUpdated
from core.domain.entity import BaseEntity
from core.domain.exceptions import DomainValidationError


def _validate_name(name: Optional[str], message: str) -> None:
    if name is None or not name.strip():
        raise DomainValidationError(message, field="name")


def _to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _validate_price(price) -> Decimal:
    """Return the price as a finite, strictly positive Decimal."""
    try:
        value = _to_decimal(price) if price is not None else None
    except InvalidOperation:
        value = None
    if value is None or not value.is_finite() or not value > 0:
        raise DomainValidationError("Price must be greater than zero.", field="price")
    return value


@dataclass(eq=False)
class Product(BaseEntity[uuid.UUID]):
    """
    Product aggregate root.

    A product optionally belongs to a brand. ``brand`` is only populated
    when the product was loaded with its brand included.
    """

    name: str
    description: Optional[str] = None
    price: Decimal = Decimal("0")
    brand_id: Optional[uuid.UUID] = None
    brand: Optional[Brand] = field(default=None, repr=False)
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    @classmethod
    def create(
        cls,
        name: str,
        description: Optional[str],
        price: Decimal,
        brand_id: Optional[uuid.UUID] = None,
        product_id: Optional[uuid.UUID] = None,
    ) -> "Product":
        """
        Create a new Product entity.

        Args:
            name: Product display name
            description: Optional description
            price: Unit price, strictly positive
            brand_id: Optional brand UUID
            product_id: Optional UUID (generated if not provided)

        Returns:
            Product entity instance with a queued ProductCreated event

        Raises:
            DomainValidationError: If the name is blank or the price is not positive
        """
        _validate_name(name, "Name cannot be null or whitespace.")
        price = _validate_price(price)

        product = cls(
            name=name,
            description=description,
            price=price,
            brand_id=brand_id,
            id=product_id or uuid.uuid4(),
        )
        product.queue_domain_event(ProductCreated(product))
        return product

    def update(
        self,
        name: Optional[str],
        description: Optional[str],
        price: Optional[Decimal],
        brand_id: Optional[uuid.UUID],
    ) -> "Product":
        """
        Update the product in place.

        Every supplied value is validated before anything is assigned, so a
        rejected update leaves the product unchanged.

        Args:
            name: New name, or None to keep the current one
            description: New description, or None to clear it
            price: New price, or None to keep the current one
            brand_id: New brand UUID; None or the nil UUID keeps the current one

        Returns:
            This product

        Raises:
            DomainValidationError: If a blank name or non-positive price is supplied
        """
        if name is not None:
            _validate_name(name, "Name cannot be empty or whitespace.")
        if price is not None:
            price = _validate_price(price)

        is_updated = False

        if name is not None and not same_text(self.name, name):
            self.name = name
            is_updated = True

        if not same_text(self.description, description):
            self.description = description
            is_updated = True

        if price is not None and self.price != price:
            self.price = price
            is_updated = True

        if brand_id is not None and brand_id != uuid.UUID(int=0) and self.brand_id != brand_id:
            self.brand_id = brand_id
            self.brand = None
            is_updated = True

        if is_updated:
            self.queue_domain_event(ProductUpdated(self))

        return self

    def mark_deleted(self) -> None:
        """Queue a ``ProductDeleted`` event ahead of removal."""
        self.queue_domain_event(ProductDeleted(self))

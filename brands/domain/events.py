"""
Catalog domain events.

Domain events represent something that happened in the catalog domain.
Each event carries a reference to the aggregate it describes.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from core.domain.events import DomainEvent

if TYPE_CHECKING:
    from brands.domain.brand import Brand
    from brands.domain.product import Product


class BrandEvent(DomainEvent):
    """Base class for events raised by a brand."""

    def __init__(self, brand: "Brand", raised_on: Optional[datetime] = None):
        """
        Initialize brand event.

        Args:
            brand: Brand that raised the event
            raised_on: When the event was raised
        """
        super().__init__(aggregate_id=str(brand.id), raised_on=raised_on)
        object.__setattr__(self, "brand", brand)


class BrandCreated(BrandEvent):
    """Event raised when a brand is created."""


class BrandUpdated(BrandEvent):
    """Event raised when a brand is updated."""


class BrandDeleted(BrandEvent):
    """Event raised when a brand is deleted."""


class ProductEvent(DomainEvent):
    """Base class for events raised by a product."""

    def __init__(self, product: "Product", raised_on: Optional[datetime] = None):
        """
        Initialize product event.

        Args:
            product: Product that raised the event
            raised_on: When the event was raised
        """
        super().__init__(aggregate_id=str(product.id), raised_on=raised_on)
        object.__setattr__(self, "product", product)


class ProductCreated(ProductEvent):
    """Event raised when a product is created."""


class ProductUpdated(ProductEvent):
    """Event raised when a product is updated."""


class ProductDeleted(ProductEvent):
    """Event raised when a product is deleted."""

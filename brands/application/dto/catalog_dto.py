"""
Catalog DTOs for handler responses.
"""
import uuid
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from brands.domain.brand import Brand
from brands.domain.product import Product


@dataclass
class BrandResponse:
    """DTO for brand information."""

    id: uuid.UUID
    name: str
    description: Optional[str]

    @classmethod
    def from_entity(cls, brand: Brand) -> "BrandResponse":
        return cls(id=brand.id, name=brand.name, description=brand.description)


@dataclass
class ProductResponse:
    """DTO for product information, with the brand name when loaded."""

    id: uuid.UUID
    name: str
    description: Optional[str]
    price: Decimal
    brand_id: Optional[uuid.UUID]
    brand_name: Optional[str] = None

    @classmethod
    def from_entity(cls, product: Product) -> "ProductResponse":
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            brand_id=product.brand_id,
            brand_name=product.brand.name if product.brand is not None else None,
        )


@dataclass
class CreateBrandResponse:
    id: uuid.UUID


@dataclass
class UpdateBrandResponse:
    id: uuid.UUID


@dataclass
class CreateProductResponse:
    id: uuid.UUID


@dataclass
class UpdateProductResponse:
    id: uuid.UUID

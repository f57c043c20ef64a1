"""
Product commands.
"""

import uuid
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Optional

from core.paging import PaginationFilter


@dataclass
class CreateProductCommand:
    """Command to create a product."""

    name: str
    price: Decimal
    description: Optional[str] = None
    brand_id: Optional[uuid.UUID] = None


@dataclass
class UpdateProductCommand:
    """
    Command to update a product.

    ``None`` keeps the current name, price and brand; a ``None``
    description clears it.
    """

    id: uuid.UUID
    name: Optional[str]
    price: Optional[Decimal] = None
    description: Optional[str] = None
    brand_id: Optional[uuid.UUID] = None


@dataclass
class DeleteProductCommand:
    """Command to delete a product."""

    id: uuid.UUID


@dataclass
class SearchProductsCommand(PaginationFilter):
    """Paged product search with brand and price range criteria."""

    brand_id: Optional[uuid.UUID] = None
    minimum_rate: Optional[Decimal] = None
    maximum_rate: Optional[Decimal] = None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "SearchProductsCommand":
        """
        Build the command from a camelCase request payload.

        Raises:
            rest_framework.exceptions.ValidationError: If the payload shape is invalid
        """
        from brands.application.serializers import SearchProductsRequestSerializer

        serializer = SearchProductsRequestSerializer(data=payload)
        serializer.is_valid(raise_exception=True)
        return serializer.to_filter(cls)

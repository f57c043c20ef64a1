"""
Brand commands.
"""

import uuid
from dataclasses import dataclass
from typing import Any, Dict, Optional

from core.paging import PaginationFilter


@dataclass
class CreateBrandCommand:
    """Command to create a brand."""

    name: str
    description: Optional[str] = None


@dataclass
class UpdateBrandCommand:
    """
    Command to update a brand.

    ``name=None`` keeps the current name; ``description=None`` clears it.
    """

    id: uuid.UUID
    name: Optional[str]
    description: Optional[str] = None


@dataclass
class DeleteBrandCommand:
    """Command to delete a brand."""

    id: uuid.UUID


@dataclass
class SearchBrandsCommand(PaginationFilter):
    """Paged brand search with optional name and description criteria."""

    name: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "SearchBrandsCommand":
        """
        Build the command from a camelCase request payload.

        Raises:
            rest_framework.exceptions.ValidationError: If the payload shape is invalid
        """
        from brands.application.serializers import SearchBrandsRequestSerializer

        serializer = SearchBrandsRequestSerializer(data=payload)
        serializer.is_valid(raise_exception=True)
        return serializer.to_filter(cls)

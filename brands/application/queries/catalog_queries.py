"""
Catalog queries.
"""

import uuid
from dataclasses import dataclass


@dataclass
class GetBrandQuery:
    """Query for a single brand by ID."""

    id: uuid.UUID


@dataclass
class GetProductQuery:
    """Query for a single product by ID, with its brand."""

    id: uuid.UUID

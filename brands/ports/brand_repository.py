"""
Brand repository port (interface).

This defines the contract for brand persistence operations.
Implementations are in the infrastructure layer.
"""

from abc import ABC

from brands.domain.brand import Brand
from core.ports.repository import Repository


class BrandRepository(Repository[Brand], ABC):
    """
    Abstract repository for Brand entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

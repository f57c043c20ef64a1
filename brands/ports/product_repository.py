"""
Product repository port (interface).
"""

from abc import ABC

from brands.domain.product import Product
from core.ports.repository import Repository


class ProductRepository(Repository[Product], ABC):
    """Abstract repository for Product entities."""

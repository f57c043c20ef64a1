"""
Product handlers.

Handlers for the create, get, update, delete and search product operations.
"""

import logging
from typing import Optional

from brands.application.cache_keys import product_cache_key
from brands.application.commands.product_commands import (
    CreateProductCommand,
    DeleteProductCommand,
    SearchProductsCommand,
    UpdateProductCommand,
)
from brands.application.dto.catalog_dto import (
    CreateProductResponse,
    ProductResponse,
    UpdateProductResponse,
)
from brands.application.queries.catalog_queries import GetProductQuery
from brands.application.specifications import GetProductSpecs, SearchProductSpecs
from brands.domain.product import Product
from brands.domain.services import ProductValidator
from brands.ports.product_repository import ProductRepository
from core.domain.exceptions import ProductNotFoundError
from core.infrastructure.cache import CachePort
from core.paging import PagedList

logger = logging.getLogger(__name__)


class CreateProductHandler:
    """Handler for CreateProductCommand."""

    def __init__(self, product_repository: ProductRepository):
        """Initialize handler with repository."""
        self.product_repository = product_repository

    async def handle(self, command: CreateProductCommand) -> CreateProductResponse:
        """
        Handle create product command.

        Args:
            command: CreateProductCommand

        Returns:
            CreateProductResponse with the new product's ID

        Raises:
            DomainValidationError: If the name, description or price is invalid
        """
        if command is None:
            raise TypeError("command must not be None")
        ProductValidator.validate(command.name, command.description, command.price)

        product = Product.create(
            command.name, command.description, command.price, brand_id=command.brand_id
        )
        await self.product_repository.add(product)
        logger.info("product created %s", product.id)
        return CreateProductResponse(id=product.id)


class GetProductHandler:
    """Handler for GetProductQuery, reading through the cache."""

    def __init__(self, product_repository: ProductRepository, cache: Optional[CachePort] = None):
        """Initialize handler with repository and cache."""
        self.product_repository = product_repository
        if cache is None:
            from core.infrastructure.cache_adapters import DjangoCacheAdapter

            cache = DjangoCacheAdapter()
        self.cache = cache

    async def handle(self, query: GetProductQuery) -> ProductResponse:
        """
        Handle get product query.

        The product is loaded together with its brand.

        Raises:
            ProductNotFoundError: If product not found
        """
        if query is None:
            raise TypeError("query must not be None")

        async def load() -> ProductResponse:
            product = await self.product_repository.first_or_default(GetProductSpecs(query.id))
            if product is None:
                raise ProductNotFoundError(query.id)
            return ProductResponse.from_entity(product)

        return await self.cache.get_or_set(product_cache_key(query.id), load)


class UpdateProductHandler:
    """Handler for UpdateProductCommand."""

    def __init__(self, product_repository: ProductRepository):
        """Initialize handler with repository."""
        self.product_repository = product_repository

    async def handle(self, command: UpdateProductCommand) -> UpdateProductResponse:
        """
        Handle update product command.

        Args:
            command: UpdateProductCommand

        Returns:
            UpdateProductResponse with the product's ID

        Raises:
            ProductNotFoundError: If product not found
            DomainValidationError: If a supplied value is invalid
        """
        if command is None:
            raise TypeError("command must not be None")
        ProductValidator.validate(command.name, command.description, command.price, partial=True)

        product = await self.product_repository.get_by_id(command.id)
        if product is None:
            raise ProductNotFoundError(command.id)

        product.update(command.name, command.description, command.price, command.brand_id)
        await self.product_repository.update(product)
        logger.info("product with id : %s updated.", product.id)
        return UpdateProductResponse(id=product.id)


class DeleteProductHandler:
    """Handler for DeleteProductCommand."""

    def __init__(self, product_repository: ProductRepository):
        """Initialize handler with repository."""
        self.product_repository = product_repository

    async def handle(self, command: DeleteProductCommand) -> None:
        """
        Handle delete product command.

        Raises:
            ProductNotFoundError: If product not found
        """
        if command is None:
            raise TypeError("command must not be None")
        product = await self.product_repository.get_by_id(command.id)
        if product is None:
            raise ProductNotFoundError(command.id)

        product.mark_deleted()
        await self.product_repository.delete(product)
        logger.info("product with id : %s deleted", product.id)


class SearchProductsHandler:
    """Handler for SearchProductsCommand."""

    def __init__(self, product_repository: ProductRepository):
        """Initialize handler with repository."""
        self.product_repository = product_repository

    async def handle(self, command: SearchProductsCommand) -> PagedList[ProductResponse]:
        """
        Handle search products command.

        Returns:
            One page of ProductResponse items with the total match count
        """
        if command is None:
            raise TypeError("command must not be None")
        spec = SearchProductSpecs(command)

        products = await self.product_repository.list(spec)
        total_count = await self.product_repository.count(spec)

        return PagedList(
            items=[ProductResponse.from_entity(product) for product in products],
            page_number=command.page_number,
            page_size=command.page_size,
            total_count=total_count,
        )

"""
Brand handlers.

Handlers for the create, get, update, delete and search brand operations.
"""

import logging
from typing import Optional

from brands.application.cache_keys import brand_cache_key
from brands.application.commands.brand_commands import (
    CreateBrandCommand,
    DeleteBrandCommand,
    SearchBrandsCommand,
    UpdateBrandCommand,
)
from brands.application.dto.catalog_dto import (
    BrandResponse,
    CreateBrandResponse,
    UpdateBrandResponse,
)
from brands.application.queries.catalog_queries import GetBrandQuery
from brands.application.specifications import SearchBrandSpecs
from brands.domain.brand import Brand
from brands.domain.services import BrandValidator
from brands.ports.brand_repository import BrandRepository
from core.domain.exceptions import BrandNotFoundError
from core.infrastructure.cache import CachePort
from core.paging import PagedList

logger = logging.getLogger(__name__)


class CreateBrandHandler:
    """Handler for CreateBrandCommand."""

    def __init__(self, brand_repository: BrandRepository):
        """Initialize handler with repository."""
        self.brand_repository = brand_repository

    async def handle(self, command: CreateBrandCommand) -> CreateBrandResponse:
        """
        Handle create brand command.

        Args:
            command: CreateBrandCommand

        Returns:
            CreateBrandResponse with the new brand's ID

        Raises:
            DomainValidationError: If the name or description is invalid
        """
        if command is None:
            raise TypeError("command must not be None")
        BrandValidator.validate(command.name, command.description)

        brand = Brand.create(command.name, command.description)
        await self.brand_repository.add(brand)
        logger.info("brand created %s", brand.id)
        return CreateBrandResponse(id=brand.id)


class GetBrandHandler:
    """Handler for GetBrandQuery, reading through the cache."""

    def __init__(self, brand_repository: BrandRepository, cache: Optional[CachePort] = None):
        """Initialize handler with repository and cache."""
        self.brand_repository = brand_repository
        if cache is None:
            from core.infrastructure.cache_adapters import DjangoCacheAdapter

            cache = DjangoCacheAdapter()
        self.cache = cache

    async def handle(self, query: GetBrandQuery) -> BrandResponse:
        """
        Handle get brand query.

        Args:
            query: GetBrandQuery

        Returns:
            BrandResponse

        Raises:
            BrandNotFoundError: If brand not found
        """
        if query is None:
            raise TypeError("query must not be None")

        async def load() -> BrandResponse:
            brand = await self.brand_repository.get_by_id(query.id)
            if brand is None:
                raise BrandNotFoundError(query.id)
            return BrandResponse.from_entity(brand)

        return await self.cache.get_or_set(brand_cache_key(query.id), load)


class UpdateBrandHandler:
    """Handler for UpdateBrandCommand."""

    def __init__(self, brand_repository: BrandRepository):
        """Initialize handler with repository."""
        self.brand_repository = brand_repository

    async def handle(self, command: UpdateBrandCommand) -> UpdateBrandResponse:
        """
        Handle update brand command.

        Args:
            command: UpdateBrandCommand

        Returns:
            UpdateBrandResponse with the brand's ID

        Raises:
            BrandNotFoundError: If brand not found
            DomainValidationError: If a supplied value is invalid
        """
        if command is None:
            raise TypeError("command must not be None")
        BrandValidator.validate(command.name, command.description, partial=True)

        brand = await self.brand_repository.get_by_id(command.id)
        if brand is None:
            raise BrandNotFoundError(command.id)

        brand.update(command.name, command.description)
        await self.brand_repository.update(brand)
        logger.info("Brand with id : %s updated.", brand.id)
        return UpdateBrandResponse(id=brand.id)


class DeleteBrandHandler:
    """Handler for DeleteBrandCommand."""

    def __init__(self, brand_repository: BrandRepository):
        """Initialize handler with repository."""
        self.brand_repository = brand_repository

    async def handle(self, command: DeleteBrandCommand) -> None:
        """
        Handle delete brand command.

        Raises:
            BrandNotFoundError: If brand not found
        """
        if command is None:
            raise TypeError("command must not be None")
        brand = await self.brand_repository.get_by_id(command.id)
        if brand is None:
            raise BrandNotFoundError(command.id)

        brand.mark_deleted()
        await self.brand_repository.delete(brand)
        logger.info("Brand with id : %s deleted", brand.id)


class SearchBrandsHandler:
    """Handler for SearchBrandsCommand."""

    def __init__(self, brand_repository: BrandRepository):
        """Initialize handler with repository."""
        self.brand_repository = brand_repository

    async def handle(self, command: SearchBrandsCommand) -> PagedList[BrandResponse]:
        """
        Handle search brands command.

        Args:
            command: SearchBrandsCommand

        Returns:
            One page of BrandResponse items with the total match count
        """
        if command is None:
            raise TypeError("command must not be None")
        spec = SearchBrandSpecs(command)

        brands = await self.brand_repository.list(spec)
        total_count = await self.brand_repository.count(spec)

        return PagedList(
            items=[BrandResponse.from_entity(brand) for brand in brands],
            page_number=command.page_number,
            page_size=command.page_size,
            total_count=total_count,
        )

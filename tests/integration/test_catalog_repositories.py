"""
Integration tests for the Django catalog repositories.
"""

import uuid
from decimal import Decimal

import pytest

from brands.application.commands.brand_commands import SearchBrandsCommand
from brands.application.commands.product_commands import SearchProductsCommand
from brands.application.handlers.brand_handlers import SearchBrandsHandler
from brands.application.specifications import GetProductSpecs, SearchBrandSpecs, SearchProductSpecs
from brands.domain.brand import Brand
from brands.domain.product import Product
from core.paging import PaginationFilter
from core.specifications.base import EntitiesByPaginationFilterSpec
from core.specifications.filters import Filter, Search


async def add_catalog(brand_repository, product_repository, brand_factory, product_factory):
    acme = await brand_repository.add(brand_factory.create("Acme", "Tools and explosives"))
    globex = await brand_repository.add(brand_factory.create("Globex", None))
    for name, price, brand in (
        ("Anvil", "50.00", acme),
        ("Rocket", "500.00", acme),
        ("Widget", "12.50", globex),
        ("Gizmo", "25.00", None),
    ):
        product = Product.create(name, None, Decimal(price), brand_id=brand.id if brand else None)
        await product_repository.add(product)
    return acme, globex


@pytest.mark.django_db(transaction=True)
@pytest.mark.integration
class TestBrandRepository:
    """Integration tests for DjangoBrandRepository."""

    @pytest.mark.asyncio
    async def test_add_and_get(self, brand_repository, recorded_events):
        """Test storing a brand and loading it back."""
        brand = Brand.create("Acme", "tools")

        await brand_repository.add(brand)
        found = await brand_repository.get_by_id(brand.id)

        assert found == brand
        assert found.name == "Acme"
        assert found.description == "tools"
        assert found.domain_events == ()
        assert recorded_events.event_types == ["BrandCreated"]

    @pytest.mark.asyncio
    async def test_get_missing(self, brand_repository):
        """Test a missing brand loads as None."""
        assert await brand_repository.get_by_id(uuid.uuid4()) is None

    @pytest.mark.asyncio
    async def test_update(self, brand_repository, recorded_events):
        """Test updating a stored brand."""
        brand = await brand_repository.add(Brand.create("Acme", "tools"))

        brand.update("Acme Corp", None)
        await brand_repository.update(brand)
        found = await brand_repository.get_by_id(brand.id)

        assert found.name == "Acme Corp"
        assert found.description is None
        assert recorded_events.event_types == ["BrandCreated", "BrandUpdated"]

    @pytest.mark.asyncio
    async def test_delete_keeps_products(self, brand_repository, product_repository):
        """Test deleting a brand detaches its products."""
        brand = await brand_repository.add(Brand.create("Acme"))
        product = await product_repository.add(
            Product.create("Anvil", None, Decimal("50"), brand_id=brand.id)
        )

        brand.mark_deleted()
        await brand_repository.delete(brand)

        assert await brand_repository.get_by_id(brand.id) is None
        found = await product_repository.get_by_id(product.id)
        assert found.brand_id is None

    @pytest.mark.asyncio
    async def test_search_second_page(self, brand_repository, brand_factory):
        """Test page 2 of size 1 over three brands."""
        for name in ("C", "A", "B"):
            await brand_repository.add(brand_factory.create(name))

        page = await SearchBrandsHandler(brand_repository).handle(
            SearchBrandsCommand(page_number=2, page_size=1)
        )

        assert [item.name for item in page.items] == ["B"]
        assert page.total_count == 3

    @pytest.mark.asyncio
    async def test_text_filters_ignore_case(self, brand_repository, brand_factory):
        """Test text operators compare case-insensitively."""
        for name in ("Acme", "Acme Labs", "Globex"):
            await brand_repository.add(brand_factory.create(name))

        equal = SearchBrandSpecs(
            SearchBrandsCommand(advanced_filter=Filter(field="name", operator="eq", value="ACME"))
        )
        contains = SearchBrandSpecs(
            SearchBrandsCommand(advanced_filter=Filter(field="Name", operator="contains", value="labs"))
        )

        assert [brand.name for brand in await brand_repository.list(equal)] == ["Acme"]
        assert [brand.name for brand in await brand_repository.list(contains)] == ["Acme Labs"]

    @pytest.mark.asyncio
    async def test_null_filters(self, brand_repository, brand_factory):
        """Test eq/neq against null translate to null checks."""
        await brand_repository.add(brand_factory.create("Acme", "tools"))
        await brand_repository.add(Brand.create("Globex"))

        is_null = SearchBrandSpecs(
            SearchBrandsCommand(advanced_filter=Filter(field="description", operator="eq", value=None))
        )
        not_null = SearchBrandSpecs(
            SearchBrandsCommand(advanced_filter=Filter(field="description", operator="neq", value=None))
        )
        starts = SearchBrandSpecs(
            SearchBrandsCommand(
                advanced_filter=Filter(field="description", operator="startswith", value=None)
            )
        )

        assert [brand.name for brand in await brand_repository.list(is_null)] == ["Globex"]
        assert [brand.name for brand in await brand_repository.list(not_null)] == ["Acme"]
        assert await brand_repository.list(starts) == []

    @pytest.mark.asyncio
    async def test_nor_filter(self, brand_repository, brand_factory):
        """Test a nor composite excludes every listed match."""
        for name in ("Acme", "Globex", "Initech"):
            await brand_repository.add(brand_factory.create(name))

        spec = SearchBrandSpecs(
            SearchBrandsCommand(
                advanced_filter=Filter(
                    logic="nor",
                    filters=[
                        Filter(field="name", operator="eq", value="acme"),
                        Filter(field="name", operator="eq", value="globex"),
                    ],
                )
            )
        )

        assert [brand.name for brand in await brand_repository.list(spec)] == ["Initech"]
        assert await brand_repository.any(spec)


@pytest.mark.django_db(transaction=True)
@pytest.mark.integration
class TestProductRepository:
    """Integration tests for DjangoProductRepository."""

    @pytest.mark.asyncio
    async def test_add_and_get(self, product_repository, recorded_events):
        """Test storing a product and loading it back without its brand."""
        product = Product.create("Anvil", "heavy", Decimal("49.90"))

        await product_repository.add(product)
        found = await product_repository.get_by_id(product.id)

        assert found.price == Decimal("49.90")
        assert found.brand is None
        assert recorded_events.event_types == ["ProductCreated"]

    @pytest.mark.asyncio
    async def test_include_brand(self, brand_repository, product_repository):
        """Test including the brand populates the navigation."""
        brand = await brand_repository.add(Brand.create("Acme"))
        product = await product_repository.add(
            Product.create("Anvil", None, Decimal("50"), brand_id=brand.id)
        )

        found = await product_repository.first_or_default(GetProductSpecs(product.id))

        assert found.brand == brand
        assert found.brand.name == "Acme"

    @pytest.mark.asyncio
    async def test_search_by_brand_and_price(
        self, brand_repository, product_repository, brand_factory, product_factory
    ):
        """Test brand and price range criteria."""
        acme, _ = await add_catalog(brand_repository, product_repository, brand_factory, product_factory)
        spec = SearchProductSpecs(
            SearchProductsCommand(brand_id=acme.id, minimum_rate=Decimal("50"), maximum_rate=Decimal("500"))
        )

        products = await product_repository.list(spec)

        assert [product.name for product in products] == ["Anvil", "Rocket"]
        assert all(product.brand.name == "Acme" for product in products)

    @pytest.mark.asyncio
    async def test_nested_brand_filter(
        self, brand_repository, product_repository, brand_factory, product_factory
    ):
        """Test filtering on a field of the related brand."""
        await add_catalog(brand_repository, product_repository, brand_factory, product_factory)
        spec = SearchProductSpecs(
            SearchProductsCommand(
                advanced_filter=Filter(field="brand.name", operator="eq", value="globex")
            )
        )

        assert [product.name for product in await product_repository.list(spec)] == ["Widget"]

    @pytest.mark.asyncio
    async def test_keyword_matches_price_text(
        self, brand_repository, product_repository, brand_factory, product_factory
    ):
        """Test the keyword also matches the text form of prices."""
        await add_catalog(brand_repository, product_repository, brand_factory, product_factory)
        spec = SearchProductSpecs(SearchProductsCommand(keyword="12.5"))

        assert [product.name for product in await product_repository.list(spec)] == ["Widget"]

    @pytest.mark.asyncio
    async def test_advanced_search_fields(
        self, brand_repository, product_repository, brand_factory, product_factory
    ):
        """Test advanced search on a related field."""
        await add_catalog(brand_repository, product_repository, brand_factory, product_factory)
        spec = SearchProductSpecs(
            SearchProductsCommand(advanced_search=Search(keyword="explosives", fields=["brand.description"]))
        )

        assert [product.name for product in await product_repository.list(spec)] == ["Anvil", "Rocket"]

    @pytest.mark.asyncio
    async def test_count_ignores_paging(
        self, brand_repository, product_repository, brand_factory, product_factory
    ):
        """Test count reports every match while list returns one page."""
        await add_catalog(brand_repository, product_repository, brand_factory, product_factory)
        spec = EntitiesByPaginationFilterSpec(
            PaginationFilter(page_number=2, page_size=3, order_by=["price desc"]), Product
        )

        products = await product_repository.list(spec)

        assert [product.name for product in products] == ["Widget"]
        assert await product_repository.count(spec) == 4

    @pytest.mark.asyncio
    async def test_delete(self, product_repository, recorded_events):
        """Test deleting a product."""
        product = await product_repository.add(Product.create("Anvil", None, Decimal("50")))

        product.mark_deleted()
        await product_repository.delete(product)

        assert await product_repository.count() == 0
        assert recorded_events.event_types == ["ProductCreated", "ProductDeleted"]

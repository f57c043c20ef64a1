"""
Unit tests for keyword search, ordering and paging of specifications.
"""

from decimal import Decimal

import pytest

from brands.domain.brand import Brand
from brands.domain.product import Product
from core.domain.exceptions import FilterValidationError
from core.paging import BaseFilter, PaginationFilter
from core.specifications.base import EntitiesByBaseFilterSpec, EntitiesByPaginationFilterSpec
from core.specifications.filters import Search
from core.specifications.specification import Specification


def brand(name, description=None):
    return Brand(name=name, description=description)


class TestKeywordSearch:
    """Tests for keyword search."""

    def test_keyword_over_default_fields(self):
        """Test the keyword is searched in every scalar field."""
        spec = EntitiesByBaseFilterSpec(BaseFilter(keyword="test"), Brand)

        assert len(spec.where_expressions) == 1
        assert spec.is_satisfied_by(brand("This is a test brand"))
        assert not spec.is_satisfied_by(brand("Another brand"))

    def test_keyword_matches_description(self):
        """Test any default field can match."""
        spec = EntitiesByBaseFilterSpec(BaseFilter(keyword="TEST"), Brand)

        assert spec.is_satisfied_by(brand("Acme", "a test description"))

    def test_keyword_ignores_id(self):
        """Test the id is not a default search field."""
        item = brand("Acme")
        spec = EntitiesByBaseFilterSpec(BaseFilter(keyword=str(item.id)[:8]), Brand)

        assert not spec.is_satisfied_by(item)

    def test_keyword_matches_number_text(self):
        """Test numbers are searched through their text form."""
        item = Product(name="Widget", price=Decimal("12.50"))
        spec = EntitiesByBaseFilterSpec(BaseFilter(keyword="12.5"), Product)

        assert spec.is_satisfied_by(item)

    @pytest.mark.parametrize("keyword", [None, "", "   "])
    def test_blank_keyword_is_noop(self, keyword):
        """Test blank keywords add no condition."""
        spec = EntitiesByBaseFilterSpec(BaseFilter(keyword=keyword), Brand)

        assert spec.where_expressions == []

    def test_advanced_search_explicit_fields(self):
        """Test advanced search only looks at the listed fields."""
        spec = EntitiesByBaseFilterSpec(
            BaseFilter(advanced_search=Search(keyword="acme", fields=["description"])), Brand
        )

        assert spec.is_satisfied_by(brand("Other", "made by Acme"))
        assert not spec.is_satisfied_by(brand("Acme", "nothing"))

    def test_advanced_search_nested_field(self):
        """Test advanced search accepts nested paths."""
        spec = EntitiesByBaseFilterSpec(
            BaseFilter(advanced_search=Search(keyword="acm", fields=["brand.name"])), Product
        )
        with_brand = Product(name="Widget", price=Decimal("1"), brand=brand("Acme"))
        without_brand = Product(name="Acme widget", price=Decimal("1"))

        assert spec.is_satisfied_by(with_brand)
        assert not spec.is_satisfied_by(without_brand)

    def test_keyword_and_filter_are_and_combined(self):
        """Test keyword search is an additional and-ed condition."""
        from core.specifications.filters import Filter

        spec = EntitiesByBaseFilterSpec(
            BaseFilter(
                keyword="widget",
                advanced_filter=Filter(field="price", operator="lt", value=5),
            ),
            Product,
        )

        assert spec.is_satisfied_by(Product(name="Widget", price=Decimal("1")))
        assert not spec.is_satisfied_by(Product(name="Widget", price=Decimal("10")))
        assert not spec.is_satisfied_by(Product(name="Gadget", price=Decimal("1")))


class TestOrdering:
    """Tests for ordering."""

    def test_order_tokens(self):
        """Test tokens become ordering keys in list order with their directions."""
        spec = EntitiesByPaginationFilterSpec(
            PaginationFilter(order_by=["name desc", "description"]), Brand
        )

        keys = [(o.path.name, o.descending) for o in spec.order_expressions]
        assert keys == [("name", True), ("description", False)]
        assert spec.order_expressions[0].key_selector(brand("Test")) == "Test"
        assert spec.order_expressions[1].key_selector(brand("x", "Desc")) == "Desc"

    def test_desc_is_case_insensitive(self):
        """Test the direction keyword ignores case."""
        spec = Specification(Brand)
        spec.query.order_by(["name DeSc"])

        assert spec.order_expressions[0].descending is True

    def test_multi_key_ordering(self):
        """Test secondary keys break ties of the primary key."""
        items = [brand("b", "1"), brand("a", "2"), brand("b", "0"), brand("a", "1")]
        spec = Specification(Brand)
        spec.query.order_by(["name desc", "description"])

        ordered = spec.evaluate(items)

        assert [(b.name, b.description) for b in ordered] == [
            ("b", "0"),
            ("b", "1"),
            ("a", "1"),
            ("a", "2"),
        ]

    def test_nulls_sort_first(self):
        """Test null keys come before values in ascending order."""
        items = [brand("b", "x"), brand("a", None)]
        spec = Specification(Brand)
        spec.query.order_by(["description"])

        assert [b.name for b in spec.evaluate(items)] == ["a", "b"]

    def test_unknown_order_field(self):
        """Test ordering by an unknown field is rejected."""
        spec = Specification(Brand)

        with pytest.raises(FilterValidationError):
            spec.query.order_by(["colour"])


class TestPaging:
    """Tests for paging."""

    def test_page_two(self):
        """Test page 2 of size 25 skips 25 and takes 25."""
        spec = EntitiesByPaginationFilterSpec(PaginationFilter(page_number=2, page_size=25), Brand)

        assert spec.skip == 25
        assert spec.take == 25

    def test_first_page_has_no_skip(self):
        """Test page 1 does not set skip."""
        spec = EntitiesByPaginationFilterSpec(PaginationFilter(page_number=1, page_size=5), Brand)

        assert spec.skip is None
        assert spec.take == 5

    @pytest.mark.parametrize("page_number", [0, -3])
    def test_page_number_clamped(self, page_number):
        """Test page numbers below 1 behave like page 1."""
        spec = EntitiesByPaginationFilterSpec(PaginationFilter(page_number=page_number), Brand)

        assert not spec.skip
        assert spec.take == 10

    @pytest.mark.parametrize("page_size", [0, -1])
    def test_page_size_clamped(self, page_size):
        """Test page sizes of 0 or less fall back to 10."""
        spec = EntitiesByPaginationFilterSpec(PaginationFilter(page_size=page_size), Brand)

        assert spec.take == 10

    def test_clamping_applies_to_raw_filters(self):
        """Test the builder clamps values that bypassed PaginationFilter."""
        request = PaginationFilter()
        request.page_number = 0
        request.page_size = 0
        spec = Specification(Brand)
        spec.query.paginate_by(request)

        assert spec.skip is None
        assert spec.take == 10

    def test_evaluate_pages_in_memory(self):
        """Test evaluate applies skip and take after ordering."""
        items = [brand(name) for name in "edcba"]
        spec = EntitiesByPaginationFilterSpec(
            PaginationFilter(page_number=2, page_size=2, order_by=["name"]), Brand
        )

        assert [b.name for b in spec.evaluate(items)] == ["c", "d"]
        assert len(spec.evaluate(items, evaluate_paging=False)) == 5

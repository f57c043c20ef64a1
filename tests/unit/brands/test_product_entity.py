"""
Unit tests for Product domain entity.
"""

import uuid
from decimal import Decimal

import pytest

from brands.domain.brand import Brand
from brands.domain.events import ProductCreated, ProductUpdated
from brands.domain.product import Product
from core.domain.exceptions import DomainValidationError


@pytest.fixture
def product():
    """Fixture for a product with no pending events."""
    product = Product.create("Widget", "d", Decimal("50"), uuid.uuid4())
    product.clear_domain_events()
    return product


class TestProductCreate:
    """Tests for Product.create."""

    def test_create_product(self):
        """Test creating a product entity."""
        brand_id = uuid.uuid4()
        product = Product.create("Widget", "d", Decimal("9.99"), brand_id)

        assert product.name == "Widget"
        assert product.description == "d"
        assert product.price == Decimal("9.99")
        assert product.brand_id == brand_id
        assert [type(e) for e in product.domain_events] == [ProductCreated]

    def test_create_without_brand(self):
        """Test a product does not need a brand."""
        product = Product.create("Widget", None, 1)

        assert product.brand_id is None
        assert product.price == Decimal("1")

    @pytest.mark.parametrize("price", [0, -1, Decimal("-0.01"), None])
    def test_non_positive_price_fails(self, price):
        """Test zero, negative or missing prices are rejected."""
        with pytest.raises(DomainValidationError) as exc_info:
            Product.create("Widget", "d", price, None)

        assert exc_info.value.field == "price"

    @pytest.mark.parametrize(
        "price", [float("nan"), Decimal("NaN"), Decimal("sNaN"), float("inf"), Decimal("-Infinity"), "abc"]
    )
    def test_non_finite_price_fails(self, price):
        """Test NaN, infinite and non-numeric prices are rejected."""
        with pytest.raises(DomainValidationError) as exc_info:
            Product.create("Widget", "d", price)

        assert exc_info.value.field == "price"

    @pytest.mark.parametrize("price", [Decimal("0.01"), 1, 10.5])
    def test_positive_price_succeeds(self, price):
        """Test any positive price is accepted."""
        assert Product.create("Widget", "d", price).price > 0

    @pytest.mark.parametrize("name", [None, "", "  "])
    def test_invalid_name(self, name):
        """Test blank or missing names are rejected."""
        with pytest.raises(DomainValidationError) as exc_info:
            Product.create(name, "d", Decimal("1"))

        assert exc_info.value.field == "name"


class TestProductUpdate:
    """Tests for Product.update."""

    def test_no_change_queues_nothing(self, product):
        """Test updating with equal values is a no-op."""
        product.update("WIDGET", "D", Decimal("50.00"), product.brand_id)

        assert product.domain_events == ()
        assert product.name == "Widget"

    def test_price_change(self, product):
        """Test changing the price queues one event."""
        product.update("Widget", "d", Decimal("60"), None)

        assert product.price == Decimal("60")
        assert product.name == "Widget"
        assert [type(e) for e in product.domain_events] == [ProductUpdated]

    def test_none_price_keeps_price(self, product):
        """Test a None price leaves the price unchanged."""
        product.update("Widget", "d", None, None)

        assert product.price == Decimal("50")
        assert product.domain_events == ()

    @pytest.mark.parametrize("price", [0, Decimal("-5"), float("nan"), Decimal("NaN"), Decimal("Infinity")])
    def test_non_positive_price_fails_atomically(self, product, price):
        """Test a bad price fails before any other field changes."""
        with pytest.raises(DomainValidationError) as exc_info:
            product.update("Renamed", "changed", price, uuid.uuid4())

        assert exc_info.value.field == "price"
        assert product.name == "Widget"
        assert product.description == "d"
        assert product.price == Decimal("50")
        assert product.domain_events == ()

    def test_blank_name_fails_atomically(self, product):
        """Test a blank name fails before any other field changes."""
        with pytest.raises(DomainValidationError):
            product.update(" ", "changed", Decimal("70"), None)

        assert product.description == "d"
        assert product.price == Decimal("50")

    def test_brand_id_set(self, product):
        """Test a new brand id is applied and drops the loaded brand."""
        product.brand = Brand.create("Acme")
        new_brand_id = uuid.uuid4()

        product.update(None, "d", None, new_brand_id)

        assert product.brand_id == new_brand_id
        assert product.brand is None
        assert len(product.domain_events) == 1

    @pytest.mark.parametrize("brand_id", [None, uuid.UUID(int=0)])
    def test_brand_id_never_cleared(self, product, brand_id):
        """Test None and the nil UUID keep the current brand."""
        current = product.brand_id

        product.update(None, "d", None, brand_id)

        assert product.brand_id == current
        assert product.domain_events == ()

    def test_none_description_clears(self, product):
        """Test a None description clears it."""
        product.update(None, None, None, None)

        assert product.description is None
        assert [type(e) for e in product.domain_events] == [ProductUpdated]

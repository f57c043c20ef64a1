"""
Catalog specifications.

Each specification describes one catalog query; repositories decide how
to execute it.
"""

import uuid

from brands.application.commands.brand_commands import SearchBrandsCommand
from brands.application.commands.product_commands import SearchProductsCommand
from brands.domain.brand import Brand
from brands.domain.product import Product
from core.specifications.base import EntitiesByPaginationFilterSpec
from core.specifications.filters import FilterOperator
from core.specifications.specification import Specification

NIL_UUID = uuid.UUID(int=0)


class SearchBrandSpecs(EntitiesByPaginationFilterSpec[Brand]):
    """
    Paged brand search.

    Sorted by name unless the command asks for an ordering. The command's
    ``name`` and ``description`` are not criteria; use the keyword or an
    advanced filter to match on them.
    """

    entity_type = Brand

    def __init__(self, command: SearchBrandsCommand):
        if command is None:
            raise TypeError("command must not be None")
        super().__init__(command)
        if not command.has_order_by():
            self.query.order_by_field("name")


class SearchProductSpecs(EntitiesByPaginationFilterSpec[Product]):
    """Paged product search by brand and price range, with the brand loaded."""

    entity_type = Product

    def __init__(self, command: SearchProductsCommand):
        if command is None:
            raise TypeError("command must not be None")
        super().__init__(command)
        self.query.include("brand")

        if command.brand_id is not None and command.brand_id != NIL_UUID:
            self.query.where_field("brand_id", FilterOperator.EQ, command.brand_id)
        if command.minimum_rate is not None:
            self.query.where_field("price", FilterOperator.GTE, command.minimum_rate)
        if command.maximum_rate is not None:
            self.query.where_field("price", FilterOperator.LTE, command.maximum_rate)

        if not command.has_order_by():
            self.query.order_by_field("name")


class GetProductSpecs(Specification[Product]):
    """A single product by ID, with its brand loaded."""

    entity_type = Product

    def __init__(self, product_id: uuid.UUID):
        super().__init__()
        self.query.where_field("id", FilterOperator.EQ, product_id).include("brand")

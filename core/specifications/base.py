"""
Reusable specifications built from search requests.
"""

from typing import Optional, TypeVar

from core.paging import BaseFilter, PaginationFilter
from core.specifications.specification import Specification

T = TypeVar("T")


class EntitiesByBaseFilterSpec(Specification[T]):
    """Keyword search, advanced search and advanced filter of a request."""

    def __init__(self, filter: BaseFilter, entity_type: Optional[type] = None):
        if filter is None:
            raise TypeError("filter must not be None")
        super().__init__(entity_type)
        self.query.search_by(filter)


class EntitiesByPaginationFilterSpec(EntitiesByBaseFilterSpec[T]):
    """Base filter criteria plus ordering and page bounds."""

    def __init__(self, filter: PaginationFilter, entity_type: Optional[type] = None):
        super().__init__(filter, entity_type)
        self.query.paginate_by(filter)

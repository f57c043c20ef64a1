"""
Paging and search request model.

Search requests carry a free-text keyword, an optional advanced search and
filter tree, ordering tokens and page bounds. Page bounds are normalized on
construction.
"""

import math
from dataclasses import dataclass, field
from typing import Callable, Generic, List, Optional, TypeVar

from core.specifications.filters import Filter, Search

T = TypeVar("T")
U = TypeVar("U")

DEFAULT_PAGE_NUMBER = 1
DEFAULT_PAGE_SIZE = 10


@dataclass
class BaseFilter:
    """Keyword, advanced search and advanced filter of a search request."""

    keyword: Optional[str] = None
    advanced_search: Optional[Search] = None
    advanced_filter: Optional[Filter] = None


@dataclass
class PaginationFilter(BaseFilter):
    """Search request with ordering and page bounds."""

    page_number: int = DEFAULT_PAGE_NUMBER
    page_size: int = DEFAULT_PAGE_SIZE
    order_by: List[str] = field(default_factory=list)

    def __post_init__(self):
        """Clamp page bounds to usable values."""
        if self.page_number is None or self.page_number < 1:
            self.page_number = DEFAULT_PAGE_NUMBER
        if self.page_size is None or self.page_size <= 0:
            self.page_size = DEFAULT_PAGE_SIZE
        if self.order_by is None:
            self.order_by = []

    def has_order_by(self) -> bool:
        """True when at least one non-blank ordering token is present."""
        return any(token and token.strip() for token in self.order_by)


@dataclass
class PagedList(Generic[T]):
    """One page of results with paging metadata."""

    items: List[T]
    page_number: int
    page_size: int
    total_count: int

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return math.ceil(self.total_count / self.page_size)

    @property
    def has_previous(self) -> bool:
        return self.page_number > 1

    @property
    def has_next(self) -> bool:
        return self.page_number < self.total_pages

    def map(self, mapper: Callable[[T], U]) -> "PagedList[U]":
        """Return a page with every item converted by ``mapper``."""
        return PagedList(
            items=[mapper(item) for item in self.items],
            page_number=self.page_number,
            page_size=self.page_size,
            total_count=self.total_count,
        )

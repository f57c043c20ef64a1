"""
Specification object.

A specification is a declarative description of a query over one entity
type: AND-combined predicates, ordering keys, related entities to include
and paging bounds. It does not execute anything itself; repositories run
it either in memory (``evaluate``) or against a Django queryset
(``apply``).
"""

from typing import Any, Generic, Iterable, List, Optional, TypeVar

from django.db.models import QuerySet

from core.specifications.builder import SpecificationBuilder
from core.specifications.expressions import Expression, OrderExpression
from core.specifications.schema import EntitySchema, FieldPath, get_schema

T = TypeVar("T")


class Specification(Generic[T]):
    """
    Query specification for an entity type.

    Subclasses either set ``entity_type`` or pass it to ``__init__``, then
    build their criteria through ``self.query``.
    """

    entity_type: Optional[type] = None

    def __init__(self, entity_type: Optional[type] = None):
        if entity_type is not None:
            self.entity_type = entity_type
        if self.entity_type is None:
            raise TypeError(f"{self.__class__.__name__} requires an entity type")

        self.where_expressions: List[Expression] = []
        self.order_expressions: List[OrderExpression] = []
        self.include_expressions: List[FieldPath] = []
        self.skip: Optional[int] = None
        self.take: Optional[int] = None
        self.query = SpecificationBuilder(self)

    @property
    def schema(self) -> EntitySchema:
        return get_schema(self.entity_type)

    def is_satisfied_by(self, entity: T) -> bool:
        """Return True if the entity matches every predicate."""
        return all(expression.evaluate(entity) for expression in self.where_expressions)

    def evaluate(self, items: Iterable[T], evaluate_paging: bool = True) -> List[T]:
        """
        Run the specification against in-memory entities.

        Args:
            items: Entities to query
            evaluate_paging: Apply skip/take (False for counting)

        Returns:
            Matching entities, ordered and paged
        """
        result = [item for item in items if self.is_satisfied_by(item)]

        # Stable sorts applied from the last key to the first
        for order in reversed(self.order_expressions):
            result.sort(key=lambda item: _sort_key(order.key_selector(item)), reverse=order.descending)

        if evaluate_paging:
            start = self.skip or 0
            end = start + self.take if self.take is not None else None
            result = result[start:end]
        return result

    def apply_criteria(self, queryset: QuerySet) -> QuerySet:
        """Apply only the predicates to a queryset."""
        for expression in self.where_expressions:
            queryset = queryset.filter(expression.to_q())
        return queryset

    def apply(self, queryset: QuerySet) -> QuerySet:
        """Apply predicates, includes, ordering and paging to a queryset."""
        queryset = self.apply_criteria(queryset)
        if self.include_expressions:
            queryset = queryset.select_related(*(path.lookup for path in self.include_expressions))
        if self.order_expressions:
            queryset = queryset.order_by(*(order.to_order_by() for order in self.order_expressions))

        start = self.skip or 0
        if self.take is not None:
            queryset = queryset[start : start + self.take]
        elif start:
            queryset = queryset[start:]
        return queryset

    def __repr__(self):
        return (
            f"{self.__class__.__name__}(where={self.where_expressions!r}, "
            f"order={self.order_expressions!r}, skip={self.skip}, take={self.take})"
        )


def _sort_key(value: Any):
    # Nulls sort before any value
    return (value is not None, value)

"""
Specification builder.

Compiles structured filter, keyword search, ordering and paging requests
into the where/order/include/skip/take parts of a ``Specification``.
"""

from typing import TYPE_CHECKING, Any, Iterable, List, Optional

from core.domain.exceptions import FilterValidationError
from core.specifications.expressions import (
    And,
    Comparison,
    Constant,
    Expression,
    KeywordSearch,
    Not,
    Or,
    OrderExpression,
)
from core.specifications.filters import Filter, FilterLogic, FilterOperator, Search

if TYPE_CHECKING:
    from core.paging import BaseFilter, PaginationFilter
    from core.specifications.specification import Specification

DEFAULT_PAGE_SIZE = 10


def combine(logic: str, accumulated: Expression, expression: Expression) -> Expression:
    """
    Combine the running expression with the next one.

    Lists fold left: ``nor`` over a, b, c is ``not((not(a or b)) or c)``.
    ``not`` negates the running expression and drops the next one.
    """
    if logic == FilterLogic.AND:
        return And(accumulated, expression)
    if logic == FilterLogic.OR:
        return Or(accumulated, expression)
    if logic == FilterLogic.NOT:
        return Not(accumulated)
    if logic == FilterLogic.NOR:
        return Not(Or(accumulated, expression))
    raise FilterValidationError("Filter Logic is not valid.")


def _normalize_logic(logic: Optional[str]) -> Optional[str]:
    if not logic:
        return None
    normalized = logic.strip().lower()
    if normalized not in FilterLogic.ALL:
        raise FilterValidationError("Filter Logic is not valid.")
    return normalized


class SpecificationBuilder:
    """
    Fluent builder bound to a specification.

    Every method mutates the bound specification and returns the builder.
    """

    def __init__(self, specification: "Specification"):
        self.specification = specification

    @property
    def schema(self):
        return self.specification.schema

    def where(self, expression: Expression) -> "SpecificationBuilder":
        """Add a predicate; predicates are AND-combined."""
        self.specification.where_expressions.append(expression)
        return self

    def where_field(self, field: str, operator: str, value: Any) -> "SpecificationBuilder":
        """Add a single ``field operator value`` predicate."""
        return self.where(self.create_filter_expression(field, operator, value))

    def include(self, path: str) -> "SpecificationBuilder":
        """Load a related entity together with the result."""
        field_path = self.schema.resolve_path(path)
        if not field_path.info.is_relation:
            raise FilterValidationError(f"Field {path} is not a relation", field=path)
        self.specification.include_expressions.append(field_path)
        return self

    def order_by_field(self, field: str, descending: bool = False) -> "SpecificationBuilder":
        """Append an ordering key after any existing ones."""
        path = self.schema.resolve_path(field)
        self.specification.order_expressions.append(OrderExpression(path, descending))
        return self

    def skip(self, count: int) -> "SpecificationBuilder":
        self.specification.skip = count
        return self

    def take(self, count: int) -> "SpecificationBuilder":
        self.specification.take = count
        return self

    # Request compilation

    def search_by(self, filter: "BaseFilter") -> "SpecificationBuilder":
        """Apply keyword, advanced search and advanced filter of a request."""
        return (
            self.search_by_keyword(filter.keyword)
            .advanced_search(filter.advanced_search)
            .advanced_filter(filter.advanced_filter)
        )

    def paginate_by(self, filter: "PaginationFilter") -> "SpecificationBuilder":
        """Apply paging bounds and ordering of a request."""
        page_number = filter.page_number if filter.page_number and filter.page_number > 0 else 1
        page_size = filter.page_size if filter.page_size and filter.page_size > 0 else DEFAULT_PAGE_SIZE

        if page_number > 1:
            self.skip((page_number - 1) * page_size)

        return self.take(page_size).order_by(filter.order_by)

    def search_by_keyword(self, keyword: Optional[str]) -> "SpecificationBuilder":
        """Search every scalar field for a keyword; blank keywords are ignored."""
        if not keyword or not keyword.strip():
            return self
        return self.advanced_search(Search(keyword=keyword))

    def advanced_search(self, search: Optional[Search]) -> "SpecificationBuilder":
        """Search the requested fields (all scalar fields when none) for a keyword."""
        if search is None or not search.keyword or not search.keyword.strip():
            return self

        if search.fields:
            paths = [self.schema.resolve_path(field) for field in search.fields]
        else:
            paths = self.schema.searchable_fields()

        if not paths:
            return self
        return self.where(KeywordSearch(paths, search.keyword))

    def advanced_filter(self, filter: Optional[Filter]) -> "SpecificationBuilder":
        """
        Compile a filter tree into where clauses.

        An ``and`` composite adds each child as its own clause; any other
        logic adds a single folded clause.
        """
        if filter is None:
            return self

        logic = _normalize_logic(filter.logic)
        if logic is not None and filter.filters is None:
            raise FilterValidationError(
                "The Filters attribute is required when declaring a logic", field="filters"
            )

        if logic == FilterLogic.AND:
            for child in filter.filters:
                self.advanced_filter(child)
            return self

        if logic is not None:
            return self.advanced_filters(filter.filters, logic)

        if filter.filters is not None:
            return self.advanced_filters(filter.filters, FilterLogic.AND)

        return self.where(self.create_expression(filter))

    def advanced_filters(
        self, filters: Optional[Iterable[Filter]], logic: str = FilterLogic.AND
    ) -> "SpecificationBuilder":
        """Fold a list of filters with one logic into a single clause."""
        expression = self._fold(filters or [], logic)
        if expression is not None:
            self.where(expression)
        return self

    def order_by(self, fields: Optional[List[str]]) -> "SpecificationBuilder":
        """
        Apply ``"field [ASC|DESC]"`` tokens; the first is the primary key.
        """
        for token in fields or []:
            parts = token.strip().split()
            if not parts:
                continue
            descending = len(parts) > 1 and parts[1].upper() == "DESC"
            self.order_by_field(parts[0], descending)
        return self

    # Expression construction

    def _fold(self, filters: Iterable[Filter], logic: str) -> Optional[Expression]:
        expressions = [self.create_expression(filter) for filter in filters]
        expressions = [expression for expression in expressions if expression is not None]
        if not expressions:
            return None

        if logic in (FilterLogic.NOT, FilterLogic.NOR) and len(expressions) == 1:
            return Not(expressions[0])

        combined = expressions[0]
        for expression in expressions[1:]:
            combined = combine(logic, combined, expression)
        return combined

    def create_expression(self, filter: Optional[Filter]) -> Optional[Expression]:
        """Build the expression for a leaf or composite filter node."""
        if filter is None:
            return None

        logic = _normalize_logic(filter.logic)
        if logic is not None:
            if filter.filters is None:
                raise FilterValidationError(
                    "The Filters attribute is required when declaring a logic", field="filters"
                )
            folded = self._fold(filter.filters, logic)
            return folded if folded is not None else Constant(True)

        if not filter.field:
            raise FilterValidationError(
                "The field attribute is required when declaring a filter", field="field"
            )
        if not filter.operator:
            raise FilterValidationError(
                "The Operator attribute is required when declaring a filter", field="operator"
            )
        return self.create_filter_expression(filter.field, filter.operator, filter.value)

    def create_filter_expression(self, field: str, operator: str, value: Any) -> Expression:
        """Build a comparison between a field and a coerced value."""
        operator = (operator or "").strip().lower()
        if operator not in FilterOperator.ALL:
            raise FilterValidationError("Filter Operator is not valid.", field="operator")

        path = self.schema.resolve_path(field)
        if operator in FilterOperator.TEXT and path.type is not str:
            raise FilterValidationError(
                f"Filter Operator {operator} is not valid for {field}", field=field
            )

        return Comparison(path, operator, path.coerce(value))

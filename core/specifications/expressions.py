"""
Predicate expression tree.

Filters, keyword searches and catalog criteria compile to a small tree of
expressions. Each node can be evaluated against an in-memory entity or
translated into a Django ``Q`` object, so the same specification runs
against plain lists and against the ORM.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Sequence

from django.db.models import CharField, F, Q
from django.db.models.functions import Cast, Lower
from django.db.models.lookups import (
    GreaterThan,
    GreaterThanOrEqual,
    IContains,
    LessThan,
    LessThanOrEqual,
)

from core.specifications.filters import FilterOperator
from core.specifications.schema import FieldPath


def _match_nothing() -> Q:
    return Q(pk__in=[])


class Expression(ABC):
    """A boolean predicate over a single entity."""

    @abstractmethod
    def evaluate(self, entity: Any) -> bool:
        """Evaluate the predicate against an entity."""

    @abstractmethod
    def to_q(self) -> Q:
        """Translate the predicate into a Django ``Q`` object."""

    def __call__(self, entity: Any) -> bool:
        return self.evaluate(entity)

    def __and__(self, other: "Expression") -> "Expression":
        return And(self, other)

    def __or__(self, other: "Expression") -> "Expression":
        return Or(self, other)

    def __invert__(self) -> "Expression":
        return Not(self)


class Constant(Expression):
    """Constant true or false."""

    def __init__(self, value: bool):
        self.value = bool(value)

    def evaluate(self, entity: Any) -> bool:
        return self.value

    def to_q(self) -> Q:
        return Q() if self.value else _match_nothing()

    def __repr__(self):
        return f"Constant({self.value})"


class And(Expression):
    def __init__(self, left: Expression, right: Expression):
        self.left = left
        self.right = right

    def evaluate(self, entity: Any) -> bool:
        return self.left.evaluate(entity) and self.right.evaluate(entity)

    def to_q(self) -> Q:
        return self.left.to_q() & self.right.to_q()

    def __repr__(self):
        return f"({self.left!r} AND {self.right!r})"


class Or(Expression):
    def __init__(self, left: Expression, right: Expression):
        self.left = left
        self.right = right

    def evaluate(self, entity: Any) -> bool:
        return self.left.evaluate(entity) or self.right.evaluate(entity)

    def to_q(self) -> Q:
        return self.left.to_q() | self.right.to_q()

    def __repr__(self):
        return f"({self.left!r} OR {self.right!r})"


class Not(Expression):
    def __init__(self, operand: Expression):
        self.operand = operand

    def evaluate(self, entity: Any) -> bool:
        return not self.operand.evaluate(entity)

    def to_q(self) -> Q:
        return ~self.operand.to_q()

    def __repr__(self):
        return f"NOT {self.operand!r}"


def _lower(value: Any) -> Any:
    return value.lower() if isinstance(value, str) else value


def _db_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


class Comparison(Expression):
    """
    Compare a field against a constant.

    Text fields compare case-insensitively for every operator. Ordering
    and text operators never match a null on either side.
    """

    _ORDERING_LOOKUPS = {
        FilterOperator.LT: (LessThan, "lt"),
        FilterOperator.LTE: (LessThanOrEqual, "lte"),
        FilterOperator.GT: (GreaterThan, "gt"),
        FilterOperator.GTE: (GreaterThanOrEqual, "gte"),
    }

    _TEXT_LOOKUPS = {
        FilterOperator.CONTAINS: "icontains",
        FilterOperator.STARTSWITH: "istartswith",
        FilterOperator.ENDSWITH: "iendswith",
    }

    def __init__(self, path: FieldPath, operator: str, value: Any):
        self.path = path
        self.operator = operator
        self.value = value

    @property
    def is_text(self) -> bool:
        return self.path.type is str

    def evaluate(self, entity: Any) -> bool:
        current = self.path.resolve(entity)
        expected = self.value
        if self.is_text:
            current, expected = _lower(current), _lower(expected)

        if self.operator == FilterOperator.EQ:
            return current == expected
        if self.operator == FilterOperator.NEQ:
            return current != expected
        if current is None or expected is None:
            return False
        if self.operator == FilterOperator.LT:
            return current < expected
        if self.operator == FilterOperator.LTE:
            return current <= expected
        if self.operator == FilterOperator.GT:
            return current > expected
        if self.operator == FilterOperator.GTE:
            return current >= expected
        if self.operator == FilterOperator.CONTAINS:
            return expected in current
        if self.operator == FilterOperator.STARTSWITH:
            return current.startswith(expected)
        return current.endswith(expected)

    def to_q(self) -> Q:
        lookup = self.path.lookup
        value = _db_value(self.value)

        if self.operator in (FilterOperator.EQ, FilterOperator.NEQ):
            if value is None:
                q = Q(**{f"{lookup}__isnull": True})
            elif self.is_text:
                q = Q(**{f"{lookup}__iexact": value})
            else:
                q = Q(**{lookup: value})
            return q if self.operator == FilterOperator.EQ else ~q

        if value is None:
            return _match_nothing()

        if self.operator in self._ORDERING_LOOKUPS:
            lookup_class, suffix = self._ORDERING_LOOKUPS[self.operator]
            if self.is_text:
                return Q(lookup_class(Lower(F(lookup)), value.lower()))
            return Q(**{f"{lookup}__{suffix}": value})

        return Q(**{f"{lookup}__{self._TEXT_LOOKUPS[self.operator]}": value})

    def __repr__(self):
        return f"{self.path.name} {self.operator} {self.value!r}"


class KeywordSearch(Expression):
    """Case-insensitive ``contains`` over the text form of several fields."""

    def __init__(self, paths: Sequence[FieldPath], keyword: str):
        self.paths = list(paths)
        self.keyword = keyword

    def evaluate(self, entity: Any) -> bool:
        needle = self.keyword.lower()
        for path in self.paths:
            value = path.resolve(entity)
            if value is not None and needle in str(value).lower():
                return True
        return False

    def to_q(self) -> Q:
        q = _match_nothing()
        for index, path in enumerate(self.paths):
            if path.type is str:
                term = Q(**{f"{path.lookup}__icontains": self.keyword})
            else:
                text = Cast(F(path.lookup), output_field=CharField())
                term = Q(IContains(text, self.keyword))
            q = term if index == 0 else q | term
        return q

    def __repr__(self):
        fields = ", ".join(path.name for path in self.paths)
        return f"search({fields}) contains {self.keyword!r}"


class OrderExpression:
    """One ordering key of a specification."""

    def __init__(self, path: FieldPath, descending: bool = False):
        self.path = path
        self.descending = descending

    def key_selector(self, entity: Any) -> Any:
        """Return the sort key value of an entity."""
        return self.path.resolve(entity)

    def to_order_by(self) -> str:
        """Django ``order_by`` argument, e.g. ``-name``."""
        return f"-{self.path.lookup}" if self.descending else self.path.lookup

    def __repr__(self):
        direction = "DESC" if self.descending else "ASC"
        return f"{self.path.name} {direction}"

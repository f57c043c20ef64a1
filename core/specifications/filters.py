"""
Filter request model.

A filter is either a leaf condition ``{field, operator, value}`` or a
composite ``{logic, filters}`` combining other filters.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


class FilterOperator:
    """Leaf filter operators."""

    EQ = "eq"
    NEQ = "neq"
    LT = "lt"
    LTE = "lte"
    GT = "gt"
    GTE = "gte"
    CONTAINS = "contains"
    STARTSWITH = "startswith"
    ENDSWITH = "endswith"

    ALL = (EQ, NEQ, LT, LTE, GT, GTE, CONTAINS, STARTSWITH, ENDSWITH)
    ORDERING = (LT, LTE, GT, GTE)
    TEXT = (CONTAINS, STARTSWITH, ENDSWITH)


class FilterLogic:
    """Composite filter logics."""

    AND = "and"
    OR = "or"
    NOT = "not"
    NOR = "nor"

    ALL = (AND, OR, NOT, NOR)


@dataclass
class Filter:
    """Node of a filter tree."""

    logic: Optional[str] = None
    filters: Optional[List["Filter"]] = None
    field: Optional[str] = None
    operator: Optional[str] = None
    value: Any = None

    @property
    def is_composite(self) -> bool:
        """True when the node declares a logic."""
        return bool(self.logic)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional["Filter"]:
        """
        Build a filter tree from its dictionary shape.

        Args:
            data: ``{logic?, filters?, field?, operator?, value?}``, recursively

        Returns:
            Filter instance, or None when data is None
        """
        if data is None:
            return None
        if isinstance(data, Filter):
            return data

        filters = data.get("filters")
        return cls(
            logic=data.get("logic"),
            filters=[cls.from_dict(item) for item in filters] if filters is not None else None,
            field=data.get("field"),
            operator=data.get("operator"),
            value=data.get("value"),
        )


@dataclass
class Search:
    """Free-text search over a set of fields (all scalar fields when empty)."""

    keyword: Optional[str] = None
    fields: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional["Search"]:
        """Build a search from its dictionary shape."""
        if data is None:
            return None
        if isinstance(data, Search):
            return data
        return cls(keyword=data.get("keyword"), fields=list(data.get("fields") or []))

"""
Entity field metadata for the specification engine.

The schema of an entity type maps each declared field to its type, so that
filter, search and ordering requests can resolve (possibly nested) field
paths and coerce loosely typed values without per-call introspection.
Schemas are built once per entity type and cached.
"""

import dataclasses
import math
import typing
import uuid
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from functools import lru_cache
from typing import Any, Dict, List, Optional, Tuple

from django.utils.dateparse import parse_date, parse_datetime

from core.domain.exceptions import FilterValidationError

SCALAR_TYPES = (str, bool, int, float, Decimal, datetime, date)


def _normalize(name: str) -> str:
    return name.replace("_", "").lower()


def _unwrap_optional(annotation) -> Tuple[Any, bool]:
    if typing.get_origin(annotation) is typing.Union:
        args = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0], True
    return annotation, False


@dataclasses.dataclass(frozen=True)
class FieldInfo:
    """A single declared field of an entity type."""

    name: str
    type: Any
    nullable: bool

    @property
    def is_enum(self) -> bool:
        return isinstance(self.type, type) and issubclass(self.type, Enum)

    @property
    def is_scalar(self) -> bool:
        """Scalar fields take part in default keyword search."""
        if not isinstance(self.type, type) or self.is_enum:
            return False
        return issubclass(self.type, SCALAR_TYPES)

    @property
    def is_relation(self) -> bool:
        """Relation fields reference another entity with its own schema."""
        return isinstance(self.type, type) and dataclasses.is_dataclass(self.type)


@dataclasses.dataclass(frozen=True)
class FieldPath:
    """A resolved, possibly nested, field path."""

    name: str
    attrs: Tuple[str, ...]
    info: FieldInfo

    @property
    def type(self):
        return self.info.type

    @property
    def lookup(self) -> str:
        """Django ORM lookup path, e.g. ``brand__name``."""
        return "__".join(self.attrs)

    def resolve(self, entity: Any) -> Any:
        """Read the field value from an entity; None if any hop is None."""
        value = entity
        for attr in self.attrs:
            if value is None:
                return None
            value = getattr(value, attr)
        return value

    def coerce(self, value: Any) -> Any:
        """Coerce a loosely typed value to this field's type."""
        return coerce_value(self.name, value, self.type)


class EntitySchema:
    """Field metadata of an entity type."""

    def __init__(self, entity_type: type):
        self.entity_type = entity_type
        self.fields: Dict[str, FieldInfo] = {}
        self._aliases: Dict[str, str] = {}

        hints = typing.get_type_hints(entity_type)
        if dataclasses.is_dataclass(entity_type):
            names = [f.name for f in dataclasses.fields(entity_type)]
        else:
            names = [name for name in hints if not name.startswith("_")]

        for name in names:
            field_type, nullable = _unwrap_optional(hints.get(name, Any))
            self.fields[name] = FieldInfo(name=name, type=field_type, nullable=nullable)
            self._aliases[_normalize(name)] = name

    def field(self, name: str) -> Optional[FieldInfo]:
        """Look up a field by name, ignoring case and underscores."""
        canonical = self._aliases.get(_normalize(name))
        return self.fields.get(canonical) if canonical else None

    def resolve_path(self, path: str) -> FieldPath:
        """
        Resolve a dot-separated field path such as ``brand.name``.

        Raises:
            FilterValidationError: If any segment does not exist
        """
        if not path or not path.strip():
            raise FilterValidationError("The field attribute is required when declaring a filter")

        schema = self
        attrs = []
        info = None
        segments = path.strip().split(".")
        for index, segment in enumerate(segments):
            info = schema.field(segment) if schema else None
            if info is None:
                raise FilterValidationError(
                    f"Field {path} is not valid for {self.entity_type.__name__}", field=path
                )
            attrs.append(info.name)
            if index < len(segments) - 1:
                schema = get_schema(info.type) if info.is_relation else None

        return FieldPath(name=path, attrs=tuple(attrs), info=info)

    def searchable_fields(self) -> List[FieldPath]:
        """First-level scalar, non-enum fields used by default keyword search."""
        return [
            FieldPath(name=info.name, attrs=(info.name,), info=info)
            for info in self.fields.values()
            if info.is_scalar
        ]


@lru_cache(maxsize=None)
def get_schema(entity_type: type) -> EntitySchema:
    """Return the cached schema for an entity type."""
    return EntitySchema(entity_type)


def _invalid(field: str, value: Any) -> FilterValidationError:
    return FilterValidationError(f"Value {value} is not valid for {field}", field=field)


def _parse_temporal(value: str, field_type):
    try:
        if field_type is date:
            return parse_date(value)
        parsed = parse_datetime(value)
        if parsed is None:
            day = parse_date(value)
            parsed = datetime(day.year, day.month, day.day) if day else None
        return parsed
    except ValueError:
        return None


def _coerce_number(field: str, value: Any, field_type):
    """Parse a finite Decimal or float; NaN and infinities are rejected."""
    try:
        if isinstance(value, field_type):
            parsed = value
        elif field_type is Decimal:
            parsed = Decimal(str(value))
        else:
            parsed = float(value)
    except (InvalidOperation, TypeError, ValueError):
        raise _invalid(field, value)
    finite = parsed.is_finite() if isinstance(parsed, Decimal) else math.isfinite(parsed)
    if not finite:
        raise _invalid(field, value)
    return parsed


def coerce_value(field: str, value: Any, field_type: Any) -> Any:
    """
    Coerce a loosely typed (JSON-like) value to a field type.

    Args:
        field: Field name, used in error messages
        value: Value to coerce
        field_type: Target type

    Returns:
        Coerced value, or None for None

    Raises:
        FilterValidationError: If the value cannot be converted
    """
    if value is None:
        return None

    if not isinstance(field_type, type):
        return value

    # datetime is a date subclass
    if field_type is date and isinstance(value, datetime):
        return value.date()
    if field_type is datetime and type(value) is date:
        return datetime(value.year, value.month, value.day)

    if field_type in (Decimal, float) and not isinstance(value, bool):
        return _coerce_number(field, value, field_type)

    # bool is an int subclass but never a valid number here
    if isinstance(value, field_type) and (field_type is bool or not isinstance(value, bool)):
        return value

    if issubclass(field_type, Enum):
        if isinstance(value, str):
            for name, member in field_type.__members__.items():
                if name.lower() == value.lower():
                    return member
        raise _invalid(field, value)

    if field_type is uuid.UUID:
        try:
            return uuid.UUID(str(value))
        except ValueError:
            raise _invalid(field, value)

    if field_type is str:
        if isinstance(value, (dict, list)):
            raise _invalid(field, value)
        return str(value)

    if field_type in (datetime, date):
        parsed = _parse_temporal(value, field_type) if isinstance(value, str) else None
        if parsed is None:
            raise _invalid(field, value)
        return parsed

    if field_type is bool:
        if isinstance(value, str) and value.lower() in ("true", "false"):
            return value.lower() == "true"
        raise _invalid(field, value)

    if isinstance(value, bool):
        raise _invalid(field, value)

    if field_type is int:
        if isinstance(value, float) and not value.is_integer():
            raise _invalid(field, value)
        try:
            return int(value)
        except (TypeError, ValueError):
            raise _invalid(field, value)

    try:
        return field_type(value)
    except (TypeError, ValueError):
        raise _invalid(field, value)

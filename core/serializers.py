"""
Serializers for search request envelopes.

Requests use camelCase keys; validated data is converted into the
paging and filter dataclasses consumed by specifications.
"""

from typing import Any, Dict, Type

from rest_framework import serializers

from core.paging import DEFAULT_PAGE_NUMBER, DEFAULT_PAGE_SIZE, PaginationFilter
from core.specifications.filters import Filter, Search

_ENVELOPE_KEYS = frozenset(
    ("page_number", "page_size", "order_by", "keyword", "advanced_search", "advanced_filter")
)


class FilterSerializer(serializers.Serializer):
    """Serializer for one node of a filter tree."""

    logic = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    filters = serializers.ListField(
        child=serializers.DictField(), required=False, allow_null=True
    )
    field = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    operator = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    value = serializers.JSONField(required=False, allow_null=True)

    def validate_filters(self, value):
        """Validate nested filter nodes recursively."""
        if value is None:
            return None
        validated = []
        for item in value:
            child = FilterSerializer(data=item)
            child.is_valid(raise_exception=True)
            validated.append(child.validated_data)
        return validated


class SearchSerializer(serializers.Serializer):
    """Serializer for an advanced search."""

    keyword = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    fields = serializers.ListField(child=serializers.CharField(), required=False, default=list)


class SearchRequestSerializer(serializers.Serializer):
    """Serializer for a paged search request."""

    pageNumber = serializers.IntegerField(
        source="page_number", required=False, default=DEFAULT_PAGE_NUMBER
    )
    pageSize = serializers.IntegerField(source="page_size", required=False, default=DEFAULT_PAGE_SIZE)
    orderBy = serializers.ListField(
        source="order_by", child=serializers.CharField(), required=False, default=list
    )
    keyword = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    advancedSearch = SearchSerializer(source="advanced_search", required=False, allow_null=True)
    advancedFilter = FilterSerializer(source="advanced_filter", required=False, allow_null=True)

    def to_filter(self, filter_class: Type[PaginationFilter] = PaginationFilter):
        """
        Build a pagination filter from validated data.

        Fields declared by subclasses are passed to ``filter_class`` as
        extra keyword arguments.

        Args:
            filter_class: PaginationFilter subclass to instantiate

        Returns:
            filter_class instance
        """
        data: Dict[str, Any] = dict(self.validated_data)
        extra = {key: value for key, value in data.items() if key not in _ENVELOPE_KEYS}
        return filter_class(
            keyword=data.get("keyword"),
            advanced_search=Search.from_dict(data.get("advanced_search")),
            advanced_filter=Filter.from_dict(data.get("advanced_filter")),
            page_number=data.get("page_number", DEFAULT_PAGE_NUMBER),
            page_size=data.get("page_size", DEFAULT_PAGE_SIZE),
            order_by=list(data.get("order_by") or []),
            **extra,
        )

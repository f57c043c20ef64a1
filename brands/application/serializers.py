"""
Serializers for catalog search requests.
"""

from rest_framework import serializers

from core.serializers import SearchRequestSerializer


class SearchBrandsRequestSerializer(SearchRequestSerializer):
    """Serializer for a brand search request."""

    name = serializers.CharField(required=False, allow_null=True, allow_blank=True, max_length=100)
    description = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, max_length=1000
    )


class SearchProductsRequestSerializer(SearchRequestSerializer):
    """Serializer for a product search request."""

    brandId = serializers.UUIDField(source="brand_id", required=False, allow_null=True)
    minimumRate = serializers.DecimalField(
        source="minimum_rate", max_digits=18, decimal_places=2, required=False, allow_null=True
    )
    maximumRate = serializers.DecimalField(
        source="maximum_rate", max_digits=18, decimal_places=2, required=False, allow_null=True
    )

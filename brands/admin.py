"""
Django admin configuration for brands app.
"""

from django.contrib import admin

from brands.infrastructure.models import Brand


@admin.register(Brand)
class BrandAdmin(admin.ModelAdmin):
    """Admin interface for Brand model."""

    list_display = ["name", "product_count", "created_at"]
    search_fields = ["name", "description"]
    readonly_fields = ["id", "created_at", "updated_at"]
    fieldsets = (
        ("Basic Information", {"fields": ("id", "name", "description")}),
        ("Timestamps", {"fields": ("created_at", "updated_at"), "classes": ("collapse",)}),
    )

    def product_count(self, obj):
        """Display number of products of this brand."""
        return obj.products.count()

    product_count.short_description = "Products"

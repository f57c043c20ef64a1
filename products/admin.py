"""
Django admin configuration for products app.
"""

from django.contrib import admin

from products.infrastructure.models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """Admin interface for Product model."""

    list_display = ["name", "price", "brand", "created_at"]
    list_filter = ["brand"]
    search_fields = ["name", "description", "brand__name"]
    readonly_fields = ["id", "created_at", "updated_at"]
    fieldsets = (
        ("Basic Information", {"fields": ("id", "brand", "name", "description", "price")}),
        ("Timestamps", {"fields": ("created_at", "updated_at"), "classes": ("collapse",)}),
    )

    def get_queryset(self, request):
        """Optimize queryset."""
        return super().get_queryset(request).select_related("brand")

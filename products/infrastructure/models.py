"""
Product model.
"""
import uuid

from django.db import models


class Product(models.Model):
    """
    Represents a catalog product (e.g., Widget Pro, Widget Lite).
    Products may belong to a brand; deleting the brand keeps the product.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    brand = models.ForeignKey(
        "brands.Brand",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="products",
    )
    name = models.CharField(max_length=100, help_text="Product display name")
    description = models.CharField(max_length=1000, null=True, blank=True)
    price = models.DecimalField(max_digits=18, decimal_places=2)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "products"
        ordering = ["name"]
        indexes = [
            models.Index(fields=["brand", "name"]),
        ]

    def clean(self):
        """Validate product fields."""
        from django.core.exceptions import ValidationError

        if not self.name or not self.name.strip():
            raise ValidationError("Name is required")
        if self.price is None or self.price <= 0:
            raise ValidationError("Price must be greater than zero")

    def save(self, *args, **kwargs):
        """Save product with validation."""
        self.full_clean()
        super().save(*args, **kwargs)

    def __str__(self):
        return self.name

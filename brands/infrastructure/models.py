"""
Brand model.
"""

import uuid

from django.db import models


class Brand(models.Model):
    """
    Represents a catalog brand (e.g., Acme, Globex).
    Products optionally reference a brand.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100, help_text="Brand display name")
    description = models.CharField(max_length=1000, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "brands"
        ordering = ["name"]
        indexes = [
            models.Index(fields=["name"]),
        ]

    def clean(self):
        """Validate brand fields."""
        from django.core.exceptions import ValidationError

        if not self.name or not self.name.strip():
            raise ValidationError("Name is required")

    def save(self, *args, **kwargs):
        """Save brand with validation."""
        self.full_clean()
        super().save(*args, **kwargs)

    def __str__(self):
        return self.name

"""
Django implementation of BrandRepository port.

This adapter converts between domain entities and Django ORM models.
"""

from brands.domain.brand import Brand
from brands.infrastructure.models import Brand as BrandModel
from brands.ports.brand_repository import BrandRepository
from core.infrastructure.repositories.django_repository import DjangoRepository


def brand_to_domain(model: BrandModel) -> Brand:
    """Rehydrate a Brand from its model without events."""
    return Brand(id=model.id, name=model.name, description=model.description)


class DjangoBrandRepository(DjangoRepository[Brand, BrandModel], BrandRepository):
    """Django ORM implementation of BrandRepository."""

    model_class = BrandModel

    def _to_domain(self, model: BrandModel) -> Brand:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Brand model

        Returns:
            Brand domain entity
        """
        return brand_to_domain(model)

    def _to_model(self, brand: Brand, model: BrandModel) -> BrandModel:
        """
        Copy domain entity state onto a Django model.

        Args:
            brand: Brand domain entity
            model: New or stored Django Brand model

        Returns:
            The updated, unsaved model
        """
        model.name = brand.name
        model.description = brand.description
        return model

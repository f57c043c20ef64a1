"""
Django implementation of ProductRepository port.
"""

from brands.domain.product import Product
from brands.infrastructure.repositories.django_brand_repository import brand_to_domain
from brands.ports.product_repository import ProductRepository
from core.infrastructure.repositories.django_repository import DjangoRepository
from products.infrastructure.models import Product as ProductModel


class DjangoProductRepository(DjangoRepository[Product, ProductModel], ProductRepository):
    """
    Django ORM implementation of ProductRepository.

    The ``brand`` navigation is only populated when the brand was loaded
    with the product (a specification including ``brand``).
    """

    model_class = ProductModel

    def _to_domain(self, model: ProductModel) -> Product:
        brand = None
        if model.brand_id is not None and ProductModel.brand.is_cached(model):
            brand = brand_to_domain(model.brand)
        return Product(
            id=model.id,
            name=model.name,
            description=model.description,
            price=model.price,
            brand_id=model.brand_id,
            brand=brand,
        )

    def _to_model(self, product: Product, model: ProductModel) -> ProductModel:
        model.name = product.name
        model.description = product.description
        model.price = product.price
        model.brand_id = product.brand_id
        return model

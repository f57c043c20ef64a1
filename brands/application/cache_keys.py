"""
Cache keys for catalog read models.
"""

import uuid


def brand_cache_key(brand_id: uuid.UUID) -> str:
    return f"brand:{brand_id}"


def product_cache_key(product_id: uuid.UUID) -> str:
    return f"product:{product_id}"

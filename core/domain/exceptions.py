"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions.
"""

import uuid
from typing import Optional


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class DomainValidationError(DomainException):
    """Raised when input violates an entity or command invariant."""

    def __init__(self, message: str, field: Optional[str] = None, code: str = "VALIDATION_ERROR"):
        """
        Initialize validation error.

        Args:
            message: Human-readable error message
            field: Name of the offending field, if any
            code: Machine-readable error code
        """
        super().__init__(message, code=code)
        self.field = field


class FilterValidationError(DomainValidationError):
    """Raised when a filter, search or ordering request cannot be compiled."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, field=field, code="INVALID_FILTER")


class NotFoundError(DomainException):
    """Base exception for missing aggregates."""

    pass


class BrandNotFoundError(NotFoundError):
    """Raised when a brand is not found."""

    def __init__(self, brand_id: uuid.UUID):
        super().__init__(f"Brand with id {brand_id} not found", code="BRAND_NOT_FOUND")
        self.brand_id = brand_id


class ProductNotFoundError(NotFoundError):
    """Raised when a product is not found."""

    def __init__(self, product_id: uuid.UUID):
        super().__init__(f"product with id {product_id} not found", code="PRODUCT_NOT_FOUND")
        self.product_id = product_id

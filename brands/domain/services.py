"""
Catalog domain services.

Domain services contain business logic that doesn't naturally
fit within a single entity.
"""
from decimal import Decimal, InvalidOperation
from typing import Optional

from core.domain.exceptions import DomainValidationError

NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 1000


def _validate_name(name: Optional[str]) -> bool:
    if not name or len(name.strip()) == 0:
        return False
    if len(name) > NAME_MAX_LENGTH:
        return False
    return True


def _validate_description(description: Optional[str]) -> bool:
    return description is None or len(description) <= DESCRIPTION_MAX_LENGTH


class BrandValidator:
    """Domain service for brand command validation."""

    @staticmethod
    def validate_name(name: Optional[str]) -> bool:
        """
        Validate brand name.

        Args:
            name: Brand name to validate

        Returns:
            True if valid, False otherwise
        """
        return _validate_name(name)

    @staticmethod
    def validate_description(description: Optional[str]) -> bool:
        """
        Validate brand description.

        Args:
            description: Brand description to validate

        Returns:
            True if valid, False otherwise
        """
        return _validate_description(description)

    @classmethod
    def validate(
        cls, name: Optional[str], description: Optional[str], partial: bool = False
    ) -> None:
        """
        Validate a brand command's fields.

        Args:
            name: Brand name
            description: Brand description
            partial: Accept a None name as "unchanged"

        Raises:
            DomainValidationError: On the first invalid field
        """
        if (name is not None or not partial) and not cls.validate_name(name):
            raise DomainValidationError(
                f"Name must not be empty and at most {NAME_MAX_LENGTH} characters.",
                field="name",
            )
        if not cls.validate_description(description):
            raise DomainValidationError(
                f"Description must be at most {DESCRIPTION_MAX_LENGTH} characters.",
                field="description",
            )


class ProductValidator:
    """Domain service for product command validation."""

    @staticmethod
    def validate_name(name: Optional[str]) -> bool:
        """
        Validate product name.

        Args:
            name: Product name to validate

        Returns:
            True if valid, False otherwise
        """
        return _validate_name(name)

    @staticmethod
    def validate_price(price) -> bool:
        """
        Validate product price.

        Args:
            price: Price to validate

        Returns:
            True if the price is a finite number greater than zero
        """
        if price is None or isinstance(price, bool):
            return False
        try:
            value = Decimal(str(price))
        except InvalidOperation:
            return False
        return value.is_finite() and value > 0

    @classmethod
    def validate(
        cls, name: Optional[str], description: Optional[str], price, partial: bool = False
    ) -> None:
        """
        Validate a product command's fields.

        With ``partial`` set, a None name or price means "unchanged" and
        is accepted.

        Raises:
            DomainValidationError: On the first invalid field
        """
        if (name is not None or not partial) and not cls.validate_name(name):
            raise DomainValidationError(
                f"Name must not be empty and at most {NAME_MAX_LENGTH} characters.",
                field="name",
            )
        if not _validate_description(description):
            raise DomainValidationError(
                f"Description must be at most {DESCRIPTION_MAX_LENGTH} characters.",
                field="description",
            )
        if (price is not None or not partial) and not cls.validate_price(price):
            raise DomainValidationError("Price must be greater than zero.", field="price")

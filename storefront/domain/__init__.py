"""Domain layer - value object base and domain exceptions."""

from storefront.domain.base import ValueObject
from storefront.domain.exceptions import (
    DomainError,
    InvalidArgumentError,
    ProductNotFoundError,
)

__all__ = [
    "ValueObject",
    "DomainError",
    "InvalidArgumentError",
    "ProductNotFoundError",
]

"""Domain exceptions.

All catalog-level errors raised by the generator, the query service and
the value objects. Empty results are never errors: zero matches, zero
recommendations and pages past the end are plain empty sequences.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the API layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Argument Errors
# ============================================================================


class InvalidArgumentError(DomainError):
    """Raised when an operation receives an argument outside its domain.

    Covers negative catalog sizes, non-positive pages or page sizes,
    negative recommendation counts and product invariant violations.
    Values are never clamped silently.
    """

    def __init__(self, argument: str, value: Any, reason: str) -> None:
        """Initialize invalid argument error.

        Args:
            argument: Name of the offending argument.
            value: The rejected value.
            reason: Explanation of why the value is invalid.
        """
        super().__init__(
            f"Invalid {argument} {value!r}: {reason}",
            details={"argument": argument, "value": value, "reason": reason},
        )


# ============================================================================
# Lookup Errors
# ============================================================================


class ProductNotFoundError(DomainError):
    """Raised when a product id is not present in the catalog."""

    def __init__(self, product_id: int) -> None:
        """Initialize product not found error.

        Args:
            product_id: The id that was looked up.
        """
        super().__init__(
            f"Product not found: {product_id}",
            details={"product_id": product_id},
        )

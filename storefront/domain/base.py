"""Base classes for domain layer.

Catalog records are value objects: immutable once built and compared by
their attributes, never by identity.
"""

from abc import ABC
from dataclasses import dataclass


# ============================================================================
# Value Object Base
# ============================================================================


@dataclass(frozen=True)
class ValueObject(ABC):
    """Base class for value objects.

    Value objects are immutable and compared by their attributes,
    not by identity. They have no lifecycle and are interchangeable
    when their values are equal.

    Example:
        @dataclass(frozen=True)
        class Review(ValueObject):
            id: int
            rating: int
    """

    pass

"""Value objects for the product catalog.

Defines Product and its nested Review and RelatedProduct records. A
generated catalog is read-only: all records are frozen and every
Product owns its own collections.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from storefront.domain.base import ValueObject
from storefront.domain.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class Review(ValueObject):
    """Customer review attached to a product.

    Attributes:
        id: Review number within its product (1-based).
        user_id: Reviewer identifier.
        rating: Star rating (1-5).
        comment: Review text.
        date: When the review was written.
    """

    id: int
    user_id: int
    rating: int
    comment: str
    date: datetime

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary.

        Returns:
            Dictionary representation.
        """
        return {
            "id": self.id,
            "user_id": self.user_id,
            "rating": self.rating,
            "comment": self.comment,
            "date": self.date.isoformat(),
        }


@dataclass(frozen=True)
class RelatedProduct(ValueObject):
    """Precomputed link to another product in the same catalog."""

    id: int
    name: str
    similarity: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"id": self.id, "name": self.name, "similarity": self.similarity}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Product(ValueObject):
    """Product in the synthetic catalog.

    Only the identifying and queried fields are required; the rest
    default to empty values so small hand-built collections stay terse.

    Attributes:
        id: Positive product id, unique within a catalog.
        name: Product name.
        price: Price in major currency units (> 0).
        category: Category name.
        brand: Brand name.
        rating: Average rating (0.0-5.0).
        stock: Available quantity (>= 0).
        description: Product description.
        image_url: Product image URL (never dereferenced).
        tags: Search tags.
        specifications: Technical specifications.
        details: Additional product details.
        related_products: Precomputed related product links.
        reviews: Customer reviews.
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
    """

    id: int
    name: str
    price: float
    category: str
    brand: str
    rating: float
    stock: int = 0
    description: str = ""
    image_url: str = ""
    tags: tuple[str, ...] = ()
    specifications: dict[str, str] = field(default_factory=dict, compare=False)
    details: dict[str, str] = field(default_factory=dict, compare=False)
    related_products: tuple[RelatedProduct, ...] = field(default=(), compare=False)
    reviews: tuple[Review, ...] = field(default=(), compare=False)
    created_at: datetime = field(default_factory=_utcnow, compare=False)
    updated_at: datetime = field(default_factory=_utcnow, compare=False)

    def __post_init__(self) -> None:
        """Validate product invariants."""
        if self.id < 1:
            raise InvalidArgumentError("id", self.id, "must be positive")
        if self.price <= 0:
            raise InvalidArgumentError("price", self.price, "must be greater than zero")
        if self.stock < 0:
            raise InvalidArgumentError("stock", self.stock, "cannot be negative")
        if not 0 <= self.rating <= 5:
            raise InvalidArgumentError("rating", self.rating, "must be between 0 and 5")

    def __hash__(self) -> int:
        """Hash product by id."""
        return hash(self.id)

    def __repr__(self) -> str:
        """String representation."""
        return f"<Product(id={self.id}, name={self.name[:30]!r}, price={self.price})>"

    def to_summary(self) -> dict[str, Any]:
        """Convert to the listing representation.

        Returns:
            Dictionary with the fields shown in product lists.
        """
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "category": self.category,
            "brand": self.brand,
            "stock": self.stock,
            "rating": self.rating,
            "image_url": self.image_url,
            "tags": list(self.tags),
        }

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary.

        Returns:
            Full dictionary representation.
        """
        return {
            **self.to_summary(),
            "description": self.description,
            "specifications": dict(self.specifications),
            "details": dict(self.details),
            "related_products": [r.to_dict() for r in self.related_products],
            "reviews": [r.to_dict() for r in self.reviews],
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }

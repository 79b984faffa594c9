"""Facet aggregation.

Counts products per category, brand, price range and rating band. Every
dimension is computed in a single pass over the collection.

Rating bands use the four-band scheme (1-2, 2-3, 3-4, 4-5) everywhere
unless a caller passes TWO_BAND_RATINGS explicitly.
"""

from collections.abc import Callable, Hashable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any, TypeVar

from storefront.catalog.models import Product
from storefront.domain.base import ValueObject

K = TypeVar("K", bound=Hashable)


# ============================================================================
# Buckets
# ============================================================================


@dataclass(frozen=True)
class BucketRange(ValueObject):
    """Half-open numeric range [lower, upper).

    Attributes:
        label: Display label.
        lower: Inclusive lower bound, None for unbounded.
        upper: Exclusive upper bound, None for unbounded.
    """

    label: str
    lower: float | None = None
    upper: float | None = None

    def contains(self, value: float) -> bool:
        """Check whether value falls inside the range."""
        if self.lower is not None and value < self.lower:
            return False
        if self.upper is not None and value >= self.upper:
            return False
        return True


@dataclass(frozen=True)
class FacetBucket(ValueObject):
    """A labelled group within a facet and its product count.

    Attributes:
        label: Bucket label (category, brand or range label).
        count: Number of products in the bucket.
        predicate: Membership test for a product.
    """

    label: str
    count: int
    predicate: Callable[[Product], bool] | None = field(
        default=None, compare=False, repr=False
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"name": self.label, "count": self.count}


@dataclass(frozen=True)
class Facets(ValueObject):
    """Counts for every facet dimension of one product collection."""

    categories: list[FacetBucket]
    brands: list[FacetBucket]
    price_ranges: list[FacetBucket]
    ratings: list[FacetBucket]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "categories": [b.to_dict() for b in self.categories],
            "brands": [b.to_dict() for b in self.brands],
            "price_ranges": [b.to_dict() for b in self.price_ranges],
            "ratings": [b.to_dict() for b in self.ratings],
        }


# ============================================================================
# Reference Ranges
# ============================================================================

DEFAULT_PRICE_RANGES: tuple[BucketRange, ...] = (
    BucketRange("Under $50", 0, 50),
    BucketRange("$50 - $100", 50, 100),
    BucketRange("$100 - $200", 100, 200),
    BucketRange("$200 - $500", 200, 500),
    BucketRange("$500 - $1000", 500, 1000),
    BucketRange("$1000+", 1000, None),
)

RATING_BANDS: tuple[BucketRange, ...] = (
    BucketRange("1-2", None, 2),
    BucketRange("2-3", 2, 3),
    BucketRange("3-4", 3, 4),
    BucketRange("4-5", 4, None),
)

TWO_BAND_RATINGS: tuple[BucketRange, ...] = (
    BucketRange("below-3", None, 3),
    BucketRange("3-and-up", 3, None),
)


# ============================================================================
# Aggregation
# ============================================================================


def count_by(products: Iterable[Product], key_fn: Callable[[Product], K]) -> dict[K, int]:
    """Count products per key in one pass.

    Args:
        products: Products to count.
        key_fn: Function mapping a product to its group key.

    Returns:
        Mapping from key to count, keys in first-seen order.
    """
    counts: dict[K, int] = {}
    for product in products:
        key = key_fn(product)
        counts[key] = counts.get(key, 0) + 1
    return counts


def category_counts(products: Iterable[Product]) -> list[FacetBucket]:
    """Count products per category.

    Args:
        products: Products to count.

    Returns:
        One bucket per category present.
    """
    return [
        FacetBucket(label=name, count=count, predicate=lambda p, name=name: p.category == name)
        for name, count in count_by(products, lambda p: p.category).items()
    ]


def brand_counts(products: Iterable[Product]) -> list[FacetBucket]:
    """Count products per brand.

    Args:
        products: Products to count.

    Returns:
        One bucket per brand present.
    """
    return [
        FacetBucket(label=name, count=count, predicate=lambda p, name=name: p.brand == name)
        for name, count in count_by(products, lambda p: p.brand).items()
    ]


def _range_counts(
    products: Iterable[Product],
    ranges: Sequence[BucketRange],
    value_fn: Callable[[Product], float],
) -> list[FacetBucket]:
    """Assign each product to the first range containing its value.

    Products outside every range are not counted. All ranges appear in
    the result, including empty ones.
    """
    counts = count_by(
        products,
        lambda p: next((i for i, r in enumerate(ranges) if r.contains(value_fn(p))), None),
    )
    return [
        FacetBucket(
            label=r.label,
            count=counts.get(i, 0),
            predicate=lambda p, r=r: r.contains(value_fn(p)),
        )
        for i, r in enumerate(ranges)
    ]


def price_range_counts(
    products: Iterable[Product],
    ranges: Sequence[BucketRange] = DEFAULT_PRICE_RANGES,
) -> list[FacetBucket]:
    """Count products per price range.

    Args:
        products: Products to count.
        ranges: Ordered, mutually exclusive price ranges.

    Returns:
        One bucket per range, in range order.
    """
    return _range_counts(products, ranges, lambda p: p.price)


def rating_band_counts(
    products: Iterable[Product],
    bands: Sequence[BucketRange] = RATING_BANDS,
) -> list[FacetBucket]:
    """Count products per rating band.

    Args:
        products: Products to count.
        bands: Ordered rating bands, RATING_BANDS or TWO_BAND_RATINGS.

    Returns:
        One bucket per band, in band order.
    """
    return _range_counts(products, bands, lambda p: p.rating)


def build_facets(
    products: Sequence[Product],
    price_ranges: Sequence[BucketRange] = DEFAULT_PRICE_RANGES,
    rating_bands: Sequence[BucketRange] = RATING_BANDS,
) -> Facets:
    """Compute all facets of a collection.

    Args:
        products: Products to aggregate.
        price_ranges: Price ranges to count.
        rating_bands: Rating bands to count.

    Returns:
        Facets with category, brand, price and rating counts.
    """
    return Facets(
        categories=category_counts(products),
        brands=brand_counts(products),
        price_ranges=price_range_counts(products, price_ranges),
        ratings=rating_band_counts(products, rating_bands),
    )

"""Tests for facet aggregation."""

from storefront.catalog.facets import (
    DEFAULT_PRICE_RANGES,
    RATING_BANDS,
    TWO_BAND_RATINGS,
    BucketRange,
    brand_counts,
    build_facets,
    category_counts,
    count_by,
    price_range_counts,
    rating_band_counts,
)
from storefront.catalog.models import Product
from storefront.catalog.taxonomy import CATEGORIES


def make(product_id: int, price: float = 10, rating: float = 3) -> Product:
    """Build a minimal product."""
    return Product(
        id=product_id, name=f"P{product_id}", category="C", brand="B",
        price=price, rating=rating,
    )


class TestBucketRange:
    """Tests for BucketRange."""

    def test_half_open(self) -> None:
        """Lower bound included, upper bound excluded."""
        bucket = BucketRange("x", 50, 100)
        assert bucket.contains(50)
        assert bucket.contains(99.99)
        assert not bucket.contains(100)
        assert not bucket.contains(49.99)

    def test_unbounded(self) -> None:
        """None bounds are open."""
        assert BucketRange("x", None, 2).contains(0)
        assert BucketRange("x", 1000, None).contains(1_000_000)


class TestCountBy:
    """Tests for count_by."""

    def test_counts_in_first_seen_order(self, pool: list[Product]) -> None:
        """Keys appear in first-seen order."""
        assert count_by(pool, lambda p: p.category) == {"Electronics": 2, "Books": 1}

    def test_empty(self) -> None:
        """Empty input gives empty counts."""
        assert count_by([], lambda p: p.brand) == {}


class TestFacets:
    """Tests for the facet dimensions."""

    def test_category_counts_partition(self, catalog: list[Product]) -> None:
        """Category counts sum to the collection size."""
        buckets = category_counts(catalog)
        assert sum(b.count for b in buckets) == len(catalog)
        assert {b.label for b in buckets} == set(CATEGORIES)

    def test_brand_counts_partition(self, catalog: list[Product]) -> None:
        """Brand counts sum to the collection size."""
        assert sum(b.count for b in brand_counts(catalog)) == len(catalog)

    def test_price_ranges_partition(self, catalog: list[Product]) -> None:
        """The six reference ranges partition the collection."""
        buckets = price_range_counts(catalog)
        assert len(buckets) == len(DEFAULT_PRICE_RANGES)
        assert sum(b.count for b in buckets) == len(catalog)

    def test_price_boundaries(self) -> None:
        """Boundary prices land in the range they open."""
        products = [make(1, 49.99), make(2, 50), make(3, 100), make(4, 1000), make(5, 5000)]
        counts = [b.count for b in price_range_counts(products)]
        assert counts == [1, 1, 1, 0, 0, 2]

    def test_empty_ranges_listed(self) -> None:
        """Ranges without products still appear with zero."""
        buckets = price_range_counts([make(1, 10)])
        assert [b.count for b in buckets] == [1, 0, 0, 0, 0, 0]

    def test_rating_bands(self) -> None:
        """Four-band scheme covers the whole rating scale."""
        products = [make(1, rating=0.1), make(2, rating=2), make(3, rating=3.9), make(4, rating=5)]
        buckets = rating_band_counts(products)
        assert [b.label for b in buckets] == [b.label for b in RATING_BANDS]
        assert [b.count for b in buckets] == [1, 1, 1, 1]

    def test_two_band_ratings(self, catalog: list[Product]) -> None:
        """Two-band scheme partitions the collection as well."""
        buckets = rating_band_counts(catalog, TWO_BAND_RATINGS)
        assert len(buckets) == 2
        assert sum(b.count for b in buckets) == len(catalog)

    def test_bucket_predicate_agrees_with_count(self, catalog: list[Product]) -> None:
        """A bucket's predicate selects exactly its counted products."""
        for bucket in price_range_counts(catalog) + category_counts(catalog):
            assert sum(1 for p in catalog if bucket.predicate(p)) == bucket.count

    def test_build_facets(self, catalog: list[Product]) -> None:
        """All four dimensions sum to the collection size."""
        facets = build_facets(catalog)
        for buckets in (facets.categories, facets.brands, facets.price_ranges, facets.ratings):
            assert sum(b.count for b in buckets) == len(catalog)

    def test_to_dict(self, pool: list[Product]) -> None:
        """Facets serialize to name/count pairs."""
        data = build_facets(pool).to_dict()
        assert data["categories"] == [
            {"name": "Electronics", "count": 2},
            {"name": "Books", "count": 1},
        ]
        assert data["brands"] == [{"name": "A", "count": 2}, {"name": "B", "count": 1}]

"""Tests for storefront taxonomy."""

from storefront.catalog.taxonomy import (
    BRANDS,
    CATEGORIES,
    CATEGORY_NOUNS,
    brand_for,
    category_for,
    nouns_for,
)


class TestEnumerations:
    """Tests for the closed enumerations."""

    def test_eight_categories_and_brands(self) -> None:
        """Both enumerations hold eight distinct values."""
        assert len(set(CATEGORIES)) == 8
        assert len(set(BRANDS)) == 8

    def test_every_category_has_nouns(self) -> None:
        """Every category has a noun vocabulary."""
        assert set(CATEGORY_NOUNS) == set(CATEGORIES)

    def test_unknown_category_nouns(self) -> None:
        """Unknown categories fall back to a generic noun."""
        assert nouns_for("Garden") == ("Product",)


class TestAssignment:
    """Tests for round-robin assignment."""

    def test_category_cycles_every_eight(self) -> None:
        """Category repeats with period eight."""
        assert category_for(1) == category_for(9)
        assert category_for(8) == CATEGORIES[0]

    def test_brand_changes_every_eight(self) -> None:
        """Brand is constant over blocks of eight ids."""
        assert brand_for(8) == brand_for(15)
        assert brand_for(15) != brand_for(16)

    def test_all_pairs_in_64_ids(self) -> None:
        """Every category and brand pair occurs once per 64 ids."""
        pairs = {(category_for(i), brand_for(i)) for i in range(64)}
        assert len(pairs) == 64

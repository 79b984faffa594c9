"""Tests for product catalog generator."""

import pytest

from storefront.catalog.generator import (
    MAX_PRICE,
    MIN_PRICE,
    GeneratorConfig,
    ProductGenerator,
    generate,
)
from storefront.catalog.models import Product
from storefront.catalog.taxonomy import BRANDS, CATEGORIES
from storefront.domain.exceptions import InvalidArgumentError


class TestGeneratorConfig:
    """Tests for GeneratorConfig."""

    def test_small_config(self) -> None:
        """Small config keeps nested records light."""
        config = GeneratorConfig.small(seed=7)
        assert config.seed == 7
        assert config.review_count < GeneratorConfig().review_count

    def test_full_config(self) -> None:
        """Full config creates heavier products."""
        config = GeneratorConfig.full()
        assert config.review_count > GeneratorConfig.small().review_count
        assert config.seed is None


class TestProductGenerator:
    """Tests for ProductGenerator."""

    @pytest.fixture
    def generator(self) -> ProductGenerator:
        """Create generator with small seeded config."""
        return ProductGenerator(GeneratorConfig.small(seed=42))

    def test_generate_count(self, generator: ProductGenerator) -> None:
        """Generator produces exactly the requested number of products."""
        assert len(generator.generate(50)) == 50

    def test_generate_zero(self, generator: ProductGenerator) -> None:
        """Zero products is a valid, empty catalog."""
        assert generator.generate(0) == []

    def test_negative_count_raises(self, generator: ProductGenerator) -> None:
        """Negative counts fail fast."""
        with pytest.raises(InvalidArgumentError):
            generator.generate(-1)

    def test_ids_unique_and_contiguous(self, catalog: list[Product]) -> None:
        """Ids run 1..n in order."""
        ids = [p.id for p in catalog]
        assert ids == list(range(1, len(catalog) + 1))
        assert len(set(ids)) == len(ids)

    def test_category_and_brand_from_enumerations(self, catalog: list[Product]) -> None:
        """Category and brand are never free text."""
        for product in catalog:
            assert product.category in CATEGORIES
            assert product.brand in BRANDS

    def test_round_robin_category_distribution(self) -> None:
        """Each category receives an equal share of a multiple of eight."""
        products = generate(80, GeneratorConfig.small())
        for category in CATEGORIES:
            assert sum(1 for p in products if p.category == category) == 10

    def test_value_ranges(self, catalog: list[Product]) -> None:
        """Generated values stay inside their declared ranges."""
        for product in catalog:
            assert MIN_PRICE <= product.price <= MAX_PRICE
            assert 0 <= product.rating <= 5
            assert product.stock >= 0
            for review in product.reviews:
                assert 1 <= review.rating <= 5

    def test_shape_follows_config(self) -> None:
        """Collection sizes follow the configuration."""
        config = GeneratorConfig(
            tag_count=4, review_count=2, related_count=3, detail_count=6, spec_count=7
        )
        product = ProductGenerator(config).generate(10)[0]
        assert len(product.tags) == 4
        assert len(product.reviews) == 2
        assert len(product.related_products) == 3
        assert len(product.details) == 6
        assert len(product.specifications) == 7

    def test_related_products_exclude_self(self, catalog: list[Product]) -> None:
        """Precomputed related products never point back at the product."""
        ids = {p.id for p in catalog}
        for product in catalog:
            for related in product.related_products:
                assert related.id != product.id
                assert related.id in ids

    def test_single_product_has_no_related(self) -> None:
        """A one-product catalog has nothing to relate to."""
        product = generate(1, GeneratorConfig.small())[0]
        assert product.related_products == ()

    def test_products_do_not_share_mutable_state(self) -> None:
        """Each product owns its own mappings."""
        first, second = generate(2, GeneratorConfig.small())
        assert first.specifications is not second.specifications
        assert first.details is not second.details

    def test_deterministic_generation(self) -> None:
        """Same seed produces same products."""
        products1 = ProductGenerator(GeneratorConfig(seed=42)).generate(20)
        products2 = ProductGenerator(GeneratorConfig(seed=42)).generate(20)

        for p1, p2 in zip(products1, products2):
            assert p1.name == p2.name
            assert p1.price == p2.price
            assert p1.rating == p2.rating
            assert p1.tags == p2.tags

    def test_different_seeds_produce_different_products(self) -> None:
        """Different seeds produce different content with the same shape."""
        products1 = ProductGenerator(GeneratorConfig(seed=42)).generate(20)
        products2 = ProductGenerator(GeneratorConfig(seed=99)).generate(20)

        assert [p.category for p in products1] == [p.category for p in products2]
        assert [p.price for p in products1] != [p.price for p in products2]

    def test_description_length_tunable(self) -> None:
        """Longer filler makes longer descriptions."""
        short = generate(1, GeneratorConfig(description_repeat=1))[0]
        long = generate(1, GeneratorConfig(description_repeat=10))[0]
        assert len(long.description) > len(short.description)

    def test_related_products_distinct_in_small_catalog(self) -> None:
        """A catalog smaller than related_count links each other product once."""
        products = generate(3, GeneratorConfig(related_count=50))
        for product in products:
            related_ids = [r.id for r in product.related_products]
            assert sorted(related_ids) == sorted({1, 2, 3} - {product.id})

    def test_related_products_capped_by_config(self) -> None:
        """Large catalogs stop at related_count distinct links."""
        product = generate(20, GeneratorConfig.small())[0]
        related_ids = [r.id for r in product.related_products]
        assert len(related_ids) == GeneratorConfig.small().related_count
        assert len(set(related_ids)) == len(related_ids)

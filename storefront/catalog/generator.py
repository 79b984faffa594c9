"""Synthetic product catalog generator.

Builds an in-memory catalog of fully populated products. The shape of a
catalog (ids, categories, brands, collection sizes) depends only on the
requested count; prices, ratings, stock, wording and reviews come from a
random source that is reproducible only when a seed is configured.
"""

import random
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Iterator

import structlog

from storefront.catalog.models import Product, RelatedProduct, Review
from storefront.catalog.taxonomy import (
    ADJECTIVES,
    TAG_KEYWORDS,
    brand_for,
    category_for,
    nouns_for,
)
from storefront.domain.exceptions import InvalidArgumentError
from storefront.infrastructure.logging import log_duration

logger = structlog.get_logger()


# ============================================================================
# Constants
# ============================================================================

MIN_PRICE = 9.99
MAX_PRICE = 999.99

DESCRIPTION_FILLER = "More description text to increase size. "
REVIEW_FILLER = "More text to increase size. "

# Reviews and creation dates reach back at most one year
MAX_AGE_DAYS = 365


# ============================================================================
# Generator Configuration
# ============================================================================


@dataclass
class GeneratorConfig:
    """Configuration for product generation.

    Attributes:
        seed: Random seed, None for fresh randomness on every run.
        description_repeat: Filler sentences appended to each description.
        tag_count: Tags per product.
        review_count: Reviews per product.
        related_count: Precomputed related products per product.
        detail_count: Entries in each product's details mapping.
        spec_count: Entries in each product's specifications mapping.
    """

    seed: int | None = None
    description_repeat: int = 20
    tag_count: int = 15
    review_count: int = 20
    related_count: int = 50
    detail_count: int = 20
    spec_count: int = 15

    @classmethod
    def small(cls, seed: int | None = None) -> "GeneratorConfig":
        """Create config for lightweight products.

        Args:
            seed: Random seed.

        Returns:
            Config with short descriptions and few nested records.
        """
        return cls(
            seed=seed,
            description_repeat=2,
            tag_count=5,
            review_count=3,
            related_count=5,
            detail_count=5,
            spec_count=5,
        )

    @classmethod
    def full(cls, seed: int | None = None) -> "GeneratorConfig":
        """Create config for heavyweight products.

        Args:
            seed: Random seed.

        Returns:
            Config with the full nested record sizes.
        """
        return cls(
            seed=seed,
            description_repeat=20,
            tag_count=15,
            review_count=100,
            related_count=50,
            detail_count=20,
            spec_count=15,
        )


# ============================================================================
# Product Generator
# ============================================================================


class ProductGenerator:
    """Generates product catalogs.

    Category and brand are assigned round robin from the product id (see
    storefront.catalog.taxonomy); everything else is drawn from the
    generator's random source.

    Example usage:
        generator = ProductGenerator(GeneratorConfig.small(seed=42))
        for product in generator.generate(100):
            print(product.name)
    """

    def __init__(self, config: GeneratorConfig | None = None) -> None:
        """Initialize generator with configuration.

        Args:
            config: Generator configuration, defaults to GeneratorConfig().
        """
        self.config = config or GeneratorConfig()
        self.rng = random.Random(self.config.seed)

    def _generate_tags(self, product_id: int) -> tuple[str, ...]:
        """Generate search tags, alternating keywords and numbered tags.

        Args:
            product_id: Product id.

        Returns:
            Tuple of tag_count tags.
        """
        tags = []
        for n in range(self.config.tag_count):
            if n % 2 == 0:
                tags.append(self.rng.choice(TAG_KEYWORDS))
            else:
                tags.append(f"tag-{n}-{product_id}")
        return tuple(tags)

    def _generate_related(self, product_id: int, count: int) -> tuple[RelatedProduct, ...]:
        """Generate related product links.

        Links point at the ids following product_id, wrapping around the
        catalog. Each other product is linked at most once and the product
        itself never is, so small catalogs get fewer than related_count links.

        Args:
            product_id: Product id.
            count: Catalog size.

        Returns:
            Tuple of related product links.
        """
        limit = min(self.config.related_count, count - 1)
        related: list[RelatedProduct] = []
        # Offsets 1..count visit every id exactly once
        for i in range(1, count + 1):
            if len(related) >= limit:
                break
            related_id = (product_id + i) % count + 1
            if related_id == product_id:
                continue
            related.append(
                RelatedProduct(
                    id=related_id,
                    name=f"Related Product {related_id}",
                    similarity=(100 - (i % 100)) / 100,
                )
            )
        return tuple(related)

    def _generate_reviews(self, product_id: int, now: datetime) -> tuple[Review, ...]:
        """Generate customer reviews.

        Args:
            product_id: Product id.
            now: Reference timestamp.

        Returns:
            Tuple of reviews.
        """
        return tuple(
            Review(
                id=i,
                user_id=self.rng.randint(1, 10000),
                rating=self.rng.randint(1, 5),
                comment=f"This is review {i} for product {product_id}. "
                        f"{REVIEW_FILLER * 5}".rstrip(),
                date=now - timedelta(days=self.rng.randint(0, MAX_AGE_DAYS)),
            )
            for i in range(1, self.config.review_count + 1)
        )

    def _generate_product(self, product_id: int, count: int, now: datetime) -> Product:
        """Generate a single product.

        Args:
            product_id: Product id (1-based).
            count: Catalog size.
            now: Reference timestamp.

        Returns:
            Generated Product.
        """
        category = category_for(product_id)
        brand = brand_for(product_id)
        adj = self.rng.choice(ADJECTIVES)
        noun = self.rng.choice(nouns_for(category))
        name = f"{brand} {adj} {noun} {product_id}"

        description = (
            f"This is a detailed description for {name}. "
            f"{DESCRIPTION_FILLER * self.config.description_repeat}"
        ).rstrip()

        return Product(
            id=product_id,
            name=name,
            description=description,
            price=round(self.rng.uniform(MIN_PRICE, MAX_PRICE), 2),
            category=category,
            brand=brand,
            stock=self.rng.randint(0, 1000),
            rating=self.rng.randint(1, 50) / 10,
            image_url=f"https://picsum.photos/seed/{product_id}/400/300",
            tags=self._generate_tags(product_id),
            specifications={
                f"spec{i}": f"Specification {i} value for product {product_id}"
                for i in range(1, self.config.spec_count + 1)
            },
            details={
                f"detail{i}": f"Detail value {i} for product {product_id}"
                for i in range(1, self.config.detail_count + 1)
            },
            related_products=self._generate_related(product_id, count),
            reviews=self._generate_reviews(product_id, now),
            created_at=now - timedelta(days=self.rng.randint(0, MAX_AGE_DAYS)),
            updated_at=now,
        )

    def iter_products(self, count: int) -> Iterator[Product]:
        """Generate products lazily.

        Args:
            count: Number of products.

        Yields:
            Products with ids 1..count in order.

        Raises:
            InvalidArgumentError: If count is negative.
        """
        if count < 0:
            raise InvalidArgumentError("count", count, "cannot be negative")

        now = datetime.now(timezone.utc)
        for product_id in range(1, count + 1):
            yield self._generate_product(product_id, count, now)

    def generate(self, count: int) -> list[Product]:
        """Generate a catalog.

        Args:
            count: Number of products.

        Returns:
            List of count products with contiguous ids starting at 1.

        Raises:
            InvalidArgumentError: If count is negative.
        """
        with log_duration("Catalog generation", count=count):
            products = list(self.iter_products(count))

        logger.info("Catalog generated", product_count=len(products), seed=self.config.seed)
        return products


def generate(count: int, config: GeneratorConfig | None = None) -> list[Product]:
    """Generate a catalog of count products.

    Args:
        count: Number of products.
        config: Optional generator configuration.

    Returns:
        List of generated products.
    """
    return ProductGenerator(config).generate(count)

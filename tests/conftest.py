"""Shared test fixtures."""

import pytest

from storefront.catalog.generator import GeneratorConfig, ProductGenerator
from storefront.catalog.models import Product


@pytest.fixture
def pool() -> list[Product]:
    """Three-product pool used by the concrete scenarios."""
    return [
        Product(id=1, name="Alpha", category="Electronics", brand="A", price=10, rating=4),
        Product(id=2, name="Beta", category="Electronics", brand="B", price=20, rating=3),
        Product(id=3, name="Gamma", category="Books", brand="A", price=30, rating=5),
    ]


@pytest.fixture(scope="session")
def catalog() -> list[Product]:
    """Seeded 200-product catalog with small nested records."""
    return ProductGenerator(GeneratorConfig.small(seed=42)).generate(200)

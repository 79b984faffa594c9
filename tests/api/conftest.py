"""Shared fixtures for API tests."""

import random
from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from storefront.api.dependencies import get_catalog
from storefront.catalog.generator import GeneratorConfig, ProductGenerator
from storefront.catalog.service import CatalogService
from storefront.main import app


@pytest.fixture(scope="session")
def catalog_service() -> CatalogService:
    """Create service over a small seeded catalog."""
    products = ProductGenerator(GeneratorConfig.small(seed=7)).generate(120)
    return CatalogService(products, rng=random.Random(7))


@pytest.fixture
def client(catalog_service: CatalogService) -> Iterator[TestClient]:
    """Create test client serving the seeded catalog."""
    app.dependency_overrides[get_catalog] = lambda: catalog_service
    yield TestClient(app)
    app.dependency_overrides.clear()

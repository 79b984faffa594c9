"""Catalog service for product queries.

High-level service that combines filtering, facet aggregation,
recommendations and pagination over one generated catalog.
"""

import math
import random
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

import structlog

from storefront.catalog.facets import (
    FacetBucket,
    Facets,
    brand_counts,
    build_facets,
    category_counts,
)
from storefront.catalog.filters import FilterSpec, filter_products
from storefront.catalog.models import Product
from storefront.catalog.recommendations import recommend
from storefront.domain.exceptions import InvalidArgumentError, ProductNotFoundError
from storefront.infrastructure.logging import log_duration

T = TypeVar("T")

logger = structlog.get_logger()


@dataclass(frozen=True)
class PaginationParams:
    """Pagination parameters.

    Attributes:
        page: Page number (1-indexed).
        page_size: Items per page.
    """

    page: int = 1
    page_size: int = 20

    def __post_init__(self) -> None:
        """Validate pagination bounds."""
        if self.page <= 0:
            raise InvalidArgumentError("page", self.page, "must be a positive integer")
        if self.page_size <= 0:
            raise InvalidArgumentError("page_size", self.page_size, "must be a positive integer")

    @property
    def offset(self) -> int:
        """Calculate offset from page number."""
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        """Get limit (alias for page_size)."""
        return self.page_size


@dataclass
class PaginatedResult(Generic[T]):
    """Paginated result container.

    Attributes:
        items: List of items.
        total: Total count before pagination.
        page: Current page.
        page_size: Items per page.
        facets: Facets of the filtered set, if requested.
    """

    items: list[T]
    total: int
    page: int
    page_size: int
    facets: Facets | None = None

    @property
    def total_pages(self) -> int:
        """Calculate total pages."""
        return math.ceil(self.total / self.page_size)

    @property
    def has_next(self) -> bool:
        """Check if there's a next page."""
        return self.page < self.total_pages

    @property
    def has_prev(self) -> bool:
        """Check if there's a previous page."""
        return self.page > 1


def query_products(
    pool: Sequence[Product],
    spec: FilterSpec | None = None,
    page: int = 1,
    page_size: int = 20,
    *,
    include_facets: bool = False,
) -> PaginatedResult[Product]:
    """Filter, sort, aggregate and paginate a product collection.

    Args:
        pool: Products to query.
        spec: Filter specification.
        page: Page number (1-indexed).
        page_size: Items per page.
        include_facets: Whether to compute facets of the filtered set.

    Returns:
        One page of results. Pages past the end have no items.

    Raises:
        InvalidArgumentError: If page or page_size is not positive.
    """
    pagination = PaginationParams(page=page, page_size=page_size)

    with log_duration("Product query", filters=spec.active_fields() if spec else []) as extra:
        filtered = filter_products(pool, spec)
        facets = build_facets(filtered) if include_facets else None
        items = filtered[pagination.offset:pagination.offset + pagination.limit]
        extra["total"] = len(filtered)

    return PaginatedResult(
        items=items,
        total=len(filtered),
        page=pagination.page,
        page_size=pagination.page_size,
        facets=facets,
    )


class CatalogService:
    """Service for catalog queries.

    Holds one read-only catalog and answers listing, detail, facet and
    recommendation requests against it.

    Example usage:
        products = ProductGenerator(GeneratorConfig.small()).generate(500)
        service = CatalogService(products)

        results = service.search_products(
            FilterSpec(category="Books", sort_by=SortBy.PRICE_ASC),
            PaginationParams(page=1, page_size=20),
        )
    """

    def __init__(self, products: Sequence[Product], rng: random.Random | None = None) -> None:
        """Initialize service with a catalog.

        Args:
            products: Generated catalog, treated as read-only.
            rng: Random source for recommendation fallbacks.
        """
        self.products = tuple(products)
        self.rng = rng or random.Random()
        self._by_id = {p.id: p for p in self.products}

    @property
    def product_count(self) -> int:
        """Get number of products in the catalog."""
        return len(self.products)

    def search_products(
        self,
        filters: FilterSpec | None,
        pagination: PaginationParams,
        include_facets: bool = False,
    ) -> PaginatedResult[Product]:
        """Search products with filters and pagination.

        Args:
            filters: Filter parameters.
            pagination: Pagination parameters.
            include_facets: Whether to compute facets of the filtered set.

        Returns:
            Paginated product results.
        """
        return query_products(
            self.products,
            filters,
            page=pagination.page,
            page_size=pagination.page_size,
            include_facets=include_facets,
        )

    def get_product(self, product_id: int) -> Product | None:
        """Get product by ID.

        Args:
            product_id: Product ID.

        Returns:
            Product if found.
        """
        return self._by_id.get(product_id)

    def get_categories(self) -> list[FacetBucket]:
        """Get categories with product counts.

        Returns:
            One bucket per category in the catalog.
        """
        return category_counts(self.products)

    def get_brands(self) -> list[FacetBucket]:
        """Get brands with product counts.

        Returns:
            One bucket per brand in the catalog.
        """
        return brand_counts(self.products)

    def get_facets(self, filters: FilterSpec | None = None) -> Facets:
        """Get facets of the products matching filters.

        Args:
            filters: Optional filter parameters.

        Returns:
            Facets of the filtered set.
        """
        return build_facets(filter_products(self.products, filters))

    def recommend(self, product_id: int, count: int) -> list[Product]:
        """Get recommendations for a product.

        Args:
            product_id: Source product ID.
            count: Maximum number of recommendations.

        Returns:
            Recommended products.

        Raises:
            ProductNotFoundError: If the product is not in the catalog.
        """
        product = self.get_product(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return recommend(product, self.products, count, rng=self.rng)

"""Product catalog endpoints.

Listing with filters, sorting, facets and pagination; product details;
recommendations; category and brand counts.
"""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, status

from storefront.api.dependencies import get_catalog
from storefront.api.schemas import (
    ErrorResponse,
    FacetBucketSchema,
    FacetsSchema,
    ProductDetailSchema,
    ProductListResponse,
    ProductSummarySchema,
    RecommendationsResponse,
)
from storefront.catalog.filters import FilterSpec, SortBy
from storefront.catalog.service import CatalogService, PaginationParams
from storefront.domain.exceptions import ProductNotFoundError
from storefront.infrastructure.config import settings

logger = structlog.get_logger()

router = APIRouter(tags=["Products"])


# ============================================================================
# Dependencies
# ============================================================================


def get_filter_spec(
    category: Annotated[str | None, Query()] = None,
    brand: Annotated[str | None, Query()] = None,
    min_price: Annotated[float | None, Query()] = None,
    max_price: Annotated[float | None, Query()] = None,
    min_rating: Annotated[float | None, Query()] = None,
    max_rating: Annotated[float | None, Query()] = None,
    search: Annotated[str | None, Query()] = None,
    sort_by: Annotated[SortBy | None, Query()] = None,
) -> FilterSpec:
    """Collect filter query parameters.

    Returns:
        FilterSpec built from the query string.
    """
    return FilterSpec(
        category=category or None,
        brand=brand or None,
        min_price=min_price,
        max_price=max_price,
        min_rating=min_rating,
        max_rating=max_rating,
        search=search or None,
        sort_by=sort_by,
    )


def _not_found(product_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail={
            "error_code": "PRODUCT_NOT_FOUND",
            "message": f"Product not found: {product_id}",
        },
    )


# ============================================================================
# Product Endpoints
# ============================================================================


@router.get("/products", response_model=ProductListResponse)
def list_products(
    catalog: Annotated[CatalogService, Depends(get_catalog)],
    filters: Annotated[FilterSpec, Depends(get_filter_spec)],
    page: Annotated[int, Query()] = 1,
    page_size: Annotated[int | None, Query()] = None,
    include_facets: Annotated[bool, Query()] = False,
) -> ProductListResponse:
    """List products with filtering, sorting and pagination.

    Args:
        page: Page number (1-based).
        page_size: Items per page, defaults to the configured page size.
        include_facets: Whether to include facets of the filtered set.

    Returns:
        Paginated product list.
    """
    pagination = PaginationParams(
        page=page,
        page_size=page_size if page_size is not None else settings.default_page_size,
    )
    result = catalog.search_products(filters, pagination, include_facets=include_facets)
    return ProductListResponse.from_result(result)


@router.get(
    "/products/{product_id}",
    response_model=ProductDetailSchema,
    responses={404: {"model": ErrorResponse}},
)
def get_product(
    product_id: int,
    catalog: Annotated[CatalogService, Depends(get_catalog)],
) -> ProductDetailSchema:
    """Get product details by ID.

    Args:
        product_id: Product ID.

    Returns:
        Product details.

    Raises:
        HTTPException: If product not found.
    """
    product = catalog.get_product(product_id)
    if product is None:
        raise _not_found(product_id)
    return ProductDetailSchema.from_product(product)


@router.get(
    "/products/{product_id}/recommendations",
    response_model=RecommendationsResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def get_recommendations(
    product_id: int,
    catalog: Annotated[CatalogService, Depends(get_catalog)],
    count: Annotated[int | None, Query()] = None,
) -> RecommendationsResponse:
    """Get products related to a product.

    Args:
        product_id: Source product ID.
        count: Maximum number of recommendations.

    Returns:
        Recommended products.

    Raises:
        HTTPException: If product not found.
    """
    try:
        items = catalog.recommend(
            product_id,
            count if count is not None else settings.recommendation_count,
        )
    except ProductNotFoundError:
        raise _not_found(product_id)

    return RecommendationsResponse(
        product_id=product_id,
        items=[ProductSummarySchema.from_product(p) for p in items],
    )


# ============================================================================
# Facet Endpoints
# ============================================================================


@router.get("/categories", response_model=list[FacetBucketSchema])
def list_categories(
    catalog: Annotated[CatalogService, Depends(get_catalog)],
) -> list[FacetBucketSchema]:
    """Get categories with product counts."""
    return [FacetBucketSchema.from_bucket(b) for b in catalog.get_categories()]


@router.get("/brands", response_model=list[FacetBucketSchema])
def list_brands(
    catalog: Annotated[CatalogService, Depends(get_catalog)],
) -> list[FacetBucketSchema]:
    """Get brands with product counts."""
    return [FacetBucketSchema.from_bucket(b) for b in catalog.get_brands()]


@router.get("/facets", response_model=FacetsSchema)
def get_facets(
    catalog: Annotated[CatalogService, Depends(get_catalog)],
    filters: Annotated[FilterSpec, Depends(get_filter_spec)],
) -> FacetsSchema:
    """Get category, brand, price and rating counts of matching products."""
    return FacetsSchema.from_facets(catalog.get_facets(filters))

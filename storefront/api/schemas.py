"""Pydantic schemas for the storefront API.

Defines response models for product listings, product details, facets
and recommendations, plus the shared error envelope.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from storefront.catalog.facets import FacetBucket, Facets
from storefront.catalog.models import Product
from storefront.catalog.service import PaginatedResult


# ============================================================================
# Common Types
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error envelope."""

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list | dict = Field(default_factory=list, description="Error context")
    request_id: str | None = Field(None, description="Request correlation ID")


# ============================================================================
# Product Schemas
# ============================================================================


class ReviewSchema(BaseModel):
    """Customer review."""

    id: int
    user_id: int
    rating: int = Field(..., ge=1, le=5)
    comment: str
    date: datetime


class RelatedProductSchema(BaseModel):
    """Precomputed related product link."""

    id: int
    name: str
    similarity: float = Field(..., ge=0, le=1)


class ProductSummarySchema(BaseModel):
    """Product as shown in listings."""

    id: int = Field(..., ge=1, description="Product ID")
    name: str = Field(..., description="Product name")
    price: float = Field(..., gt=0, description="Price")
    category: str = Field(..., description="Category name")
    brand: str = Field(..., description="Brand name")
    stock: int = Field(..., ge=0, description="Available quantity")
    rating: float = Field(..., ge=0, le=5, description="Average rating")
    image_url: str = Field(..., description="Product image URL")
    tags: list[str] = Field(default_factory=list, description="Search tags")

    @classmethod
    def from_product(cls, product: Product) -> "ProductSummarySchema":
        """Build schema from a catalog product."""
        return cls(**product.to_summary())


class ProductDetailSchema(ProductSummarySchema):
    """Full product details."""

    description: str = Field(..., description="Product description")
    specifications: dict[str, str] = Field(default_factory=dict)
    details: dict[str, str] = Field(default_factory=dict)
    related_products: list[RelatedProductSchema] = Field(default_factory=list)
    reviews: list[ReviewSchema] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_product(cls, product: Product) -> "ProductDetailSchema":
        """Build schema from a catalog product."""
        return cls(**product.to_dict())


# ============================================================================
# Facet Schemas
# ============================================================================


class FacetBucketSchema(BaseModel):
    """A labelled group and its product count."""

    name: str
    count: int = Field(..., ge=0)

    @classmethod
    def from_bucket(cls, bucket: FacetBucket) -> "FacetBucketSchema":
        """Build schema from a facet bucket."""
        return cls(**bucket.to_dict())


class FacetsSchema(BaseModel):
    """Counts per category, brand, price range and rating band."""

    categories: list[FacetBucketSchema]
    brands: list[FacetBucketSchema]
    price_ranges: list[FacetBucketSchema]
    ratings: list[FacetBucketSchema]

    @classmethod
    def from_facets(cls, facets: Facets) -> "FacetsSchema":
        """Build schema from computed facets."""
        return cls(**facets.to_dict())


# ============================================================================
# Response Schemas
# ============================================================================


class ProductListResponse(BaseModel):
    """Paginated product list."""

    items: list[ProductSummarySchema]
    total: int = Field(..., ge=0, description="Matches before pagination")
    page: int = Field(..., ge=1)
    page_size: int = Field(..., ge=1)
    total_pages: int = Field(..., ge=0)
    facets: FacetsSchema | None = None

    @classmethod
    def from_result(cls, result: PaginatedResult[Product]) -> "ProductListResponse":
        """Build response from a paginated query result."""
        return cls(
            items=[ProductSummarySchema.from_product(p) for p in result.items],
            total=result.total,
            page=result.page,
            page_size=result.page_size,
            total_pages=result.total_pages,
            facets=FacetsSchema.from_facets(result.facets) if result.facets else None,
        )


class RecommendationsResponse(BaseModel):
    """Recommendations for one product."""

    product_id: int
    items: list[ProductSummarySchema]

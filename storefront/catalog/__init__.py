"""Product Catalog.

Provides synthetic catalog generation, filtering, facet aggregation,
recommendations and paginated queries over an in-memory catalog.
"""

from storefront.catalog.facets import (
    DEFAULT_PRICE_RANGES,
    RATING_BANDS,
    TWO_BAND_RATINGS,
    BucketRange,
    FacetBucket,
    Facets,
    build_facets,
    count_by,
)
from storefront.catalog.filters import FilterSpec, SortBy, filter_products
from storefront.catalog.generator import GeneratorConfig, ProductGenerator, generate
from storefront.catalog.models import Product, RelatedProduct, Review
from storefront.catalog.recommendations import recommend
from storefront.catalog.service import (
    CatalogService,
    PaginatedResult,
    PaginationParams,
    query_products,
)
from storefront.catalog.taxonomy import BRANDS, CATEGORIES

__all__ = [
    # Taxonomy
    "BRANDS",
    "CATEGORIES",
    # Models
    "Product",
    "RelatedProduct",
    "Review",
    # Generator
    "GeneratorConfig",
    "ProductGenerator",
    "generate",
    # Filters
    "FilterSpec",
    "SortBy",
    "filter_products",
    # Facets
    "BucketRange",
    "FacetBucket",
    "Facets",
    "DEFAULT_PRICE_RANGES",
    "RATING_BANDS",
    "TWO_BAND_RATINGS",
    "build_facets",
    "count_by",
    # Recommendations
    "recommend",
    # Service
    "CatalogService",
    "PaginatedResult",
    "PaginationParams",
    "query_products",
]

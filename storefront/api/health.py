"""Health check endpoints.

Provides endpoints for monitoring service health and readiness.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from storefront.api.dependencies import get_catalog
from storefront.catalog.service import CatalogService
from storefront.infrastructure.config import settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    service: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response schema."""

    status: str
    product_count: int


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check service health.

    Returns:
        Health status with service name and version.
    """
    return HealthResponse(
        status="healthy",
        service="storefront",
        version=settings.api_version,
    )


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(
    catalog: Annotated[CatalogService, Depends(get_catalog)],
) -> ReadinessResponse:
    """Check if the catalog is loaded and ready to serve queries.

    Returns:
        Readiness status with catalog size.
    """
    return ReadinessResponse(status="ready", product_count=catalog.product_count)

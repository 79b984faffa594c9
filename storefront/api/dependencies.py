"""FastAPI dependencies."""

from fastapi import Request

from storefront.catalog.service import CatalogService


def get_catalog(request: Request) -> CatalogService:
    """Get the catalog built during application startup.

    Args:
        request: Current request.

    Returns:
        The application's catalog service.
    """
    return request.app.state.catalog

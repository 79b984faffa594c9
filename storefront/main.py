"""Storefront API main application module.

This module initializes the FastAPI application and configures
core middleware, routers, and startup/shutdown events.
"""

import locale
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from storefront.api.health import router as health_router
from storefront.api.middleware import setup_middleware
from storefront.api.products import router as products_router
from storefront.catalog.generator import GeneratorConfig, ProductGenerator
from storefront.catalog.service import CatalogService
from storefront.domain.exceptions import DomainError, InvalidArgumentError
from storefront.infrastructure.config import Settings, settings
from storefront.infrastructure.logging import configure_logging

logger = structlog.get_logger()


def build_catalog(config: Settings) -> CatalogService:
    """Generate the catalog served by the application.

    Args:
        config: Application settings.

    Returns:
        Catalog service over a freshly generated catalog.
    """
    generator = ProductGenerator(
        GeneratorConfig(
            seed=config.catalog_seed,
            description_repeat=config.description_repeat,
            tag_count=config.tag_count,
            review_count=config.review_count,
            related_count=config.related_count,
        )
    )
    return CatalogService(generator.generate(config.catalog_size))


def apply_collation_locale(name: str | None) -> bool:
    """Set the LC_COLLATE locale used for name ordering.

    Args:
        name: Locale name such as "en_US.UTF-8", None to keep the current one.

    Returns:
        True if the locale was applied.
    """
    if not name:
        return False
    try:
        locale.setlocale(locale.LC_COLLATE, name)
    except locale.Error:
        logger.warning("Collation locale unavailable", locale=name)
        return False
    return True


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    configure_logging(settings.log_level)
    logger.info(
        "Starting Storefront API",
        version=settings.api_version,
        debug=settings.debug,
        catalog_size=settings.catalog_size,
    )

    apply_collation_locale(settings.collation_locale)
    app.state.catalog = build_catalog(settings)

    yield

    logger.info("Shutting down Storefront API")


app = FastAPI(
    title="Storefront API",
    description="Synthetic product catalog with filtering, facets and recommendations",
    version=settings.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Setup custom middleware (request ID, error handling)
setup_middleware(app)

# Include routers
app.include_router(health_router, tags=["Health"])
app.include_router(products_router)


# ============================================================================
# Custom Exception Handlers
# ============================================================================


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle HTTP exceptions with consistent format."""
    request_id = getattr(request.state, "request_id", None)

    detail = exc.detail
    if isinstance(detail, dict):
        error_code = detail.get("error_code", "ERROR")
        message = detail.get("message", str(detail))
        details = detail.get("details", [])
    else:
        error_code = "ERROR"
        message = str(detail)
        details = []

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error_code": error_code,
            "message": message,
            "details": details,
            "request_id": request_id,
        },
    )


@app.exception_handler(DomainError)
async def domain_exception_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Map domain errors to 400 responses."""
    request_id = getattr(request.state, "request_id", None)
    error_code = "INVALID_ARGUMENT" if isinstance(exc, InvalidArgumentError) else "DOMAIN_ERROR"

    logger.warning(
        "Domain error",
        path=request.url.path,
        error_code=error_code,
        error=exc.message,
    )

    return JSONResponse(
        status_code=400,
        content={
            "error_code": error_code,
            "message": exc.message,
            "details": exc.details,
            "request_id": request_id,
        },
    )

"""Catalog Browser main application module.

This module initializes the FastAPI application and configures
core middleware, routers, and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from catalog_browser.api.catalog import router as catalog_router
from catalog_browser.api.filters import router as filters_router
from catalog_browser.api.health import router as health_router
from catalog_browser.api.middleware import setup_middleware
from catalog_browser.api.products import router as products_router
from catalog_browser.application.browser_service import get_catalog_browser
from catalog_browser.domain.exceptions import DomainError
from catalog_browser.infrastructure.catalog_client import get_catalog_client
from catalog_browser.infrastructure.config import settings
from catalog_browser.infrastructure.logging import configure_logging

configure_logging()
logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    logger.info(
        "Starting Catalog Browser",
        version=settings.api_version,
        debug=settings.debug,
        catalog_api_url=settings.catalog_api_url,
    )

    client = get_catalog_client()
    if settings.catalog_autoload:
        browser = get_catalog_browser()
        loaded = await browser.refresh(client)
        logger.info(
            "Initial catalog fetch complete",
            loaded=loaded,
            product_count=len(browser.store),
        )

    yield

    logger.info("Shutting down Catalog Browser")
    await client.close()


app = FastAPI(
    title="Catalog Browser",
    description="Product catalog browsing with staged filters and sorting",
    version=settings.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware (must be added before custom middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Setup custom middleware (request ID, error handling)
setup_middleware(app)

# Include routers
app.include_router(health_router, tags=["Health"])
app.include_router(catalog_router)
app.include_router(products_router)
app.include_router(filters_router)


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
    """Handle domain errors that escaped a handler as 400s."""
    request_id = getattr(request.state, "request_id", None)

    logger.warning(
        "Domain error in handler",
        path=request.url.path,
        error=exc.message,
        error_type=type(exc).__name__,
    )

    return JSONResponse(
        status_code=400,
        content={
            "error_code": "DOMAIN_ERROR",
            "message": exc.message,
            "details": [
                {"field": key, "message": str(value)} for key, value in exc.details.items()
            ],
            "request_id": request_id,
        },
    )

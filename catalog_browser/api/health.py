"""Health check endpoints.

Provides endpoints for monitoring service health and readiness.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from catalog_browser.application.browser_service import CatalogBrowser, get_catalog_browser

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    service: str
    version: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check service health.

    Returns:
        Health status with service name and version.
    """
    from catalog_browser.infrastructure.config import settings

    return HealthResponse(
        status="healthy",
        service="catalog-browser",
        version=settings.api_version,
    )


@router.get("/ready")
async def readiness_check(
    browser: Annotated[CatalogBrowser, Depends(get_catalog_browser)],
) -> dict[str, str | bool]:
    """Check if service is ready to accept requests.

    Returns:
        Readiness status and whether a catalog has been loaded.
    """
    return {"status": "ready", "catalog_loaded": browser.store.is_loaded}

"""Catalog API endpoints.

Provides an endpoint to (re)fetch the product catalog.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from catalog_browser.api.schemas import RefreshResponse
from catalog_browser.application.browser_service import CatalogBrowser, get_catalog_browser
from catalog_browser.infrastructure.catalog_client import CatalogClient, get_catalog_client

router = APIRouter(prefix="/catalog", tags=["Catalog"])


@router.post(
    "/refresh",
    response_model=RefreshResponse,
    status_code=status.HTTP_200_OK,
    summary="Refresh catalog",
    description="Fetch the product list from the catalog service and load it.",
)
async def refresh_catalog(
    browser: Annotated[CatalogBrowser, Depends(get_catalog_browser)],
    client: Annotated[CatalogClient, Depends(get_catalog_client)],
) -> RefreshResponse:
    """Refresh the catalog.

    A failed fetch keeps the previous catalog; the error is reported in
    the response rather than as an HTTP error so the client can offer a
    retry.

    Returns:
        Whether a catalog was loaded and how many products it holds.
    """
    loaded = await browser.refresh(client)
    return RefreshResponse(
        loaded=loaded,
        product_count=len(browser.store),
        fetch_error=browser.fetch_error,
    )

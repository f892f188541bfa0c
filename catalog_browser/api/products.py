"""Product API endpoints.

Provides the product list screen (derived view plus chips and counts) and
the product detail screen.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from catalog_browser.api.schemas import (
    ChipSchema,
    CriteriaSchema,
    ErrorResponse,
    ProductCardSchema,
    ProductDetailResponse,
    ProductListResponse,
)
from catalog_browser.application.browser_service import (
    CatalogBrowser,
    ProductDetailService,
    get_catalog_browser,
)
from catalog_browser.application.formatting import ProductCard, ProductDetail
from catalog_browser.domain.exceptions import ProductNotFoundError
from catalog_browser.infrastructure.catalog_client import (
    CatalogClient,
    CatalogClientError,
    get_catalog_client,
)

router = APIRouter(prefix="/products", tags=["Products"])


# ============================================================================
# Dependencies
# ============================================================================


def get_detail_service(
    client: Annotated[CatalogClient, Depends(get_catalog_client)],
) -> ProductDetailService:
    """Get product detail service."""
    return ProductDetailService(client)


# ============================================================================
# Converters
# ============================================================================


def browser_to_response(browser: CatalogBrowser) -> ProductListResponse:
    """Convert the browser state to the list response schema."""
    view = browser.view
    return ProductListResponse(
        items=[ProductCardSchema.from_card(ProductCard.from_product(p)) for p in view],
        total=len(view),
        count_label=browser.result_count_label,
        categories=list(browser.categories),
        sort_key=browser.sort_key,
        applied=CriteriaSchema.from_criteria(browser.applied),
        active_count=browser.active_count,
        chips=[ChipSchema.from_chip(chip) for chip in browser.chips],
        is_loading=browser.is_loading,
        is_empty=browser.is_empty,
        fetch_error=browser.fetch_error,
        revision=browser.revision,
    )


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=ProductListResponse,
    status_code=status.HTTP_200_OK,
    summary="Product list",
    description="Get the filtered and sorted product list with active filter chips.",
)
async def list_products(
    browser: Annotated[CatalogBrowser, Depends(get_catalog_browser)],
) -> ProductListResponse:
    """Get the product list screen.

    Returns:
        Derived view and the state needed to render chips, badge and
        empty state.
    """
    return browser_to_response(browser)


@router.get(
    "/{product_id}",
    response_model=ProductDetailResponse,
    status_code=status.HTTP_200_OK,
    responses={
        404: {"model": ErrorResponse, "description": "Product not found"},
        502: {"model": ErrorResponse, "description": "Catalog service unavailable"},
    },
    summary="Product detail",
    description="Fetch a single product from the catalog service.",
)
async def get_product(
    product_id: int,
    service: Annotated[ProductDetailService, Depends(get_detail_service)],
) -> ProductDetailResponse:
    """Get product detail.

    Args:
        product_id: Product identifier.

    Returns:
        Formatted product detail.

    Raises:
        HTTPException: If the product is unknown or the catalog service fails.
    """
    try:
        product = await service.get_product(product_id)
    except ProductNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={
                "error_code": "PRODUCT_NOT_FOUND",
                "message": e.message,
            },
        ) from e
    except CatalogClientError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={
                "error_code": "CATALOG_UNAVAILABLE",
                "message": e.message,
            },
        ) from e

    return ProductDetailResponse.from_detail(ProductDetail.from_product(product))

"""Application layer - the product list screen and product detail service."""

from catalog_browser.application.browser_service import (
    CatalogBrowser,
    ProductDetailService,
    get_catalog_browser,
)

__all__ = [
    "CatalogBrowser",
    "ProductDetailService",
    "get_catalog_browser",
]

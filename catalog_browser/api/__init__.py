"""API layer module.

Contains FastAPI routers and request/response schemas.
"""

from catalog_browser.api.catalog import router as catalog_router
from catalog_browser.api.filters import router as filters_router
from catalog_browser.api.health import router as health_router
from catalog_browser.api.products import router as products_router

__all__ = [
    "catalog_router",
    "filters_router",
    "health_router",
    "products_router",
]

"""Catalog filtering core.

Catalog store, filter/sort engine, staged selection controller and the
active-selection summary.
"""

from catalog_browser.catalog.engine import (
    derive,
    matches_category,
    matches_min_rating,
    matches_price_range,
    sort_products,
)
from catalog_browser.catalog.selection import StagedSelectionController
from catalog_browser.catalog.store import CatalogStore
from catalog_browser.catalog.summary import ActiveFilterChip, active_count, describe

__all__ = [
    # Store
    "CatalogStore",
    # Engine
    "derive",
    "matches_category",
    "matches_min_rating",
    "matches_price_range",
    "sort_products",
    # Selection
    "StagedSelectionController",
    # Summary
    "ActiveFilterChip",
    "active_count",
    "describe",
]

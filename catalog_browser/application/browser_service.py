"""Catalog browser application service.

Owns one product list screen: the catalog store, the staged filter
selection, the active sort key and the derived view. Every operation that
can change what the list shows recomputes the view exactly once before
returning, so callers never observe a stale or partial list.
"""

from typing import Iterable

import structlog

from catalog_browser.application.formatting import result_count_label
from catalog_browser.catalog.engine import derive
from catalog_browser.catalog.selection import StagedSelectionController
from catalog_browser.catalog.store import CatalogStore
from catalog_browser.catalog.summary import ActiveFilterChip, active_count, describe
from catalog_browser.domain.exceptions import ProductNotFoundError
from catalog_browser.domain.models import Product
from catalog_browser.domain.state_machines import EditorState
from catalog_browser.domain.value_objects import (
    FilterCriteria,
    FilterField,
    PriceRange,
    SortKey,
)
from catalog_browser.infrastructure.catalog_client import CatalogClient, CatalogClientError

logger = structlog.get_logger()


class CatalogBrowser:
    """State holder for the product list screen.

    Example usage:
        browser = CatalogBrowser()
        await browser.refresh(get_catalog_client())

        browser.open_filter_editor()
        browser.set_draft_price_range(PriceRange.FROM_50_TO_100)
        browser.commit()

        browser.set_sort_key(SortKey.PRICE_HIGH)
        browser.view  # filtered, sorted products
    """

    def __init__(self) -> None:
        self.store = CatalogStore()
        self.selection = StagedSelectionController()
        self._sort_key = SortKey.RELEVANCE
        self._view: tuple[Product, ...] = ()
        self._revision = 0
        self._pending_fetches = 0
        self._fetch_error: str | None = None

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------

    @property
    def view(self) -> tuple[Product, ...]:
        """Derived view: filtered and sorted products."""
        return self._view

    @property
    def revision(self) -> int:
        """Number of recomputations so far."""
        return self._revision

    @property
    def sort_key(self) -> SortKey:
        """Active sort key."""
        return self._sort_key

    @property
    def applied(self) -> FilterCriteria:
        """Applied filter criteria."""
        return self.selection.applied

    @property
    def editor_state(self) -> EditorState:
        """Filter editor state."""
        return self.selection.state

    @property
    def categories(self) -> tuple[str, ...]:
        """Category universe."""
        return self.store.categories

    @property
    def active_count(self) -> int:
        """Number of active filter criteria (badge count)."""
        return active_count(self.selection.applied)

    @property
    def chips(self) -> tuple[ActiveFilterChip, ...]:
        """Removable chips for the applied criteria."""
        return describe(self.selection.applied)

    @property
    def result_count_label(self) -> str:
        """E.g. "1 Product" or "12 Products"."""
        return result_count_label(len(self._view))

    @property
    def is_loading(self) -> bool:
        """Whether a catalog fetch is in flight."""
        return self._pending_fetches > 0

    @property
    def fetch_error(self) -> str | None:
        """Message of the last failed fetch, cleared by a successful one."""
        return self._fetch_error

    @property
    def is_empty(self) -> bool:
        """Whether a loaded catalog yields nothing under the current filters."""
        return self.store.is_loaded and not self._view

    # ------------------------------------------------------------------
    # Recomputation
    # ------------------------------------------------------------------

    def _recompute(self) -> None:
        self._view = derive(self.store.products, self.selection.applied, self._sort_key)
        self._revision += 1
        logger.debug(
            "View recomputed",
            revision=self._revision,
            result_count=len(self._view),
            sort_key=self._sort_key.value,
        )

    # ------------------------------------------------------------------
    # Catalog
    # ------------------------------------------------------------------

    def load_catalog(self, products: Iterable[Product]) -> None:
        """Replace the catalog and recompute the view.

        Args:
            products: Products in fetch order.
        """
        self.store.load(products)
        self._fetch_error = None
        self._recompute()

    async def refresh(self, client: CatalogClient) -> bool:
        """Fetch the catalog and load it.

        A failed fetch leaves the previous catalog and view in place;
        retrying is up to the caller.

        Args:
            client: Catalog client to fetch with.

        Returns:
            True if a new catalog was loaded.
        """
        self._pending_fetches += 1
        try:
            products = await client.list_products()
        except CatalogClientError as e:
            self._fetch_error = e.message
            logger.warning(
                "Catalog refresh failed, keeping previous catalog",
                error=e.message,
                status_code=e.status_code,
            )
            return False
        finally:
            self._pending_fetches -= 1

        self.load_catalog(products)
        return True

    # ------------------------------------------------------------------
    # Sort
    # ------------------------------------------------------------------

    def set_sort_key(self, sort_key: SortKey | str) -> None:
        """Change the sort key; applies immediately.

        Accepts a ``SortKey`` or its wire value. Unknown keys fall back to
        relevance.
        """
        try:
            key = SortKey(sort_key)
        except ValueError:
            logger.warning("Unknown sort key, using relevance", sort_key=str(sort_key))
            key = SortKey.RELEVANCE
        self._sort_key = key
        logger.info("Sort key changed", sort_key=key.value)
        self._recompute()

    # ------------------------------------------------------------------
    # Filter editing
    # ------------------------------------------------------------------

    def open_filter_editor(self) -> FilterCriteria:
        """Open the filter editor seeded from the applied criteria."""
        return self.selection.open_filter_editor()

    def set_draft_category(self, category: str) -> None:
        """Edit the draft category."""
        self.selection.set_draft_category(category)

    def set_draft_price_range(self, price_range: PriceRange) -> None:
        """Edit the draft price range."""
        self.selection.set_draft_price_range(price_range)

    def set_draft_rating(self, min_rating: int) -> None:
        """Edit the draft minimum rating."""
        self.selection.set_draft_rating(min_rating)

    def commit(self) -> bool:
        """Apply the draft; recomputes only if the editor was open."""
        committed = self.selection.commit()
        if committed:
            self._recompute()
        return committed

    def cancel(self) -> bool:
        """Discard the draft. The view is untouched."""
        return self.selection.cancel()

    def clear_all(self) -> None:
        """Reset all filters and recompute."""
        self.selection.clear_all()
        self._recompute()

    def remove_criterion(self, field: FilterField) -> FilterCriteria:
        """Remove one applied criterion (chip removal) and recompute."""
        applied = self.selection.remove_criterion(field)
        self._recompute()
        return applied


class ProductDetailService:
    """Fetches single products for the detail screen."""

    def __init__(self, client: CatalogClient) -> None:
        """Initialize service with a catalog client.

        Args:
            client: Catalog client.
        """
        self.client = client

    async def get_product(self, product_id: int) -> Product:
        """Get product by ID.

        Args:
            product_id: Product identifier.

        Returns:
            The product.

        Raises:
            ProductNotFoundError: If the service does not know the product.
            CatalogClientError: On transport or API failure.
        """
        product = await self.client.get_product(product_id)
        if product is None:
            logger.info("Product not found", product_id=product_id)
            raise ProductNotFoundError(product_id)
        return product


# Global browser instance (one screen per process)
_catalog_browser: CatalogBrowser | None = None


def get_catalog_browser() -> CatalogBrowser:
    """Get the catalog browser singleton.

    Returns:
        CatalogBrowser instance.
    """
    global _catalog_browser
    if _catalog_browser is None:
        _catalog_browser = CatalogBrowser()
    return _catalog_browser

"""Catalog store.

Holds the product collection from the latest fetch and the category
universe derived from it.
"""

from typing import Iterable

import structlog

from catalog_browser.domain.models import Product
from catalog_browser.domain.value_objects import ALL

logger = structlog.get_logger()


class CatalogStore:
    """Write-once-per-fetch holder of the product catalog.

    ``load`` replaces the catalog outright; there is no way to add or
    remove individual products.
    """

    def __init__(self) -> None:
        self._products: tuple[Product, ...] = ()
        self._categories: tuple[str, ...] = (ALL,)
        self._loaded = False

    def load(self, products: Iterable[Product]) -> None:
        """Replace the stored catalog.

        Args:
            products: Products in fetch order.
        """
        self._products = tuple(products)
        # dict preserves first-appearance order
        distinct = dict.fromkeys(p.category for p in self._products if p.category != ALL)
        self._categories = (ALL, *distinct)
        self._loaded = True
        logger.info(
            "Catalog loaded",
            product_count=len(self._products),
            category_count=len(distinct),
        )

    @property
    def products(self) -> tuple[Product, ...]:
        """Products in fetch order."""
        return self._products

    @property
    def categories(self) -> tuple[str, ...]:
        """Category universe: "All" followed by distinct categories."""
        return self._categories

    @property
    def is_loaded(self) -> bool:
        """Whether a fetch has completed at least once."""
        return self._loaded

    def get(self, product_id: int) -> Product | None:
        """Get product by ID.

        Args:
            product_id: Product identifier.

        Returns:
            Product if present in the loaded catalog.
        """
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def __len__(self) -> int:
        return len(self._products)

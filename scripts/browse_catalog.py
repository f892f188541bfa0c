#!/usr/bin/env python3
"""Browse the product catalog from the command line.

Fetches the catalog, applies filters through the same staged editor the
API uses, and prints product cards or a single product detail.

Usage:
    python scripts/browse_catalog.py
    python scripts/browse_catalog.py --category electronics --sort price-high
    python scripts/browse_catalog.py --price-range 50-100 --min-rating 4
    python scripts/browse_catalog.py --show 3
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from catalog_browser.application.browser_service import CatalogBrowser
from catalog_browser.application.formatting import ProductCard, ProductDetail
from catalog_browser.domain.value_objects import (
    ALL,
    RATING_THRESHOLDS,
    PriceRange,
    SortKey,
)
from catalog_browser.infrastructure.catalog_client import CatalogClient
from catalog_browser.infrastructure.config import settings
from catalog_browser.infrastructure.logging import configure_logging


def print_card(card: ProductCard) -> None:
    """Print a product card."""
    print(f"[{card.id}] {card.title}")
    print(f"    {card.price}  ⭐ {card.rating} ({card.review_count})  {card.category}")


def print_detail(detail: ProductDetail) -> None:
    """Print a product detail view."""
    print(f"{detail.screen_title}: {detail.title}")
    print(f"  {detail.price}")
    print(f"  {detail.stars}  {detail.rating}  ({detail.reviews})")
    print(f"  {detail.description}")


async def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Browse the product catalog",
    )
    parser.add_argument(
        "--url",
        default=settings.catalog_api_url,
        help="Catalog service base URL",
    )
    parser.add_argument(
        "--category",
        default=ALL,
        help="Category to show (default: All)",
    )
    parser.add_argument(
        "--price-range",
        choices=[r.value for r in PriceRange],
        default=PriceRange.ALL.value,
        help="Price range",
    )
    parser.add_argument(
        "--min-rating",
        type=int,
        choices=RATING_THRESHOLDS,
        default=0,
        help="Minimum rating",
    )
    parser.add_argument(
        "--sort",
        choices=[k.value for k in SortKey],
        default=SortKey.RELEVANCE.value,
        help="Sort order",
    )
    parser.add_argument(
        "--show",
        type=int,
        metavar="ID",
        help="Show a single product from the fetched catalog",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log at debug level",
    )

    args = parser.parse_args()
    configure_logging(level="DEBUG" if args.verbose else "WARNING", json_logs=False)

    client = CatalogClient(base_url=args.url, timeout=settings.catalog_timeout_seconds)
    browser = CatalogBrowser()
    try:
        if not await browser.refresh(client):
            print(f"Could not fetch catalog: {browser.fetch_error}", file=sys.stderr)
            return 1
    finally:
        await client.close()

    if args.show is not None:
        product = browser.store.get(args.show)
        if product is None:
            print(f"Product {args.show} not found", file=sys.stderr)
            return 1
        print_detail(ProductDetail.from_product(product))
        return 0

    browser.open_filter_editor()
    browser.set_draft_category(args.category)
    browser.set_draft_price_range(PriceRange(args.price_range))
    browser.set_draft_rating(args.min_rating)
    browser.commit()
    browser.set_sort_key(SortKey(args.sort))

    print(f"Categories: {', '.join(browser.categories)}")
    if browser.chips:
        print(f"Filters: {' | '.join(chip.label for chip in browser.chips)}")
    print(f"Sort: {browser.sort_key.label}")
    print(browser.result_count_label)
    print("=" * 60)

    if browser.is_empty:
        print("No Products Found")
        print("Try adjusting your search criteria")
        return 0

    for product in browser.view:
        print_card(ProductCard.from_product(product))

    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))

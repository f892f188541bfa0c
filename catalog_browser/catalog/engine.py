"""Filter/sort engine.

``derive`` maps a catalog, applied criteria and a sort key to the ordered
list the user sees. It is a pure function: it never mutates its inputs and
never raises for criteria values it does not recognise.
"""

from decimal import Decimal
from typing import Callable, Iterable

import structlog

from catalog_browser.domain.models import Product
from catalog_browser.domain.value_objects import (
    ALL,
    RATING_THRESHOLDS,
    FilterCriteria,
    PriceRange,
    SortKey,
)

logger = structlog.get_logger()


# ============================================================================
# Predicates
# ============================================================================


def matches_category(product: Product, category: str) -> bool:
    """Category predicate; "All" matches everything."""
    return category == ALL or product.category == category


def matches_price_range(product: Product, price_range: PriceRange | str) -> bool:
    """Price range predicate.

    Unrecognised range values match nothing.
    """
    resolved = PriceRange.parse(price_range)
    if resolved is None:
        return False
    return resolved.contains(product.price)


def matches_min_rating(product: Product, min_rating: int) -> bool:
    """Minimum rating predicate; 0 matches everything.

    Thresholds outside the selectable set match nothing.
    """
    if min_rating not in RATING_THRESHOLDS:
        return False
    if min_rating == 0:
        return True
    return product.rating.rate >= min_rating


# ============================================================================
# Sorting
# ============================================================================


# (key function, descending)
_SORT_SPECS: dict[SortKey, tuple[Callable[[Product], Decimal | int], bool]] = {
    SortKey.PRICE_LOW: (lambda p: p.price, False),
    SortKey.PRICE_HIGH: (lambda p: p.price, True),
    SortKey.RATING: (lambda p: p.rating.rate, True),
    SortKey.POPULARITY: (lambda p: p.rating.count, True),
}


def sort_products(products: Iterable[Product], sort_key: SortKey | str) -> list[Product]:
    """Stable-sort products by a sort key.

    Products with equal keys keep their relative input order, including for
    descending keys. Relevance and unrecognised keys leave the order alone.

    Args:
        products: Products to order.
        sort_key: Requested ordering.

    Returns:
        New list in the requested order.
    """
    items = list(products)
    try:
        key = SortKey(sort_key)
    except ValueError:
        logger.warning("Unknown sort key, keeping catalog order", sort_key=str(sort_key))
        return items

    spec = _SORT_SPECS.get(key)
    if spec is None:
        return items
    key_func, descending = spec
    # list.sort is stable even with reverse=True
    items.sort(key=key_func, reverse=descending)
    return items


# ============================================================================
# Derivation
# ============================================================================


def derive(
    catalog: Iterable[Product],
    criteria: FilterCriteria,
    sort_key: SortKey | str = SortKey.RELEVANCE,
) -> tuple[Product, ...]:
    """Compute the derived view.

    Filters are conjunctive and applied in a fixed order (category, price
    range, minimum rating), then the survivors are stable-sorted.

    Args:
        catalog: Products in fetch order.
        criteria: Applied filter criteria.
        sort_key: Active sort key.

    Returns:
        Filtered and ordered products. Empty when nothing matches.
    """
    result: Iterable[Product] = catalog

    if criteria.category != ALL:
        result = [p for p in result if matches_category(p, criteria.category)]

    if criteria.price_range != PriceRange.ALL:
        result = [p for p in result if matches_price_range(p, criteria.price_range)]

    if criteria.min_rating != 0:
        result = [p for p in result if matches_min_rating(p, criteria.min_rating)]

    return tuple(sort_products(result, sort_key))

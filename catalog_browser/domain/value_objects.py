"""Value objects for catalog filtering.

Filter criteria, price ranges, rating thresholds and sort keys. All of them
are immutable and compared by value.
"""

from dataclasses import dataclass, replace
from decimal import Decimal
from enum import Enum
from typing import Self

ALL = "All"
CURRENCY_SYMBOL = "₹"


# ============================================================================
# Price Ranges
# ============================================================================


class PriceRange(str, Enum):
    """Fixed set of selectable price ranges.

    Values are the wire representation ("min-max"). Both bounds are
    inclusive; the top range has no upper bound. A price sitting exactly on
    a shared edge therefore belongs to both neighbouring ranges.
    """

    ALL = "All"
    UNDER_50 = "0-50"
    FROM_50_TO_100 = "50-100"
    FROM_100_TO_200 = "100-200"
    FROM_200_TO_500 = "200-500"
    ABOVE_500 = "500-99999"

    @property
    def label(self) -> str:
        """Human-readable label."""
        return _PRICE_RANGE_LABELS[self]

    @property
    def lower(self) -> Decimal | None:
        """Inclusive lower bound, or None for ALL."""
        bounds = _PRICE_RANGE_BOUNDS.get(self)
        return bounds[0] if bounds else None

    @property
    def upper(self) -> Decimal | None:
        """Inclusive upper bound, or None if unbounded."""
        bounds = _PRICE_RANGE_BOUNDS.get(self)
        return bounds[1] if bounds else None

    def contains(self, price: Decimal) -> bool:
        """Check whether a price falls inside this range.

        Args:
            price: Price to test.

        Returns:
            True if ``lower <= price`` and (no upper bound or ``price <= upper``).
        """
        if self is PriceRange.ALL:
            return True
        lower, upper = _PRICE_RANGE_BOUNDS[self]
        if price < lower:
            return False
        return upper is None or price <= upper

    @classmethod
    def parse(cls, value: object) -> "PriceRange | None":
        """Resolve a wire value into a PriceRange.

        Args:
            value: Candidate value.

        Returns:
            Matching PriceRange, or None if the value is not recognised.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


_PRICE_RANGE_LABELS: dict[PriceRange, str] = {
    PriceRange.ALL: "All Prices",
    PriceRange.UNDER_50: f"Under {CURRENCY_SYMBOL}50",
    PriceRange.FROM_50_TO_100: f"{CURRENCY_SYMBOL}50 - {CURRENCY_SYMBOL}100",
    PriceRange.FROM_100_TO_200: f"{CURRENCY_SYMBOL}100 - {CURRENCY_SYMBOL}200",
    PriceRange.FROM_200_TO_500: f"{CURRENCY_SYMBOL}200 - {CURRENCY_SYMBOL}500",
    PriceRange.ABOVE_500: f"Above {CURRENCY_SYMBOL}500",
}

_PRICE_RANGE_BOUNDS: dict[PriceRange, tuple[Decimal, Decimal | None]] = {
    PriceRange.UNDER_50: (Decimal(0), Decimal(50)),
    PriceRange.FROM_50_TO_100: (Decimal(50), Decimal(100)),
    PriceRange.FROM_100_TO_200: (Decimal(100), Decimal(200)),
    PriceRange.FROM_200_TO_500: (Decimal(200), Decimal(500)),
    PriceRange.ABOVE_500: (Decimal(500), None),
}


# ============================================================================
# Rating Thresholds
# ============================================================================


RATING_THRESHOLDS: tuple[int, ...] = (0, 4, 3, 2)


def rating_label(threshold: int) -> str:
    """Label for a minimum-rating threshold.

    Args:
        threshold: Minimum rating (0 means no restriction).

    Returns:
        Display label.
    """
    if threshold == 0:
        return "All Ratings"
    return f"{threshold}★ & above"


# ============================================================================
# Sort Keys
# ============================================================================


class SortKey(str, Enum):
    """List ordering. Applies immediately, without a draft phase."""

    RELEVANCE = "relevance"
    PRICE_LOW = "price-low"
    PRICE_HIGH = "price-high"
    RATING = "rating"
    POPULARITY = "popularity"

    @property
    def label(self) -> str:
        """Human-readable label."""
        return _SORT_KEY_LABELS[self]


_SORT_KEY_LABELS: dict[SortKey, str] = {
    SortKey.RELEVANCE: "Relevance",
    SortKey.PRICE_LOW: "Price: Low to High",
    SortKey.PRICE_HIGH: "Price: High to Low",
    SortKey.RATING: "Customer Rating",
    SortKey.POPULARITY: "Popularity",
}


# ============================================================================
# Filter Criteria
# ============================================================================


class FilterField(str, Enum):
    """Individually removable fields of FilterCriteria."""

    CATEGORY = "category"
    PRICE_RANGE = "price_range"
    MIN_RATING = "min_rating"


@dataclass(frozen=True)
class FilterCriteria:
    """A complete filter selection.

    Two instances live side by side in a browsing session: the applied one
    driving the visible list and a draft being edited. Being frozen, one
    can never leak edits into the other.

    Attributes:
        category: Category name, or "All".
        price_range: Selected price range.
        min_rating: Minimum average rating (0, 2, 3 or 4; 0 means any).
    """

    category: str = ALL
    price_range: PriceRange = PriceRange.ALL
    min_rating: int = 0

    @classmethod
    def default(cls) -> Self:
        """Criteria that match every product."""
        return cls()

    def with_category(self, category: str) -> Self:
        """Return a copy with a different category."""
        return replace(self, category=category)

    def with_price_range(self, price_range: PriceRange) -> Self:
        """Return a copy with a different price range."""
        return replace(self, price_range=price_range)

    def with_min_rating(self, min_rating: int) -> Self:
        """Return a copy with a different minimum rating."""
        return replace(self, min_rating=min_rating)

    def reset(self, field: FilterField) -> Self:
        """Return a copy with one field back at its default.

        Args:
            field: Field to reset.

        Returns:
            New criteria; other fields are untouched.
        """
        if field is FilterField.CATEGORY:
            return self.with_category(ALL)
        if field is FilterField.PRICE_RANGE:
            return self.with_price_range(PriceRange.ALL)
        return self.with_min_rating(0)

    def is_active(self, field: FilterField) -> bool:
        """Check whether a field differs from its default."""
        if field is FilterField.CATEGORY:
            return self.category != ALL
        if field is FilterField.PRICE_RANGE:
            return self.price_range != PriceRange.ALL
        return self.min_rating != 0

    @property
    def is_default(self) -> bool:
        """True if no field restricts the catalog."""
        return not any(self.is_active(field) for field in FilterField)

    def to_dict(self) -> dict[str, str | int]:
        """Convert to a JSON-friendly dictionary."""
        price_range = self.price_range
        return {
            "category": self.category,
            "price_range": price_range.value if isinstance(price_range, PriceRange) else str(price_range),
            "min_rating": self.min_rating,
        }

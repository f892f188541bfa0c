"""Display formatting for product cards and the product detail view."""

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from catalog_browser.domain.models import Product
from catalog_browser.domain.value_objects import CURRENCY_SYMBOL

FULL_STAR = "⭐"
EMPTY_STAR = "☆"
MAX_STARS = 5


def format_price(price: Decimal) -> str:
    """Format a price with the currency symbol and two decimals.

    Args:
        price: Price in major units.

    Returns:
        Formatted price, e.g. "₹109.95".
    """
    amount = price.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"{CURRENCY_SYMBOL}{amount}"


def render_stars(rate: Decimal) -> str:
    """Render a rating as five star symbols.

    A fractional part of 0.5 or more earns one extra full star.

    Args:
        rate: Average rating in [0, 5].

    Returns:
        Space separated star symbols.
    """
    full = math.floor(rate)
    if rate % 1 >= Decimal("0.5"):
        full += 1
    full = min(full, MAX_STARS)
    return " ".join([FULL_STAR] * full + [EMPTY_STAR] * (MAX_STARS - full))


def format_rating(rate: Decimal) -> str:
    """Format a rating with one decimal place."""
    return str(rate.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def format_review_count(count: int) -> str:
    """Format a review count with thousands separators."""
    return f"{count:,} reviews"


def title_case_category(category: str) -> str:
    """Upper-case the first letter of a category name."""
    return category[:1].upper() + category[1:]


def result_count_label(count: int) -> str:
    """Label for the number of products in the list."""
    return f"{count} {'Product' if count == 1 else 'Products'}"


# ============================================================================
# View Models
# ============================================================================


@dataclass(frozen=True)
class ProductCard:
    """Product as rendered in the list.

    Attributes:
        id: Product identifier (navigation target).
        title: Product title.
        price: Formatted price.
        rating: Rating as reported.
        review_count: Number of ratings.
        category: Category name.
        description: Description (the view truncates it).
        image: Image reference.
    """

    id: int
    title: str
    price: str
    rating: str
    review_count: int
    category: str
    description: str
    image: str

    @classmethod
    def from_product(cls, product: Product) -> "ProductCard":
        """Build a card from a product."""
        return cls(
            id=product.id,
            title=product.title,
            price=format_price(product.price),
            rating=str(product.rating.rate),
            review_count=product.rating.count,
            category=product.category,
            description=product.description,
            image=product.image,
        )


@dataclass(frozen=True)
class ProductDetail:
    """Product as rendered on the detail screen."""

    id: int
    title: str
    screen_title: str
    category_badge: str
    price: str
    stars: str
    rating: str
    reviews: str
    description: str
    category: str
    image: str

    @classmethod
    def from_product(cls, product: Product) -> "ProductDetail":
        """Build the detail view from a product."""
        return cls(
            id=product.id,
            title=product.title,
            screen_title=title_case_category(product.category),
            category_badge=product.category.upper(),
            price=format_price(product.price),
            stars=render_stars(product.rating.rate),
            rating=format_rating(product.rating.rate),
            reviews=format_review_count(product.rating.count),
            description=product.description,
            category=title_case_category(product.category),
            image=product.image,
        )

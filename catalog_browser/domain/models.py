"""Product entity as delivered by the catalog service.

Products are immutable once fetched. Prices and ratings are kept as
``Decimal`` so that range boundaries compare exactly.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

from catalog_browser.domain.exceptions import InvalidProductError


def _to_decimal(value: Any, field_name: str, payload: Any) -> Decimal:
    if isinstance(value, bool) or value is None:
        raise InvalidProductError(f"'{field_name}' must be a number", payload)
    try:
        result = Decimal(str(value))
    except (InvalidOperation, ValueError) as e:
        raise InvalidProductError(f"'{field_name}' must be a number", payload) from e
    if not result.is_finite():
        raise InvalidProductError(f"'{field_name}' must be finite", payload)
    return result


@dataclass(frozen=True)
class Rating:
    """Aggregate customer rating.

    Attributes:
        rate: Average rating in [0, 5].
        count: Number of ratings.
    """

    rate: Decimal
    count: int

    def __post_init__(self) -> None:
        if not Decimal(0) <= self.rate <= Decimal(5):
            raise InvalidProductError(f"rating rate {self.rate} outside [0, 5]")
        if self.count < 0:
            raise InvalidProductError(f"rating count {self.count} is negative")


@dataclass(frozen=True)
class Product:
    """Product in the fetched catalog.

    Attributes:
        id: Unique, stable product identifier.
        title: Product title.
        price: Price in major currency units, never negative.
        description: Product description.
        category: Category name as reported by the catalog service.
        image: Opaque image reference (URL).
        rating: Customer rating summary.
    """

    id: int
    title: str
    price: Decimal
    description: str
    category: str
    image: str
    rating: Rating

    def __post_init__(self) -> None:
        if self.price < 0:
            raise InvalidProductError(f"price {self.price} is negative", {"id": self.id})

    @classmethod
    def from_api_response(cls, data: Any) -> "Product":
        """Create from catalog service response.

        Args:
            data: Decoded JSON object for a single product.

        Returns:
            Product instance.

        Raises:
            InvalidProductError: If required fields are missing or malformed.
        """
        if not isinstance(data, dict):
            raise InvalidProductError("expected a JSON object", data)

        missing = [key for key in ("id", "title", "price", "category") if key not in data]
        if missing:
            raise InvalidProductError(f"missing fields {missing}", data)

        raw_id = data["id"]
        if isinstance(raw_id, bool) or not isinstance(raw_id, int):
            raise InvalidProductError("'id' must be an integer", data)

        rating_data = data.get("rating") or {}
        if not isinstance(rating_data, dict):
            raise InvalidProductError("'rating' must be an object", data)

        raw_count = rating_data.get("count", 0)
        if isinstance(raw_count, bool) or not isinstance(raw_count, int):
            raise InvalidProductError("'rating.count' must be an integer", data)

        try:
            rating = Rating(
                rate=_to_decimal(rating_data.get("rate", 0), "rating.rate", data),
                count=raw_count,
            )
            return cls(
                id=raw_id,
                title=str(data["title"]),
                price=_to_decimal(data["price"], "price", data),
                description=str(data.get("description") or ""),
                category=str(data["category"]),
                image=str(data.get("image") or ""),
                rating=rating,
            )
        except InvalidProductError as e:
            if e.details.get("product_id") is None:
                e.details["product_id"] = raw_id
            raise

    def to_dict(self) -> dict[str, Any]:
        """Convert to the catalog service wire shape.

        Returns:
            Dictionary representation.
        """
        return {
            "id": self.id,
            "title": self.title,
            "price": float(self.price),
            "description": self.description,
            "category": self.category,
            "image": self.image,
            "rating": {
                "rate": float(self.rating.rate),
                "count": self.rating.count,
            },
        }

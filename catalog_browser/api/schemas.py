"""API schemas for the catalog browser.

Pydantic models for request/response validation and serialization.
"""

from typing import Literal

from pydantic import BaseModel, Field

from catalog_browser.application.formatting import ProductCard, ProductDetail
from catalog_browser.catalog.summary import ActiveFilterChip
from catalog_browser.domain.state_machines import EditorStatus
from catalog_browser.domain.value_objects import (
    ALL,
    FilterCriteria,
    FilterField,
    PriceRange,
    SortKey,
)

RatingThreshold = Literal[0, 2, 3, 4]


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


class OptionSchema(BaseModel):
    """Selectable option with a display label."""

    label: str
    value: str | int


# ============================================================================
# Criteria Schemas
# ============================================================================


class CriteriaSchema(BaseModel):
    """Filter criteria."""

    category: str = Field(default=ALL, description="Category name or 'All'")
    price_range: PriceRange = Field(default=PriceRange.ALL, description="Price range value")
    min_rating: int = Field(default=0, description="Minimum average rating")

    @classmethod
    def from_criteria(cls, criteria: FilterCriteria) -> "CriteriaSchema":
        """Convert FilterCriteria to schema."""
        return cls(
            category=criteria.category,
            price_range=criteria.price_range,
            min_rating=criteria.min_rating,
        )


class ChipSchema(BaseModel):
    """Removable active-filter chip."""

    field: FilterField = Field(..., description="Criterion the chip removes")
    label: str = Field(..., description="Chip text")

    @classmethod
    def from_chip(cls, chip: ActiveFilterChip) -> "ChipSchema":
        """Convert ActiveFilterChip to schema."""
        return cls(field=chip.field, label=chip.label)


class DraftUpdateRequest(BaseModel):
    """Partial update of the draft criteria.

    Omitted fields keep their current draft value.
    """

    category: str | None = Field(default=None, description="Category name or 'All'")
    price_range: PriceRange | None = Field(default=None, description="Price range value")
    min_rating: RatingThreshold | None = Field(default=None, description="Minimum rating")


class EditorStateResponse(BaseModel):
    """Filter editor state."""

    status: EditorStatus
    draft: CriteriaSchema | None = Field(default=None, description="Draft while editing")
    applied: CriteriaSchema
    active_count: int


class FilterOptionsResponse(BaseModel):
    """Options offered by the filter and sort modals."""

    categories: list[str]
    price_ranges: list[OptionSchema]
    ratings: list[OptionSchema]
    sort_options: list[OptionSchema]


class SortRequest(BaseModel):
    """Request to change the sort key."""

    sort_key: SortKey


# ============================================================================
# Product Schemas
# ============================================================================


class ProductCardSchema(BaseModel):
    """Product card in the list."""

    id: int
    title: str
    price: str = Field(..., description="Formatted price")
    rating: str
    review_count: int
    category: str
    description: str
    image: str

    @classmethod
    def from_card(cls, card: ProductCard) -> "ProductCardSchema":
        """Convert ProductCard to schema."""
        return cls(
            id=card.id,
            title=card.title,
            price=card.price,
            rating=card.rating,
            review_count=card.review_count,
            category=card.category,
            description=card.description,
            image=card.image,
        )


class ProductListResponse(BaseModel):
    """Product list screen state."""

    items: list[ProductCardSchema]
    total: int = Field(..., description="Number of products in the derived view")
    count_label: str
    categories: list[str]
    sort_key: SortKey
    applied: CriteriaSchema
    active_count: int
    chips: list[ChipSchema]
    is_loading: bool
    is_empty: bool = Field(..., description="Catalog loaded but nothing matches")
    fetch_error: str | None = None
    revision: int


class ProductDetailResponse(BaseModel):
    """Product detail screen."""

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
    def from_detail(cls, detail: ProductDetail) -> "ProductDetailResponse":
        """Convert ProductDetail to schema."""
        return cls(
            id=detail.id,
            title=detail.title,
            screen_title=detail.screen_title,
            category_badge=detail.category_badge,
            price=detail.price,
            stars=detail.stars,
            rating=detail.rating,
            reviews=detail.reviews,
            description=detail.description,
            category=detail.category,
            image=detail.image,
        )


class RefreshResponse(BaseModel):
    """Result of a catalog refresh."""

    loaded: bool
    product_count: int
    fetch_error: str | None = None

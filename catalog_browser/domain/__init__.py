"""Domain layer - product entity, filter value objects, editor state machine.

- **Models**: Products as fetched from the catalog service (Product, Rating)
- **Value Objects**: Filter criteria, price ranges, sort keys
- **State Machines**: Filter editor states (Closed, Editing)
- **Exceptions**: Domain-specific errors

Example usage:
    from catalog_browser.domain import FilterCriteria, PriceRange

    criteria = FilterCriteria.default().with_price_range(PriceRange.FROM_50_TO_100)
    criteria.is_default  # False
"""

from catalog_browser.domain.exceptions import (
    DomainError,
    InvalidProductError,
    InvalidStateTransitionError,
    ProductError,
    ProductNotFoundError,
)
from catalog_browser.domain.models import Product, Rating
from catalog_browser.domain.state_machines import (
    Closed,
    EditorState,
    EditorStatus,
    Editing,
    validate_editor_transition,
)
from catalog_browser.domain.value_objects import (
    ALL,
    CURRENCY_SYMBOL,
    RATING_THRESHOLDS,
    FilterCriteria,
    FilterField,
    PriceRange,
    SortKey,
    rating_label,
)

__all__ = [
    # Models
    "Product",
    "Rating",
    # Value objects
    "ALL",
    "CURRENCY_SYMBOL",
    "RATING_THRESHOLDS",
    "FilterCriteria",
    "FilterField",
    "PriceRange",
    "SortKey",
    "rating_label",
    # State machines
    "Closed",
    "EditorState",
    "EditorStatus",
    "Editing",
    "validate_editor_transition",
    # Exceptions
    "DomainError",
    "InvalidProductError",
    "InvalidStateTransitionError",
    "ProductError",
    "ProductNotFoundError",
]

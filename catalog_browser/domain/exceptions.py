"""Domain exceptions.

Errors raised at the edges of the catalog domain: building products from
untrusted payloads, looking up products that do not exist, and driving the
filter editor through transitions it does not allow. The filtering core
itself never raises for in-domain input.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# State Machine Errors
# ============================================================================


class InvalidStateTransitionError(DomainError):
    """Raised when an invalid state transition is attempted."""

    def __init__(
        self,
        entity_type: str,
        current_state: str,
        target_state: str,
        allowed_transitions: list[str] | None = None,
    ) -> None:
        """Initialize invalid state transition error.

        Args:
            entity_type: Type of state holder (e.g., "FilterEditor").
            current_state: Current state.
            target_state: Attempted target state.
            allowed_transitions: List of allowed target states from current state.
        """
        allowed = allowed_transitions or []
        message = (
            f"Cannot transition {entity_type} "
            f"from '{current_state}' to '{target_state}'. "
            f"Allowed transitions: {allowed}"
        )
        super().__init__(
            message,
            details={
                "entity_type": entity_type,
                "current_state": current_state,
                "target_state": target_state,
                "allowed_transitions": allowed,
            },
        )


# ============================================================================
# Product Errors
# ============================================================================


class ProductError(DomainError):
    """Base class for product-related errors."""

    pass


class InvalidProductError(ProductError):
    """Raised when a catalog payload cannot be turned into a Product."""

    def __init__(self, reason: str, payload: Any = None) -> None:
        """Initialize invalid product error.

        Args:
            reason: What was wrong with the payload.
            payload: The offending payload, if available.
        """
        product_id = payload.get("id") if isinstance(payload, dict) else None
        super().__init__(
            f"Invalid product payload: {reason}",
            details={"reason": reason, "product_id": product_id},
        )


class ProductNotFoundError(ProductError):
    """Raised when a product does not exist in the catalog service."""

    def __init__(self, product_id: int) -> None:
        """Initialize product not found error.

        Args:
            product_id: ID of the missing product.
        """
        super().__init__(
            f"Product {product_id} not found",
            details={"product_id": product_id},
        )

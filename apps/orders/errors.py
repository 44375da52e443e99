"""
Order submission errors.

Each error knows the HTTP status it maps to and how to render itself as the
API error body ``{"error": ..., "details": ...}``.
"""

from rest_framework import status


class OrderError(Exception):
    """Base class for every failure of an order submission."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Order could not be processed."

    def __init__(self, message=None, details=None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def to_dict(self):
        """Convert the error to the API error body."""
        error_dict = {"error": self.message}
        if self.details is not None:
            error_dict["details"] = self.details
        return error_dict


class OrderValidationError(OrderError):
    """Malformed, missing or out-of-range input. Carries per-field details."""

    default_message = "Invalid order data provided."


class ReferenceNotFound(OrderError):
    """A store, variant or charge id does not exist."""

    default_message = "Invalid reference ID."


class ChargeNotFound(ReferenceNotFound):
    def __init__(self, charge_id):
        self.charge_id = charge_id
        super().__init__(f"Charge with ID {charge_id} not found.")


class InsufficientStock(OrderError):
    """A tracked variant does not have enough stock at the chosen store."""

    def __init__(self, variant_id, available, requested, variant_name=None):
        self.variant_id = variant_id
        self.available = available
        self.requested = requested
        label = f"Variant ID {variant_id}"
        if variant_name:
            label = f"{variant_name} ({label})"
        super().__init__(
            f"Insufficient stock for {label}. Available: {available}, Needed: {requested}",
            details={
                "variantId": str(variant_id),
                "available": available,
                "requested": requested,
            },
        )


class MissingAmountReceived(OrderError):
    default_message = "Amount received must be provided."


class InsufficientAmount(OrderError):
    default_message = "Amount received is less than total amount."


class TransactionTimeout(OrderError):
    """The atomic unit did not finish within its time bound."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Transaction failed or timed out."


class UnexpectedOrderError(OrderError):
    """Any other failure. Internal details are logged, never returned."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Failed to create order."

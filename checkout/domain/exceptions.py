"""
Domain exceptions.

Hierarchy:
    CheckoutError
    ├── OrderNotFound          (404)
    ├── PaymentNotFound        (404)
    ├── InvalidOrderState      (400)
    ├── IdempotencyConflict    (409)
    ├── PaymentGatewayError    (502, dependency failure)
    ├── InvalidSignature       (401)
    └── MalformedEvent         (400)

Nothing here is retried. HTTP mapping lives in apps.api.errors.
"""
from typing import Optional


class CheckoutError(Exception):
    """Base exception for all checkout domain errors."""


class OrderNotFound(CheckoutError):
    """Raised when an order does not exist."""

    def __init__(self, order_id: object):
        super().__init__(f"Order not found: {order_id}")
        self.order_id = order_id


class PaymentNotFound(CheckoutError):
    """Raised when no payment attempt matches a provider reference."""

    def __init__(self, reference_id: str):
        super().__init__(f"Payment not found for provider reference: {reference_id}")
        self.reference_id = reference_id


class InvalidOrderState(CheckoutError):
    """
    Raised when an order cannot take the requested transition.

    The message is keyed by the current status so callers can tell
    whether retrying with a new order is the right remedy.
    """

    def __init__(self, message: str, status: Optional[object] = None):
        super().__init__(message)
        self.status = status


class IdempotencyConflict(CheckoutError):
    """Raised when an idempotency key has already been consumed."""

    def __init__(self, idempotency_key: str):
        super().__init__(f"Idempotency key already used: {idempotency_key}")
        self.idempotency_key = idempotency_key


class PaymentGatewayError(CheckoutError):
    """Raised when the payment provider call fails (network, timeout, rejection)."""


class InvalidSignature(CheckoutError):
    """Raised when an inbound provider message fails signature verification."""


class MalformedEvent(CheckoutError):
    """Raised when a verified provider event lacks required correlation data."""

"""
Status state machines for Order and PaymentAttempt.

Each aggregate has one transition table and one transition function.
Pairs missing from the table are rejected; terminal states absorb
every event without change.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
from enum import Enum
from typing import Dict, Tuple

from .enums import OrderStatus, OutcomeKind, PaymentStatus
from .exceptions import InvalidOrderState


class OrderEvent(str, Enum):
    """Events that drive the order lifecycle."""

    CHECKOUT_INITIATED = "CHECKOUT_INITIATED"
    PAYMENT_SUCCEEDED = "PAYMENT_SUCCEEDED"
    PAYMENT_FAILED = "PAYMENT_FAILED"
    PAYMENT_CANCELED = "PAYMENT_CANCELED"

    @classmethod
    def for_outcome(cls, kind: OutcomeKind) -> "OrderEvent":
        return _OUTCOME_EVENTS[kind]


_OUTCOME_EVENTS = {
    OutcomeKind.SUCCEEDED: OrderEvent.PAYMENT_SUCCEEDED,
    OutcomeKind.FAILED: OrderEvent.PAYMENT_FAILED,
    OutcomeKind.CANCELED: OrderEvent.PAYMENT_CANCELED,
}


ORDER_TRANSITIONS: Dict[Tuple[OrderStatus, OrderEvent], OrderStatus] = {
    (OrderStatus.CREATED, OrderEvent.CHECKOUT_INITIATED): OrderStatus.PAYMENT_PENDING,
    (OrderStatus.PAYMENT_PENDING, OrderEvent.PAYMENT_SUCCEEDED): OrderStatus.PAID,
    (OrderStatus.PAYMENT_PENDING, OrderEvent.PAYMENT_FAILED): OrderStatus.FAILED,
    (OrderStatus.PAYMENT_PENDING, OrderEvent.PAYMENT_CANCELED): OrderStatus.CANCELED,
}

PAYMENT_TRANSITIONS: Dict[Tuple[PaymentStatus, OutcomeKind], PaymentStatus] = {
    (PaymentStatus.INITIATED, kind): kind.payment_status for kind in OutcomeKind
}

CHECKOUT_REJECTION_REASONS: Dict[OrderStatus, str] = {
    OrderStatus.PAYMENT_PENDING: "Order already has a payment in progress",
    OrderStatus.PAID: "Order has already been paid",
    OrderStatus.FAILED: "Order payment failed, create a new order",
    OrderStatus.CANCELED: "Order was canceled, create a new order",
}

DEFAULT_REJECTION_REASON = "Order is not in a valid state for checkout"


def checkout_rejection_reason(status: OrderStatus) -> str:
    """Human-readable reason why an order in `status` cannot be checked out."""
    return CHECKOUT_REJECTION_REASONS.get(status, DEFAULT_REJECTION_REASON)


def next_order_status(current: OrderStatus, event: OrderEvent) -> OrderStatus:
    """
    Compute the order status after `event`.

    Args:
        current: Current order status
        event: Lifecycle event

    Returns:
        New status (unchanged if current is terminal)

    Raises:
        InvalidOrderState: If the transition is not in the table
    """
    if current.is_terminal:
        return current

    try:
        return ORDER_TRANSITIONS[(current, event)]
    except KeyError:
        if event is OrderEvent.CHECKOUT_INITIATED:
            raise InvalidOrderState(checkout_rejection_reason(current), status=current)
        raise InvalidOrderState(
            f"Order in status {current.value} cannot accept {event.value}",
            status=current,
        )


def next_payment_status(current: PaymentStatus, kind: OutcomeKind) -> PaymentStatus:
    """Compute the payment attempt status after an outcome (terminal absorbs)."""
    if current.is_terminal:
        return current
    return PAYMENT_TRANSITIONS[(current, kind)]

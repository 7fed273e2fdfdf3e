"""
Outcome Kind Enum.

Closed set of payment outcomes a provider can report. Each kind
maps to exactly one terminal status per aggregate.
"""
from enum import Enum

from .order_status import OrderStatus
from .payment_status import PaymentStatus


class OutcomeKind(str, Enum):
    """Payment outcome reported by the provider."""

    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"
    CANCELED = "CANCELED"

    @property
    def order_status(self) -> OrderStatus:
        """Terminal order status implied by this outcome."""
        return _ORDER_STATUS[self]

    @property
    def payment_status(self) -> PaymentStatus:
        """Terminal payment status implied by this outcome."""
        return _PAYMENT_STATUS[self]


_ORDER_STATUS = {
    OutcomeKind.SUCCEEDED: OrderStatus.PAID,
    OutcomeKind.FAILED: OrderStatus.FAILED,
    OutcomeKind.CANCELED: OrderStatus.CANCELED,
}

_PAYMENT_STATUS = {
    OutcomeKind.SUCCEEDED: PaymentStatus.SUCCEEDED,
    OutcomeKind.FAILED: PaymentStatus.FAILED,
    OutcomeKind.CANCELED: PaymentStatus.CANCELED,
}

"""
Order Status Enum.

Lifecycle: CREATED -> PAYMENT_PENDING -> PAID | FAILED | CANCELED
"""
from enum import Enum


class OrderStatus(str, Enum):
    """Order status values."""

    CREATED = "CREATED"
    PAYMENT_PENDING = "PAYMENT_PENDING"
    PAID = "PAID"
    FAILED = "FAILED"
    CANCELED = "CANCELED"

    @property
    def is_terminal(self) -> bool:
        return self in (OrderStatus.PAID, OrderStatus.FAILED, OrderStatus.CANCELED)

"""Domain value objects."""

from .value_objects import Money, OrderId, PaymentId

__all__ = [
    "Money",
    "OrderId",
    "PaymentId",
]

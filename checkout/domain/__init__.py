"""Domain layer - pure domain models and interfaces."""

from .entities import LineItem, Order, PaymentAttempt
from .enums import OrderStatus, OutcomeKind, PaymentProvider, PaymentStatus
from .repositories import OrderRepository, PaymentRepository
from .value_objects import Money, OrderId, PaymentId

__all__ = [
    "LineItem",
    "Money",
    "Order",
    "OrderId",
    "OrderRepository",
    "OrderStatus",
    "OutcomeKind",
    "PaymentAttempt",
    "PaymentId",
    "PaymentProvider",
    "PaymentRepository",
    "PaymentStatus",
]

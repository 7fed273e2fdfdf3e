"""Domain entities."""

from .order import LineItem, Order
from .payment_attempt import PaymentAttempt

__all__ = ["LineItem", "Order", "PaymentAttempt"]

"""Database models."""

from .base import Base
from .order_model import OrderItemModel, OrderModel
from .payment_model import PaymentAttemptModel

__all__ = ["Base", "OrderModel", "OrderItemModel", "PaymentAttemptModel"]

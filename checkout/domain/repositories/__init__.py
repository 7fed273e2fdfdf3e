"""Repository interfaces."""

from .order_repository import OrderRepository
from .payment_repository import PaymentRepository

__all__ = ["OrderRepository", "PaymentRepository"]

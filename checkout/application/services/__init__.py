"""Application services."""

from .checkout_service import CheckoutService
from .order_service import OrderApplicationService
from .reconciliation_service import ReconciliationResult, ReconciliationService

__all__ = [
    "CheckoutService",
    "OrderApplicationService",
    "ReconciliationResult",
    "ReconciliationService",
]

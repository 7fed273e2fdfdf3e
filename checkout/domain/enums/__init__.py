"""Domain enums."""

from .order_status import OrderStatus
from .outcome_kind import OutcomeKind
from .payment_provider import PaymentProvider
from .payment_status import PaymentStatus

__all__ = [
    "OrderStatus",
    "OutcomeKind",
    "PaymentProvider",
    "PaymentStatus",
]

"""
PaymentAttempt aggregate.

One attempt to collect payment for an order through a provider.
Amount and currency are a snapshot of the order at creation time.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..enums import OutcomeKind, PaymentProvider, PaymentStatus
from ..state_machine import next_payment_status
from ..value_objects import Money, OrderId, PaymentId
from .order import Order, utcnow


@dataclass
class PaymentAttempt:
    """Payment attempt owned by exactly one order."""
    payment_id: PaymentId
    order_id: OrderId
    provider: PaymentProvider
    provider_reference_id: str
    client_secret: Optional[str]
    amount: Money
    idempotency_key: str
    status: PaymentStatus = PaymentStatus.INITIATED
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    def __post_init__(self):
        if not self.idempotency_key or not self.idempotency_key.strip():
            raise ValueError("Idempotency key cannot be empty")
        if not self.provider_reference_id:
            raise ValueError("Provider reference id cannot be empty")

    @classmethod
    def initiate(
        cls,
        order: Order,
        provider: PaymentProvider,
        provider_reference_id: str,
        client_secret: Optional[str],
        idempotency_key: str,
    ) -> "PaymentAttempt":
        """Create an INITIATED attempt snapshotting the order total."""
        return cls(
            payment_id=PaymentId.generate(),
            order_id=order.order_id,
            provider=provider,
            provider_reference_id=provider_reference_id,
            client_secret=client_secret,
            amount=order.total,
            idempotency_key=idempotency_key,
        )

    def apply_outcome(self, kind: OutcomeKind) -> bool:
        """
        Apply a provider outcome.

        Returns:
            True if the status changed
        """
        previous = self.status
        self.status = next_payment_status(self.status, kind)
        if self.status is not previous:
            self.updated_at = utcnow()
            return True
        return False

"""Repository interfaces for PaymentAttempt aggregate."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.payment_attempt import PaymentAttempt


class PaymentRepository(ABC):
    """Abstract repository for PaymentAttempt persistence.

    Implementations must enforce idempotency-key and provider-reference
    uniqueness at the storage layer.
    """

    @abstractmethod
    async def save(self, attempt: PaymentAttempt) -> PaymentAttempt:
        """Persist payment attempt (insert or update).

        Raises:
            IdempotencyConflict: If the idempotency key is already used
        """
        pass

    @abstractmethod
    async def get_by_idempotency_key(self, idempotency_key: str) -> Optional[PaymentAttempt]:
        """Find the attempt created with `idempotency_key`."""
        pass

    @abstractmethod
    async def get_by_provider_reference(self, reference_id: str) -> Optional[PaymentAttempt]:
        """Find the attempt correlated with a provider reference id."""
        pass

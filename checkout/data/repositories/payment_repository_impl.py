"""SQLAlchemy implementation of PaymentRepository."""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from checkout.domain.entities.payment_attempt import PaymentAttempt
from checkout.domain.exceptions import IdempotencyConflict
from checkout.domain.repositories.payment_repository import PaymentRepository

from ..mappers import PaymentAttemptMapper
from ..models.payment_model import PaymentAttemptModel

logger = logging.getLogger(__name__)


class SqlAlchemyPaymentRepository(PaymentRepository):
    """Concrete implementation of PaymentRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, attempt: PaymentAttempt) -> PaymentAttempt:
        """Persist payment attempt (upsert).

        Raises:
            IdempotencyConflict: If the idempotency key is already stored
            IntegrityError: For any other constraint violation
        """
        existing = await self._session.get(PaymentAttemptModel, str(attempt.payment_id))

        if existing:
            PaymentAttemptMapper.update_persistence(attempt, existing)
            self._session.add(existing)
            await self._session.flush()
            return attempt

        self._session.add(PaymentAttemptMapper.to_persistence(attempt))
        try:
            await self._session.flush()
        except IntegrityError:
            await self._session.rollback()
            if await self.get_by_idempotency_key(attempt.idempotency_key) is not None:
                logger.info(f"Idempotency key collision on insert: {attempt.idempotency_key}")
                raise IdempotencyConflict(attempt.idempotency_key)
            raise
        return attempt

    async def get_by_idempotency_key(self, idempotency_key: str) -> Optional[PaymentAttempt]:
        result = await self._session.execute(
            select(PaymentAttemptModel).where(PaymentAttemptModel.idempotency_key == idempotency_key)
        )
        model = result.scalar_one_or_none()
        return PaymentAttemptMapper.to_domain(model) if model else None

    async def get_by_provider_reference(self, reference_id: str) -> Optional[PaymentAttempt]:
        result = await self._session.execute(
            select(PaymentAttemptModel).where(
                PaymentAttemptModel.provider_reference_id == reference_id
            )
        )
        model = result.scalar_one_or_none()
        return PaymentAttemptMapper.to_domain(model) if model else None

"""
Checkout orchestration.

Turns a CREATED order into PAYMENT_PENDING with exactly one INITIATED
payment attempt, keyed by the caller's idempotency key. Every step runs
in one unit of work; the order row is locked for the duration.
"""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from checkout.application.dtos.checkout_dto import CheckoutDTO
from checkout.data.uow import UnitOfWork, create_uow
from checkout.domain.entities.order import Order
from checkout.domain.entities.payment_attempt import PaymentAttempt
from checkout.domain.enums import OrderStatus, PaymentProvider
from checkout.domain.exceptions import (
    CheckoutError,
    IdempotencyConflict,
    InvalidOrderState,
    OrderNotFound,
    PaymentGatewayError,
)
from checkout.domain.ports.payment_gateway import PaymentGateway, PaymentIntent
from checkout.domain.state_machine import checkout_rejection_reason
from checkout.domain.value_objects import OrderId

logger = logging.getLogger(__name__)


class CheckoutService:
    """
    Checkout orchestrator.

    Guarantees at most one payment attempt per idempotency key and at
    most one active attempt per order. A remote intent created for a
    transaction that then fails to commit is canceled best-effort.
    """

    def __init__(self, session_factory: async_sessionmaker, gateway: PaymentGateway) -> None:
        """Initialize checkout service.

        Args:
            session_factory: SQLAlchemy async session factory
            gateway: Payment provider gateway
        """
        self._session_factory = session_factory
        self._gateway = gateway

    async def initiate_checkout(
        self,
        order_id: str,
        provider: str,
        idempotency_key: Optional[str],
    ) -> CheckoutDTO:
        """Initiate checkout for an order.

        Args:
            order_id: Order ID string
            provider: Payment provider name (case-insensitive)
            idempotency_key: Caller-supplied idempotency key

        Returns:
            CheckoutDTO with the new attempt and client secret

        Raises:
            ValueError: Blank idempotency key or unsupported provider
            IdempotencyConflict: Key already used
            OrderNotFound: Unknown or malformed order id
            InvalidOrderState: Order not eligible for checkout
            PaymentGatewayError: Provider call failed (nothing persisted)
        """
        if not idempotency_key or not idempotency_key.strip():
            raise ValueError("Idempotency-Key header is required")
        key = idempotency_key.strip()
        payment_provider = PaymentProvider.parse(provider)

        uow = create_uow(self._session_factory)
        async with uow:
            # 1. Idempotency key must be fresh
            if await uow.payments.get_by_idempotency_key(key) is not None:
                logger.warning(f"Idempotency key already used: {key}")
                raise IdempotencyConflict(key)

            # 2-3. Lock and validate the order
            order = await self._load_order_for_update(uow, order_id)
            order.ensure_checkout_eligible()

            # 4. Remote intent
            intent = await self._create_intent(order, key)

            # 5-6. Persist attempt + order transition, commit
            try:
                attempt = await self._persist(uow, order, payment_provider, intent, key)
            except IntegrityError:
                await uow.rollback()
                await self._compensate(intent)
                raise await self._classify_conflict(uow, key)
            except (CheckoutError, ValueError, SQLAlchemyError):
                await self._compensate(intent)
                raise

        logger.info(
            f"✅ Checkout initiated for order {attempt.order_id}: "
            f"payment {attempt.payment_id} ({attempt.provider.value})"
        )
        return CheckoutDTO(
            order_id=str(attempt.order_id),
            payment_id=str(attempt.payment_id),
            provider=attempt.provider.value,
            client_secret=attempt.client_secret,
            status=order.status.value,
        )

    @staticmethod
    async def _load_order_for_update(uow: UnitOfWork, order_id: str) -> Order:
        try:
            parsed = OrderId.parse(order_id)
        except ValueError:
            raise OrderNotFound(order_id)

        order = await uow.orders.get(parsed, for_update=True)
        if order is None:
            raise OrderNotFound(order_id)
        return order

    async def _create_intent(self, order: Order, key: str) -> PaymentIntent:
        try:
            return await self._gateway.create_intent(order.total, order.order_id, key)
        except PaymentGatewayError as e:
            logger.error(f"Payment gateway failed for order {order.order_id}: {e}")
            raise

    @staticmethod
    async def _persist(
        uow: UnitOfWork,
        order: Order,
        provider: PaymentProvider,
        intent: PaymentIntent,
        key: str,
    ) -> PaymentAttempt:
        attempt = PaymentAttempt.initiate(
            order=order,
            provider=provider,
            provider_reference_id=intent.reference_id,
            client_secret=intent.client_secret,
            idempotency_key=key,
        )
        await uow.payments.save(attempt)

        previous = order.status
        order.begin_checkout()
        await uow.orders.save(order)
        await uow.commit()

        logger.info(f"Order {order.order_id}: {previous.value} -> {order.status.value}")
        return attempt

    @staticmethod
    async def _classify_conflict(uow: UnitOfWork, key: str) -> CheckoutError:
        """Map a uniqueness violation to the domain error it stands for."""
        if await uow.payments.get_by_idempotency_key(key) is not None:
            logger.warning(f"Idempotency key already used: {key}")
            return IdempotencyConflict(key)
        logger.warning("Concurrent checkout lost the race for the active payment attempt")
        return InvalidOrderState(
            checkout_rejection_reason(OrderStatus.PAYMENT_PENDING),
            status=OrderStatus.PAYMENT_PENDING,
        )

    async def _compensate(self, intent: PaymentIntent) -> None:
        try:
            await self._gateway.cancel_intent(intent.reference_id)
            logger.info(f"Canceled orphaned payment intent {intent.reference_id}")
        except PaymentGatewayError as e:
            logger.error(f"Failed to cancel orphaned payment intent {intent.reference_id}: {e}")

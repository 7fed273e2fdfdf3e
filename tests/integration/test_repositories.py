"""Tests for SQLAlchemy repositories and storage constraints."""
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import IntegrityError

from checkout.data.uow import UnitOfWork, create_uow
from checkout.domain.entities.order import Order
from checkout.domain.entities.payment_attempt import PaymentAttempt
from checkout.domain.enums import OrderStatus, OutcomeKind, PaymentProvider, PaymentStatus
from checkout.domain.exceptions import IdempotencyConflict


async def save_order(session_factory) -> Order:
    order = Order.create("USD", [("A", 1999, 2), ("B", 1299, 1)])
    uow = create_uow(session_factory)
    async with uow:
        await uow.orders.save(order)
        await uow.commit()
    return order


async def save_attempt(session_factory, attempt: PaymentAttempt) -> None:
    uow = create_uow(session_factory)
    async with uow:
        await uow.payments.save(attempt)
        await uow.commit()


class TestOrderRepository:
    """Test order persistence."""

    @pytest.mark.asyncio
    async def test_round_trip(self, session_factory):
        order = await save_order(session_factory)

        uow = create_uow(session_factory)
        async with uow:
            loaded = await uow.orders.get(order.order_id, for_update=True)

        assert loaded.order_id == order.order_id
        assert loaded.total == order.total
        assert loaded.items == order.items
        assert loaded.status is OrderStatus.CREATED
        assert loaded.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_status_update(self, session_factory):
        order = await save_order(session_factory)

        uow = create_uow(session_factory)
        async with uow:
            loaded = await uow.orders.get(order.order_id)
            loaded.begin_checkout()
            await uow.orders.save(loaded)
            await uow.commit()

        uow = create_uow(session_factory)
        async with uow:
            assert (await uow.orders.get(order.order_id)).status is OrderStatus.PAYMENT_PENDING

    @pytest.mark.asyncio
    async def test_uncommitted_changes_are_discarded(self, session_factory):
        order = Order.create("USD", [("A", 100, 1)])

        uow = create_uow(session_factory)
        async with uow:
            await uow.orders.save(order)

        uow = create_uow(session_factory)
        async with uow:
            assert await uow.orders.get(order.order_id) is None


class TestPaymentRepository:
    """Test payment attempt persistence and uniqueness."""

    @pytest.mark.asyncio
    async def test_lookup_by_key_and_reference(self, session_factory):
        order = await save_order(session_factory)
        attempt = PaymentAttempt.initiate(order, PaymentProvider.STRIPE, "pi_1", "pi_1_secret", "K1")
        await save_attempt(session_factory, attempt)

        uow = create_uow(session_factory)
        async with uow:
            by_key = await uow.payments.get_by_idempotency_key("K1")
            by_ref = await uow.payments.get_by_provider_reference("pi_1")

        assert by_key.payment_id == attempt.payment_id
        assert by_ref.payment_id == attempt.payment_id
        assert by_key.amount == order.total
        assert by_key.client_secret == "pi_1_secret"

    @pytest.mark.asyncio
    async def test_duplicate_key_is_idempotency_conflict(self, session_factory):
        order = await save_order(session_factory)
        other = await save_order(session_factory)
        await save_attempt(
            session_factory, PaymentAttempt.initiate(order, PaymentProvider.STRIPE, "pi_1", None, "K1")
        )

        with pytest.raises(IdempotencyConflict):
            await save_attempt(
                session_factory, PaymentAttempt.initiate(other, PaymentProvider.STRIPE, "pi_2", None, "K1")
            )

    @pytest.mark.asyncio
    async def test_second_active_attempt_rejected(self, session_factory):
        order = await save_order(session_factory)
        await save_attempt(
            session_factory, PaymentAttempt.initiate(order, PaymentProvider.STRIPE, "pi_1", None, "K1")
        )

        with pytest.raises(IntegrityError):
            await save_attempt(
                session_factory, PaymentAttempt.initiate(order, PaymentProvider.STRIPE, "pi_2", None, "K2")
            )

    @pytest.mark.asyncio
    async def test_terminal_attempt_frees_active_slot(self, session_factory):
        order = await save_order(session_factory)
        first = PaymentAttempt.initiate(order, PaymentProvider.STRIPE, "pi_1", None, "K1")
        await save_attempt(session_factory, first)

        first.apply_outcome(OutcomeKind.FAILED)
        await save_attempt(session_factory, first)
        await save_attempt(
            session_factory, PaymentAttempt.initiate(order, PaymentProvider.STRIPE, "pi_2", None, "K2")
        )

        uow = create_uow(session_factory)
        async with uow:
            assert (await uow.payments.get_by_idempotency_key("K1")).status is PaymentStatus.FAILED
            assert (await uow.payments.get_by_idempotency_key("K2")).status is PaymentStatus.INITIATED

    @pytest.mark.asyncio
    async def test_duplicate_reference_rejected(self, session_factory):
        order = await save_order(session_factory)
        other = await save_order(session_factory)
        await save_attempt(
            session_factory, PaymentAttempt.initiate(order, PaymentProvider.STRIPE, "pi_1", None, "K1")
        )

        with pytest.raises(IntegrityError):
            await save_attempt(
                session_factory, PaymentAttempt.initiate(other, PaymentProvider.STRIPE, "pi_1", None, "K2")
            )


class TestUnitOfWork:
    """Test UnitOfWork guards."""

    def test_repositories_require_context(self):
        uow = UnitOfWork(MagicMock())
        with pytest.raises(RuntimeError, match="not initialized"):
            uow.orders

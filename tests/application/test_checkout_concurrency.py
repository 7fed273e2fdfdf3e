"""
Concurrent checkouts against a file-backed SQLite database.

The in-memory engine shares a single connection, so these tests build
their own engine through the production lifecycle helpers.
"""
import asyncio

import pytest
import pytest_asyncio

from checkout.application.dtos.checkout_dto import CheckoutDTO
from checkout.application.services import CheckoutService, OrderApplicationService
from checkout.domain.enums import OrderStatus
from checkout.domain.exceptions import IdempotencyConflict, InvalidOrderState
from checkout.infrastructure.database import (
    create_engine,
    create_session_factory,
    create_tables,
)
from checkout.settings import DatabaseSettings
from tests.mocks.fake_payment_gateway import FakePaymentGateway


@pytest_asyncio.fixture
async def file_session_factory(tmp_path):
    settings = DatabaseSettings(
        _env_file=None,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'checkout.db'}",
    )
    engine = create_engine(settings)
    await create_tables(engine)
    yield create_session_factory(engine)
    await engine.dispose()


@pytest.fixture
def slow_gateway() -> FakePaymentGateway:
    return FakePaymentGateway(delay=0.05)


@pytest_asyncio.fixture
async def pending_order_id(file_session_factory, scenario_request) -> str:
    order = await OrderApplicationService(file_session_factory).create_order(scenario_request)
    return order.order_id


def split(results):
    successes = [r for r in results if isinstance(r, CheckoutDTO)]
    errors = [r for r in results if isinstance(r, BaseException)]
    return successes, errors


class TestConcurrentCheckout:
    """Two checkouts racing for the same order."""

    @pytest.mark.asyncio
    async def test_different_keys_call_gateway_once(
        self, file_session_factory, slow_gateway, pending_order_id
    ):
        service = CheckoutService(file_session_factory, slow_gateway)

        results = await asyncio.gather(
            service.initiate_checkout(pending_order_id, "stripe", "K1"),
            service.initiate_checkout(pending_order_id, "stripe", "K2"),
            return_exceptions=True,
        )

        successes, errors = split(results)
        assert len(successes) == 1
        assert len(errors) == 1
        assert isinstance(errors[0], InvalidOrderState)
        assert errors[0].status is OrderStatus.PAYMENT_PENDING
        assert slow_gateway.create_count == 1
        assert slow_gateway.canceled == []

    @pytest.mark.asyncio
    async def test_same_key_calls_gateway_once(
        self, file_session_factory, slow_gateway, pending_order_id
    ):
        service = CheckoutService(file_session_factory, slow_gateway)

        results = await asyncio.gather(
            service.initiate_checkout(pending_order_id, "stripe", "K1"),
            service.initiate_checkout(pending_order_id, "stripe", "K1"),
            return_exceptions=True,
        )

        successes, errors = split(results)
        assert len(successes) == 1
        assert len(errors) == 1
        assert isinstance(errors[0], IdempotencyConflict)
        assert slow_gateway.create_count == 1
        assert slow_gateway.canceled == []

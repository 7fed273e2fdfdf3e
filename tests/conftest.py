"""Shared pytest fixtures: in-memory database, fakes and services."""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from checkout.application.dtos.order_dto import CreateOrderRequest, OrderItemRequest
from checkout.application.services import (
    CheckoutService,
    OrderApplicationService,
    ReconciliationService,
)
from checkout.data.models import Base
from checkout.infrastructure.database import create_session_factory, create_tables
from tests.mocks.fake_payment_gateway import FakePaymentGateway
from tests.mocks.fake_signature_verifier import FakeSignatureVerifier

# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    await create_tables(engine)

    yield engine

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(test_engine):
    """Create test session factory."""
    yield create_session_factory(test_engine)


@pytest.fixture
def gateway() -> FakePaymentGateway:
    return FakePaymentGateway()


@pytest.fixture
def verifier() -> FakeSignatureVerifier:
    return FakeSignatureVerifier()


@pytest.fixture
def order_service(session_factory) -> OrderApplicationService:
    return OrderApplicationService(session_factory)


@pytest.fixture
def checkout_service(session_factory, gateway) -> CheckoutService:
    return CheckoutService(session_factory, gateway)


@pytest.fixture
def reconciliation_service(session_factory, verifier) -> ReconciliationService:
    return ReconciliationService(session_factory, verifier)


@pytest.fixture
def scenario_request() -> CreateOrderRequest:
    """Two items, USD: 1999*2 + 1299*1 = 5297."""
    return CreateOrderRequest(
        currency="USD",
        items=[
            OrderItemRequest(name="A", unit_price_minor=1999, quantity=2),
            OrderItemRequest(name="B", unit_price_minor=1299, quantity=1),
        ],
    )


@pytest_asyncio.fixture
async def created_order(order_service, scenario_request):
    """A persisted order in status CREATED."""
    return await order_service.create_order(scenario_request)

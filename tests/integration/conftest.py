"""Pytest fixtures for API integration tests."""

import pytest
from fastapi.testclient import TestClient

from apps.api.deps import get_payment_gateway
from apps.api.main import app
from checkout.settings import get_app_settings
from tests.mocks.stripe_events import WEBHOOK_SECRET


@pytest.fixture
def test_client(tmp_path, monkeypatch, gateway) -> TestClient:
    """
    FastAPI test client backed by a throwaway SQLite file.

    Startup creates the schema; the Stripe gateway is replaced by the
    recording fake, webhook signatures are checked for real.
    """
    monkeypatch.setenv("DB_DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'checkout.db'}")
    monkeypatch.setenv("STRIPE_WEBHOOK_SECRET", WEBHOOK_SECRET)
    get_app_settings.cache_clear()

    app.dependency_overrides[get_payment_gateway] = lambda: gateway

    with TestClient(app) as client:
        yield client

    # Cleanup
    app.dependency_overrides.clear()
    get_app_settings.cache_clear()


@pytest.fixture
def order_payload() -> dict:
    return {
        "currency": "USD",
        "items": [
            {"name": "A", "unit_price_minor": 1999, "quantity": 2},
            {"name": "B", "unit_price_minor": 1299, "quantity": 1},
        ],
    }


@pytest.fixture
def order_id(test_client, order_payload) -> str:
    response = test_client.post("/api/v1/orders", json=order_payload)
    assert response.status_code == 201, response.text
    return response.json()["order_id"]

"""Integration tests for the checkout endpoint."""

from uuid import uuid4

from fastapi.testclient import TestClient


def checkout(client: TestClient, order_id: str, key=None, provider: str = "STRIPE"):
    headers = {"Idempotency-Key": key} if key is not None else {}
    return client.post(
        "/api/v1/checkout",
        json={"order_id": order_id, "provider": provider},
        headers=headers,
    )


class TestCheckoutApi:
    """Test POST /api/v1/checkout."""

    def test_checkout_success(self, test_client: TestClient, gateway, order_id):
        response = checkout(test_client, order_id, "K1")

        assert response.status_code == 200, response.text
        data = response.json()
        assert data["order_id"] == order_id
        assert data["provider"] == "STRIPE"
        assert data["status"] == "PAYMENT_PENDING"
        assert data["client_secret"] == gateway.intents[0].client_secret
        assert test_client.get(f"/api/v1/orders/{order_id}").json()["status"] == "PAYMENT_PENDING"

    def test_repeated_key_is_409(self, test_client: TestClient, gateway, order_id):
        assert checkout(test_client, order_id, "K1").status_code == 200

        response = checkout(test_client, order_id, "K1")

        assert response.status_code == 409
        assert "K1" in response.json()["message"]
        assert gateway.create_count == 1

    def test_missing_key_is_400(self, test_client: TestClient, gateway, order_id):
        response = checkout(test_client, order_id)

        assert response.status_code == 400
        assert "Idempotency-Key" in response.json()["message"]
        assert gateway.create_count == 0

    def test_blank_key_is_400(self, test_client: TestClient, order_id):
        assert checkout(test_client, order_id, "  ").status_code == 400

    def test_second_key_on_pending_order_is_400(self, test_client: TestClient, order_id):
        checkout(test_client, order_id, "K1")

        response = checkout(test_client, order_id, "K2")

        assert response.status_code == 400
        assert response.json()["message"] == "Order already has a payment in progress"

    def test_unknown_order_is_404(self, test_client: TestClient):
        assert checkout(test_client, str(uuid4()), "K1").status_code == 404

    def test_unsupported_provider_is_400(self, test_client: TestClient, order_id):
        response = checkout(test_client, order_id, "K1", provider="paypal")
        assert response.status_code == 400
        assert "Unsupported payment provider" in response.json()["message"]

    def test_gateway_failure_is_502(self, test_client: TestClient, gateway, order_id):
        gateway.fail_create = True

        response = checkout(test_client, order_id, "K1")

        assert response.status_code == 502
        assert test_client.get(f"/api/v1/orders/{order_id}").json()["status"] == "CREATED"

"""Application DTOs for checkout and webhook operations."""

from typing import Optional

from pydantic import BaseModel, Field


class CheckoutRequest(BaseModel):
    """Request DTO for initiating checkout."""

    order_id: str = Field(..., description="Order ID (UUID)")
    provider: str = Field(default="STRIPE", description="Payment provider")

    model_config = {"frozen": True}


class CheckoutDTO(BaseModel):
    """Response DTO for an initiated checkout."""

    order_id: str = Field(..., description="Order ID")
    payment_id: str = Field(..., description="Payment attempt ID")
    provider: str = Field(..., description="Payment provider")
    client_secret: Optional[str] = Field(None, description="Opaque provider client secret")
    status: str = Field(..., description="Order status after checkout")

    model_config = {"frozen": True}


class WebhookAckDTO(BaseModel):
    """Acknowledgement returned to the provider."""

    received: bool = Field(default=True)
    result: str = Field(..., description="Reconciliation result")

    model_config = {"frozen": True}

"""Application DTOs for Order operations."""

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field


class OrderItemRequest(BaseModel):
    """Line item as submitted by the buyer."""

    name: str = Field(..., min_length=1, description="Item name")
    unit_price_minor: int = Field(..., gt=0, description="Unit price in minor units")
    quantity: int = Field(..., gt=0, description="Quantity ordered")

    model_config = {"frozen": True}


class CreateOrderRequest(BaseModel):
    """Request DTO for creating an order."""

    currency: str = Field(..., pattern=r"^[A-Z]{3}$", description="ISO 4217 currency code")
    items: List[OrderItemRequest] = Field(..., min_length=1, description="Order items")

    model_config = {"frozen": True}


class OrderItemDTO(BaseModel):
    """DTO for order item."""

    name: str = Field(..., description="Item name")
    unit_price_minor: int = Field(..., description="Unit price in minor units")
    quantity: int = Field(..., description="Quantity ordered")
    subtotal_minor: int = Field(..., description="unit_price_minor * quantity")

    model_config = {"frozen": True}


class OrderDTO(BaseModel):
    """Response DTO for order details."""

    order_id: str = Field(..., description="Order ID (UUID)")
    currency: str = Field(..., description="Currency code")
    items: List[OrderItemDTO] = Field(default_factory=list, description="Order items")
    total_amount_minor: int = Field(..., ge=0, description="Order total in minor units")
    status: str = Field(..., description="Order status")
    created_at: datetime = Field(..., description="Creation timestamp (UTC)")

    model_config = {"frozen": True}

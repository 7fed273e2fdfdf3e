"""Application DTOs."""

from .checkout_dto import CheckoutDTO, CheckoutRequest, WebhookAckDTO
from .order_dto import CreateOrderRequest, OrderDTO, OrderItemDTO, OrderItemRequest

__all__ = [
    "CheckoutDTO",
    "CheckoutRequest",
    "CreateOrderRequest",
    "OrderDTO",
    "OrderItemDTO",
    "OrderItemRequest",
    "WebhookAckDTO",
]

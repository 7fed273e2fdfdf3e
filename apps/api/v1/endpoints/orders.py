"""Order endpoints for REST API."""

import logging

from fastapi import APIRouter, Depends

from apps.api.deps import get_order_service
from checkout.application.dtos.order_dto import CreateOrderRequest, OrderDTO
from checkout.application.services.order_service import OrderApplicationService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("", response_model=OrderDTO, status_code=201)
async def create_order(
    request: CreateOrderRequest,
    service: OrderApplicationService = Depends(get_order_service),
) -> OrderDTO:
    """Create a new order.

    Args:
        request: CreateOrderRequest DTO
        service: OrderApplicationService instance

    Returns:
        OrderDTO with created order details
    """
    return await service.create_order(request)


@router.get("/{order_id}", response_model=OrderDTO)
async def get_order(
    order_id: str,
    service: OrderApplicationService = Depends(get_order_service),
) -> OrderDTO:
    """Get order by ID (malformed ids are reported as not found)."""
    return await service.get_order(order_id)

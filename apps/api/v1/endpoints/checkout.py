"""Checkout endpoint."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header

from apps.api.deps import get_checkout_service
from checkout.application.dtos.checkout_dto import CheckoutDTO, CheckoutRequest
from checkout.application.services.checkout_service import CheckoutService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/checkout", tags=["checkout"])


@router.post("", response_model=CheckoutDTO)
async def initiate_checkout(
    request: CheckoutRequest,
    idempotency_key: Optional[str] = Header(None, alias="Idempotency-Key"),
    service: CheckoutService = Depends(get_checkout_service),
) -> CheckoutDTO:
    """Initiate payment for an order.

    Args:
        request: CheckoutRequest DTO
        idempotency_key: Idempotency-Key header (required)
        service: CheckoutService instance

    Returns:
        CheckoutDTO with the client secret for the provider SDK
    """
    return await service.initiate_checkout(request.order_id, request.provider, idempotency_key)

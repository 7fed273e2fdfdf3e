"""Payment provider webhook endpoints."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header, Request

from apps.api.deps import get_reconciliation_service
from checkout.application.dtos.checkout_dto import WebhookAckDTO
from checkout.application.services.reconciliation_service import ReconciliationService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/webhooks", tags=["webhooks"])


@router.post("/stripe", response_model=WebhookAckDTO)
async def stripe_webhook(
    request: Request,
    stripe_signature: Optional[str] = Header(None, alias="Stripe-Signature"),
    service: ReconciliationService = Depends(get_reconciliation_service),
) -> WebhookAckDTO:
    """Receive a Stripe event. The raw body is needed for signature checks."""
    payload = await request.body()
    result = await service.apply_outcome(payload, stripe_signature)
    return WebhookAckDTO(result=result.value)

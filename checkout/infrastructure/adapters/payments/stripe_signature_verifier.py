"""
Stripe webhook signature verifier.

Checks the `Stripe-Signature` header (v1 HMAC-SHA256 scheme) with the
Stripe SDK, then parses the event and maps Stripe event types onto
OutcomeKind. Event types outside the map parse with kind=None.
"""
import json
import logging
from typing import Dict, Optional, Union

import stripe

from checkout.domain.enums import OutcomeKind
from checkout.domain.exceptions import InvalidSignature, MalformedEvent
from checkout.domain.ports.signature_verifier import ProviderEvent, SignatureVerifier
from checkout.settings import StripeSettings

logger = logging.getLogger(__name__)

STRIPE_EVENT_KINDS: Dict[str, OutcomeKind] = {
    "payment_intent.succeeded": OutcomeKind.SUCCEEDED,
    "payment_intent.payment_failed": OutcomeKind.FAILED,
    "payment_intent.canceled": OutcomeKind.CANCELED,
}


class StripeSignatureVerifier(SignatureVerifier):
    """SignatureVerifier for Stripe webhooks."""

    def __init__(self, settings: StripeSettings) -> None:
        self._secret = settings.webhook_secret
        self._tolerance = settings.webhook_tolerance_seconds

    def verify(
        self,
        raw_payload: Union[bytes, str],
        signature_header: Optional[str],
    ) -> ProviderEvent:
        if not self._secret:
            raise InvalidSignature("Webhook secret is not configured")
        if not signature_header:
            raise InvalidSignature("Missing Stripe-Signature header")

        if isinstance(raw_payload, bytes):
            try:
                payload = raw_payload.decode("utf-8")
            except UnicodeDecodeError:
                raise InvalidSignature("Webhook payload is not valid UTF-8")
        else:
            payload = raw_payload

        try:
            stripe.WebhookSignature.verify_header(
                payload, signature_header, self._secret, tolerance=self._tolerance
            )
        except stripe.SignatureVerificationError as e:
            logger.warning(f"Stripe signature verification failed: {e}")
            raise InvalidSignature("Invalid Stripe signature") from e

        try:
            event = json.loads(payload)
        except ValueError as e:
            raise MalformedEvent("Signed payload is not valid JSON") from e

        return self._to_provider_event(event)

    @staticmethod
    def _to_provider_event(event: object) -> ProviderEvent:
        if not isinstance(event, dict):
            raise MalformedEvent("Stripe event must be a JSON object")
        data = event.get("data") or {}
        if not isinstance(data, dict):
            raise MalformedEvent("Stripe event 'data' must be an object")
        data_object = data.get("object") or {}
        if not isinstance(data_object, dict):
            raise MalformedEvent("Stripe event 'data.object' must be an object")
        metadata = data_object.get("metadata") or {}
        if not isinstance(metadata, dict):
            raise MalformedEvent("Stripe event metadata must be an object")

        event_type = str(event.get("type") or "")
        return ProviderEvent(
            event_id=str(event.get("id") or ""),
            event_type=event_type,
            kind=STRIPE_EVENT_KINDS.get(event_type),
            reference_id=data_object.get("id"),
            metadata={str(k): str(v) for k, v in metadata.items()},
        )

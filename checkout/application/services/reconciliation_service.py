"""
Outcome reconciliation.

Applies provider-reported payment outcomes to the order and its payment
attempt. Redeliveries are no-ops; nothing is read before the signature
is verified.
"""

import logging
from enum import Enum
from typing import Optional, Tuple, Union

from sqlalchemy.ext.asyncio import async_sessionmaker

from checkout.data.uow import create_uow
from checkout.domain.exceptions import MalformedEvent, OrderNotFound, PaymentNotFound
from checkout.domain.ports.signature_verifier import ProviderEvent, SignatureVerifier
from checkout.domain.state_machine import OrderEvent, next_order_status
from checkout.domain.value_objects import OrderId

logger = logging.getLogger(__name__)

ORDER_ID_METADATA_KEY = "orderId"


class ReconciliationResult(str, Enum):
    """What an outcome event did."""

    APPLIED = "APPLIED"
    DUPLICATE = "DUPLICATE"
    CONTRADICTORY = "CONTRADICTORY"
    IGNORED = "IGNORED"


class ReconciliationService:
    """Outcome reconciler."""

    def __init__(self, session_factory: async_sessionmaker, verifier: SignatureVerifier) -> None:
        self._session_factory = session_factory
        self._verifier = verifier

    async def apply_outcome(
        self,
        raw_event: Union[bytes, str],
        signature: Optional[str],
    ) -> ReconciliationResult:
        """Verify and apply a provider outcome event.

        Args:
            raw_event: Raw request body as received
            signature: Provider signature header

        Returns:
            ReconciliationResult

        Raises:
            InvalidSignature: Signature check failed
            MalformedEvent: Missing or inconsistent correlation data
            OrderNotFound: Order referenced by the event does not exist
            PaymentNotFound: No attempt matches the provider reference
            InvalidOrderState: Order has no transition for this outcome
        """
        event = self._verifier.verify(raw_event, signature)

        if event.kind is None:
            logger.info(f"Ignoring provider event {event.event_id} of type {event.event_type}")
            return ReconciliationResult.IGNORED

        reference_id, order_id = self._correlate(event)
        kind = event.kind
        target = kind.order_status

        uow = create_uow(self._session_factory)
        async with uow:
            order = await uow.orders.get(order_id, for_update=True)
            if order is None:
                raise OrderNotFound(order_id)

            if order.status is target:
                logger.info(
                    f"Duplicate outcome {kind.value} for order {order_id} "
                    f"(event {event.event_id}), already {order.status.value}"
                )
                return ReconciliationResult.DUPLICATE

            if order.is_terminal:
                logger.warning(
                    f"Contradictory outcome {kind.value} for order {order_id} "
                    f"(event {event.event_id}): order is {order.status.value}, "
                    f"outcome implies {target.value}"
                )
                return ReconciliationResult.CONTRADICTORY

            # CREATED has no transition for any outcome
            next_order_status(order.status, OrderEvent.for_outcome(kind))

            attempt = await uow.payments.get_by_provider_reference(reference_id)
            if attempt is None:
                raise PaymentNotFound(reference_id)
            if attempt.order_id != order.order_id:
                raise MalformedEvent(
                    f"Payment {reference_id} belongs to order {attempt.order_id}, "
                    f"not {order.order_id}"
                )

            previous = order.status
            order.apply_outcome(kind)
            attempt.apply_outcome(kind)

            await uow.payments.save(attempt)
            await uow.orders.save(order)
            await uow.commit()

        logger.info(
            f"✅ Order {order_id}: {previous.value} -> {order.status.value}, "
            f"payment {attempt.payment_id} -> {attempt.status.value}"
        )
        return ReconciliationResult.APPLIED

    @staticmethod
    def _correlate(event: ProviderEvent) -> Tuple[str, OrderId]:
        if not event.reference_id:
            raise MalformedEvent(f"Event {event.event_id} has no payment reference")

        raw_order_id = event.metadata.get(ORDER_ID_METADATA_KEY)
        if not raw_order_id:
            raise MalformedEvent(f"Event {event.event_id} has no {ORDER_ID_METADATA_KEY} metadata")

        try:
            return event.reference_id, OrderId.parse(raw_order_id)
        except ValueError:
            raise MalformedEvent(f"Event {event.event_id} has malformed order id: {raw_order_id}")

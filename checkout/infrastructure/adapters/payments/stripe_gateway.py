"""
Stripe payment gateway adapter.

Implements the PaymentGateway port over the Stripe PaymentIntents API.
The Stripe SDK is synchronous, so calls run in the default executor and
are bounded by a timeout. SDK-level network retries are disabled: a
failed call surfaces as PaymentGatewayError and is never retried here.
"""
import asyncio
import logging
from functools import partial
from typing import Any, Callable

import stripe

from checkout.domain.exceptions import PaymentGatewayError
from checkout.domain.ports.payment_gateway import PaymentGateway, PaymentIntent
from checkout.domain.value_objects import Money, OrderId
from checkout.settings import StripeSettings

logger = logging.getLogger(__name__)


class StripePaymentGateway(PaymentGateway):
    """PaymentGateway backed by Stripe PaymentIntents."""

    def __init__(self, settings: StripeSettings) -> None:
        self._api_key = settings.secret_key
        self._timeout = settings.api_timeout_seconds
        stripe.max_network_retries = 0

    async def _call(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        if not self._api_key:
            raise PaymentGatewayError("Stripe secret key is not configured")

        loop = asyncio.get_running_loop()
        try:
            return await asyncio.wait_for(
                loop.run_in_executor(None, partial(func, *args, api_key=self._api_key, **kwargs)),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError:
            raise PaymentGatewayError(f"Stripe call timed out after {self._timeout}s")
        except stripe.StripeError as e:
            raise PaymentGatewayError(f"Stripe error: {e.user_message or e}") from e

    async def create_intent(
        self,
        amount: Money,
        order_id: OrderId,
        idempotency_key: str,
    ) -> PaymentIntent:
        logger.info(
            f"Creating Stripe PaymentIntent for order {order_id} "
            f"({amount.amount_minor} {amount.currency})"
        )
        intent = await self._call(
            stripe.PaymentIntent.create,
            amount=amount.amount_minor,
            currency=amount.currency.lower(),
            metadata={"orderId": str(order_id)},
            automatic_payment_methods={"enabled": True},
            idempotency_key=idempotency_key,
        )
        logger.info(f"✅ Stripe PaymentIntent created: {intent.id}")
        return PaymentIntent(reference_id=intent.id, client_secret=intent.client_secret)

    async def cancel_intent(self, reference_id: str) -> None:
        logger.info(f"Canceling Stripe PaymentIntent {reference_id}")
        await self._call(stripe.PaymentIntent.cancel, reference_id)

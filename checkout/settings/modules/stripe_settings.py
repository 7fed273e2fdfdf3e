from __future__ import annotations

from pydantic import Field

from checkout.settings.base import CheckoutBaseSettings


class StripeSettings(CheckoutBaseSettings):
    """
    Stripe integration settings.
    Loaded from .env file with exact variable name matching.
    """

    secret_key: str = Field("", alias="STRIPE_SECRET_KEY")
    webhook_secret: str = Field("", alias="STRIPE_WEBHOOK_SECRET")

    api_timeout_seconds: float = Field(10.0, alias="STRIPE_API_TIMEOUT_SECONDS")
    webhook_tolerance_seconds: int = Field(300, alias="STRIPE_WEBHOOK_TOLERANCE_SECONDS")

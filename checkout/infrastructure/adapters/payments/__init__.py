"""Payment provider adapters."""

from .stripe_gateway import StripePaymentGateway
from .stripe_signature_verifier import STRIPE_EVENT_KINDS, StripeSignatureVerifier

__all__ = ["STRIPE_EVENT_KINDS", "StripePaymentGateway", "StripeSignatureVerifier"]

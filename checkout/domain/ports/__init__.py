"""Ports to external collaborators."""

from .payment_gateway import PaymentGateway, PaymentIntent
from .signature_verifier import ProviderEvent, SignatureVerifier

__all__ = [
    "PaymentGateway",
    "PaymentIntent",
    "ProviderEvent",
    "SignatureVerifier",
]

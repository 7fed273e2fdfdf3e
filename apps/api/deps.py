"""FastAPI dependencies for dependency injection."""

from dotenv import load_dotenv
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from checkout.application.services import (
    CheckoutService,
    OrderApplicationService,
    ReconciliationService,
)
from checkout.domain.ports import PaymentGateway, SignatureVerifier
from checkout.infrastructure import database
from checkout.infrastructure.adapters.payments import (
    StripePaymentGateway,
    StripeSignatureVerifier,
)
from checkout.settings import AppSettings, get_app_settings

load_dotenv()


def get_settings() -> AppSettings:
    """Get cached application settings."""
    return get_app_settings()


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get SQLAlchemy session factory.

    Returns:
        async_sessionmaker bound to the application engine
    """
    return database.get_session_factory()


def get_payment_gateway(settings: AppSettings = Depends(get_settings)) -> PaymentGateway:
    return StripePaymentGateway(settings.stripe)


def get_signature_verifier(settings: AppSettings = Depends(get_settings)) -> SignatureVerifier:
    return StripeSignatureVerifier(settings.stripe)


def get_order_service(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> OrderApplicationService:
    """Get OrderApplicationService instance."""
    return OrderApplicationService(session_factory)


def get_checkout_service(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
    gateway: PaymentGateway = Depends(get_payment_gateway),
) -> CheckoutService:
    """Get CheckoutService instance."""
    return CheckoutService(session_factory, gateway)


def get_reconciliation_service(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
    verifier: SignatureVerifier = Depends(get_signature_verifier),
) -> ReconciliationService:
    """Get ReconciliationService instance."""
    return ReconciliationService(session_factory, verifier)

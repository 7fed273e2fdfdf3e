"""Exception → HTTP response mapping."""

import logging
from datetime import datetime, timezone
from typing import Dict, Type

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from checkout.domain.exceptions import (
    CheckoutError,
    IdempotencyConflict,
    InvalidOrderState,
    InvalidSignature,
    MalformedEvent,
    OrderNotFound,
    PaymentGatewayError,
    PaymentNotFound,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR: Dict[Type[CheckoutError], int] = {
    OrderNotFound: status.HTTP_404_NOT_FOUND,
    PaymentNotFound: status.HTTP_404_NOT_FOUND,
    InvalidOrderState: status.HTTP_400_BAD_REQUEST,
    IdempotencyConflict: status.HTTP_409_CONFLICT,
    PaymentGatewayError: status.HTTP_502_BAD_GATEWAY,
    InvalidSignature: status.HTTP_401_UNAUTHORIZED,
    MalformedEvent: status.HTTP_400_BAD_REQUEST,
}


def error_response(request: Request, status_code: int, message: str) -> JSONResponse:
    """Build the uniform error body."""
    return JSONResponse(
        status_code=status_code,
        content={
            "message": message,
            "status": status_code,
            "path": request.url.path,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )


def status_for(exc: CheckoutError) -> int:
    for klass in type(exc).__mro__:
        if klass in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[klass]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def checkout_error_handler(request: Request, exc: CheckoutError) -> JSONResponse:
    """Handle domain errors."""
    status_code = status_for(exc)
    logger.info(f"{type(exc).__name__} on {request.url.path}: {exc}")
    return error_response(request, status_code, str(exc))


async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
    """Handle ValueError exceptions (bad input that passed schema validation)."""
    return error_response(request, status.HTTP_400_BAD_REQUEST, str(exc))


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all uncaught exceptions."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CheckoutError, checkout_error_handler)
    app.add_exception_handler(ValueError, value_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)

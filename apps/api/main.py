"""
Checkout API - Main FastAPI Application.

Order creation, checkout initiation and provider webhook intake.
"""
import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from apps.api.errors import register_exception_handlers
from apps.api.v1.endpoints import checkout as checkout_endpoints
from apps.api.v1.endpoints import orders, webhooks
from checkout.infrastructure.database import close_database, init_database
from checkout.infrastructure.logging import configure_logging
from checkout.settings import get_app_settings

logger = logging.getLogger(__name__)


# =============================================================================
# CREATE FASTAPI APP
# =============================================================================

app = FastAPI(
    title="Checkout API",
    description="Order checkout with idempotent payment initiation and webhook reconciliation",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_app_settings().api.cors_origin_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


# =============================================================================
# REQUEST LOGGING MIDDLEWARE
# =============================================================================

@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests with timing."""
    start_time = time.time()

    logger.info(f"→ {request.method} {request.url.path}")

    response = await call_next(request)

    duration = time.time() - start_time
    logger.info(
        f"← {request.method} {request.url.path} "
        f"[{response.status_code}] ({duration:.3f}s)"
    )

    return response


register_exception_handlers(app)


# =============================================================================
# STARTUP/SHUTDOWN EVENTS
# =============================================================================

@app.on_event("startup")
async def startup_event():
    """Configure logging and open the database."""
    settings = get_app_settings()
    configure_logging(settings.api.log_level)
    await init_database(settings.database)
    logger.info("🚀 Checkout API starting up...")


@app.on_event("shutdown")
async def shutdown_event():
    """Dispose the database engine."""
    await close_database()
    logger.info("👋 Checkout API shutting down...")


# =============================================================================
# INCLUDE ROUTERS
# =============================================================================

app.include_router(orders.router, prefix="/api/v1")
app.include_router(checkout_endpoints.router, prefix="/api/v1")
app.include_router(webhooks.router, prefix="/api/v1")


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)

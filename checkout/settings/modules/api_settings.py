from __future__ import annotations

from typing import List

from pydantic import Field

from checkout.settings.base import CheckoutBaseSettings


class ApiSettings(CheckoutBaseSettings):
    """HTTP surface settings."""

    log_level: str = Field("INFO", alias="CHECKOUT_LOG_LEVEL")
    cors_origins: str = Field("*", alias="CHECKOUT_CORS_ORIGINS")

    @property
    def cors_origin_list(self) -> List[str]:
        """Comma-separated origins as a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

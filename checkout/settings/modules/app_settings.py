from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from checkout.settings.modules.api_settings import ApiSettings
from checkout.settings.modules.database_settings import DatabaseSettings
from checkout.settings.modules.stripe_settings import StripeSettings


class AppSettings(BaseModel):
    """Application settings aggregator."""

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="ignore")

    database: DatabaseSettings
    stripe: StripeSettings
    api: ApiSettings


@lru_cache()
def get_app_settings() -> AppSettings:
    return AppSettings(
        database=DatabaseSettings(),
        stripe=StripeSettings(),
        api=ApiSettings(),
    )

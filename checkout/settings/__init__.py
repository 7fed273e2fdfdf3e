# Settings package
from checkout.settings.modules import (
    ApiSettings,
    AppSettings,
    DatabaseSettings,
    StripeSettings,
    get_app_settings,
)

__all__ = ["get_app_settings", "AppSettings", "ApiSettings", "DatabaseSettings", "StripeSettings"]

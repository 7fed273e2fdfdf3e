"""Payment Provider Enum."""
from enum import Enum


class PaymentProvider(str, Enum):
    """Supported payment providers."""

    STRIPE = "STRIPE"

    @classmethod
    def parse(cls, raw: str) -> "PaymentProvider":
        """
        Parse a provider name case-insensitively.

        Raises:
            ValueError: If the provider is not supported
        """
        try:
            return cls(raw.strip().upper())
        except ValueError:
            raise ValueError(f"Unsupported payment provider: {raw}")

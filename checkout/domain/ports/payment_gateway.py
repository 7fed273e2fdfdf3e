"""Payment provider gateway port."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from ..value_objects import Money, OrderId


@dataclass(frozen=True)
class PaymentIntent:
    """Remote payment intent created by the provider."""
    reference_id: str
    client_secret: Optional[str] = field(default=None, repr=False)


class PaymentGateway(ABC):
    """
    Interface over the external payment provider.

    Every call is a single bounded request. Implementations raise
    PaymentGatewayError on any network or provider-side failure and
    never retry.
    """

    @abstractmethod
    async def create_intent(
        self,
        amount: Money,
        order_id: OrderId,
        idempotency_key: str,
    ) -> PaymentIntent:
        """
        Create a remote payment intent.

        Args:
            amount: Amount in minor units with currency
            order_id: Owning order (stored in provider metadata)
            idempotency_key: Caller key, forwarded to the provider

        Returns:
            PaymentIntent with reference id and client secret

        Raises:
            PaymentGatewayError: On any failure
        """
        pass

    @abstractmethod
    async def cancel_intent(self, reference_id: str) -> None:
        """
        Cancel a remote payment intent.

        Raises:
            PaymentGatewayError: On any failure
        """
        pass

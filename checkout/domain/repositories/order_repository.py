"""Repository interfaces for Order aggregate."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.order import Order
from ..value_objects import OrderId


class OrderRepository(ABC):
    """Abstract repository for Order aggregate persistence."""

    @abstractmethod
    async def save(self, order: Order) -> Order:
        """Persist order aggregate (insert or update).

        Args:
            order: Order aggregate to persist

        Returns:
            The persisted order
        """
        pass

    @abstractmethod
    async def get(self, order_id: OrderId, for_update: bool = False) -> Optional[Order]:
        """Retrieve order by unique identifier.

        Args:
            order_id: OrderId identifier
            for_update: Lock the row for the rest of the transaction

        Returns:
            Order if found, None otherwise
        """
        pass

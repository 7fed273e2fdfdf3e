"""SQLAlchemy implementation of OrderRepository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from checkout.domain.entities.order import Order
from checkout.domain.repositories.order_repository import OrderRepository
from checkout.domain.value_objects import OrderId

from ..mappers import OrderMapper
from ..models.order_model import OrderModel


class SqlAlchemyOrderRepository(OrderRepository):
    """Concrete implementation of OrderRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with SQLAlchemy session.

        Args:
            session: SQLAlchemy async session
        """
        self._session = session

    async def save(self, order: Order) -> Order:
        """Persist order aggregate (upsert).

        Args:
            order: Order domain aggregate

        Returns:
            The same aggregate
        """
        existing = await self._session.get(OrderModel, str(order.order_id))

        if existing:
            OrderMapper.update_persistence(order, existing)
            self._session.add(existing)
        else:
            self._session.add(OrderMapper.to_persistence(order))

        await self._session.flush()  # Propagate to DB without committing
        return order

    async def get(self, order_id: OrderId, for_update: bool = False) -> Optional[Order]:
        """Retrieve order by unique identifier.

        Args:
            order_id: OrderId identifier
            for_update: Take a row lock (SELECT ... FOR UPDATE where supported)

        Returns:
            Order if found, None otherwise
        """
        stmt = select(OrderModel).where(OrderModel.order_id == str(order_id))
        if for_update:
            stmt = stmt.with_for_update()

        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            return None

        return OrderMapper.to_domain(model)

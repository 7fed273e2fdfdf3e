"""Application service for Order operations."""

import logging

from sqlalchemy.ext.asyncio import async_sessionmaker

from checkout.application.dtos.order_dto import CreateOrderRequest, OrderDTO, OrderItemDTO
from checkout.data.uow import create_uow
from checkout.domain.entities.order import Order
from checkout.domain.exceptions import OrderNotFound
from checkout.domain.value_objects import OrderId

logger = logging.getLogger(__name__)


class OrderApplicationService:
    """
    Application service for orchestrating order operations.

    Responsibilities:
    - Coordinate domain + persistence
    - Handle transactions via UoW
    - Transform between DTOs and domain entities
    """

    def __init__(self, session_factory: async_sessionmaker) -> None:
        """Initialize order application service.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory

    async def create_order(self, request: CreateOrderRequest) -> OrderDTO:
        """Create a new order in status CREATED.

        Args:
            request: CreateOrderRequest DTO

        Returns:
            OrderDTO with computed subtotals and total
        """
        order = Order.create(
            currency=request.currency,
            items=[(item.name, item.unit_price_minor, item.quantity) for item in request.items],
        )

        uow = create_uow(self._session_factory)
        async with uow:
            await uow.orders.save(order)
            await uow.commit()

        logger.info(f"Order {order.order_id} created: {order.total}")
        return self.order_to_dto(order)

    async def get_order(self, order_id: str) -> OrderDTO:
        """Get order by ID.

        Args:
            order_id: Order ID string

        Returns:
            OrderDTO

        Raises:
            OrderNotFound: If the id is malformed or unknown
        """
        try:
            parsed = OrderId.parse(order_id)
        except ValueError:
            raise OrderNotFound(order_id)

        uow = create_uow(self._session_factory)
        async with uow:
            order = await uow.orders.get(parsed)

        if not order:
            raise OrderNotFound(order_id)
        return self.order_to_dto(order)

    @staticmethod
    def order_to_dto(order: Order) -> OrderDTO:
        """Transform Order domain entity to OrderDTO."""
        return OrderDTO(
            order_id=str(order.order_id),
            currency=order.currency,
            items=[
                OrderItemDTO(
                    name=item.name,
                    unit_price_minor=item.unit_price.amount_minor,
                    quantity=item.quantity,
                    subtotal_minor=item.subtotal.amount_minor,
                )
                for item in order.items
            ],
            total_amount_minor=order.total.amount_minor,
            status=order.status.value,
            created_at=order.created_at,
        )

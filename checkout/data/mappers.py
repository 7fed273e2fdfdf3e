"""Static mappers for domain entities ↔ database models."""

from datetime import datetime, timezone
from typing import List
from uuid import UUID

from checkout.domain.entities.order import LineItem, Order
from checkout.domain.entities.payment_attempt import PaymentAttempt
from checkout.domain.enums import OrderStatus, PaymentProvider, PaymentStatus
from checkout.domain.value_objects import Money, OrderId, PaymentId

from .models.order_model import OrderItemModel, OrderModel
from .models.payment_model import PaymentAttemptModel


def _as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo on the way back
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class LineItemMapper:
    """Static mapper for LineItem ↔ OrderItemModel transformation."""

    @staticmethod
    def to_domain(model: OrderItemModel, currency: str) -> LineItem:
        """Convert ORM model to domain value.

        Args:
            model: OrderItemModel instance
            currency: Owning order currency

        Returns:
            LineItem domain value
        """
        return LineItem(
            name=model.name,
            unit_price=Money(amount_minor=model.unit_price_minor, currency=currency),
            quantity=model.quantity,
            subtotal=Money(amount_minor=model.subtotal_minor, currency=currency),
        )

    @staticmethod
    def to_persistence(entity: LineItem, order_id: str, position: int) -> OrderItemModel:
        return OrderItemModel(
            order_id=order_id,
            position=position,
            name=entity.name,
            unit_price_minor=entity.unit_price.amount_minor,
            quantity=entity.quantity,
            subtotal_minor=entity.subtotal.amount_minor,
        )


class OrderMapper:
    """Static mapper for Order ↔ OrderModel transformation."""

    @staticmethod
    def to_domain(model: OrderModel) -> Order:
        """Convert ORM model to domain aggregate.

        Args:
            model: OrderModel instance (items eagerly loaded)

        Returns:
            Order domain aggregate
        """
        items: List[LineItem] = [
            LineItemMapper.to_domain(item, model.currency) for item in model.items
        ]
        return Order(
            order_id=OrderId(UUID(model.order_id)),
            currency=model.currency,
            items=items,
            total=Money(amount_minor=model.total_amount_minor, currency=model.currency),
            status=OrderStatus(model.status),
            created_at=_as_utc(model.created_at),
        )

    @staticmethod
    def to_persistence(entity: Order) -> OrderModel:
        """Convert domain aggregate to ORM model.

        Args:
            entity: Order domain aggregate

        Returns:
            OrderModel instance with items
        """
        order_id = str(entity.order_id)
        model = OrderModel(
            order_id=order_id,
            currency=entity.currency,
            total_amount_minor=entity.total.amount_minor,
            status=entity.status.value,
            created_at=entity.created_at,
        )
        model.items = [
            LineItemMapper.to_persistence(item, order_id, position)
            for position, item in enumerate(entity.items)
        ]
        return model

    @staticmethod
    def update_persistence(entity: Order, model: OrderModel) -> None:
        """Update existing ORM model from domain aggregate.

        Items and total are immutable after creation; only status moves.
        """
        model.status = entity.status.value


class PaymentAttemptMapper:
    """Static mapper for PaymentAttempt ↔ PaymentAttemptModel transformation."""

    @staticmethod
    def to_domain(model: PaymentAttemptModel) -> PaymentAttempt:
        return PaymentAttempt(
            payment_id=PaymentId(UUID(model.payment_id)),
            order_id=OrderId(UUID(model.order_id)),
            provider=PaymentProvider(model.provider),
            provider_reference_id=model.provider_reference_id,
            client_secret=model.client_secret,
            amount=Money(amount_minor=model.amount_minor, currency=model.currency),
            idempotency_key=model.idempotency_key,
            status=PaymentStatus(model.status),
            created_at=_as_utc(model.created_at),
            updated_at=_as_utc(model.updated_at),
        )

    @staticmethod
    def to_persistence(entity: PaymentAttempt) -> PaymentAttemptModel:
        return PaymentAttemptModel(
            payment_id=str(entity.payment_id),
            order_id=str(entity.order_id),
            provider=entity.provider.value,
            provider_reference_id=entity.provider_reference_id,
            client_secret=entity.client_secret,
            amount_minor=entity.amount.amount_minor,
            currency=entity.amount.currency,
            status=entity.status.value,
            idempotency_key=entity.idempotency_key,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    @staticmethod
    def update_persistence(entity: PaymentAttempt, model: PaymentAttemptModel) -> None:
        """Only status and updated_at change after creation."""
        model.status = entity.status.value
        model.updated_at = entity.updated_at

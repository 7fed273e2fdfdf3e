"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, List, Tuple

from ..enums import OrderStatus, OutcomeKind
from ..exceptions import InvalidOrderState
from ..state_machine import OrderEvent, next_order_status
from ..value_objects import Money, OrderId


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class LineItem:
    """Individual line item within an order."""
    name: str
    unit_price: Money
    quantity: int
    subtotal: Money

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Line item name cannot be empty")
        if not self.unit_price.is_positive():
            raise ValueError(f"Unit price must be greater than zero: {self.unit_price}")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int) or self.quantity <= 0:
            raise ValueError(f"Quantity must be a positive integer: {self.quantity!r}")

        calculated = self.unit_price * self.quantity
        if calculated != self.subtotal:
            raise ValueError(f"Subtotal mismatch: {calculated} vs {self.subtotal}")

    @classmethod
    def of(cls, name: str, unit_price_minor: int, quantity: int, currency: str) -> "LineItem":
        """Build a line item, deriving the subtotal."""
        unit_price = Money(amount_minor=unit_price_minor, currency=currency)
        return cls(
            name=name,
            unit_price=unit_price,
            quantity=quantity,
            subtotal=unit_price * quantity,
        )


@dataclass
class Order:
    """
    Order aggregate root.

    Status only moves through the order state machine; the total is
    fixed at creation.
    """
    order_id: OrderId
    currency: str
    items: List[LineItem]
    total: Money
    status: OrderStatus = OrderStatus.CREATED
    created_at: datetime = field(default_factory=utcnow)

    def __post_init__(self):
        if self.total.currency != self.currency:
            raise ValueError(
                f"Order total currency {self.total.currency} does not match {self.currency}"
            )
        for item in self.items:
            if item.unit_price.currency != self.currency:
                raise ValueError(
                    f"Item '{item.name}' currency {item.unit_price.currency} "
                    f"does not match order currency {self.currency}"
                )

    @classmethod
    def create(
        cls,
        currency: str,
        items: Iterable[Tuple[str, int, int]],
    ) -> "Order":
        """
        Factory method to create a new Order in status CREATED.

        Args:
            currency: ISO 4217 code, uppercase
            items: (name, unit_price_minor, quantity) tuples

        Returns:
            New Order with subtotals and total computed
        """
        line_items = [
            LineItem.of(name, unit_price_minor, quantity, currency)
            for name, unit_price_minor, quantity in items
        ]
        return cls(
            order_id=OrderId.generate(),
            currency=currency,
            items=line_items,
            total=cls._sum_items(line_items, currency),
        )

    @staticmethod
    def _sum_items(items: List[LineItem], currency: str) -> Money:
        total = Money.zero(currency)
        for item in items:
            total = total + item.subtotal
        return total

    @property
    def is_terminal(self) -> bool:
        return self.status.is_terminal

    def ensure_checkout_eligible(self) -> None:
        """
        Business rule: only CREATED orders with items and a positive total
        can be checked out.

        Raises:
            InvalidOrderState: With a reason keyed by the current status
        """
        # Raises with the per-status reason when not CREATED
        next_order_status(self.status, OrderEvent.CHECKOUT_INITIATED)

        if not self.total.is_positive():
            raise InvalidOrderState("Order total must be greater than zero", status=self.status)
        if not self.items:
            raise InvalidOrderState("Order has no items", status=self.status)

    def begin_checkout(self) -> None:
        """Transition CREATED -> PAYMENT_PENDING."""
        self.ensure_checkout_eligible()
        self.status = next_order_status(self.status, OrderEvent.CHECKOUT_INITIATED)

    def apply_outcome(self, kind: OutcomeKind) -> bool:
        """
        Apply a provider outcome.

        Returns:
            True if the status changed, False if the order was already terminal
        """
        previous = self.status
        self.status = next_order_status(self.status, OrderEvent.for_outcome(kind))
        return self.status is not previous

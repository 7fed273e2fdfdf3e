"""SQLAlchemy ORM models for Order aggregate."""

from sqlalchemy import BigInteger, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from .base import Base


class OrderModel(Base):
    """SQLAlchemy ORM model for orders table."""

    __tablename__ = "orders"

    order_id = Column(String(36), primary_key=True)
    currency = Column(String(3), nullable=False)
    total_amount_minor = Column(BigInteger, nullable=False)
    status = Column(String(32), nullable=False, default="CREATED", index=True)
    created_at = Column(DateTime(timezone=True), nullable=False)

    # Relationship to items (ordered by position)
    items = relationship(
        "OrderItemModel",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItemModel.position",
        lazy="selectin",
    )

    def __repr__(self):
        return f"<OrderModel(order_id={self.order_id}, status={self.status})>"


class OrderItemModel(Base):
    """SQLAlchemy ORM model for order_items table."""

    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(String(36), ForeignKey("orders.order_id"), nullable=False, index=True)
    position = Column(Integer, nullable=False)
    name = Column(String(255), nullable=False)
    unit_price_minor = Column(BigInteger, nullable=False)
    quantity = Column(Integer, nullable=False)
    subtotal_minor = Column(BigInteger, nullable=False)

    # Relationship back to order
    order = relationship("OrderModel", back_populates="items")

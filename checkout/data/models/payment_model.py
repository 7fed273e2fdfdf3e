"""SQLAlchemy ORM model for PaymentAttempt aggregate."""

from sqlalchemy import BigInteger, Column, DateTime, ForeignKey, Index, String, Text, text

from .base import Base


class PaymentAttemptModel(Base):
    """
    SQLAlchemy ORM model for payment_attempts table.

    Storage-level guarantees:
    - idempotency_key is UNIQUE
    - provider_reference_id is UNIQUE
    - at most one INITIATED attempt per order (partial unique index)
    """

    __tablename__ = "payment_attempts"

    payment_id = Column(String(36), primary_key=True)
    order_id = Column(String(36), ForeignKey("orders.order_id"), nullable=False, index=True)
    provider = Column(String(32), nullable=False)
    provider_reference_id = Column(String(255), nullable=False, unique=True)
    client_secret = Column(Text, nullable=True)
    amount_minor = Column(BigInteger, nullable=False)
    currency = Column(String(3), nullable=False)
    status = Column(String(32), nullable=False, default="INITIATED")
    idempotency_key = Column(String(255), nullable=False, unique=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    __table_args__ = (
        Index(
            "uq_payment_attempts_active_order",
            "order_id",
            unique=True,
            sqlite_where=text("status = 'INITIATED'"),
            postgresql_where=text("status = 'INITIATED'"),
        ),
    )

    def __repr__(self):
        return (
            f"<PaymentAttemptModel(payment_id={self.payment_id}, "
            f"order_id={self.order_id}, status={self.status})>"
        )

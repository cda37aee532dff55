"""SQLAlchemy ORM model for Payment aggregate."""

from sqlalchemy import Column, DateTime, Numeric, String, Text

from .base import Base


class PaymentModel(Base):
    """SQLAlchemy ORM model for payments table (one row per attempt)."""

    __tablename__ = "payments"

    id = Column(String(36), primary_key=True)
    order_id = Column(String(36), nullable=False, index=True)
    amount = Column(Numeric(10, 2), nullable=False)
    currency = Column(String(3), default="EUR")
    status = Column(String(20), nullable=False, index=True)
    transaction_id = Column(String(100), nullable=True)
    failure_reason = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    processed_at = Column(DateTime(timezone=True), nullable=True)

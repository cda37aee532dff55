"""SQLAlchemy ORM models for Order aggregate."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from .base import Base


class OrderModel(Base):
    """SQLAlchemy ORM model for orders table."""

    __tablename__ = "orders"

    id = Column(String(36), primary_key=True)
    table_number = Column(Integer, nullable=False, index=True)
    session_id = Column(String(36), nullable=False, index=True)
    status = Column(String(20), nullable=False, default="Draft", index=True)
    total_amount = Column(Numeric(10, 2), nullable=False)
    total_currency = Column(String(3), default="EUR")
    created_at = Column(DateTime(timezone=True), nullable=False)
    confirmed_at = Column(DateTime(timezone=True), nullable=True)

    # Relationship to lines (kept in insertion order)
    lines = relationship(
        "OrderLineModel",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderLineModel.position",
    )


class OrderLineModel(Base):
    """SQLAlchemy ORM model for order_lines table."""

    __tablename__ = "order_lines"

    id = Column(String(36), primary_key=True)
    order_id = Column(String(36), ForeignKey("orders.id"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)
    product_id = Column(String(36), nullable=False)
    product_name = Column(String(200), nullable=False)
    unit_price_amount = Column(Numeric(10, 2), nullable=False)
    unit_price_currency = Column(String(3), default="EUR")
    quantity = Column(Integer, nullable=False)
    subtotal_amount = Column(Numeric(10, 2), nullable=False)

    # Relationship back to order
    order = relationship("OrderModel", back_populates="lines")

"""SQLAlchemy ORM models for the menu catalog."""

from sqlalchemy import JSON, Boolean, Column, ForeignKey, Numeric, String

from .base import Base


class CategoryModel(Base):
    """SQLAlchemy ORM model for categories table."""

    __tablename__ = "categories"

    id = Column(String(36), primary_key=True)
    name = Column(String(100), nullable=False)
    description = Column(String(500), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)


class ProductModel(Base):
    """SQLAlchemy ORM model for products table."""

    __tablename__ = "products"

    id = Column(String(36), primary_key=True)
    name = Column(String(200), nullable=False)
    description = Column(String(500), nullable=True)
    price_amount = Column(Numeric(10, 2), nullable=False)
    price_currency = Column(String(3), default="EUR")
    category_id = Column(String(36), ForeignKey("categories.id"), nullable=False, index=True)
    allergens = Column(JSON, nullable=False, default=list)
    is_available = Column(Boolean, nullable=False, default=True)

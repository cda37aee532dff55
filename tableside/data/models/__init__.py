"""Database models."""

from .base import Base, init_models
from .order_model import OrderLineModel, OrderModel
from .table_model import TableModel
from .payment_model import PaymentModel
from .catalog_model import CategoryModel, ProductModel

__all__ = [
    "Base",
    "init_models",
    "OrderModel",
    "OrderLineModel",
    "TableModel",
    "PaymentModel",
    "CategoryModel",
    "ProductModel",
]

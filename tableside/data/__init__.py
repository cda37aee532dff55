"""Data layer - SQLAlchemy persistence and mapping."""

from .mappers import (
    CategoryMapper,
    OrderLineMapper,
    OrderMapper,
    PaymentMapper,
    ProductMapper,
    TableMapper,
)
from .models import (
    Base,
    CategoryModel,
    OrderLineModel,
    OrderModel,
    PaymentModel,
    ProductModel,
    TableModel,
    init_models,
)
from .repositories import (
    SqlAlchemyCategoryRepository,
    SqlAlchemyOrderRepository,
    SqlAlchemyPaymentRepository,
    SqlAlchemyProductRepository,
    SqlAlchemyTableRepository,
)

__all__ = [
    "Base",
    "init_models",
    "CategoryMapper",
    "CategoryModel",
    "OrderLineMapper",
    "OrderLineModel",
    "OrderMapper",
    "OrderModel",
    "PaymentMapper",
    "PaymentModel",
    "ProductMapper",
    "ProductModel",
    "TableMapper",
    "TableModel",
    "SqlAlchemyCategoryRepository",
    "SqlAlchemyOrderRepository",
    "SqlAlchemyPaymentRepository",
    "SqlAlchemyProductRepository",
    "SqlAlchemyTableRepository",
]

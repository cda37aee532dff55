"""SQLAlchemy repository implementations."""

from .order_repository_impl import SqlAlchemyOrderRepository
from .table_repository_impl import SqlAlchemyTableRepository
from .payment_repository_impl import SqlAlchemyPaymentRepository
from .catalog_repository_impl import (
    SqlAlchemyCategoryRepository,
    SqlAlchemyProductRepository,
)

__all__ = [
    "SqlAlchemyOrderRepository",
    "SqlAlchemyTableRepository",
    "SqlAlchemyPaymentRepository",
    "SqlAlchemyCategoryRepository",
    "SqlAlchemyProductRepository",
]

"""Repository interfaces consumed by the application layer."""
from .order_repository import OrderRepository
from .table_repository import TableRepository
from .payment_repository import PaymentRepository
from .catalog_repository import ProductRepository, CategoryRepository

__all__ = [
    "OrderRepository",
    "TableRepository",
    "PaymentRepository",
    "ProductRepository",
    "CategoryRepository",
]

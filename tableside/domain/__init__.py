"""Domain layer - pure domain models and interfaces."""

from .entities import Category, Order, OrderLine, Payment, Product, Table, TableSession
from .enums import OrderStatus, PaymentStatus
from .exceptions import DomainError, InvalidStateError, NotFoundError, ValidationError
from .repositories import (
    CategoryRepository,
    OrderRepository,
    PaymentRepository,
    ProductRepository,
    TableRepository,
)
from .value_objects import (
    Allergens,
    CategoryId,
    OrderId,
    OrderLineId,
    PaymentId,
    Price,
    ProductId,
    Quantity,
    SessionId,
    TableId,
)

__all__ = [
    "Allergens",
    "Category",
    "CategoryId",
    "CategoryRepository",
    "DomainError",
    "InvalidStateError",
    "NotFoundError",
    "Order",
    "OrderId",
    "OrderLine",
    "OrderLineId",
    "OrderRepository",
    "OrderStatus",
    "Payment",
    "PaymentId",
    "PaymentRepository",
    "PaymentStatus",
    "Price",
    "Product",
    "ProductId",
    "ProductRepository",
    "Quantity",
    "SessionId",
    "Table",
    "TableId",
    "TableRepository",
    "TableSession",
    "ValidationError",
]

"""Domain value objects."""

from .identifiers import (
    EntityId,
    OrderId,
    OrderLineId,
    ProductId,
    CategoryId,
    SessionId,
    PaymentId,
    TableId,
)
from .price import Price, SUPPORTED_CURRENCIES, DEFAULT_CURRENCY
from .quantity import Quantity
from .allergens import Allergens

__all__ = [
    "EntityId",
    "OrderId",
    "OrderLineId",
    "ProductId",
    "CategoryId",
    "SessionId",
    "PaymentId",
    "TableId",
    "Price",
    "SUPPORTED_CURRENCIES",
    "DEFAULT_CURRENCY",
    "Quantity",
    "Allergens",
]

"""Domain entities and aggregate roots."""
from .order import Order, OrderLine, ORDER_CURRENCY
from .table import Table, TableSession
from .payment import Payment
from .catalog import Category, Product

__all__ = [
    "Order",
    "OrderLine",
    "ORDER_CURRENCY",
    "Table",
    "TableSession",
    "Payment",
    "Category",
    "Product",
]

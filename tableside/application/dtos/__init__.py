"""Application DTOs."""
from .order_dto import OrderDTO, OrderLineDTO
from .payment_dto import PaymentDTO
from .table_dto import EndedTableSessionDTO, TableSessionDTO
from .catalog_dto import CategoryDTO, ProductDTO

__all__ = [
    "OrderDTO",
    "OrderLineDTO",
    "PaymentDTO",
    "TableSessionDTO",
    "EndedTableSessionDTO",
    "CategoryDTO",
    "ProductDTO",
]

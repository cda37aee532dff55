"""Application use cases."""
from .start_table_session import StartTableSessionUseCase
from .end_table_session import EndTableSessionUseCase
from .get_or_create_order_for_table import GetOrCreateOrderForTableUseCase
from .get_order import GetOrderUseCase
from .add_product_to_order import AddProductToOrderUseCase
from .confirm_order import ConfirmOrderUseCase
from .cancel_order import CancelOrderUseCase
from .update_order_status import UpdateOrderStatusUseCase
from .process_payment import ProcessPaymentUseCase
from .get_all_active_orders import GetAllActiveOrdersUseCase
from .get_all_categories import GetAllCategoriesUseCase
from .get_products_by_category import GetProductsByCategoryUseCase

__all__ = [
    "StartTableSessionUseCase",
    "EndTableSessionUseCase",
    "GetOrCreateOrderForTableUseCase",
    "GetOrderUseCase",
    "AddProductToOrderUseCase",
    "ConfirmOrderUseCase",
    "CancelOrderUseCase",
    "UpdateOrderStatusUseCase",
    "ProcessPaymentUseCase",
    "GetAllActiveOrdersUseCase",
    "GetAllCategoriesUseCase",
    "GetProductsByCategoryUseCase",
]

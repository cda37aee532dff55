"""Domain enums."""
from .order_status import OrderStatus
from .payment_status import PaymentStatus

__all__ = ["OrderStatus", "PaymentStatus"]

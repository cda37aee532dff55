"""Domain events recorded by aggregates."""
from .base import DomainEvent
from .order_events import OrderConfirmedEvent, OrderStatusChangedEvent

__all__ = [
    "DomainEvent",
    "OrderConfirmedEvent",
    "OrderStatusChangedEvent",
]

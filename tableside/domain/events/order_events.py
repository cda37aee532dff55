"""
Order Domain Events.

Events recorded by the Order aggregate during its lifecycle.
Consumers: kitchen dashboard, table screens (via the notification service).
"""
from dataclasses import dataclass
from typing import Optional

from ..enums import OrderStatus
from .base import DomainEvent


@dataclass
class OrderConfirmedEvent(DomainEvent):
    """
    Order was confirmed at the table and sent to the kitchen.

    Next: OrderStatusChangedEvent (Draft -> Confirmed), recorded alongside.
    """

    order_id: str = ""
    table_number: int = 0

    def __post_init__(self):
        """Set aggregate_id to order_id."""
        if not self.aggregate_id and self.order_id:
            object.__setattr__(self, "aggregate_id", self.order_id)
        super().__post_init__()


@dataclass
class OrderStatusChangedEvent(DomainEvent):
    """
    Order status changed.

    Tracks transitions (Draft -> Confirmed -> Preparing -> Ready -> Delivered,
    and Draft|Confirmed -> Cancelled).
    """

    order_id: str = ""
    table_number: int = 0
    old_status: Optional[OrderStatus] = None
    new_status: Optional[OrderStatus] = None

    def __post_init__(self):
        """Set aggregate_id to order_id."""
        if not self.aggregate_id and self.order_id:
            object.__setattr__(self, "aggregate_id", self.order_id)
        super().__post_init__()

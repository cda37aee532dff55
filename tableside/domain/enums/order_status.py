"""
Order Status Enum.

Lifecycle of an order from the table to the kitchen.
"""
from enum import Enum


class OrderStatus(str, Enum):
    """Order status values (serialized by name)."""

    DRAFT = "Draft"            # Being built at the table
    CONFIRMED = "Confirmed"    # Sent to the kitchen
    PREPARING = "Preparing"
    READY = "Ready"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"

    @property
    def is_open(self) -> bool:
        """Open orders still accept new items or are awaiting the kitchen."""
        return self in (OrderStatus.DRAFT, OrderStatus.CONFIRMED)

    def __str__(self) -> str:
        return self.value

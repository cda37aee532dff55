"""
Payment Status Enum.

Status values for a single payment attempt.
"""
from enum import Enum


class PaymentStatus(str, Enum):
    """Payment status values (serialized by name)."""

    PENDING = "Pending"        # Created, gateway not called yet
    PROCESSING = "Processing"  # Gateway call in flight
    COMPLETED = "Completed"
    FAILED = "Failed"
    CANCELLED = "Cancelled"

    def __str__(self) -> str:
        return self.value

"""
Payment aggregate.

Independent of the Order aggregate; references it by id only.
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from ..enums import PaymentStatus
from ..exceptions import InvalidStateError, ValidationError
from ..value_objects import OrderId, PaymentId, Price


@dataclass
class Payment:
    """
    One payment attempt for an order.

    Status chain:
        Pending -> Processing -> Completed | Failed
        Pending | Processing -> Cancelled
    """
    id: PaymentId
    order_id: OrderId
    amount: Price
    status: PaymentStatus = PaymentStatus.PENDING
    transaction_id: Optional[str] = None
    failure_reason: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    processed_at: Optional[datetime] = None

    @classmethod
    def create(cls, order_id: OrderId, amount: Price) -> "Payment":
        """Create a Pending payment for the given order amount."""
        return cls(id=PaymentId.generate(), order_id=order_id, amount=amount)

    def mark_as_processing(self) -> None:
        if self.status != PaymentStatus.PENDING:
            raise InvalidStateError(
                "Payment can only be marked as processing when in Pending status"
            )
        self.status = PaymentStatus.PROCESSING

    def mark_as_completed(self, transaction_id: Optional[str]) -> None:
        if not transaction_id or not transaction_id.strip():
            raise ValidationError("Transaction ID is required when completing a payment")

        if self.status == PaymentStatus.COMPLETED:
            raise InvalidStateError("Payment has already been completed")
        if self.status in (PaymentStatus.FAILED, PaymentStatus.CANCELLED):
            raise InvalidStateError(f"Cannot complete a {self.status.value.lower()} payment")

        self.status = PaymentStatus.COMPLETED
        self.transaction_id = transaction_id
        self.processed_at = datetime.now(timezone.utc)

    def mark_as_failed(self, failure_reason: Optional[str]) -> None:
        if not failure_reason or not failure_reason.strip():
            raise ValidationError("Failure reason is required when marking payment as failed")

        if self.status == PaymentStatus.COMPLETED:
            raise InvalidStateError("Cannot mark a completed payment as failed")

        self.status = PaymentStatus.FAILED
        self.failure_reason = failure_reason
        self.processed_at = datetime.now(timezone.utc)

    def cancel(self) -> None:
        if self.status == PaymentStatus.COMPLETED:
            raise InvalidStateError("Cannot cancel a completed payment")
        self.status = PaymentStatus.CANCELLED

    def is_successful(self) -> bool:
        return self.status == PaymentStatus.COMPLETED

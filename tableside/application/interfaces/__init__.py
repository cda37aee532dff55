"""Application layer interfaces."""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Optional

from tableside.domain.enums import OrderStatus, PaymentStatus
from tableside.domain.value_objects import PaymentId, Price


@dataclass(frozen=True)
class PaymentResult:
    """Outcome of a gateway charge. Declines are results, not exceptions."""

    success: bool
    transaction_id: Optional[str] = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None

    @classmethod
    def succeeded(cls, transaction_id: str) -> "PaymentResult":
        return cls(success=True, transaction_id=transaction_id)

    @classmethod
    def failed(cls, error_code: str, error_message: str) -> "PaymentResult":
        return cls(success=False, error_code=error_code, error_message=error_message)


@dataclass(frozen=True)
class PaymentStatusResult:
    """Status of a previously submitted charge, as known by the gateway."""

    payment_id: str
    status: PaymentStatus
    transaction_id: Optional[str] = None
    processed_at: Optional[datetime] = None


class IPaymentGateway(ABC):
    """
    Interface for payment gateway operations.

    This interface defines the contract for charging an order amount,
    allowing the application layer to take payments without depending
    on a specific provider.
    """

    @abstractmethod
    async def process_payment(
        self,
        payment_id: PaymentId,
        amount: Price,
        payment_method: str,
        metadata: Optional[Dict[str, str]] = None,
    ) -> PaymentResult:
        """
        Charge an amount.

        Args:
            payment_id: Payment being processed
            amount: Amount to charge
            payment_method: Method chosen by the customer (card, cash...)
            metadata: Extra context (order_id, table_number)

        Returns:
            PaymentResult; a decline is success=False with an error code
        """
        pass

    @abstractmethod
    async def check_status(self, payment_id: PaymentId) -> PaymentStatusResult:
        """
        Look up the gateway status of a payment.

        Args:
            payment_id: Payment previously submitted
        """
        pass


class IOrderNotificationService(ABC):
    """
    Interface for real-time order notifications.

    Implementations push to the table screen and the kitchen dashboard
    (webhook, websocket hub, log...).
    """

    @abstractmethod
    async def notify_order_confirmed(
        self,
        order_id: str,
        table_number: int,
        occurred_at: datetime,
    ) -> None:
        """
        Announce that an order was sent to the kitchen.

        Args:
            order_id: Confirmed order
            table_number: Table the order belongs to
            occurred_at: When the confirmation happened
        """
        pass

    @abstractmethod
    async def notify_order_status_changed(
        self,
        order_id: str,
        table_number: int,
        old_status: Optional[OrderStatus],
        new_status: OrderStatus,
        occurred_at: datetime,
    ) -> None:
        """
        Announce an order status transition.

        Args:
            order_id: Order whose status changed
            table_number: Table the order belongs to
            old_status: Previous status
            new_status: Current status
            occurred_at: When the transition happened
        """
        pass


__all__ = [
    "IPaymentGateway",
    "IOrderNotificationService",
    "PaymentResult",
    "PaymentStatusResult",
]

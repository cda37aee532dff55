"""Repository interface for Payment aggregate."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.payment import Payment
from ..value_objects import OrderId, PaymentId


class PaymentRepository(ABC):
    """Abstract repository for Payment persistence."""

    @abstractmethod
    async def get_by_id(self, payment_id: PaymentId) -> Optional[Payment]:
        """Retrieve payment by unique identifier."""
        pass

    @abstractmethod
    async def get_by_order_id(self, order_id: OrderId) -> Optional[Payment]:
        """Retrieve the payment of an order.

        An order can accumulate several attempts. The successful one wins;
        otherwise the most recent attempt is returned.

        Args:
            order_id: Order the payment belongs to

        Returns:
            Payment if any attempt exists, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, payment: Payment) -> None:
        """Insert or replace the payment."""
        pass

"""
Logging Notification Service Implementation.

This simulates real-time notifications for development and tests.
"""
from datetime import datetime
from typing import List, Optional
import logging

from tableside.application.interfaces import IOrderNotificationService
from tableside.domain.enums import OrderStatus

from .messages import (
    NotificationMessage,
    order_confirmed_messages,
    order_status_changed_messages,
)


logger = logging.getLogger(__name__)


class LoggingNotificationService(IOrderNotificationService):
    """
    Logs notifications instead of pushing them.

    Every message is also kept in notifications_sent for inspection.
    """

    def __init__(self):
        """Initialize logging notification service."""
        self.notifications_sent: List[NotificationMessage] = []
        logger.info("LoggingNotificationService initialized (console logging)")

    async def notify_order_confirmed(
        self,
        order_id: str,
        table_number: int,
        occurred_at: datetime,
    ) -> None:
        logger.info(f"🔔 Order confirmed: OrderId={order_id}, Table={table_number}")
        self._record(order_confirmed_messages(order_id, table_number, occurred_at))

    async def notify_order_status_changed(
        self,
        order_id: str,
        table_number: int,
        old_status: Optional[OrderStatus],
        new_status: OrderStatus,
        occurred_at: datetime,
    ) -> None:
        logger.info(
            f"🔔 Order status changed: OrderId={order_id}, Table={table_number}, "
            f"From={old_status.value if old_status else None}, To={new_status.value}"
        )
        self._record(
            order_status_changed_messages(
                order_id, table_number, old_status, new_status, occurred_at
            )
        )

    def _record(self, messages: List[NotificationMessage]) -> None:
        for message in messages:
            self.notifications_sent.append(message)
            logger.debug(f"   -> {message.group}: {message.method}")

    def get_notifications(self) -> List[NotificationMessage]:
        """Get all recorded notifications."""
        return list(self.notifications_sent)

    def clear(self) -> None:
        """Clear all recorded notifications (for testing)."""
        self.notifications_sent.clear()

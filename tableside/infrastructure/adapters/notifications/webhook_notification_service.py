"""
Webhook Notification Service Implementation.

Posts order notifications as JSON to a webhook (a websocket hub, a
kitchen display bridge...). Delivery problems are logged and never
interrupt the use case that triggered them.
"""
from datetime import datetime
from typing import List, Optional
import logging

import aiohttp

from tableside.application.interfaces import IOrderNotificationService
from tableside.domain.enums import OrderStatus
from tableside.settings.sections.notifications import NotificationSettings

from .messages import (
    NotificationMessage,
    order_confirmed_messages,
    order_status_changed_messages,
)


logger = logging.getLogger(__name__)


class WebhookNotificationService(IOrderNotificationService):
    """
    Webhook implementation of the order notification service.

    Sends one POST per subscriber group.
    """

    def __init__(self, settings: NotificationSettings):
        """
        Initialize webhook notification service.

        Args:
            settings: Notification settings with webhook URL
        """
        self.settings = settings
        self.webhook_url = settings.webhook_url
        self.timeout = aiohttp.ClientTimeout(total=settings.timeout_seconds)
        logger.info("WebhookNotificationService initialized")

    async def notify_order_confirmed(
        self,
        order_id: str,
        table_number: int,
        occurred_at: datetime,
    ) -> None:
        """Send order confirmed notification to table and kitchen."""
        await self._send(order_confirmed_messages(order_id, table_number, occurred_at))

    async def notify_order_status_changed(
        self,
        order_id: str,
        table_number: int,
        old_status: Optional[OrderStatus],
        new_status: OrderStatus,
        occurred_at: datetime,
    ) -> None:
        """Send order status notification to table and kitchen."""
        await self._send(
            order_status_changed_messages(
                order_id, table_number, old_status, new_status, occurred_at
            )
        )

    async def _send(self, messages: List[NotificationMessage]) -> None:
        """
        Post messages to the webhook.

        Args:
            messages: Messages to deliver, one request each
        """
        if not self.webhook_url:
            logger.warning("Notification webhook_url not configured, skipping notification")
            return

        try:
            async with aiohttp.ClientSession(timeout=self.timeout) as session:
                for message in messages:
                    async with session.post(self.webhook_url, json=message.to_dict()) as response:
                        if response.status >= 300:
                            error_text = await response.text()
                            logger.error(
                                f"Webhook error for {message.group}: "
                                f"{response.status} - {error_text}"
                            )
                        else:
                            logger.info(f"Notification {message.method} sent to {message.group}")
        except Exception as e:
            logger.error(f"Failed to send webhook notification: {e}", exc_info=True)

"""
Order event dispatcher.

Hands the events buffered by an Order aggregate to the notification
service, one call per event, then drains the buffer. Called by use cases
after the aggregate has been saved.
"""
import logging

from tableside.application.interfaces import IOrderNotificationService
from tableside.domain.entities import Order
from tableside.domain.events import OrderConfirmedEvent, OrderStatusChangedEvent


logger = logging.getLogger(__name__)


class OrderEventDispatcher:
    """Translate Order domain events into notification calls."""

    def __init__(self, notification_service: IOrderNotificationService):
        self.notification_service = notification_service

    async def dispatch(self, order: Order) -> int:
        """
        Publish and clear the pending events of an order.

        Args:
            order: Saved order aggregate

        Returns:
            Number of events dispatched
        """
        events = order.get_domain_events()

        for event in events:
            if isinstance(event, OrderConfirmedEvent):
                await self.notification_service.notify_order_confirmed(
                    order_id=event.order_id,
                    table_number=event.table_number,
                    occurred_at=event.occurred_at,
                )
            elif isinstance(event, OrderStatusChangedEvent):
                await self.notification_service.notify_order_status_changed(
                    order_id=event.order_id,
                    table_number=event.table_number,
                    old_status=event.old_status,
                    new_status=event.new_status,
                    occurred_at=event.occurred_at,
                )
            else:
                logger.warning(f"No notification mapped for event {event.event_type}")

        order.clear_domain_events()

        if events:
            logger.debug(f"Dispatched {len(events)} event(s) for order {order.id}")

        return len(events)

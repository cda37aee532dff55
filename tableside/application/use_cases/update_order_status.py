"""
Update Order Status Use Case (kitchen).

Confirm and Cancel have their own use cases; the kitchen only moves an
order through Preparing, Ready and Delivered.
"""
import logging

from tableside.application.dtos import OrderDTO
from tableside.application.interfaces import IOrderNotificationService
from tableside.application.mappers import OrderMapper
from tableside.application.results import Result
from tableside.application.services import OrderEventDispatcher
from tableside.domain.exceptions import DomainError
from tableside.domain.repositories import OrderRepository
from tableside.domain.value_objects import OrderId


logger = logging.getLogger(__name__)


KITCHEN_TRANSITIONS = {
    "Preparing": "mark_as_preparing",
    "Ready": "mark_as_ready",
    "Delivered": "mark_as_delivered",
}


class UpdateOrderStatusUseCase:
    """Advance an order along the kitchen part of its status chain."""

    def __init__(
        self,
        order_repository: OrderRepository,
        notification_service: IOrderNotificationService,
    ):
        """
        Initialize use case with dependencies.

        Args:
            order_repository: Repository for order persistence
            notification_service: Real-time notifications to table and kitchen
        """
        self.order_repository = order_repository
        self.event_dispatcher = OrderEventDispatcher(notification_service)

    async def execute(self, order_id: str, new_status: str) -> Result[OrderDTO]:
        """
        Args:
            order_id: Order to advance
            new_status: One of Preparing, Ready, Delivered

        Returns:
            Result with the updated order, or the transition error
        """
        try:
            order = await self.order_repository.get_by_id(OrderId.from_string(order_id))
            if order is None:
                return Result.fail(f"Order with ID {order_id} not found.")

            transition = KITCHEN_TRANSITIONS.get(new_status)
            if transition is None:
                return Result.fail(
                    f"Invalid status: {new_status}. "
                    f"Valid statuses are: {', '.join(KITCHEN_TRANSITIONS)}"
                )

            getattr(order, transition)()
            await self.order_repository.save(order)
            logger.info(f"Order {order.id} is now {order.status.value}")

            await self.event_dispatcher.dispatch(order)

            return Result.ok(OrderMapper.to_dto(order))

        except DomainError as e:
            logger.warning(f"Status update of order {order_id} to {new_status} failed: {e}")
            return Result.fail(e.message)

"""
Confirm Order Use Case.

Flow:
1. Load the order
2. Confirm it (records OrderConfirmed and StatusChanged)
3. Save
4. Notify table and kitchen, one call per event
5. Clear the event buffer
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


class ConfirmOrderUseCase:
    """Send a Draft order to the kitchen."""

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

    async def execute(self, order_id: str) -> Result[OrderDTO]:
        try:
            order = await self.order_repository.get_by_id(OrderId.from_string(order_id))
            if order is None:
                return Result.fail(f"Order with ID {order_id} not found.")

            order.confirm()
            await self.order_repository.save(order)
            logger.info(f"Order {order.id} confirmed for table {order.table_id.value}")

            await self.event_dispatcher.dispatch(order)

            return Result.ok(OrderMapper.to_dto(order))

        except DomainError as e:
            logger.warning(f"Confirm order {order_id} failed: {e}")
            return Result.fail(e.message)

"""Cancel Order Use Case."""
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


class CancelOrderUseCase:
    """Cancel a Draft or Confirmed order and notify observers."""

    def __init__(
        self,
        order_repository: OrderRepository,
        notification_service: IOrderNotificationService,
    ):
        self.order_repository = order_repository
        self.event_dispatcher = OrderEventDispatcher(notification_service)

    async def execute(self, order_id: str) -> Result[OrderDTO]:
        try:
            order = await self.order_repository.get_by_id(OrderId.from_string(order_id))
            if order is None:
                return Result.fail(f"Order with ID {order_id} not found.")

            order.cancel()
            await self.order_repository.save(order)
            logger.info(f"Order {order.id} cancelled")

            await self.event_dispatcher.dispatch(order)

            return Result.ok(OrderMapper.to_dto(order))

        except DomainError as e:
            logger.warning(f"Cancel order {order_id} failed: {e}")
            return Result.fail(e.message)

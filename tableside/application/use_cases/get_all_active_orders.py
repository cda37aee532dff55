"""
Get All Active Orders Use Case (kitchen dashboard).

Orders the kitchen cares about: everything that was confirmed and has
not been cancelled, oldest first.
"""
import logging
from typing import List

from tableside.application.dtos import OrderDTO
from tableside.application.mappers import OrderMapper
from tableside.application.results import Result
from tableside.domain.enums import OrderStatus
from tableside.domain.repositories import OrderRepository


logger = logging.getLogger(__name__)


HIDDEN_FROM_KITCHEN = (OrderStatus.DRAFT, OrderStatus.CANCELLED)


class GetAllActiveOrdersUseCase:

    def __init__(self, order_repository: OrderRepository):
        self.order_repository = order_repository

    async def execute(self) -> Result[List[OrderDTO]]:
        orders = await self.order_repository.get_all()

        active = sorted(
            (o for o in orders if o.status not in HIDDEN_FROM_KITCHEN),
            key=lambda o: o.created_at,
        )

        logger.debug(f"Kitchen view: {len(active)} active of {len(orders)} orders")
        return Result.ok(OrderMapper.to_dto_list(active))

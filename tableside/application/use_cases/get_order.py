"""Get Order Use Case (read-only, for polling clients)."""
from tableside.application.dtos import OrderDTO
from tableside.application.mappers import OrderMapper
from tableside.application.results import Result
from tableside.domain.exceptions import DomainError
from tableside.domain.repositories import OrderRepository
from tableside.domain.value_objects import OrderId


class GetOrderUseCase:

    def __init__(self, order_repository: OrderRepository):
        self.order_repository = order_repository

    async def execute(self, order_id: str) -> Result[OrderDTO]:
        try:
            order = await self.order_repository.get_by_id(OrderId.from_string(order_id))
        except DomainError as e:
            return Result.fail(e.message)

        if order is None:
            return Result.fail(f"Order with ID {order_id} not found.")

        return Result.ok(OrderMapper.to_dto(order))

"""
Get Or Create Order For Table Use Case.

Every diner at a table works on the same order: repeated page loads
converge on the open (Draft or Confirmed) order of the table, and a new
Draft is only created when there is none.
"""
import logging

from tableside.application.dtos import OrderDTO
from tableside.application.mappers import OrderMapper
from tableside.application.results import Result
from tableside.domain.entities import Order
from tableside.domain.exceptions import DomainError
from tableside.domain.repositories import OrderRepository, TableRepository
from tableside.domain.value_objects import TableId


logger = logging.getLogger(__name__)


class GetOrCreateOrderForTableUseCase:
    """Return the shared open order of a table, creating it if needed."""

    def __init__(
        self,
        order_repository: OrderRepository,
        table_repository: TableRepository,
    ):
        """
        Initialize use case with dependencies.

        Args:
            order_repository: Repository for order persistence
            table_repository: Repository for table persistence
        """
        self.order_repository = order_repository
        self.table_repository = table_repository

    async def execute(self, table_number: int) -> Result[OrderDTO]:
        """
        Args:
            table_number: Visible table number

        Returns:
            Result with the open order of the table
        """
        try:
            table_id = TableId(table_number)
            table = await self.table_repository.get_by_id(table_id)

            if table is None:
                return Result.fail(f"Table {table_number} does not exist.")

            if not table.is_occupied:
                logger.warning(f"Table {table_number} has no active session")
                return Result.fail(f"Table {table_number} does not have an active session.")

            order = await self.order_repository.get_active_order_by_table(table_id)

            if order is None:
                order = Order.create(table_id, table.active_session.id)
                await self.order_repository.save(order)
                logger.info(f"Created order {order.id} for table {table_number}")
            else:
                logger.info(f"Reusing order {order.id} for table {table_number}")

            return Result.ok(OrderMapper.to_dto(order))

        except DomainError as e:
            logger.warning(f"Get-or-create order failed for table {table_number}: {e}")
            return Result.fail(e.message)

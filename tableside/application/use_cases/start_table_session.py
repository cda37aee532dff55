"""
Start Table Session Use Case.

Entry point when diners scan the QR code of a table. Starting a session
on an occupied table returns the running session.
"""
import logging

from tableside.application.dtos import TableSessionDTO
from tableside.application.mappers import TableSessionMapper
from tableside.application.results import Result
from tableside.domain.exceptions import DomainError
from tableside.domain.repositories import TableRepository
from tableside.domain.value_objects import TableId


logger = logging.getLogger(__name__)


class StartTableSessionUseCase:
    """Open (or join) the session of a table."""

    def __init__(self, table_repository: TableRepository):
        """
        Initialize use case with dependencies.

        Args:
            table_repository: Repository for table persistence
        """
        self.table_repository = table_repository

    async def execute(self, table_number: int) -> Result[TableSessionDTO]:
        """
        Start the session of a table.

        Args:
            table_number: Visible table number

        Returns:
            Result with the active session
        """
        try:
            table_id = TableId(table_number)
            table = await self.table_repository.get_by_id(table_id)

            if table is None:
                logger.warning(f"Session start rejected: table {table_number} does not exist")
                return Result.fail(f"Table {table_number} does not exist.")

            was_occupied = table.is_occupied
            session = table.start_session()

            if was_occupied:
                logger.info(f"Table {table_number} joined running session {session.id}")
            else:
                await self.table_repository.save(table)
                logger.info(f"Table {table_number} started session {session.id}")

            return Result.ok(TableSessionMapper.to_dto(session, table.id))

        except DomainError as e:
            logger.warning(f"Session start failed for table {table_number}: {e}")
            return Result.fail(e.message)

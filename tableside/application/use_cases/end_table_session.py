"""End Table Session Use Case."""
import logging

from tableside.application.dtos import EndedTableSessionDTO
from tableside.application.mappers import TableSessionMapper
from tableside.application.results import Result
from tableside.domain.exceptions import DomainError
from tableside.domain.repositories import TableRepository
from tableside.domain.value_objects import TableId


logger = logging.getLogger(__name__)


class EndTableSessionUseCase:
    """Close the active session and free the table."""

    def __init__(self, table_repository: TableRepository):
        self.table_repository = table_repository

    async def execute(self, table_number: int) -> Result[EndedTableSessionDTO]:
        try:
            table_id = TableId(table_number)
            table = await self.table_repository.get_by_id(table_id)

            if table is None:
                return Result.fail(f"Table {table_number} does not exist.")

            session = table.end_session()
            await self.table_repository.save(table)

            logger.info(f"Table {table_number} ended session {session.id}")
            return Result.ok(TableSessionMapper.to_ended_dto(session, table.id))

        except DomainError as e:
            logger.warning(f"Session end failed for table {table_number}: {e}")
            return Result.fail(e.message)

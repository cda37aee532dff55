"""Repository interface for Table aggregate."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.table import Table
from ..value_objects import TableId


class TableRepository(ABC):
    """Abstract repository for Table aggregate persistence.

    The roster of tables is seeded up front; use cases never create tables.
    """

    @abstractmethod
    async def get_by_id(self, table_id: TableId) -> Optional[Table]:
        """Retrieve table (with its active session) by number.

        Args:
            table_id: Table number

        Returns:
            Table if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_all(self) -> List[Table]:
        """List every table ordered by number."""
        pass

    @abstractmethod
    async def save(self, table: Table) -> None:
        """Insert or replace the table aggregate."""
        pass

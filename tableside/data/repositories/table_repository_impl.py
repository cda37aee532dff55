"""SQLAlchemy implementation of TableRepository."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import async_sessionmaker

from tableside.domain.entities import Table
from tableside.domain.repositories import TableRepository
from tableside.domain.value_objects import TableId

from ..mappers import TableMapper
from ..models import TableModel


class SqlAlchemyTableRepository(TableRepository):
    """Concrete implementation of TableRepository using SQLAlchemy."""

    def __init__(self, session_factory: async_sessionmaker) -> None:
        self._session_factory = session_factory

    async def get_by_id(self, table_id: TableId) -> Optional[Table]:
        async with self._session_factory() as session:
            model = await session.get(TableModel, table_id.value)
            return TableMapper.to_domain(model) if model else None

    async def get_all(self) -> List[Table]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(TableModel).order_by(TableModel.table_number)
            )
            return [TableMapper.to_domain(model) for model in result.scalars().all()]

    async def save(self, table: Table) -> None:
        async with self._session_factory() as session:
            async with session.begin():
                existing = await session.get(TableModel, table.id.value)
                if existing:
                    TableMapper.update_persistence(table, existing)
                else:
                    session.add(TableMapper.to_persistence(table))

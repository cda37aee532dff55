"""SQLAlchemy implementation of OrderRepository."""

from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlalchemy.orm import selectinload

from tableside.domain.entities import Order
from tableside.domain.enums import OrderStatus
from tableside.domain.repositories import OrderRepository
from tableside.domain.value_objects import OrderId, TableId

from ..mappers import OrderMapper
from ..models import OrderLineModel, OrderModel


OPEN_STATUSES = [OrderStatus.DRAFT.value, OrderStatus.CONFIRMED.value]


class SqlAlchemyOrderRepository(OrderRepository):
    """
    Concrete implementation of OrderRepository using SQLAlchemy.

    Every call runs in its own session and transaction.
    """

    def __init__(self, session_factory: async_sessionmaker) -> None:
        """Initialize repository with SQLAlchemy session factory.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory

    async def get_by_id(self, order_id: OrderId) -> Optional[Order]:
        """Retrieve order by unique identifier.

        Args:
            order_id: OrderId identifier

        Returns:
            Order if found, None otherwise
        """
        async with self._session_factory() as session:
            result = await session.execute(
                select(OrderModel)
                .options(selectinload(OrderModel.lines))
                .where(OrderModel.id == str(order_id))
            )
            model = result.scalar_one_or_none()
            return OrderMapper.to_domain(model) if model else None

    async def get_active_order_by_table(self, table_id: TableId) -> Optional[Order]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(OrderModel)
                .options(selectinload(OrderModel.lines))
                .where(OrderModel.table_number == table_id.value)
                .where(OrderModel.status.in_(OPEN_STATUSES))
                .order_by(OrderModel.created_at.desc())
                .limit(1)
            )
            model = result.scalar_one_or_none()
            return OrderMapper.to_domain(model) if model else None

    async def get_all(self) -> List[Order]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(OrderModel).options(selectinload(OrderModel.lines))
            )
            return [OrderMapper.to_domain(model) for model in result.scalars().all()]

    async def save(self, order: Order) -> None:
        """Persist order aggregate (insert or replace).

        Args:
            order: Order domain aggregate
        """
        async with self._session_factory() as session:
            async with session.begin():
                result = await session.execute(
                    select(OrderModel)
                    .options(selectinload(OrderModel.lines))
                    .where(OrderModel.id == str(order.id))
                )
                existing = result.scalar_one_or_none()

                if existing:
                    OrderMapper.update_persistence(order, existing)
                else:
                    session.add(OrderMapper.to_persistence(order))

    async def delete(self, order_id: OrderId) -> None:
        async with self._session_factory() as session:
            async with session.begin():
                await session.execute(
                    delete(OrderLineModel).where(OrderLineModel.order_id == str(order_id))
                )
                await session.execute(
                    delete(OrderModel).where(OrderModel.id == str(order_id))
                )

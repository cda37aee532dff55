"""SQLAlchemy implementation of PaymentRepository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import async_sessionmaker

from tableside.domain.entities import Payment
from tableside.domain.enums import PaymentStatus
from tableside.domain.repositories import PaymentRepository
from tableside.domain.value_objects import OrderId, PaymentId

from ..mappers import PaymentMapper
from ..models import PaymentModel


class SqlAlchemyPaymentRepository(PaymentRepository):
    """Concrete implementation of PaymentRepository using SQLAlchemy."""

    def __init__(self, session_factory: async_sessionmaker) -> None:
        self._session_factory = session_factory

    async def get_by_id(self, payment_id: PaymentId) -> Optional[Payment]:
        async with self._session_factory() as session:
            model = await session.get(PaymentModel, str(payment_id))
            return PaymentMapper.to_domain(model) if model else None

    async def get_by_order_id(self, order_id: OrderId) -> Optional[Payment]:
        """Successful attempt if any, otherwise the latest one."""
        async with self._session_factory() as session:
            result = await session.execute(
                select(PaymentModel)
                .where(PaymentModel.order_id == str(order_id))
                .where(PaymentModel.status == PaymentStatus.COMPLETED.value)
                .limit(1)
            )
            model = result.scalar_one_or_none()

            if model is None:
                result = await session.execute(
                    select(PaymentModel)
                    .where(PaymentModel.order_id == str(order_id))
                    .order_by(PaymentModel.created_at.desc())
                    .limit(1)
                )
                model = result.scalar_one_or_none()

            return PaymentMapper.to_domain(model) if model else None

    async def save(self, payment: Payment) -> None:
        async with self._session_factory() as session:
            async with session.begin():
                existing = await session.get(PaymentModel, str(payment.id))
                if existing:
                    PaymentMapper.update_persistence(payment, existing)
                else:
                    session.add(PaymentMapper.to_persistence(payment))

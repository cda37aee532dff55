"""Static mappers for domain entities ↔ database models."""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Dict, Optional

from tableside.domain.entities import (
    Category,
    Order,
    OrderLine,
    Payment,
    Product,
    Table,
    TableSession,
)
from tableside.domain.enums import OrderStatus, PaymentStatus
from tableside.domain.value_objects import (
    Allergens,
    CategoryId,
    OrderId,
    OrderLineId,
    PaymentId,
    Price,
    ProductId,
    Quantity,
    SessionId,
    TableId,
)

from .models import (
    CategoryModel,
    OrderLineModel,
    OrderModel,
    PaymentModel,
    ProductModel,
    TableModel,
)


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Re-attach UTC to naive datetimes (sqlite drops the offset)."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


def _money(amount, currency: str) -> Price:
    return Price(Decimal(str(amount)), currency)


class OrderLineMapper:
    """Static mapper for OrderLine ↔ OrderLineModel transformation."""

    @staticmethod
    def to_domain(model: OrderLineModel) -> OrderLine:
        """Convert ORM model to domain entity (subtotal is recomputed).

        Args:
            model: OrderLineModel instance

        Returns:
            OrderLine domain entity
        """
        return OrderLine(
            id=OrderLineId.from_string(model.id),
            product_id=ProductId.from_string(model.product_id),
            product_name=model.product_name,
            unit_price=_money(model.unit_price_amount, model.unit_price_currency),
            quantity=Quantity(model.quantity),
        )

    @staticmethod
    def to_persistence(entity: OrderLine, order_id: str, position: int) -> OrderLineModel:
        """Convert domain entity to ORM model.

        Args:
            entity: OrderLine domain entity
            order_id: Owning order ID string
            position: Index of the line within the order

        Returns:
            OrderLineModel instance
        """
        model = OrderLineModel(id=str(entity.id), order_id=order_id)
        OrderLineMapper.update_persistence(entity, model, position)
        return model

    @staticmethod
    def update_persistence(entity: OrderLine, model: OrderLineModel, position: int) -> OrderLineModel:
        model.position = position
        model.product_id = str(entity.product_id)
        model.product_name = entity.product_name
        model.unit_price_amount = entity.unit_price.amount
        model.unit_price_currency = entity.unit_price.currency
        model.quantity = entity.quantity.value
        model.subtotal_amount = entity.subtotal.amount
        return model


class OrderMapper:
    """Static mapper for Order ↔ OrderModel transformation with nested lines."""

    @staticmethod
    def to_domain(model: OrderModel) -> Order:
        """Convert ORM model to domain aggregate (with nested lines).

        Args:
            model: OrderModel instance with lines loaded

        Returns:
            Order domain aggregate
        """
        return Order(
            id=OrderId.from_string(model.id),
            table_id=TableId(model.table_number),
            session_id=SessionId.from_string(model.session_id),
            lines=[OrderLineMapper.to_domain(line) for line in model.lines],
            status=OrderStatus(model.status),
            created_at=_as_utc(model.created_at),
            confirmed_at=_as_utc(model.confirmed_at),
        )

    @staticmethod
    def to_persistence(entity: Order) -> OrderModel:
        """Convert domain aggregate to ORM model (with nested lines).

        Args:
            entity: Order domain aggregate

        Returns:
            OrderModel instance
        """
        order_model = OrderModel(id=str(entity.id), lines=[])
        return OrderMapper.update_persistence(entity, order_model)

    @staticmethod
    def update_persistence(entity: Order, model: OrderModel) -> OrderModel:
        """Update existing ORM model from domain entity (for updates).

        Lines are matched by id: kept lines are updated in place, removed
        lines are dropped from the collection (delete-orphan), new lines
        are appended.

        Args:
            entity: Order domain aggregate
            model: Existing OrderModel instance

        Returns:
            Updated OrderModel instance
        """
        model.table_number = entity.table_id.value
        model.session_id = str(entity.session_id)
        model.status = entity.status.value
        model.total_amount = entity.total.amount
        model.total_currency = entity.total.currency
        model.created_at = entity.created_at
        model.confirmed_at = entity.confirmed_at

        existing: Dict[str, OrderLineModel] = {line.id: line for line in model.lines}
        lines = []
        for position, line in enumerate(entity.lines):
            line_model = existing.get(str(line.id))
            if line_model is None:
                line_model = OrderLineMapper.to_persistence(line, model.id, position)
            else:
                OrderLineMapper.update_persistence(line, line_model, position)
            lines.append(line_model)
        model.lines = lines

        return model


class TableMapper:
    """Static mapper for Table ↔ TableModel transformation."""

    @staticmethod
    def to_domain(model: TableModel) -> Table:
        session = None
        if model.session_id:
            session = TableSession(
                id=SessionId.from_string(model.session_id),
                started_at=_as_utc(model.session_started_at),
            )
        return Table(id=TableId(model.table_number), active_session=session)

    @staticmethod
    def update_persistence(entity: Table, model: TableModel) -> TableModel:
        if entity.is_occupied:
            model.session_id = str(entity.active_session.id)
            model.session_started_at = entity.active_session.started_at
        else:
            model.session_id = None
            model.session_started_at = None
        return model

    @staticmethod
    def to_persistence(entity: Table) -> TableModel:
        return TableMapper.update_persistence(
            entity, TableModel(table_number=entity.id.value)
        )


class PaymentMapper:
    """Static mapper for Payment ↔ PaymentModel transformation."""

    @staticmethod
    def to_domain(model: PaymentModel) -> Payment:
        return Payment(
            id=PaymentId.from_string(model.id),
            order_id=OrderId.from_string(model.order_id),
            amount=_money(model.amount, model.currency),
            status=PaymentStatus(model.status),
            transaction_id=model.transaction_id,
            failure_reason=model.failure_reason,
            created_at=_as_utc(model.created_at),
            processed_at=_as_utc(model.processed_at),
        )

    @staticmethod
    def update_persistence(entity: Payment, model: PaymentModel) -> PaymentModel:
        model.order_id = str(entity.order_id)
        model.amount = entity.amount.amount
        model.currency = entity.amount.currency
        model.status = entity.status.value
        model.transaction_id = entity.transaction_id
        model.failure_reason = entity.failure_reason
        model.created_at = entity.created_at
        model.processed_at = entity.processed_at
        return model

    @staticmethod
    def to_persistence(entity: Payment) -> PaymentModel:
        return PaymentMapper.update_persistence(entity, PaymentModel(id=str(entity.id)))


class CategoryMapper:
    """Static mapper for Category ↔ CategoryModel transformation."""

    @staticmethod
    def to_domain(model: CategoryModel) -> Category:
        return Category(
            id=CategoryId.from_string(model.id),
            name=model.name,
            description=model.description,
            is_active=model.is_active,
        )

    @staticmethod
    def update_persistence(entity: Category, model: CategoryModel) -> CategoryModel:
        model.name = entity.name
        model.description = entity.description
        model.is_active = entity.is_active
        return model


class ProductMapper:
    """Static mapper for Product ↔ ProductModel transformation."""

    @staticmethod
    def to_domain(model: ProductModel) -> Product:
        return Product(
            id=ProductId.from_string(model.id),
            name=model.name,
            description=model.description,
            price=_money(model.price_amount, model.price_currency),
            category_id=CategoryId.from_string(model.category_id),
            allergens=Allergens.of(*(model.allergens or [])),
            is_available=model.is_available,
        )

    @staticmethod
    def update_persistence(entity: Product, model: ProductModel) -> ProductModel:
        model.name = entity.name
        model.description = entity.description
        model.price_amount = entity.price.amount
        model.price_currency = entity.price.currency
        model.category_id = str(entity.category_id)
        model.allergens = entity.allergens.sorted_values()
        model.is_available = entity.is_available
        return model

"""Static mappers for domain entities ↔ application DTOs."""

from typing import List

from tableside.domain.entities import (
    Category,
    Order,
    OrderLine,
    Payment,
    Product,
    TableSession,
)
from tableside.domain.enums import OrderStatus
from tableside.domain.value_objects import (
    Allergens,
    CategoryId,
    OrderId,
    OrderLineId,
    Price,
    ProductId,
    Quantity,
    SessionId,
    TableId,
)

from .dtos import (
    CategoryDTO,
    EndedTableSessionDTO,
    OrderDTO,
    OrderLineDTO,
    PaymentDTO,
    ProductDTO,
    TableSessionDTO,
)


class OrderLineMapper:
    """Static mapper for OrderLine ↔ OrderLineDTO transformation."""

    @staticmethod
    def to_dto(line: OrderLine) -> OrderLineDTO:
        return OrderLineDTO(
            id=str(line.id),
            product_id=str(line.product_id),
            product_name=line.product_name,
            unit_price=line.unit_price.amount,
            currency=line.unit_price.currency,
            quantity=line.quantity.value,
            subtotal=line.subtotal.amount,
        )

    @staticmethod
    def to_domain(dto: OrderLineDTO) -> OrderLine:
        # subtotal is derived again by the entity
        return OrderLine(
            id=OrderLineId.from_string(dto.id),
            product_id=ProductId.from_string(dto.product_id),
            product_name=dto.product_name,
            unit_price=Price(dto.unit_price, dto.currency),
            quantity=Quantity(dto.quantity),
        )


class OrderMapper:
    """Static mapper for Order ↔ OrderDTO transformation with nested lines."""

    @staticmethod
    def to_dto(order: Order) -> OrderDTO:
        """Convert domain aggregate to outward DTO.

        Args:
            order: Order domain aggregate

        Returns:
            OrderDTO with status as its name and money split in amount/currency
        """
        return OrderDTO(
            id=str(order.id),
            table_number=order.table_id.value,
            session_id=str(order.session_id),
            status=order.status.value,
            lines=[OrderLineMapper.to_dto(line) for line in order.lines],
            total=order.total.amount,
            currency=order.total.currency,
            created_at=order.created_at,
            confirmed_at=order.confirmed_at,
        )

    @staticmethod
    def to_domain(dto: OrderDTO) -> Order:
        """Rebuild the aggregate from a DTO (no events are recorded).

        Args:
            dto: OrderDTO instance

        Returns:
            Order domain aggregate with total recomputed from its lines
        """
        return Order(
            id=OrderId.from_string(dto.id),
            table_id=TableId(dto.table_number),
            session_id=SessionId.from_string(dto.session_id),
            lines=[OrderLineMapper.to_domain(line) for line in dto.lines],
            status=OrderStatus(dto.status),
            created_at=dto.created_at,
            confirmed_at=dto.confirmed_at,
        )

    @staticmethod
    def to_dto_list(orders: List[Order]) -> List[OrderDTO]:
        return [OrderMapper.to_dto(order) for order in orders]


class PaymentMapper:
    """Static mapper for Payment → PaymentDTO."""

    @staticmethod
    def to_dto(payment: Payment) -> PaymentDTO:
        return PaymentDTO(
            id=str(payment.id),
            order_id=str(payment.order_id),
            amount=payment.amount.amount,
            currency=payment.amount.currency,
            status=payment.status.value,
            transaction_id=payment.transaction_id,
            failure_reason=payment.failure_reason,
            created_at=payment.created_at,
            processed_at=payment.processed_at,
        )


class TableSessionMapper:
    """Static mapper for TableSession → session DTOs."""

    @staticmethod
    def to_dto(session: TableSession, table_id: TableId) -> TableSessionDTO:
        return TableSessionDTO(
            session_id=str(session.id),
            table_number=table_id.value,
            started_at=session.started_at,
        )

    @staticmethod
    def to_ended_dto(session: TableSession, table_id: TableId) -> EndedTableSessionDTO:
        return EndedTableSessionDTO(
            session_id=str(session.id),
            table_number=table_id.value,
            ended_at=session.ended_at,
        )


class CatalogMapper:
    """Static mapper for Category/Product ↔ catalog DTOs."""

    @staticmethod
    def category_to_dto(category: Category) -> CategoryDTO:
        return CategoryDTO(
            id=str(category.id),
            name=category.name,
            description=category.description,
            is_active=category.is_active,
        )

    @staticmethod
    def product_to_dto(product: Product) -> ProductDTO:
        return ProductDTO(
            id=str(product.id),
            name=product.name,
            description=product.description,
            price=product.price.amount,
            currency=product.price.currency,
            category_id=str(product.category_id),
            allergens=product.allergens.sorted_values(),
            is_available=product.is_available,
        )

    @staticmethod
    def product_to_domain(dto: ProductDTO) -> Product:
        return Product(
            id=ProductId.from_string(dto.id),
            name=dto.name,
            description=dto.description,
            price=Price(dto.price, dto.currency),
            category_id=CategoryId.from_string(dto.category_id),
            allergens=Allergens.of(*dto.allergens),
            is_available=dto.is_available,
        )

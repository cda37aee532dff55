"""
Tests for OrderEventDispatcher and the application mappers.
"""
from decimal import Decimal

import pytest

from tableside.application.mappers import CatalogMapper, OrderMapper
from tableside.application.services import OrderEventDispatcher
from tableside.domain.entities import Order
from tableside.domain.enums import OrderStatus
from tableside.domain.value_objects import Price, ProductId, Quantity, SessionId, TableId
from tableside.infrastructure.adapters.notifications import LoggingNotificationService


def draft_order() -> Order:
    order = Order.create(TableId(8), SessionId.generate())
    order.add_product(ProductId.generate(), "Papas Arrugadas", Price(Decimal("4.50")), Quantity(3))
    order.add_product(ProductId.generate(), "Cerveza", Price(Decimal("2.00")), Quantity(1))
    return order


@pytest.mark.asyncio
async def test_dispatch_confirmation_events():
    notifier = LoggingNotificationService()
    order = draft_order()
    order.confirm()

    dispatched = await OrderEventDispatcher(notifier).dispatch(order)

    assert dispatched == 2
    assert order.get_domain_events() == []
    methods = [(m.group, m.method) for m in notifier.get_notifications()]
    assert methods == [
        ("table_8", "OrderConfirmed"),
        ("kitchen", "NewOrder"),
        ("table_8", "OrderStatusChanged"),
        ("kitchen", "OrderStatusChanged"),
    ]


@pytest.mark.asyncio
async def test_dispatch_without_events(notification_service):
    order = draft_order()

    dispatched = await OrderEventDispatcher(notification_service).dispatch(order)

    assert dispatched == 0
    notification_service.notify_order_confirmed.assert_not_awaited()
    notification_service.notify_order_status_changed.assert_not_awaited()


def test_order_dto_round_trip():
    order = draft_order()
    order.confirm()

    dto = OrderMapper.to_dto(order)
    rebuilt = OrderMapper.to_domain(dto)

    assert dto.status == "Confirmed"
    assert dto.total == Decimal("15.50")
    assert dto.currency == "EUR"
    assert rebuilt.id == order.id
    assert rebuilt.table_id == order.table_id
    assert rebuilt.session_id == order.session_id
    assert rebuilt.status == OrderStatus.CONFIRMED
    assert rebuilt.total == order.total
    assert [line.id for line in rebuilt.lines] == [line.id for line in order.lines]
    assert rebuilt.confirmed_at == order.confirmed_at
    assert rebuilt.get_domain_events() == []
    assert OrderMapper.to_dto(rebuilt) == dto


def test_order_dto_is_json_friendly():
    dto = OrderMapper.to_dto(draft_order())

    data = dto.model_dump(mode="json")

    assert data["status"] == "Draft"
    assert data["table_number"] == 8
    assert data["lines"][0]["quantity"] == 3
    assert Decimal(data["total"]) == Decimal("15.50")


def test_product_dto_round_trip(queso):
    dto = CatalogMapper.product_to_dto(queso)

    rebuilt = CatalogMapper.product_to_domain(dto)

    assert rebuilt == queso

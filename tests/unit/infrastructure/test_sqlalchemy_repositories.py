"""
Tests for the SQLAlchemy repositories against in-memory SQLite.
"""
from decimal import Decimal

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from tableside.data.models import init_models
from tableside.data.repositories import (
    SqlAlchemyCategoryRepository,
    SqlAlchemyOrderRepository,
    SqlAlchemyPaymentRepository,
    SqlAlchemyProductRepository,
    SqlAlchemyTableRepository,
)
from tableside.domain.entities import Category, Order, Payment, Product, Table
from tableside.domain.enums import OrderStatus, PaymentStatus
from tableside.domain.value_objects import (
    Allergens,
    OrderId,
    Price,
    ProductId,
    Quantity,
    SessionId,
    TableId,
)
from tableside.infrastructure.database.config import get_session_factory


TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def session_factory():
    """Fresh in-memory schema per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )
    await init_models(engine)

    yield get_session_factory(engine)

    await engine.dispose()


def eur(amount: str) -> Price:
    return Price(Decimal(amount), "EUR")


# =============================================================================
# ORDERS
# =============================================================================

@pytest.mark.asyncio
async def test_order_round_trip_with_lines(session_factory):
    repo = SqlAlchemyOrderRepository(session_factory)
    papas, cerveza = ProductId.generate(), ProductId.generate()
    order = Order.create(TableId(5), SessionId.generate())
    order.add_product(papas, "Papas Arrugadas", eur("4.50"), Quantity(2))
    order.add_product(cerveza, "Cerveza", eur("2.00"), Quantity(1))

    await repo.save(order)
    loaded = await repo.get_by_id(order.id)

    assert loaded.id == order.id
    assert loaded.table_id == TableId(5)
    assert loaded.session_id == order.session_id
    assert loaded.status == OrderStatus.DRAFT
    assert [line.product_name for line in loaded.lines] == ["Papas Arrugadas", "Cerveza"]
    assert loaded.total == eur("11.00")
    assert loaded.created_at.tzinfo is not None


@pytest.mark.asyncio
async def test_order_update_merges_removes_and_confirms(session_factory):
    repo = SqlAlchemyOrderRepository(session_factory)
    papas, cerveza, queso = ProductId.generate(), ProductId.generate(), ProductId.generate()
    order = Order.create(TableId(5), SessionId.generate())
    order.add_product(papas, "Papas Arrugadas", eur("4.50"), Quantity(2))
    order.add_product(cerveza, "Cerveza", eur("2.00"), Quantity(1))
    await repo.save(order)

    order = await repo.get_by_id(order.id)
    order.add_product(papas, "Papas Arrugadas", eur("4.50"), Quantity(1))
    order.remove_line(order.lines[1].id)
    order.add_product(queso, "Queso Asado", eur("6.00"), Quantity(1))
    order.confirm()
    await repo.save(order)

    loaded = await repo.get_by_id(order.id)

    assert loaded.status == OrderStatus.CONFIRMED
    assert loaded.confirmed_at is not None
    assert [(line.product_name, line.quantity.value) for line in loaded.lines] == [
        ("Papas Arrugadas", 3),
        ("Queso Asado", 1),
    ]
    assert loaded.total == eur("19.50")
    assert loaded.get_domain_events() == []


@pytest.mark.asyncio
async def test_active_order_by_table(session_factory):
    repo = SqlAlchemyOrderRepository(session_factory)
    cancelled = Order.create(TableId(2), SessionId.generate())
    cancelled.cancel()
    await repo.save(cancelled)

    assert await repo.get_active_order_by_table(TableId(2)) is None

    open_order = Order.create(TableId(2), SessionId.generate())
    await repo.save(open_order)

    found = await repo.get_active_order_by_table(TableId(2))
    assert found.id == open_order.id
    assert await repo.get_active_order_by_table(TableId(3)) is None


@pytest.mark.asyncio
async def test_order_get_all_and_delete(session_factory):
    repo = SqlAlchemyOrderRepository(session_factory)
    first = Order.create(TableId(1), SessionId.generate())
    first.add_product(ProductId.generate(), "Agua", eur("1.00"), Quantity(1))
    second = Order.create(TableId(2), SessionId.generate())
    await repo.save(first)
    await repo.save(second)

    assert {o.id for o in await repo.get_all()} == {first.id, second.id}

    await repo.delete(first.id)

    assert await repo.get_by_id(first.id) is None
    assert [o.id for o in await repo.get_all()] == [second.id]


# =============================================================================
# TABLES
# =============================================================================

@pytest.mark.asyncio
async def test_table_session_is_persisted(session_factory):
    repo = SqlAlchemyTableRepository(session_factory)
    table = Table.create(TableId(7))
    await repo.save(table)

    table = await repo.get_by_id(TableId(7))
    assert not table.is_occupied

    session = table.start_session()
    await repo.save(table)

    loaded = await repo.get_by_id(TableId(7))
    assert loaded.is_occupied
    assert loaded.active_session.id == session.id
    assert loaded.active_session.started_at.tzinfo is not None

    loaded.end_session()
    await repo.save(loaded)

    assert not (await repo.get_by_id(TableId(7))).is_occupied


@pytest.mark.asyncio
async def test_tables_are_listed_in_number_order(session_factory):
    repo = SqlAlchemyTableRepository(session_factory)
    for number in (3, 1, 2):
        await repo.save(Table.create(TableId(number)))

    assert [t.id.value for t in await repo.get_all()] == [1, 2, 3]
    assert await repo.get_by_id(TableId(9)) is None


# =============================================================================
# PAYMENTS
# =============================================================================

@pytest.mark.asyncio
async def test_payment_lifecycle_is_persisted(session_factory):
    repo = SqlAlchemyPaymentRepository(session_factory)
    order_id = OrderId.generate()

    failed = Payment.create(order_id, eur("25.50"))
    failed.mark_as_processing()
    failed.mark_as_failed("card_declined: Card was declined by the issuer")
    await repo.save(failed)

    latest = await repo.get_by_order_id(order_id)
    assert latest.status == PaymentStatus.FAILED
    assert latest.failure_reason == "card_declined: Card was declined by the issuer"

    completed = Payment.create(order_id, eur("25.50"))
    await repo.save(completed)
    completed.mark_as_processing()
    completed.mark_as_completed("txn_abc")
    await repo.save(completed)

    found = await repo.get_by_order_id(order_id)
    assert found.id == completed.id
    assert found.transaction_id == "txn_abc"
    assert found.amount == eur("25.50")
    assert found.is_successful()

    assert (await repo.get_by_id(failed.id)).status == PaymentStatus.FAILED
    assert await repo.get_by_order_id(OrderId.generate()) is None


# =============================================================================
# CATALOG
# =============================================================================

@pytest.mark.asyncio
async def test_catalog_round_trip(session_factory):
    categories = SqlAlchemyCategoryRepository(session_factory)
    products = SqlAlchemyProductRepository(session_factory)

    postres = Category.create("Postres", "Postres caseros")
    cafes = Category.create("Cafés")
    cafes.deactivate()
    await categories.save(postres)
    await categories.save(cafes)

    quesillo = Product.create(
        name="Quesillo",
        description="Flan canario casero",
        price=eur("3.50"),
        category_id=postres.id,
        allergens=Allergens.of("lactosa", "huevo"),
    )
    helado = Product.create("Helado de la Casa", None, eur("3.00"), postres.id)
    helado.make_unavailable()
    await products.save(quesillo)
    await products.save(helado)

    assert [c.name for c in await categories.get_active()] == ["Postres"]
    assert len(await categories.get_all()) == 2

    loaded = await products.get_by_id(quesillo.id)
    assert loaded.allergens.sorted_values() == ["Huevo", "Lactosa"]
    assert loaded.price == eur("3.50")

    assert {p.name for p in await products.get_by_category(postres.id)} == {
        "Quesillo",
        "Helado de la Casa",
    }
    assert [p.name for p in await products.get_available()] == ["Quesillo"]

    quesillo.update_price(eur("4.00"))
    await products.save(quesillo)
    assert (await products.get_by_id(quesillo.id)).price == eur("4.00")

    await products.delete(helado.id)
    assert await products.get_by_id(helado.id) is None

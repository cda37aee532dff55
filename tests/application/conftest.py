"""Fixtures for application use case tests (in-memory adapters, mocked collaborators)."""
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio

from tableside.application.interfaces import IOrderNotificationService, IPaymentGateway, PaymentResult
from tableside.application.use_cases import (
    GetOrCreateOrderForTableUseCase,
    StartTableSessionUseCase,
)
from tableside.domain.entities import Category, Product
from tableside.domain.value_objects import Allergens, Price
from tableside.infrastructure.adapters.persistence import (
    InMemoryCategoryRepository,
    InMemoryOrderRepository,
    InMemoryPaymentRepository,
    InMemoryProductRepository,
    InMemoryTableRepository,
)


@pytest.fixture
def order_repository():
    return InMemoryOrderRepository()


@pytest.fixture
def table_repository():
    """Tables 1..10 exist, all free."""
    return InMemoryTableRepository(table_count=10)


@pytest.fixture
def payment_repository():
    return InMemoryPaymentRepository()


@pytest.fixture
def entrantes():
    return Category.create("Entrantes", "Para abrir boca")


@pytest.fixture
def bebidas():
    return Category.create("Bebidas")


@pytest.fixture
def papas(entrantes):
    return Product.create(
        name="Papas Arrugadas",
        description="Con mojo picón",
        price=Price(Decimal("4.50"), "EUR"),
        category_id=entrantes.id,
    )


@pytest.fixture
def queso(entrantes):
    return Product.create(
        name="Queso Asado",
        description=None,
        price=Price(Decimal("6.00"), "EUR"),
        category_id=entrantes.id,
        allergens=Allergens.of("lactosa"),
    )


@pytest.fixture
def cerveza(bebidas):
    return Product.create(
        name="Cerveza",
        description=None,
        price=Price(Decimal("2.00"), "EUR"),
        category_id=bebidas.id,
    )


@pytest.fixture
def category_repository(entrantes, bebidas):
    return InMemoryCategoryRepository([entrantes, bebidas])


@pytest.fixture
def product_repository(papas, queso, cerveza):
    return InMemoryProductRepository([papas, queso, cerveza])


@pytest.fixture
def notification_service():
    """Notifier whose calls can be asserted."""
    return AsyncMock(spec=IOrderNotificationService)


@pytest.fixture
def payment_gateway():
    """Gateway that approves every charge with transaction txn_abc."""
    gateway = AsyncMock(spec=IPaymentGateway)
    gateway.process_payment.return_value = PaymentResult.succeeded("txn_abc")
    return gateway


@pytest_asyncio.fixture
async def open_order(table_repository, order_repository):
    """Draft order of table 5 with a started session."""
    await StartTableSessionUseCase(table_repository).execute(5)
    result = await GetOrCreateOrderForTableUseCase(order_repository, table_repository).execute(5)
    return result.value

"""
In-memory repository implementations.

Used for development, demos and tests. Aggregates are deep-copied on the
way in and on the way out, so callers never share instances with the
store or with each other (same load-mutate-save semantics as a database).
"""
from copy import deepcopy
from typing import Dict, Iterable, List, Optional
import logging

from tableside.domain.entities import Category, Order, Payment, Product, Table
from tableside.domain.repositories import (
    CategoryRepository,
    OrderRepository,
    PaymentRepository,
    ProductRepository,
    TableRepository,
)
from tableside.domain.value_objects import (
    CategoryId,
    OrderId,
    PaymentId,
    ProductId,
    TableId,
)


logger = logging.getLogger(__name__)


class InMemoryOrderRepository(OrderRepository):
    """
    In-memory implementation of OrderRepository.

    Stores orders in a dictionary keyed by OrderId.
    """

    def __init__(self):
        """Initialize empty storage."""
        self._storage: Dict[OrderId, Order] = {}
        logger.info("InMemoryOrderRepository initialized (in-memory storage)")

    async def get_by_id(self, order_id: OrderId) -> Optional[Order]:
        order = self._storage.get(order_id)
        return deepcopy(order) if order is not None else None

    async def get_active_order_by_table(self, table_id: TableId) -> Optional[Order]:
        candidates = [
            o for o in self._storage.values()
            if o.table_id == table_id and o.status.is_open
        ]
        if not candidates:
            return None
        return deepcopy(max(candidates, key=lambda o: o.created_at))

    async def get_all(self) -> List[Order]:
        return [deepcopy(o) for o in self._storage.values()]

    async def save(self, order: Order) -> None:
        """
        Save order to in-memory storage.

        Args:
            order: Order aggregate to save
        """
        stored = deepcopy(order)
        # Pending events belong to the caller's instance
        stored.clear_domain_events()
        self._storage[order.id] = stored
        logger.debug(
            f"Order saved: {order.id} (status: {order.status.value}, total: {order.total})"
        )

    async def delete(self, order_id: OrderId) -> None:
        self._storage.pop(order_id, None)

    def clear(self) -> None:
        """Clear all stored orders (for testing)."""
        self._storage.clear()


class InMemoryTableRepository(TableRepository):
    """
    In-memory implementation of TableRepository.

    Optionally pre-seeded with tables 1..table_count.
    """

    def __init__(self, table_count: int = 0):
        self._storage: Dict[TableId, Table] = {}
        for number in range(1, table_count + 1):
            table = Table.create(TableId(number))
            self._storage[table.id] = table
        logger.info(f"InMemoryTableRepository initialized with {table_count} table(s)")

    async def get_by_id(self, table_id: TableId) -> Optional[Table]:
        table = self._storage.get(table_id)
        return deepcopy(table) if table is not None else None

    async def get_all(self) -> List[Table]:
        return [
            deepcopy(t)
            for t in sorted(self._storage.values(), key=lambda t: t.id.value)
        ]

    async def save(self, table: Table) -> None:
        self._storage[table.id] = deepcopy(table)
        logger.debug(f"Table saved: {table.id.value} (occupied: {table.is_occupied})")


class InMemoryPaymentRepository(PaymentRepository):
    """In-memory implementation of PaymentRepository (keeps every attempt)."""

    def __init__(self):
        self._storage: Dict[PaymentId, Payment] = {}
        logger.info("InMemoryPaymentRepository initialized (in-memory storage)")

    async def get_by_id(self, payment_id: PaymentId) -> Optional[Payment]:
        payment = self._storage.get(payment_id)
        return deepcopy(payment) if payment is not None else None

    async def get_by_order_id(self, order_id: OrderId) -> Optional[Payment]:
        attempts = [p for p in self._storage.values() if p.order_id == order_id]
        if not attempts:
            return None

        successful = next((p for p in attempts if p.is_successful()), None)
        if successful is not None:
            return deepcopy(successful)

        return deepcopy(max(attempts, key=lambda p: p.created_at))

    async def save(self, payment: Payment) -> None:
        self._storage[payment.id] = deepcopy(payment)
        logger.debug(f"Payment saved: {payment.id} (status: {payment.status.value})")


class InMemoryProductRepository(ProductRepository):
    """In-memory implementation of ProductRepository."""

    def __init__(self, products: Optional[Iterable[Product]] = None):
        self._storage: Dict[ProductId, Product] = {}
        for product in products or ():
            self._storage[product.id] = deepcopy(product)

    async def get_by_id(self, product_id: ProductId) -> Optional[Product]:
        product = self._storage.get(product_id)
        return deepcopy(product) if product is not None else None

    async def get_all(self) -> List[Product]:
        return [deepcopy(p) for p in self._storage.values()]

    async def get_by_category(self, category_id: CategoryId) -> List[Product]:
        return [
            deepcopy(p) for p in self._storage.values()
            if p.category_id == category_id
        ]

    async def get_available(self) -> List[Product]:
        return [deepcopy(p) for p in self._storage.values() if p.is_available]

    async def save(self, product: Product) -> None:
        self._storage[product.id] = deepcopy(product)

    async def delete(self, product_id: ProductId) -> None:
        self._storage.pop(product_id, None)


class InMemoryCategoryRepository(CategoryRepository):
    """In-memory implementation of CategoryRepository."""

    def __init__(self, categories: Optional[Iterable[Category]] = None):
        self._storage: Dict[CategoryId, Category] = {}
        for category in categories or ():
            self._storage[category.id] = deepcopy(category)

    async def get_by_id(self, category_id: CategoryId) -> Optional[Category]:
        category = self._storage.get(category_id)
        return deepcopy(category) if category is not None else None

    async def get_all(self) -> List[Category]:
        return [deepcopy(c) for c in self._storage.values()]

    async def get_active(self) -> List[Category]:
        return [deepcopy(c) for c in self._storage.values() if c.is_active]

    async def save(self, category: Category) -> None:
        self._storage[category.id] = deepcopy(category)

    async def delete(self, category_id: CategoryId) -> None:
        self._storage.pop(category_id, None)

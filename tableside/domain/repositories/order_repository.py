"""Repository interface for Order aggregate."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.order import Order
from ..value_objects import OrderId, TableId


class OrderRepository(ABC):
    """Abstract repository for Order aggregate persistence.

    Orders are loaded, mutated in memory and saved back whole; a save
    replaces whatever was stored (last writer wins).
    """

    @abstractmethod
    async def get_by_id(self, order_id: OrderId) -> Optional[Order]:
        """Retrieve order by unique identifier.

        Args:
            order_id: OrderId identifier

        Returns:
            Order if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_active_order_by_table(self, table_id: TableId) -> Optional[Order]:
        """Retrieve the open (Draft or Confirmed) order of a table.

        Args:
            table_id: Table number

        Returns:
            Most recently created open order, None if the table has none
        """
        pass

    @abstractmethod
    async def get_all(self) -> List[Order]:
        """List every stored order."""
        pass

    @abstractmethod
    async def save(self, order: Order) -> None:
        """Insert or replace the order aggregate.

        Args:
            order: Order aggregate to persist
        """
        pass

    @abstractmethod
    async def delete(self, order_id: OrderId) -> None:
        """Physically remove an order (no use case calls this)."""
        pass

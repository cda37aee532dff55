"""Repository interfaces for the menu catalog."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.catalog import Category, Product
from ..value_objects import CategoryId, ProductId


class ProductRepository(ABC):
    """Abstract repository for Product persistence."""

    @abstractmethod
    async def get_by_id(self, product_id: ProductId) -> Optional[Product]:
        pass

    @abstractmethod
    async def get_all(self) -> List[Product]:
        pass

    @abstractmethod
    async def get_by_category(self, category_id: CategoryId) -> List[Product]:
        """List products of one category, available or not."""
        pass

    @abstractmethod
    async def get_available(self) -> List[Product]:
        pass

    @abstractmethod
    async def save(self, product: Product) -> None:
        pass

    @abstractmethod
    async def delete(self, product_id: ProductId) -> None:
        pass


class CategoryRepository(ABC):
    """Abstract repository for Category persistence."""

    @abstractmethod
    async def get_by_id(self, category_id: CategoryId) -> Optional[Category]:
        pass

    @abstractmethod
    async def get_all(self) -> List[Category]:
        pass

    @abstractmethod
    async def get_active(self) -> List[Category]:
        pass

    @abstractmethod
    async def save(self, category: Category) -> None:
        pass

    @abstractmethod
    async def delete(self, category_id: CategoryId) -> None:
        pass

"""SQLAlchemy implementations of the catalog repositories."""

from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import async_sessionmaker

from tableside.domain.entities import Category, Product
from tableside.domain.repositories import CategoryRepository, ProductRepository
from tableside.domain.value_objects import CategoryId, ProductId

from ..mappers import CategoryMapper, ProductMapper
from ..models import CategoryModel, ProductModel


class SqlAlchemyCategoryRepository(CategoryRepository):
    """Concrete implementation of CategoryRepository using SQLAlchemy."""

    def __init__(self, session_factory: async_sessionmaker) -> None:
        self._session_factory = session_factory

    async def get_by_id(self, category_id: CategoryId) -> Optional[Category]:
        async with self._session_factory() as session:
            model = await session.get(CategoryModel, str(category_id))
            return CategoryMapper.to_domain(model) if model else None

    async def get_all(self) -> List[Category]:
        return await self._list(select(CategoryModel))

    async def get_active(self) -> List[Category]:
        return await self._list(select(CategoryModel).where(CategoryModel.is_active.is_(True)))

    async def save(self, category: Category) -> None:
        async with self._session_factory() as session:
            async with session.begin():
                model = await session.get(CategoryModel, str(category.id))
                if model is None:
                    model = CategoryModel(id=str(category.id))
                    session.add(model)
                CategoryMapper.update_persistence(category, model)

    async def delete(self, category_id: CategoryId) -> None:
        async with self._session_factory() as session:
            async with session.begin():
                await session.execute(
                    delete(CategoryModel).where(CategoryModel.id == str(category_id))
                )

    async def _list(self, statement) -> List[Category]:
        async with self._session_factory() as session:
            result = await session.execute(statement)
            return [CategoryMapper.to_domain(model) for model in result.scalars().all()]


class SqlAlchemyProductRepository(ProductRepository):
    """Concrete implementation of ProductRepository using SQLAlchemy."""

    def __init__(self, session_factory: async_sessionmaker) -> None:
        self._session_factory = session_factory

    async def get_by_id(self, product_id: ProductId) -> Optional[Product]:
        async with self._session_factory() as session:
            model = await session.get(ProductModel, str(product_id))
            return ProductMapper.to_domain(model) if model else None

    async def get_all(self) -> List[Product]:
        return await self._list(select(ProductModel))

    async def get_by_category(self, category_id: CategoryId) -> List[Product]:
        return await self._list(
            select(ProductModel).where(ProductModel.category_id == str(category_id))
        )

    async def get_available(self) -> List[Product]:
        return await self._list(
            select(ProductModel).where(ProductModel.is_available.is_(True))
        )

    async def save(self, product: Product) -> None:
        async with self._session_factory() as session:
            async with session.begin():
                model = await session.get(ProductModel, str(product.id))
                if model is None:
                    model = ProductModel(id=str(product.id))
                    session.add(model)
                ProductMapper.update_persistence(product, model)

    async def delete(self, product_id: ProductId) -> None:
        async with self._session_factory() as session:
            async with session.begin():
                await session.execute(
                    delete(ProductModel).where(ProductModel.id == str(product_id))
                )

    async def _list(self, statement) -> List[Product]:
        async with self._session_factory() as session:
            result = await session.execute(statement)
            return [ProductMapper.to_domain(model) for model in result.scalars().all()]

"""
Tests for menu browsing use cases.
"""
from decimal import Decimal

import pytest

from tableside.application.use_cases import GetAllCategoriesUseCase, GetProductsByCategoryUseCase
from tableside.domain.value_objects import CategoryId


@pytest.fixture
def products_by_category(category_repository, product_repository):
    return GetProductsByCategoryUseCase(category_repository, product_repository)


@pytest.mark.asyncio
async def test_categories_hide_inactive(category_repository, bebidas):
    bebidas.deactivate()
    await category_repository.save(bebidas)

    result = await GetAllCategoriesUseCase(category_repository).execute()

    assert result.success
    assert [c.name for c in result.value] == ["Entrantes"]


@pytest.mark.asyncio
async def test_products_by_category(products_by_category, entrantes):
    result = await products_by_category.execute(str(entrantes.id))

    assert result.success
    by_name = {p.name: p for p in result.value}
    assert set(by_name) == {"Papas Arrugadas", "Queso Asado"}
    assert by_name["Queso Asado"].price == Decimal("6.00")
    assert by_name["Queso Asado"].allergens == ["Lactosa"]
    assert by_name["Papas Arrugadas"].allergens == []


@pytest.mark.asyncio
async def test_products_by_category_hides_unavailable(
    products_by_category, entrantes, papas, product_repository
):
    papas.make_unavailable()
    await product_repository.save(papas)

    result = await products_by_category.execute(str(entrantes.id))

    assert [p.name for p in result.value] == ["Queso Asado"]


@pytest.mark.asyncio
async def test_products_of_inactive_category(products_by_category, entrantes, category_repository):
    entrantes.deactivate()
    await category_repository.save(entrantes)

    result = await products_by_category.execute(str(entrantes.id))

    assert not result.success
    assert result.error == "Category 'Entrantes' is not active."


@pytest.mark.asyncio
async def test_products_of_unknown_category(products_by_category):
    category_id = str(CategoryId.generate())

    result = await products_by_category.execute(category_id)

    assert not result.success
    assert result.error == f"Category with ID {category_id} does not exist."

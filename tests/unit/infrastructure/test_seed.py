"""
Unit tests for startup seeding.
"""
import pytest

from tableside.domain.value_objects import TableId
from tableside.infrastructure.adapters.persistence import (
    InMemoryCategoryRepository,
    InMemoryProductRepository,
    InMemoryTableRepository,
)
from tableside.infrastructure.seed import MENU, seed_catalog, seed_tables


@pytest.mark.asyncio
async def test_seed_tables_creates_missing_tables_only():
    repo = InMemoryTableRepository(table_count=2)
    table = await repo.get_by_id(TableId(1))
    table.start_session()
    await repo.save(table)

    created = await seed_tables(repo, 5)

    assert created == 3
    assert [t.id.value for t in await repo.get_all()] == [1, 2, 3, 4, 5]
    assert (await repo.get_by_id(TableId(1))).is_occupied


@pytest.mark.asyncio
async def test_seed_catalog_once():
    categories = InMemoryCategoryRepository()
    products = InMemoryProductRepository()

    created = await seed_catalog(categories, products)
    again = await seed_catalog(categories, products)

    assert created == sum(len(items) for _, _, items in MENU)
    assert again == 0
    assert len(await categories.get_all()) == len(MENU)
    assert len(await products.get_all()) == created


@pytest.mark.asyncio
async def test_seeded_products_carry_allergens():
    categories = InMemoryCategoryRepository()
    products = InMemoryProductRepository()
    await seed_catalog(categories, products)

    by_name = {p.name: p for p in await products.get_all()}

    assert by_name["Bienmesabe"].allergens.sorted_values() == ["Frutos secos", "Huevo"]
    assert not by_name["Agua"].allergens.has_allergens
    assert all(p.price.currency == "EUR" for p in by_name.values())

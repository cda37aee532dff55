"""
Startup seeding.

Tables are a fixed roster (1..N) and the menu is a Canarian grill house
card. Both functions are safe to call on every startup.
"""
from decimal import Decimal
from typing import List, Tuple
import logging

from tableside.domain.entities import Category, Product, Table
from tableside.domain.repositories import (
    CategoryRepository,
    ProductRepository,
    TableRepository,
)
from tableside.domain.value_objects import Allergens, Price, TableId


logger = logging.getLogger(__name__)


# (name, description, price EUR, allergens)
MenuItem = Tuple[str, str, str, Tuple[str, ...]]

MENU: List[Tuple[str, str, List[MenuItem]]] = [
    ("Bebidas", "Vinos de la casa y bebidas", [
        ("Vino Tinto de la Casa", "Vino tinto del norte de Tenerife", "1.50", ()),
        ("Vino Blanco de la Casa", "Vino blanco afrutado", "1.50", ()),
        ("Vino Rosado", "Vino rosado fresco", "1.50", ()),
        ("Agua", "Agua mineral", "1.00", ()),
        ("Refresco", "Coca-Cola, Fanta, Sprite", "1.50", ()),
        ("Cerveza Dorada", "Cerveza canaria", "2.00", ()),
        ("Tropical", "Cerveza canaria", "2.00", ()),
    ]),
    ("Entrantes", "Para abrir boca", [
        ("Papas Arrugadas con Mojo", "Papas con mojo picón y mojo verde", "4.50", ()),
        ("Queso Asado", "Queso de cabra asado con mojo", "6.00", ("lactosa",)),
        ("Pimientos de Padrón", "Pimientos fritos con sal gorda", "5.00", ()),
        ("Chicharrones", "Chicharrones caseros", "5.50", ()),
        ("Chorizo a la Brasa", "Chorizo canario a la brasa", "6.50", ()),
        ("Champiñones al Ajillo", "Champiñones salteados con ajo", "5.50", ()),
    ]),
    ("Carnes a la Brasa", "Nuestras especialidades a la parrilla", [
        ("Chuletas de Cerdo", "Chuletas de cerdo a la brasa con papas y ensalada", "9.50", ()),
        ("Costillas", "Costillas de cerdo a la brasa", "10.50", ()),
        ("Pollo al Horno", "Medio pollo al horno con papas", "8.50", ()),
        ("Conejo al Salmorejo", "Conejo marinado en salmorejo canario", "11.00", ()),
        ("Carne de Cabra", "Carne de cabra guisada", "10.50", ()),
        ("Entrecot", "Entrecot de ternera a la brasa", "14.00", ()),
    ]),
    ("Pescados", "Pescado fresco del día", [
        ("Cherne a la Plancha", "Cherne fresco con papas arrugadas", "13.00", ("pescado",)),
        ("Vieja Saneada", "Vieja a la plancha", "12.00", ("pescado",)),
        ("Sama a la Plancha", "Sama fresca con guarnición", "13.50", ("pescado",)),
        ("Pulpo a la Gallega", "Pulpo con papas y pimentón", "14.00", ("moluscos",)),
        ("Calamares Fritos", "Calamares rebozados", "9.00", ("moluscos", "gluten")),
    ]),
    ("Guisos Canarios", "Potajes y guisos tradicionales", [
        ("Ropa Vieja", "Guiso de garbanzos con carne", "8.50", ()),
        ("Potaje de Berros", "Potaje canario con berros y costilla", "7.50", ()),
        ("Puchero Canario", "Puchero con verduras y carnes", "8.00", ()),
        ("Rancho Canario", "Rancho con fideos y papas", "7.00", ("gluten",)),
    ]),
    ("Postres", "Postres caseros", [
        ("Quesillo", "Flan canario casero", "3.50", ("lactosa", "huevo")),
        ("Bienmesabe", "Postre de almendras típico canario", "4.00", ("frutos secos", "huevo")),
        ("Frangollo", "Postre de gofio con leche", "3.50", ("lactosa", "gluten")),
        ("Príncipe Alberto", "Bizcocho con almendras y chocolate", "4.00",
         ("gluten", "lactosa", "huevo", "frutos secos")),
        ("Helado de la Casa", "Helado artesanal", "3.00", ("lactosa",)),
    ]),
    ("Cafés", "Café y bebidas calientes", [
        ("Café Solo", "Café expreso", "1.20", ()),
        ("Cortado", "Café cortado", "1.30", ("lactosa",)),
        ("Café con Leche", "Café con leche", "1.40", ("lactosa",)),
        ("Barraquito", "Café canario con leche condensada y licor", "2.00", ("lactosa",)),
    ]),
]


async def seed_tables(table_repository: TableRepository, count: int) -> int:
    """
    Create tables 1..count that do not exist yet.

    Args:
        table_repository: Target repository
        count: Highest table number

    Returns:
        Number of tables created
    """
    created = 0
    for number in range(1, count + 1):
        table_id = TableId(number)
        if await table_repository.get_by_id(table_id) is None:
            await table_repository.save(Table.create(table_id))
            created += 1

    if created:
        logger.info(f"Seeded {created} table(s)")
    return created


async def seed_catalog(
    category_repository: CategoryRepository,
    product_repository: ProductRepository,
) -> int:
    """
    Load the house menu unless a catalog already exists.

    Returns:
        Number of products created
    """
    if await category_repository.get_all():
        logger.info("Catalog already seeded, skipping seed")
        return 0

    created = 0
    for category_name, category_description, items in MENU:
        category = Category.create(category_name, category_description)
        await category_repository.save(category)

        for name, description, amount, allergens in items:
            product = Product.create(
                name=name,
                description=description,
                price=Price(Decimal(amount), "EUR"),
                category_id=category.id,
                allergens=Allergens.of(*allergens),
            )
            await product_repository.save(product)
            created += 1

    logger.info(f"Seeded {len(MENU)} categories and {created} products")
    return created

"""Menu catalog entities: categories and products."""
from dataclasses import dataclass, field
from typing import Optional

from ..exceptions import ValidationError
from ..value_objects import Allergens, CategoryId, Price, ProductId


MAX_DESCRIPTION_LENGTH = 500


def _validate_name(name: Optional[str], entity: str, max_length: int) -> None:
    if not name or not name.strip():
        raise ValidationError(f"{entity} name is required.")
    if len(name) > max_length:
        raise ValidationError(
            f"{entity} name cannot exceed {max_length} characters. "
            f"Current length: {len(name)}"
        )


def _validate_description(description: Optional[str], entity: str) -> None:
    if description is not None and len(description) > MAX_DESCRIPTION_LENGTH:
        raise ValidationError(
            f"{entity} description cannot exceed {MAX_DESCRIPTION_LENGTH} characters. "
            f"Current length: {len(description)}"
        )


@dataclass
class Category:
    """Menu section (drinks, starters, desserts...)."""

    MAX_NAME_LENGTH = 100

    id: CategoryId
    name: str
    description: Optional[str] = None
    is_active: bool = True

    @classmethod
    def create(cls, name: str, description: Optional[str] = None) -> "Category":
        _validate_name(name, "Category", cls.MAX_NAME_LENGTH)
        _validate_description(description, "Category")
        return cls(id=CategoryId.generate(), name=name, description=description)

    def update_name(self, name: str) -> None:
        _validate_name(name, "Category", self.MAX_NAME_LENGTH)
        self.name = name

    def update_description(self, description: Optional[str]) -> None:
        _validate_description(description, "Category")
        self.description = description

    def activate(self) -> None:
        self.is_active = True

    def deactivate(self) -> None:
        self.is_active = False


@dataclass
class Product:
    """
    Orderable menu item.

    Order lines copy name and price at add time, so edits here only
    affect future lines.
    """

    MAX_NAME_LENGTH = 200

    id: ProductId
    name: str
    price: Price
    category_id: CategoryId
    description: Optional[str] = None
    allergens: Allergens = field(default_factory=Allergens.none)
    is_available: bool = True

    @classmethod
    def create(
        cls,
        name: str,
        description: Optional[str],
        price: Price,
        category_id: CategoryId,
        allergens: Optional[Allergens] = None,
    ) -> "Product":
        _validate_name(name, "Product", cls.MAX_NAME_LENGTH)
        _validate_description(description, "Product")
        return cls(
            id=ProductId.generate(),
            name=name,
            description=description,
            price=price,
            category_id=category_id,
            allergens=allergens or Allergens.none(),
        )

    def update_name(self, name: str) -> None:
        _validate_name(name, "Product", self.MAX_NAME_LENGTH)
        self.name = name

    def update_description(self, description: Optional[str]) -> None:
        _validate_description(description, "Product")
        self.description = description

    def update_price(self, price: Price) -> None:
        if price is None:
            raise ValidationError("Price cannot be null")
        self.price = price

    def update_category(self, category_id: CategoryId) -> None:
        if category_id is None:
            raise ValidationError("CategoryId cannot be null")
        self.category_id = category_id

    def make_available(self) -> None:
        self.is_available = True

    def make_unavailable(self) -> None:
        self.is_available = False

"""Application DTOs for the menu catalog."""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field


class CategoryDTO(BaseModel):
    """Menu category."""

    id: str = Field(..., description="Category ID")
    name: str = Field(..., description="Category name")
    description: Optional[str] = Field(None, description="Category description")
    is_active: bool = Field(default=True, description="Shown on the menu")

    model_config = {"frozen": True}


class ProductDTO(BaseModel):
    """Menu product."""

    id: str = Field(..., description="Product ID")
    name: str = Field(..., description="Product name")
    description: Optional[str] = Field(None, description="Product description")
    price: Decimal = Field(..., ge=0, description="Price amount")
    currency: str = Field(default="EUR", description="Currency code")
    category_id: str = Field(..., description="Category ID")
    allergens: List[str] = Field(default_factory=list, description="Allergen names")
    is_available: bool = Field(default=True, description="Can be ordered")

    model_config = {"frozen": True}

"""Application DTOs for Order operations."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field


class OrderLineDTO(BaseModel):
    """DTO for order line."""

    id: str = Field(..., description="Order line ID")
    product_id: str = Field(..., description="Product ID")
    product_name: str = Field(..., description="Product name at the time it was added")
    unit_price: Decimal = Field(..., ge=0, description="Unit price amount")
    currency: str = Field(default="EUR", description="Currency code")
    quantity: int = Field(..., ge=1, le=100, description="Quantity ordered")
    subtotal: Decimal = Field(..., ge=0, description="unit_price * quantity")

    model_config = {"frozen": True}


class OrderDTO(BaseModel):
    """Response DTO for order details."""

    id: str = Field(..., description="Order ID")
    table_number: int = Field(..., gt=0, description="Table number")
    session_id: str = Field(..., description="Table session the order belongs to")
    status: str = Field(..., description="Order status (Draft, Confirmed, ...)")
    lines: List[OrderLineDTO] = Field(default_factory=list, description="Order lines")
    total: Decimal = Field(..., ge=0, description="Total order amount")
    currency: str = Field(default="EUR", description="Currency code")
    created_at: datetime = Field(..., description="Creation timestamp")
    confirmed_at: Optional[datetime] = Field(None, description="Confirmation timestamp")

    model_config = {"frozen": True}

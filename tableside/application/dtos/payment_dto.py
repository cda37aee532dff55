"""Application DTOs for Payment operations."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class PaymentDTO(BaseModel):
    """Response DTO for a payment attempt."""

    id: str = Field(..., description="Payment ID")
    order_id: str = Field(..., description="Order being paid")
    amount: Decimal = Field(..., ge=0, description="Charged amount")
    currency: str = Field(default="EUR", description="Currency code")
    status: str = Field(..., description="Payment status (Pending, Completed, ...)")
    transaction_id: Optional[str] = Field(None, description="Gateway transaction ID")
    failure_reason: Optional[str] = Field(None, description="'{code}: {message}' on failure")
    created_at: datetime = Field(..., description="Creation timestamp")
    processed_at: Optional[datetime] = Field(None, description="Completion/failure timestamp")

    model_config = {"frozen": True}

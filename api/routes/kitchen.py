"""Kitchen dashboard endpoints."""
from typing import List

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from api.dependencies import get_active_orders_use_case, get_update_order_status_use_case
from api.responses import unwrap
from tableside.application.dtos import OrderDTO
from tableside.application.use_cases import GetAllActiveOrdersUseCase, UpdateOrderStatusUseCase


router = APIRouter()


class UpdateStatusRequest(BaseModel):
    status: str = Field(..., description="Preparing, Ready or Delivered")


@router.get("/orders", response_model=List[OrderDTO], summary="Active orders, oldest first")
async def active_orders(
    use_case: GetAllActiveOrdersUseCase = Depends(get_active_orders_use_case),
):
    return unwrap(await use_case.execute())


@router.put("/orders/{order_id}/status", response_model=OrderDTO, summary="Advance order status")
async def update_status(
    order_id: str,
    request: UpdateStatusRequest,
    use_case: UpdateOrderStatusUseCase = Depends(get_update_order_status_use_case),
):
    return unwrap(await use_case.execute(order_id, request.status))

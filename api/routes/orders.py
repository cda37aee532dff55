"""
Order endpoints (diner side).

Every diner at a table shares one order: GET-or-create it by table
number, add products, then confirm it to send it to the kitchen.
"""
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from api.dependencies import (
    get_add_product_use_case,
    get_cancel_order_use_case,
    get_confirm_order_use_case,
    get_or_create_order_use_case,
    get_order_use_case,
)
from api.responses import unwrap
from tableside.application.dtos import OrderDTO
from tableside.application.use_cases import (
    AddProductToOrderUseCase,
    CancelOrderUseCase,
    ConfirmOrderUseCase,
    GetOrCreateOrderForTableUseCase,
    GetOrderUseCase,
)


router = APIRouter()


class AddProductRequest(BaseModel):
    """Request body for adding a product to an order."""

    product_id: str = Field(..., description="Product to add")
    quantity: int = Field(default=1, description="Units to add (1-100)")


@router.post(
    "/table/{table_number}",
    response_model=OrderDTO,
    status_code=status.HTTP_200_OK,
    summary="Get or create the open order of a table",
)
async def get_or_create_for_table(
    table_number: int,
    use_case: GetOrCreateOrderForTableUseCase = Depends(get_or_create_order_use_case),
):
    """
    Return the shared order of a table.

    **Errors:**
    - 400 if the table does not exist or has no active session
    """
    return unwrap(await use_case.execute(table_number))


@router.get("/{order_id}", response_model=OrderDTO, summary="Get order by ID")
async def get_order(
    order_id: str,
    use_case: GetOrderUseCase = Depends(get_order_use_case),
):
    return unwrap(await use_case.execute(order_id))


@router.post(
    "/{order_id}/items",
    response_model=OrderDTO,
    summary="Add a product to a Draft order",
)
async def add_product(
    order_id: str,
    request: AddProductRequest,
    use_case: AddProductToOrderUseCase = Depends(get_add_product_use_case),
):
    """
    Add a product; adding the same product again increases its quantity.

    **Errors:**
    - 400 if the order is not a Draft, the product is unavailable or the
      line would exceed 100 units
    """
    return unwrap(await use_case.execute(order_id, request.product_id, request.quantity))


@router.post("/{order_id}/confirm", response_model=OrderDTO, summary="Confirm an order")
async def confirm_order(
    order_id: str,
    use_case: ConfirmOrderUseCase = Depends(get_confirm_order_use_case),
):
    return unwrap(await use_case.execute(order_id))


@router.post("/{order_id}/cancel", response_model=OrderDTO, summary="Cancel an order")
async def cancel_order(
    order_id: str,
    use_case: CancelOrderUseCase = Depends(get_cancel_order_use_case),
):
    return unwrap(await use_case.execute(order_id))

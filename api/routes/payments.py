"""Payment endpoints."""
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from api.dependencies import get_payment_repository, get_process_payment_use_case
from api.responses import unwrap
from tableside.application.dtos import PaymentDTO
from tableside.application.mappers import PaymentMapper
from tableside.application.use_cases import ProcessPaymentUseCase
from tableside.domain.exceptions import DomainError
from tableside.domain.repositories import PaymentRepository
from tableside.domain.value_objects import OrderId


router = APIRouter()


class ProcessPaymentRequest(BaseModel):
    """Request body for paying an order."""

    order_id: str = Field(..., description="Order to pay")
    payment_method: str = Field(default="card", description="card, cash...")


@router.post("", response_model=PaymentDTO, summary="Pay a confirmed order")
async def process_payment(
    request: ProcessPaymentRequest,
    use_case: ProcessPaymentUseCase = Depends(get_process_payment_use_case),
):
    """
    Charge the order total.

    **Errors:**
    - 400 if the order is not confirmed, is already paid or the charge fails
    """
    return unwrap(await use_case.execute(request.order_id, request.payment_method))


@router.get("/order/{order_id}", response_model=PaymentDTO, summary="Payment of an order")
async def get_order_payment(
    order_id: str,
    repository: PaymentRepository = Depends(get_payment_repository),
):
    """Return the successful payment of an order, or its latest attempt."""
    try:
        payment = await repository.get_by_order_id(OrderId.from_string(order_id))
    except DomainError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

    if payment is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No payment found for order {order_id}",
        )

    return PaymentMapper.to_dto(payment)

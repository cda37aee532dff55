"""
Process Payment Use Case.

CRITICAL: This handles money - at most one successful payment per order.

Flow:
1. Load the order (must be past Draft and not Cancelled)
2. Refuse if the order already has a successful payment
3. Create a Payment for the order total, save it Pending
4. Mark Processing and save again (observable in-flight state)
5. Charge through the gateway
6. Mark Completed or Failed and save

Every attempt is a new Payment; nothing is retried automatically.
"""
import asyncio
import logging
from typing import Optional

from tableside.application.dtos import PaymentDTO
from tableside.application.interfaces import IPaymentGateway, PaymentResult
from tableside.application.mappers import PaymentMapper
from tableside.application.results import Result
from tableside.domain.entities import Payment
from tableside.domain.enums import OrderStatus
from tableside.domain.exceptions import DomainError
from tableside.domain.repositories import OrderRepository, PaymentRepository
from tableside.domain.value_objects import OrderId


logger = logging.getLogger(__name__)


GATEWAY_TIMEOUT_CODE = "network_timeout"
GATEWAY_TIMEOUT_MESSAGE = "Network timeout while processing payment"
GATEWAY_ERROR_CODE = "processing_error"
GATEWAY_ERROR_MESSAGE = "Payment gateway error"
MISSING_TRANSACTION_MESSAGE = "Payment gateway returned no transaction id"


class ProcessPaymentUseCase:
    """Charge the total of a confirmed order."""

    def __init__(
        self,
        order_repository: OrderRepository,
        payment_repository: PaymentRepository,
        payment_gateway: IPaymentGateway,
        gateway_timeout: Optional[float] = None,
    ):
        """
        Initialize use case with dependencies.

        Args:
            order_repository: Repository for order persistence
            payment_repository: Repository for payment attempts
            payment_gateway: Gateway that performs the charge
            gateway_timeout: Seconds to wait for the gateway (None waits forever)
        """
        self.order_repository = order_repository
        self.payment_repository = payment_repository
        self.payment_gateway = payment_gateway
        self.gateway_timeout = gateway_timeout

    async def execute(self, order_id: str, payment_method: str) -> Result[PaymentDTO]:
        """
        Execute the payment workflow.

        Args:
            order_id: Order to pay
            payment_method: Method chosen by the customer

        Returns:
            Result with the completed payment, or "Payment failed: ..." on decline
        """
        try:
            order = await self.order_repository.get_by_id(OrderId.from_string(order_id))
            if order is None:
                return Result.fail(f"Order with ID {order_id} not found.")

            if order.status in (OrderStatus.DRAFT, OrderStatus.CANCELLED):
                return Result.fail(
                    f"Order must be confirmed before payment. "
                    f"Current status: {order.status.value}"
                )

            existing = await self.payment_repository.get_by_order_id(order.id)
            if existing is not None and existing.is_successful():
                logger.warning(f"Order {order.id} already has a completed payment")
                return Result.fail("Payment has already been completed for this order")

            # Step 1: Pending
            payment = Payment.create(order.id, order.total)
            await self.payment_repository.save(payment)

            # Step 2: Processing
            payment.mark_as_processing()
            await self.payment_repository.save(payment)
            logger.info(
                f"Processing payment {payment.id} for order {order.id} "
                f"({payment.amount}, {payment_method})"
            )

            # Step 3: Gateway
            gateway_result = await self._charge(
                payment,
                payment_method,
                metadata={
                    "order_id": str(order.id),
                    "table_number": str(order.table_id.value),
                },
            )

            # Step 4: Outcome
            if gateway_result.success:
                payment.mark_as_completed(gateway_result.transaction_id)
                await self.payment_repository.save(payment)
                logger.info(
                    f"Payment {payment.id} completed "
                    f"(transaction {payment.transaction_id})"
                )
                return Result.ok(PaymentMapper.to_dto(payment))

            payment.mark_as_failed(
                f"{gateway_result.error_code}: {gateway_result.error_message}"
            )
            await self.payment_repository.save(payment)
            logger.warning(f"Payment {payment.id} failed: {payment.failure_reason}")
            return Result.fail(f"Payment failed: {gateway_result.error_message}")

        except DomainError as e:
            logger.warning(f"Payment for order {order_id} failed: {e}")
            return Result.fail(e.message)

    async def _charge(
        self,
        payment: Payment,
        payment_method: str,
        metadata: dict,
    ) -> PaymentResult:
        """Call the gateway. Every outcome, including errors, is a PaymentResult."""
        call = self.payment_gateway.process_payment(
            payment_id=payment.id,
            amount=payment.amount,
            payment_method=payment_method,
            metadata=metadata,
        )

        try:
            if self.gateway_timeout is None:
                result = await call
            else:
                result = await asyncio.wait_for(call, timeout=self.gateway_timeout)
        except asyncio.TimeoutError:
            logger.error(
                f"Gateway did not answer within {self.gateway_timeout}s "
                f"for payment {payment.id}"
            )
            return PaymentResult.failed(GATEWAY_TIMEOUT_CODE, GATEWAY_TIMEOUT_MESSAGE)
        except Exception as e:
            logger.error(f"Gateway error for payment {payment.id}: {e}", exc_info=True)
            return PaymentResult.failed(GATEWAY_ERROR_CODE, GATEWAY_ERROR_MESSAGE)

        if result.success and not (result.transaction_id or "").strip():
            logger.error(f"Gateway approved payment {payment.id} without a transaction id")
            return PaymentResult.failed(GATEWAY_ERROR_CODE, MISSING_TRANSACTION_MESSAGE)

        return result

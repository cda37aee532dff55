"""
Tests for ProcessPaymentUseCase.

CRITICAL: at most one successful payment per order.
"""
import asyncio
from decimal import Decimal

import pytest
import pytest_asyncio

from tableside.application.interfaces import PaymentResult
from tableside.application.use_cases import (
    AddProductToOrderUseCase,
    CancelOrderUseCase,
    ConfirmOrderUseCase,
    ProcessPaymentUseCase,
)
from tableside.domain.enums import PaymentStatus
from tableside.domain.value_objects import OrderId, PaymentId
from tableside.infrastructure.adapters.payments import MockPaymentGateway


@pytest_asyncio.fixture
async def confirmed_order(
    open_order, order_repository, product_repository, papas, queso, notification_service
):
    """Order of table 5: 3 x Papas (13.50) + 2 x Queso (12.00) = 25.50 EUR, confirmed."""
    add = AddProductToOrderUseCase(order_repository, product_repository)
    await add.execute(open_order.id, str(papas.id), 3)
    await add.execute(open_order.id, str(queso.id), 2)
    result = await ConfirmOrderUseCase(order_repository, notification_service).execute(open_order.id)
    assert result.value.total == Decimal("25.50")
    return result.value


@pytest.fixture
def process_payment(order_repository, payment_repository, payment_gateway):
    return ProcessPaymentUseCase(order_repository, payment_repository, payment_gateway)


@pytest.mark.asyncio
async def test_scenario_pay_once(
    process_payment, confirmed_order, payment_gateway, payment_repository
):
    result = await process_payment.execute(confirmed_order.id, "card")

    assert result.success
    payment = result.value
    assert payment.amount == Decimal("25.50")
    assert payment.currency == "EUR"
    assert payment.status == "Completed"
    assert payment.transaction_id == "txn_abc"
    assert payment.processed_at is not None

    kwargs = payment_gateway.process_payment.await_args.kwargs
    assert str(kwargs["payment_id"]) == payment.id
    assert kwargs["amount"].amount == Decimal("25.50")
    assert kwargs["payment_method"] == "card"
    assert kwargs["metadata"] == {"order_id": confirmed_order.id, "table_number": "5"}

    again = await process_payment.execute(confirmed_order.id, "card")

    assert not again.success
    assert again.error == "Payment has already been completed for this order"
    payment_gateway.process_payment.assert_awaited_once()

    stored = await payment_repository.get_by_order_id(OrderId.from_string(confirmed_order.id))
    assert stored.id == PaymentId.from_string(payment.id)


@pytest.mark.asyncio
async def test_draft_order_cannot_be_paid(process_payment, open_order, payment_gateway):
    result = await process_payment.execute(open_order.id, "card")

    assert not result.success
    assert result.error == "Order must be confirmed before payment. Current status: Draft"
    payment_gateway.process_payment.assert_not_awaited()


@pytest.mark.asyncio
async def test_cancelled_order_cannot_be_paid(
    process_payment, confirmed_order, order_repository, notification_service
):
    await CancelOrderUseCase(order_repository, notification_service).execute(confirmed_order.id)

    result = await process_payment.execute(confirmed_order.id, "card")

    assert not result.success
    assert result.error == "Order must be confirmed before payment. Current status: Cancelled"


@pytest.mark.asyncio
async def test_unknown_order(process_payment):
    order_id = str(OrderId.generate())

    result = await process_payment.execute(order_id, "card")

    assert not result.success
    assert result.error == f"Order with ID {order_id} not found."


@pytest.mark.asyncio
async def test_declined_payment_is_recorded_and_retry_allowed(
    process_payment, confirmed_order, payment_gateway, payment_repository
):
    payment_gateway.process_payment.return_value = PaymentResult.failed(
        "card_declined", "Card was declined by the issuer"
    )

    declined = await process_payment.execute(confirmed_order.id, "card")

    assert not declined.success
    assert declined.error == "Payment failed: Card was declined by the issuer"

    failed = await payment_repository.get_by_order_id(OrderId.from_string(confirmed_order.id))
    assert failed.status == PaymentStatus.FAILED
    assert failed.failure_reason == "card_declined: Card was declined by the issuer"
    assert failed.transaction_id is None

    payment_gateway.process_payment.return_value = PaymentResult.succeeded("txn_retry")

    retried = await process_payment.execute(confirmed_order.id, "card")

    assert retried.success
    assert retried.value.transaction_id == "txn_retry"
    assert retried.value.id != str(failed.id)


@pytest.mark.asyncio
async def test_payment_is_processing_while_gateway_runs(
    confirmed_order, order_repository, payment_repository
):
    seen = {}

    class InspectingGateway(MockPaymentGateway):
        async def process_payment(self, payment_id, amount, payment_method, metadata=None):
            seen["status"] = (await payment_repository.get_by_id(payment_id)).status
            return await super().process_payment(payment_id, amount, payment_method, metadata)

    use_case = ProcessPaymentUseCase(
        order_repository,
        payment_repository,
        InspectingGateway(success_rate=1.0, min_delay_ms=0, max_delay_ms=0),
    )

    result = await use_case.execute(confirmed_order.id, "card")

    assert result.success
    assert result.value.transaction_id.startswith("txn_mock_")
    assert seen["status"] == PaymentStatus.PROCESSING


@pytest.mark.asyncio
async def test_gateway_timeout_fails_payment(
    confirmed_order, order_repository, payment_repository
):
    class HangingGateway(MockPaymentGateway):
        async def process_payment(self, payment_id, amount, payment_method, metadata=None):
            await asyncio.sleep(10)

    use_case = ProcessPaymentUseCase(
        order_repository,
        payment_repository,
        HangingGateway(),
        gateway_timeout=0.01,
    )

    result = await use_case.execute(confirmed_order.id, "card")

    assert not result.success
    assert result.error == "Payment failed: Network timeout while processing payment"

    stored = await payment_repository.get_by_order_id(OrderId.from_string(confirmed_order.id))
    assert stored.status == PaymentStatus.FAILED
    assert stored.failure_reason.startswith("network_timeout: ")


@pytest.mark.asyncio
async def test_approval_without_transaction_id_fails_payment(
    process_payment, confirmed_order, payment_gateway, payment_repository
):
    payment_gateway.process_payment.return_value = PaymentResult(success=True, transaction_id=None)

    result = await process_payment.execute(confirmed_order.id, "card")

    assert not result.success
    assert result.error == "Payment failed: Payment gateway returned no transaction id"

    stored = await payment_repository.get_by_order_id(OrderId.from_string(confirmed_order.id))
    assert stored.status == PaymentStatus.FAILED
    assert stored.failure_reason.startswith("processing_error: ")
    assert stored.transaction_id is None


@pytest.mark.asyncio
async def test_gateway_exception_fails_payment(
    process_payment, confirmed_order, payment_gateway, payment_repository
):
    payment_gateway.process_payment.side_effect = ConnectionError("connection reset")

    result = await process_payment.execute(confirmed_order.id, "card")

    assert not result.success
    assert result.error == "Payment failed: Payment gateway error"

    stored = await payment_repository.get_by_order_id(OrderId.from_string(confirmed_order.id))
    assert stored.status == PaymentStatus.FAILED
    assert stored.failure_reason == "processing_error: Payment gateway error"

    payment_gateway.process_payment.side_effect = None
    payment_gateway.process_payment.return_value = PaymentResult.succeeded("txn_after_error")

    retried = await process_payment.execute(confirmed_order.id, "card")

    assert retried.success
    assert retried.value.transaction_id == "txn_after_error"

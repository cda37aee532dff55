"""
Mock Payment Gateway Implementation.

This simulates a card processor for development, demos and tests.
No money is moved.
"""
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional
import asyncio
import logging
import random
import uuid

from tableside.application.interfaces import (
    IPaymentGateway,
    PaymentResult,
    PaymentStatusResult,
)
from tableside.domain.enums import PaymentStatus
from tableside.domain.value_objects import PaymentId, Price


logger = logging.getLogger(__name__)


ERROR_MESSAGES: Dict[str, str] = {
    "insufficient_funds": "Insufficient funds in the account",
    "card_declined": "Card was declined by the issuer",
    "expired_card": "Card has expired",
    "invalid_card": "Invalid card number",
    "processing_error": "Error processing the payment",
    "network_timeout": "Network timeout while processing payment",
}


class MockPaymentGateway(IPaymentGateway):
    """
    Mock implementation of the payment gateway.

    Waits a random delay, then succeeds with probability success_rate
    (clamped to 0..1) or fails with a random error code. Results are
    remembered for check_status.
    """

    def __init__(
        self,
        success_rate: float = 1.0,
        min_delay_ms: int = 100,
        max_delay_ms: int = 500,
        rng: Optional[random.Random] = None,
        sleep: Callable[[float], Any] = asyncio.sleep,
    ):
        """
        Initialize mock gateway.

        Args:
            success_rate: Probability of a successful charge
            min_delay_ms: Lower bound of the simulated network delay
            max_delay_ms: Upper bound of the simulated network delay
            rng: Random source (seed it for deterministic tests)
            sleep: Awaitable sleep used for the delay
        """
        self.success_rate = min(max(success_rate, 0.0), 1.0)
        self.min_delay_ms = min_delay_ms
        self.max_delay_ms = max(max_delay_ms, min_delay_ms)
        self._rng = rng or random.Random()
        self._sleep = sleep
        self._payments: Dict[str, PaymentStatusResult] = {}
        logger.info(f"MockPaymentGateway initialized (success_rate={self.success_rate})")

    async def process_payment(
        self,
        payment_id: PaymentId,
        amount: Price,
        payment_method: str,
        metadata: Optional[Dict[str, str]] = None,
    ) -> PaymentResult:
        logger.info(
            f"Processing mock payment. PaymentId: {payment_id}, "
            f"Amount: {amount}, Method: {payment_method}"
        )

        await self._simulate_delay()

        key = str(payment_id)
        now = datetime.now(timezone.utc)

        if self._rng.random() < self.success_rate:
            transaction_id = f"txn_mock_{uuid.uuid4().hex[:8]}"
            self._payments[key] = PaymentStatusResult(
                payment_id=key,
                status=PaymentStatus.COMPLETED,
                transaction_id=transaction_id,
                processed_at=now,
            )
            logger.info(
                f"Mock payment successful. PaymentId: {payment_id}, "
                f"TransactionId: {transaction_id}"
            )
            return PaymentResult.succeeded(transaction_id)

        error_code = self._rng.choice(list(ERROR_MESSAGES))
        error_message = ERROR_MESSAGES[error_code]
        self._payments[key] = PaymentStatusResult(
            payment_id=key,
            status=PaymentStatus.FAILED,
            processed_at=now,
        )
        logger.warning(
            f"Mock payment failed. PaymentId: {payment_id}, "
            f"ErrorCode: {error_code}, ErrorMessage: {error_message}"
        )
        return PaymentResult.failed(error_code, error_message)

    async def check_status(self, payment_id: PaymentId) -> PaymentStatusResult:
        key = str(payment_id)
        known = self._payments.get(key)
        if known is not None:
            return known

        # Unknown to the gateway: still pending from its point of view
        return PaymentStatusResult(payment_id=key, status=PaymentStatus.PENDING)

    async def _simulate_delay(self) -> None:
        if self.max_delay_ms <= 0:
            return
        delay_ms = self._rng.randint(self.min_delay_ms, self.max_delay_ms)
        await self._sleep(delay_ms / 1000)

"""Payment gateway adapters."""
from .mock_payment_gateway import ERROR_MESSAGES, MockPaymentGateway

__all__ = ["ERROR_MESSAGES", "MockPaymentGateway"]

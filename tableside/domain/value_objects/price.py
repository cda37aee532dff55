"""
Price value object.

CRITICAL: Always use Decimal, never float!
"""
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from ..exceptions import ValidationError


SUPPORTED_CURRENCIES = frozenset(
    {"EUR", "USD", "GBP", "JPY", "CHF", "CAD", "AUD", "CNY"}
)
DEFAULT_CURRENCY = "EUR"


@dataclass(frozen=True)
class Price:
    """
    Immutable non-negative monetary value with currency.

    Currency is normalized to an upper-case ISO code and must be one of
    SUPPORTED_CURRENCIES.
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self):
        # Convert to Decimal if needed
        if not isinstance(self.amount, Decimal):
            try:
                object.__setattr__(self, "amount", Decimal(str(self.amount)))
            except InvalidOperation:
                raise ValidationError(f"Invalid price amount: {self.amount!r}")

        if not self.amount.is_finite():
            raise ValidationError(f"Invalid price amount: {self.amount}")

        if self.amount < 0:
            raise ValidationError(
                f"Price amount cannot be negative. Received: {self.amount}"
            )

        if not isinstance(self.currency, str) or not self.currency.strip():
            raise ValidationError("Currency is required.")

        currency = self.currency.strip().upper()
        if len(currency) != 3:
            raise ValidationError(
                f"Currency must be a valid 3-letter ISO code. Received: {self.currency}"
            )
        if currency not in SUPPORTED_CURRENCIES:
            raise ValidationError(
                f"Currency '{currency}' is not supported. "
                f"Supported currencies: {', '.join(sorted(SUPPORTED_CURRENCIES))}"
            )
        object.__setattr__(self, "currency", currency)

    @classmethod
    def zero(cls, currency: str = DEFAULT_CURRENCY) -> "Price":
        return cls(amount=Decimal("0"), currency=currency)

    def add(self, other: "Price") -> "Price":
        """Add two prices (must have same currency)."""
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot add prices with different currencies: "
                f"{self.currency} and {other.currency}."
            )
        return Price(amount=self.amount + other.amount, currency=self.currency)

    def multiply(self, factor: int) -> "Price":
        """Multiply by a positive whole quantity."""
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise ValidationError(f"Multiplier must be an integer. Received: {factor!r}")
        if factor <= 0:
            raise ValidationError(f"Quantity must be positive. Received: {factor}")
        return Price(amount=self.amount * factor, currency=self.currency)

    def __add__(self, other: "Price") -> "Price":
        return self.add(other)

    def __mul__(self, factor: int) -> "Price":
        return self.multiply(factor)

    def is_zero(self) -> bool:
        return self.amount == 0

    def __str__(self) -> str:
        return f"{self.amount:.2f} {self.currency}"

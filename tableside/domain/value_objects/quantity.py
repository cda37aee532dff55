"""Quantity value object."""
from dataclasses import dataclass

from ..exceptions import ValidationError


@dataclass(frozen=True)
class Quantity:
    """Number of units on an order line, bounded to 1..100."""

    MIN_VALUE = 1
    MAX_VALUE = 100

    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(f"Quantity must be an integer. Received: {self.value!r}")
        if self.value < self.MIN_VALUE:
            raise ValidationError(
                f"Quantity must be at least {self.MIN_VALUE}. Received: {self.value}"
            )
        if self.value > self.MAX_VALUE:
            raise ValidationError(
                f"Quantity cannot exceed {self.MAX_VALUE}. Received: {self.value}"
            )

    def add(self, other: "Quantity") -> "Quantity":
        new_value = self.value + other.value
        if new_value > self.MAX_VALUE:
            raise ValidationError(
                f"Total quantity cannot exceed {self.MAX_VALUE}. Attempted: {new_value}"
            )
        return Quantity(new_value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

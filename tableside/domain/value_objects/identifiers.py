"""Identifier value objects - pure Python immutable types."""

from dataclasses import dataclass
from typing import TypeVar, Type, Union
from uuid import UUID, uuid4

from ..exceptions import ValidationError


_ID = TypeVar("_ID", bound="EntityId")


@dataclass(frozen=True)
class EntityId:
    """
    Opaque 128-bit identifier.

    Subclasses only differ by type, so an OrderId never equals a
    ProductId even when both wrap the same UUID.
    """

    value: UUID

    def __post_init__(self):
        if not isinstance(self.value, UUID):
            raise ValidationError(
                f"{self.__class__.__name__} requires a UUID, got: {self.value!r}"
            )

    @classmethod
    def generate(cls: Type[_ID]) -> _ID:
        """Generate a new random identifier."""
        return cls(value=uuid4())

    @classmethod
    def from_string(cls: Type[_ID], raw: Union[str, UUID]) -> _ID:
        """Parse an identifier from its text (or UUID) form."""
        if isinstance(raw, UUID):
            return cls(value=raw)
        try:
            return cls(value=UUID(str(raw)))
        except (TypeError, ValueError):
            raise ValidationError(f"Invalid {cls.__name__}: {raw!r}")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class OrderId(EntityId):
    """Identifier of an Order aggregate."""


@dataclass(frozen=True)
class OrderLineId(EntityId):
    """Identifier of a line inside an Order."""


@dataclass(frozen=True)
class ProductId(EntityId):
    """Identifier of a catalog product."""


@dataclass(frozen=True)
class CategoryId(EntityId):
    """Identifier of a catalog category."""


@dataclass(frozen=True)
class SessionId(EntityId):
    """Identifier of a table session."""


@dataclass(frozen=True)
class PaymentId(EntityId):
    """Identifier of a payment attempt."""


@dataclass(frozen=True)
class TableId:
    """
    Visible table number (not a surrogate key).

    Examples: 1, 7, 20
    """

    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Table number must be an integer. Received value: {self.value!r}"
            )
        if self.value <= 0:
            raise ValidationError(
                f"Table number must be positive. Received value: {self.value}"
            )

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return f"Table {self.value}"

"""
Domain exceptions.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""


class DomainError(ValueError):
    """
    Base class for every business-rule violation.

    Subclasses ValueError so callers that only care about "bad input"
    can keep catching ValueError.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ValidationError(DomainError):
    """Malformed input to a value object or aggregate method."""
    pass


class InvalidStateError(DomainError):
    """Operation attempted from a state that forbids it."""
    pass


class NotFoundError(DomainError):
    """Referenced entity (order, line, product, table, category) does not exist."""
    pass

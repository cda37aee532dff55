"""Translation of use case results into HTTP responses."""
from typing import TypeVar

from fastapi import HTTPException, status

from tableside.application.results import Result


T = TypeVar("T")


def unwrap(result: Result[T]) -> T:
    """Return the value of a successful result, or raise 400 with its error."""
    if not result.success:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.error)
    return result.value

"""Result types for railway-oriented programming.

Operations that can fail return a Result instead of raising. This keeps the
failure path explicit at every call site and makes handlers easy to test.

Usage:
    def parse_status(value: str) -> Result[RequestStatus, ValidationError]:
        status = RequestStatus.parse(value)
        if status is None:
            return Failure(error=ValidationError(...))
        return Success(value=status)

    match parse_status("approved"):
        case Success(value=status):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]

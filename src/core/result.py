"""Result types for railway-oriented programming.

Validators and the client transport return Result values instead of raising,
so callers decide explicitly how a failure is recorded (an ApplicationError
during validation, a generic error message on the client).

Usage:
    def parse_quantity(raw: str) -> Result[int, ValidationError]:
        if not raw.isdigit():
            return Failure(error=ValidationError(...))
        return Success(value=int(raw))

    match parse_quantity("3"):
        case Success(value=quantity):
            ...
        case Failure(error=error):
            errors.add_application_error(...)
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


type Result[T, E] = Success[T] | Failure[E]

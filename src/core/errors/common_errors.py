"""Common error classes used across all layers.

Error Types:
- ValidationError: Input validation failures (one per field)
- NotFoundError: Resource not found

Usage:
    from src.core.errors import ValidationError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.FIELD_TOO_LONG,
        message="The first name cannot be longer than 30 characters.",
        field="firstName",
        params=("firstName", "30"),
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Parameter name that failed validation.
        params: Message parameters (field name, limits) for client-side use.
        details: Additional context.
    """

    field: str | None = None
    params: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource (Order, OrderItem).
        resource_id: ID of the resource that was not found.
        details: Additional context.
    """

    resource_type: str
    resource_id: str

"""Base error carried by Failure results.

Validators and the order service return these instead of raising. Handlers
turn them into ApplicationError entries (validation) or CommandExecutionError
(execution), so no DomainError ever reaches the client as-is.

Usage:
    from src.core.errors import DomainError

    return Failure(
        error=DomainError(
            code=ErrorCode.ORDER_NOT_EDITABLE,
            message="This order can no longer be changed.",
        )
    )
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Error value (not an Exception).

    Attributes:
        code: Machine-readable error code.
        message: Message safe to show to the user.
        details: Optional debugging context, never shown to the user.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"

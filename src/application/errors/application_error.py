"""Application layer error types.

The ajax command pipeline reports failures through two independent channels:

- ApplicationError: expected, user-input failure found during validation.
  Surfaced to the user verbatim.
- SystemFault: unexpected failure in any pipeline step. Surfaced to the user as
  a generic message; the original exception is kept for logging.

Both are plain data (not exceptions). Steps catch what they raise and record
it in an ErrorAggregator.

Exports:
    ApplicationError: User-input validation failure
    SystemFault: Unexpected failure captured at a step boundary
"""

from dataclasses import dataclass

from src.core.errors import ValidationError


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """User-input validation failure.

    Attributes:
        message: Human-readable, user-actionable message.
        code: Machine-readable error code.
        params: Message parameters (field name, limits).

    Examples:
        >>> error = ApplicationError(
        ...     message="The first name cannot be longer than 30 characters.",
        ...     code="field_too_long",
        ...     params=("firstName", "30"),
        ... )
    """

    message: str
    code: str
    params: tuple[str, ...] = ()

    @classmethod
    def from_validation(cls, error: ValidationError) -> "ApplicationError":
        """Convert a core ValidationError into an ApplicationError.

        Args:
            error: Failure value returned by a validator.

        Returns:
            ApplicationError carrying the validator's message, code and params.
        """
        return cls(message=error.message, code=error.code.value, params=error.params)

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True, kw_only=True)
class SystemFault:
    """Unexpected failure captured at a step boundary.

    Attributes:
        message: Generic, non-identifying message shown to the user.
        cause: Original exception (or None when a step reported the fault
            without raising).
        step: Pipeline step that produced the fault (validate, execute,
            operation name, render).
    """

    message: str
    cause: BaseException | None = None
    step: str = ""

    def __str__(self) -> str:
        return self.message

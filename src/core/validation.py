"""Validation helpers for request parameters.

Each helper checks one rule for one parameter and returns a Result, so a
command can validate every field and report all failures in one response.
Messages are written for the end user; they are surfaced verbatim.

Usage:
    from src.core.validation import validate_max_length
    from src.core.result import Failure

    result = validate_max_length(first_name, 30, "firstName", "first name")
    if isinstance(result, Failure):
        errors.add_application_error(ApplicationError.from_validation(result.error))
"""

import re

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success


def validate_required(
    value: str | None, field_name: str, label: str
) -> Result[str, ValidationError]:
    """Validate that a parameter is present and not blank.

    Args:
        value: Raw parameter value (None when absent).
        field_name: Parameter name as sent by the client.
        label: Human-readable field name used in the message.

    Returns:
        Success with the stripped value, Failure with ValidationError otherwise.
    """
    if value is None or not value.strip():
        return Failure(
            error=ValidationError(
                code=ErrorCode.FIELD_REQUIRED,
                message=f"The {label} is required.",
                field=field_name,
                params=(field_name,),
            )
        )
    return Success(value=value.strip())


def validate_max_length(
    value: str, max_length: int, field_name: str, label: str
) -> Result[str, ValidationError]:
    """Validate maximum string length.

    Args:
        value: String to validate.
        max_length: Maximum allowed length.
        field_name: Parameter name as sent by the client.
        label: Human-readable field name used in the message.

    Returns:
        Success with value if valid, Failure with ValidationError otherwise.
    """
    if len(value) > max_length:
        return Failure(
            error=ValidationError(
                code=ErrorCode.FIELD_TOO_LONG,
                message=f"The {label} cannot be longer than {max_length} characters.",
                field=field_name,
                params=(field_name, str(max_length)),
            )
        )
    return Success(value=value)


def validate_pattern(
    value: str, pattern: str, field_name: str, label: str
) -> Result[str, ValidationError]:
    """Validate a string against a full-match regular expression.

    Args:
        value: String to validate.
        pattern: Regular expression the whole value must match.
        field_name: Parameter name as sent by the client.
        label: Human-readable field name used in the message.

    Returns:
        Success with value if valid, Failure with ValidationError otherwise.
    """
    if re.fullmatch(pattern, value) is None:
        return Failure(
            error=ValidationError(
                code=ErrorCode.FIELD_INVALID_FORMAT,
                message=f"The {label} is not valid.",
                field=field_name,
                params=(field_name,),
            )
        )
    return Success(value=value)


def validate_int_range(
    value: str, minimum: int, maximum: int, field_name: str, label: str
) -> Result[int, ValidationError]:
    """Validate that a string is a whole number within an inclusive range.

    Args:
        value: String to parse.
        minimum: Smallest accepted value.
        maximum: Largest accepted value.
        field_name: Parameter name as sent by the client.
        label: Human-readable field name used in the message.

    Returns:
        Success with the parsed int, Failure with ValidationError otherwise.
    """
    error = ValidationError(
        code=ErrorCode.FIELD_OUT_OF_RANGE,
        message=f"The {label} must be a whole number between {minimum} and {maximum}.",
        field=field_name,
        params=(field_name, str(minimum), str(maximum)),
    )
    text = value.strip()
    digits = text[1:] if text[:1] in ("+", "-") else text
    # ASCII digits with an optional sign
    if not (digits.isascii() and digits.isdigit()):
        return Failure(error=error)
    number = int(text)
    if not minimum <= number <= maximum:
        return Failure(error=error)
    return Success(value=number)

"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention. They travel inside
ApplicationError.code so clients can react to a failure without parsing the
human-readable message.
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    FIELD_REQUIRED = "field_required"
    FIELD_TOO_LONG = "field_too_long"
    FIELD_INVALID_FORMAT = "field_invalid_format"
    FIELD_OUT_OF_RANGE = "field_out_of_range"

    # Resource errors
    ORDER_NOT_FOUND = "order_not_found"
    ORDER_ITEM_NOT_FOUND = "order_item_not_found"

    # Business rule violations
    ORDER_NOT_EDITABLE = "order_not_editable"
    ORDER_NOT_PREPARED = "order_not_prepared"

"""Centralized constants for internal implementation details.

This module contains constants that are internal implementation details,
NOT environment-specific configuration. For environment-specific settings,
use `src/core/config.py` instead.

Categories:
- Wire format: Envelope keys and media types
- Document conventions: Attribute names shared with rendered markup
- Checkout limits: Field lengths and ranges enforced during validation
- Optional operations: Names shared by checkout commands
"""

# =============================================================================
# Wire Format
# =============================================================================

ENVELOPE_MEDIA_TYPE: str = "application/json"
"""Media type of every ajax command response."""

ENVELOPE_JSON_SEPARATORS: tuple[str, str] = (",", ":")
"""Separators used for compact, deterministic envelope serialization."""


# =============================================================================
# Document Conventions
# =============================================================================

AJAX_REGION_ATTRIBUTE: str = "data-ajax-region"
"""Marks a container whose controls are locked while a request is in flight."""

REQUEST_SCOPED_ATTRIBUTE: str = "data-request-scoped"
"""Tags an ajax region as locked by requests that carry no origin element."""


# =============================================================================
# Checkout Limits
# =============================================================================

NAME_MAX_LENGTH: int = 30
"""Maximum length of first and last names on a shipping address."""

ADDRESS_LINE_MAX_LENGTH: int = 50
"""Maximum length of a street address line."""

CITY_MAX_LENGTH: int = 35
"""Maximum length of a city name."""

POSTAL_CODE_PATTERN: str = r"\d{5}(-\d{4})?"
"""Accepted postal code format (ZIP or ZIP+4)."""

GIFT_MESSAGE_MAX_LENGTH: int = 240
"""Maximum length of a gift message body."""

GIFT_NAME_MAX_LENGTH: int = 40
"""Maximum length of gift sender and recipient names."""

ITEM_QUANTITY_MIN: int = 1
"""Smallest quantity accepted for an order item."""

ITEM_QUANTITY_MAX: int = 99
"""Largest quantity accepted for an order item."""


# =============================================================================
# Optional Operations
# =============================================================================

ORDER_PREPARE: str = "orderPrepare"
"""Recalculates order totals after a checkout change."""

SYNC_PAYMENT_INSTRUCTION: str = "syncPaymentInstructionWithOrderTotal"
"""Aligns the payment instruction amount with the prepared order total."""

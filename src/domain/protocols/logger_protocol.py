"""LoggerProtocol definition for structured logging.

Backend-agnostic structured logging port. Every call is a message plus
key-value context; implementations render the context (console or JSON) and
add timestamp and level.

Context Binding:
    The ajax pipeline binds command and trace_id once per request so every
    step, optional operation and fault log carries them.

Security:
    - NEVER log raw request parameters (addresses, gift messages)
    - Log parameter names and counts instead

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    request_logger = logger.bind(command="update_item_quantity", trace_id=trace_id)
    request_logger.info("Ajax command gated", should_execute=True)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    Supports the 5 standard levels and immutable context binding.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message (state transitions, rendering detail)."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message (normal operational events)."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message (rejected requests, skipped work)."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            error: Optional exception instance; implementations add
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message for failures affecting every request."""
        ...

    def bind(self, **context: Any) -> "LoggerProtocol":
        """Return new logger with permanently bound context.

        The original logger instance remains unchanged.

        Example:
            request_logger = logger.bind(command=name, trace_id=trace_id)
            request_logger.info("Ajax command finalized")
        """
        ...

    def with_context(self, **context: Any) -> "LoggerProtocol":
        """Alias for bind()."""
        ...

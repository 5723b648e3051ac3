"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (structlog console adapter)
- Fragment rendering (Jinja2)
- Order service (in-memory store)

Usage:
    # Application Layer (direct use)
    logger = get_logger()

    # Presentation Layer (FastAPI Depends)
    from fastapi import Depends
    logger: LoggerProtocol = Depends(get_logger)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import settings

if TYPE_CHECKING:
    from src.domain.protocols.fragment_renderer_protocol import (
        FragmentRendererProtocol,
    )
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.order_service_protocol import OrderServiceProtocol


# ============================================================================
# Logging (Application-Scoped)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=not settings.is_development,
        level="DEBUG" if settings.debug else settings.log_level,
    )


# ============================================================================
# Rendering (Application-Scoped)
# ============================================================================


@lru_cache()
def get_fragment_renderer() -> "FragmentRendererProtocol":
    """Return the Jinja2 fragment renderer singleton.

    Templates are loaded from settings.template_dir.
    """
    from src.infrastructure.rendering.jinja_fragment_renderer import (
        JinjaFragmentRenderer,
    )

    return JinjaFragmentRenderer(settings.template_dir)


# ============================================================================
# Orders (Application-Scoped)
# ============================================================================


@lru_cache()
def get_order_service() -> "OrderServiceProtocol":
    """Return the order service singleton.

    The in-memory store is process-wide so edits made by one request are
    visible to the next.
    """
    from src.infrastructure.persistence.in_memory_order_service import (
        InMemoryOrderService,
    )

    return InMemoryOrderService()

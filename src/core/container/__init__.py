"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_ajax_command_handler

The container is organized into modules by concern:
- infrastructure: Core services (logging, rendering, order service)
- ajax: Ajax command handlers and the command service
- handler_factory: Type-hint based handler auto-wiring
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_fragment_renderer,
    get_logger,
    get_order_service,
)

# Ajax commands
from src.core.container.ajax import (
    get_ajax_command_handler,
    get_ajax_command_service,
)

__all__ = [
    # Infrastructure
    "get_fragment_renderer",
    "get_logger",
    "get_order_service",
    # Ajax
    "get_ajax_command_handler",
    "get_ajax_command_service",
]

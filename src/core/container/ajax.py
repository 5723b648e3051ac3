"""Ajax command factories.

Request-scoped handler instances resolved through the command registry, and
the application-scoped AjaxCommandService that runs them.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import settings

if TYPE_CHECKING:
    from src.application.ajax.command_handler import AjaxCommandHandler
    from src.application.services.ajax_command_service import AjaxCommandService


@lru_cache()
def get_ajax_command_service() -> "AjaxCommandService":
    """Return the AjaxCommandService singleton."""
    from src.application.ajax.fragments import FragmentCompiler
    from src.application.services.ajax_command_service import AjaxCommandService
    from src.core.container.infrastructure import get_fragment_renderer, get_logger

    return AjaxCommandService(
        compiler=FragmentCompiler(get_fragment_renderer()),
        system_error_message=settings.system_error_message,
        logger=get_logger(),
    )


def get_ajax_command_handler(command_name: str) -> "AjaxCommandHandler | None":
    """Create a request-scoped handler for a registered command.

    Args:
        command_name: Command name from the request path.

    Returns:
        A new handler instance, or None when the command is not registered.
    """
    from src.application.cqrs.computed_views import get_command_metadata
    from src.core.container.handler_factory import create_handler

    metadata = get_command_metadata(command_name)
    if metadata is None:
        return None
    handler: "AjaxCommandHandler" = create_handler(metadata.handler_class)
    return handler

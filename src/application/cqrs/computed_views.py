"""Computed views over the ajax command registry.

Helper functions derived from AJAX_COMMAND_REGISTRY. Registry imports are
deferred so this module can be imported without loading every handler.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.application.cqrs.metadata import CommandMetadata, CQRSCategory


def get_command_names() -> list[str]:
    """Return every registered command name, in registry order."""
    from src.application.cqrs.registry import AJAX_COMMAND_REGISTRY

    return [meta.name for meta in AJAX_COMMAND_REGISTRY]


def get_commands_by_category(category: "CQRSCategory") -> list["CommandMetadata"]:
    """Return the metadata of every command in a category."""
    from src.application.cqrs.registry import AJAX_COMMAND_REGISTRY

    return [meta for meta in AJAX_COMMAND_REGISTRY if meta.category == category]


def get_command_metadata(name: str) -> "CommandMetadata | None":
    """Get metadata for a command by route name.

    Args:
        name: Command name from the request path.

    Returns:
        CommandMetadata if registered, None otherwise.

    Example:
        >>> meta = get_command_metadata("update_item_quantity")
        >>> meta.view_name
        'OrderItemsView'
    """
    from src.application.cqrs.registry import AJAX_COMMAND_REGISTRY

    for meta in AJAX_COMMAND_REGISTRY:
        if meta.name == name:
            return meta
    return None


def validate_registry_consistency() -> list[str]:
    """Validate the registry against handlers and views.

    Returns:
        List of error messages. Empty if registry is consistent.

    Example:
        >>> validate_registry_consistency()
        []
    """
    from src.application.ajax.fragments import VIEW_REGISTRY
    from src.application.cqrs.registry import AJAX_COMMAND_REGISTRY

    errors: list[str] = []

    names = [meta.name for meta in AJAX_COMMAND_REGISTRY]
    if len(names) != len(set(names)):
        errors.append("Duplicate command names in AJAX_COMMAND_REGISTRY")

    command_classes = [meta.command_class for meta in AJAX_COMMAND_REGISTRY]
    if len(command_classes) != len(set(command_classes)):
        errors.append("Duplicate command classes in AJAX_COMMAND_REGISTRY")

    for meta in AJAX_COMMAND_REGISTRY:
        handler = meta.handler_class
        for method in ("validate", "execute", "view_data"):
            if not callable(getattr(handler, method, None)):
                errors.append(f"Command handler {handler.__name__} missing {method}()")
        if getattr(handler, "name", None) != meta.name:
            errors.append(f"Command handler {handler.__name__} name != {meta.name!r}")
        if getattr(handler, "view_name", None) != meta.view_name:
            errors.append(
                f"Command handler {handler.__name__} view != {meta.view_name!r}"
            )
        if meta.view_name not in VIEW_REGISTRY:
            errors.append(f"Command {meta.name} uses unknown view {meta.view_name!r}")

    return errors

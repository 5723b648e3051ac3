"""Handler Factory - Auto-wire handler dependencies.

Introspects a handler's __init__ type hints and resolves each protocol-typed
parameter from the container's application-scoped singletons.

Usage:
    from src.core.container.handler_factory import create_handler

    handler = create_handler(UpdateItemQuantityHandler)
    handler = create_handler(UpdateItemQuantityHandler, order_service=fake)
"""

import inspect
from typing import Any, TypeVar, get_args, get_origin, get_type_hints

T = TypeVar("T")


def get_type_name(annotation: Any) -> str:
    """Extract type name from annotation.

    Handles class types, string forward references and Optional unions.
    """
    if annotation is None:
        return "None"

    # For Union types, use the first non-None member
    if get_origin(annotation) is not None:
        for arg in get_args(annotation):
            if arg is not type(None):
                return get_type_name(arg)
        return "None"

    if isinstance(annotation, type):
        return annotation.__name__

    if isinstance(annotation, str):
        return annotation.split(".")[-1]

    return str(annotation).split(".")[-1].rstrip("'>")


def analyze_handler_dependencies(handler_class: type) -> dict[str, str]:
    """Map each __init__ parameter of a handler to its type name.

    Args:
        handler_class: Handler class to analyze.

    Returns:
        Dict of parameter name to type name.
    """
    init_method = getattr(handler_class, "__init__", None)
    if init_method is None:
        return {}
    try:
        hints = get_type_hints(init_method)
    except NameError:
        # Unresolvable forward reference: fall back to raw annotations
        sig = inspect.signature(init_method)
        hints = {
            name: param.annotation
            for name, param in sig.parameters.items()
            if name != "self" and param.annotation is not inspect.Parameter.empty
        }

    hints.pop("return", None)
    return {
        name: get_type_name(annotation)
        for name, annotation in hints.items()
        if name != "self"
    }


def _get_singleton_instance(type_name: str) -> Any:
    """Get singleton service instance from container.

    Raises:
        ValueError: If singleton type not found.
    """
    from src.core.container.infrastructure import (
        get_fragment_renderer,
        get_logger,
        get_order_service,
    )

    singleton_factories: dict[str, Any] = {
        "LoggerProtocol": get_logger,
        "FragmentRendererProtocol": get_fragment_renderer,
        "OrderServiceProtocol": get_order_service,
    }

    if type_name not in singleton_factories:
        raise ValueError(f"Unknown singleton type: {type_name}")

    return singleton_factories[type_name]()


def create_handler(handler_class: type[T], **overrides: Any) -> T:
    """Create handler instance with auto-wired dependencies.

    Args:
        handler_class: Handler class to instantiate.
        **overrides: Explicit dependency overrides (by parameter name).

    Returns:
        Handler instance with injected dependencies.

    Raises:
        ValueError: If a dependency cannot be resolved.
    """
    kwargs: dict[str, Any] = {}
    for param_name, type_name in analyze_handler_dependencies(handler_class).items():
        if param_name in overrides:
            kwargs[param_name] = overrides[param_name]
        else:
            kwargs[param_name] = _get_singleton_instance(type_name)
    return handler_class(**kwargs)

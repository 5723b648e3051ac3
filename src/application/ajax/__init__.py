"""Ajax command pipeline.

Exports the request lifecycle, the optional operation registry, the view
registry and the response envelope used to answer asynchronous widget updates.
"""

from src.application.ajax.command_handler import AjaxCommandHandler
from src.application.ajax.context import RequestContext
from src.application.ajax.envelope import ResponseEnvelope, build_envelope
from src.application.ajax.fragments import (
    VIEW_REGISTRY,
    FragmentCompiler,
    FragmentDeclaration,
    UnknownViewError,
    ViewDefinition,
)
from src.application.ajax.lifecycle import (
    CommandLifecycle,
    LifecycleState,
    LifecycleStateError,
)
from src.application.ajax.optional_operations import (
    OperationOutcome,
    OptionalOperation,
    OptionalOperationConfig,
    OptionalOperationConfigurationError,
    OptionalOperationRegistry,
)

__all__ = [
    "VIEW_REGISTRY",
    "AjaxCommandHandler",
    "CommandLifecycle",
    "FragmentCompiler",
    "FragmentDeclaration",
    "LifecycleState",
    "LifecycleStateError",
    "OperationOutcome",
    "OptionalOperation",
    "OptionalOperationConfig",
    "OptionalOperationConfigurationError",
    "OptionalOperationRegistry",
    "RequestContext",
    "ResponseEnvelope",
    "UnknownViewError",
    "ViewDefinition",
    "build_envelope",
]

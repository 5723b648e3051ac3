"""Structural interface of an ajax command handler.

A handler plugs its steps into a CommandLifecycle. It declares the parameters
it accepts, the view its fragments come from, the optional operations that
run during finalize and the per-command overrides for them.
"""

from collections.abc import Sequence
from typing import Any, Protocol

from src.application.ajax.context import RequestContext
from src.application.ajax.optional_operations import (
    OptionalOperationConfig,
    OptionalOperationRegistry,
)
from src.application.errors import ErrorAggregator


class AjaxCommandHandler(Protocol):
    """What CommandLifecycle needs from a command."""

    parameters: Sequence[str]
    view_name: str | None
    operations: OptionalOperationRegistry
    operation_config: OptionalOperationConfig

    async def validate(self, context: RequestContext, errors: ErrorAggregator) -> None:
        """Append one ApplicationError per invalid parameter."""
        ...

    async def execute(self, context: RequestContext) -> Any:
        """Run the primary operation and return JSON-compatible data."""
        ...

    async def view_data(self, context: RequestContext, data: Any) -> Any:
        """Return the template data for the view, given execute's result."""
        ...

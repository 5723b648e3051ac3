"""Ajax command service.

Builds one CommandLifecycle per request from a handler and the raw request
parameters, runs it and returns the envelope. Composes the command's steps
with view-level fragment compilation.

Usage:
    service = AjaxCommandService(
        compiler=FragmentCompiler(renderer),
        system_error_message=settings.system_error_message,
        logger=logger,
    )
    envelope = await service.run(handler, pairs, command_name=name, trace_id=trace_id)
"""

from collections.abc import Iterable

from src.application.ajax.command_handler import AjaxCommandHandler
from src.application.ajax.context import RequestContext
from src.application.ajax.envelope import ResponseEnvelope
from src.application.ajax.fragments import FragmentCompiler
from src.application.ajax.lifecycle import CommandLifecycle
from src.domain.protocols.logger_protocol import LoggerProtocol


class AjaxCommandService:
    """Run ajax commands through the request lifecycle."""

    def __init__(
        self,
        *,
        compiler: FragmentCompiler,
        system_error_message: str,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize service with dependencies.

        Args:
            compiler: Fragment compiler for command views.
            system_error_message: Generic message recorded for SystemFaults.
            logger: Logger, bound per request by the lifecycle.
        """
        self._compiler = compiler
        self._system_error_message = system_error_message
        self._logger = logger

    def build_lifecycle(
        self, handler: AjaxCommandHandler, context: RequestContext
    ) -> CommandLifecycle:
        """Compose a lifecycle from a handler and its view.

        Raises:
            UnknownViewError: If the handler names an unregistered view.
            OptionalOperationConfigurationError: If the handler's overrides
                name unknown operations.
        """
        compile_fragments = (
            self._compiler.for_view(handler.view_name, load=handler.view_data)
            if handler.view_name is not None
            else None
        )
        return CommandLifecycle(
            context=context,
            validate=handler.validate,
            execute=handler.execute,
            operations=handler.operations,
            operation_config=handler.operation_config,
            compile_fragments=compile_fragments,
            view_name=handler.view_name,
            system_error_message=self._system_error_message,
            logger=self._logger,
        )

    async def run(
        self,
        handler: AjaxCommandHandler,
        pairs: Iterable[tuple[str, str]],
        *,
        command_name: str,
        trace_id: str | None = None,
    ) -> ResponseEnvelope:
        """Answer one ajax request.

        Args:
            handler: Request-scoped command handler.
            pairs: Raw parameter name/value pairs in request order.
            command_name: Registered command name.
            trace_id: Request trace ID.

        Returns:
            The request's ResponseEnvelope.
        """
        context = RequestContext.from_pairs(
            command_name=command_name,
            pairs=pairs,
            declared=handler.parameters,
            trace_id=trace_id,
        )
        return await self.build_lifecycle(handler, context).run()

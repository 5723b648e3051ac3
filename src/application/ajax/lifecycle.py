"""Ajax command lifecycle: validate → gate → execute → finalize.

States:
    CREATED → VALIDATED → GATED → EXECUTED | SKIPPED → FINALIZED

There is no failure state. Every failure is caught at the boundary of the step
that produced it and recorded in the request's ErrorAggregator, and the
lifecycle always reaches FINALIZED with exactly one ResponseEnvelope.

Flow:
1. validate: the command appends an ApplicationError per invalid field. An
   exception escaping validation becomes a SystemFault.
2. gate: should_execute is latched as "no errors of either kind so far".
3. execute: runs only when the gate passed. An exception becomes a SystemFault;
   the returned value becomes the envelope's data.
4. finalize: always runs the optional operations, compiles fragments only when
   no error was recorded, then builds the envelope.

The lifecycle is composed, not subclassed: commands plug in their validate and
execute coroutines, their optional operation registry and its configuration,
and the view layer plugs in fragment compilation.
"""

import json
from collections.abc import Awaitable, Callable, Mapping
from enum import Enum
from typing import Any

from src.application.ajax.context import RequestContext
from src.application.ajax.envelope import ResponseEnvelope, build_envelope
from src.application.ajax.optional_operations import (
    OperationReport,
    OptionalOperationConfig,
    OptionalOperationRegistry,
)
from src.application.errors import ErrorAggregator, SystemFault
from src.domain.protocols.logger_protocol import LoggerProtocol

type ValidateStep = Callable[[RequestContext, ErrorAggregator], Awaitable[None]]
type ExecuteStep = Callable[[RequestContext], Awaitable[Any]]
type CompileStep = Callable[[RequestContext, Any], Awaitable[Mapping[str, str]]]


class LifecycleState(str, Enum):
    """States of a CommandLifecycle."""

    CREATED = "created"
    VALIDATED = "validated"
    GATED = "gated"
    EXECUTED = "executed"
    SKIPPED = "skipped"
    FINALIZED = "finalized"


class LifecycleStateError(RuntimeError):
    """Raised when a lifecycle is driven out of order (e.g. run twice)."""


class CommandLifecycle:
    """State machine answering one ajax command invocation.

    A lifecycle instance serves exactly one request: it owns the request
    context and a fresh ErrorAggregator, and run() may be called once.

    Example:
        >>> lifecycle = CommandLifecycle(
        ...     context=context,
        ...     validate=handler.validate,
        ...     execute=handler.execute,
        ...     operations=handler.operations,
        ...     operation_config=handler.operation_config,
        ...     compile_fragments=compiler.for_view("ShippingAddressView"),
        ...     view_name="ShippingAddressView",
        ...     system_error_message=settings.system_error_message,
        ...     logger=logger,
        ... )
        >>> envelope = await lifecycle.run()
    """

    def __init__(
        self,
        *,
        context: RequestContext,
        validate: ValidateStep,
        execute: ExecuteStep,
        operations: OptionalOperationRegistry,
        operation_config: OptionalOperationConfig,
        system_error_message: str,
        logger: LoggerProtocol,
        compile_fragments: CompileStep | None = None,
        view_name: str | None = None,
    ) -> None:
        """Initialize the lifecycle for one request.

        Args:
            context: Read-only request context.
            validate: Parameter validation coroutine.
            execute: Primary operation coroutine.
            operations: Optional operations run during finalize.
            operation_config: Enable/disable overrides for this command.
            system_error_message: Generic message recorded for SystemFaults.
            logger: Logger; bound here with command and trace context.
            compile_fragments: Fragment compilation coroutine (None = no html).
            view_name: Logical view name, reported in metadata.

        Raises:
            OptionalOperationConfigurationError: If operation_config names
                operations the registry does not contain.
        """
        operations.check_config(operation_config)
        self._context = context
        self._validate_step = validate
        self._execute_step = execute
        self._operations = operations
        self._operation_config = operation_config
        self._compile_step = compile_fragments
        self._view_name = view_name
        self._system_error_message = system_error_message
        self._logger = logger.bind(
            command=context.command_name, trace_id=context.trace_id
        )

        self._errors = ErrorAggregator()
        self._state = LifecycleState.CREATED
        self._should_execute: bool | None = None
        self._data: Any = None
        self._operation_report: OperationReport = {}
        self._envelope: ResponseEnvelope | None = None

    # Read views
    @property
    def state(self) -> LifecycleState:
        return self._state

    @property
    def errors(self) -> ErrorAggregator:
        return self._errors

    @property
    def should_execute(self) -> bool | None:
        """Latched gate decision (None before the gate)."""
        return self._should_execute

    @property
    def operation_report(self) -> OperationReport:
        return self._operation_report

    @property
    def envelope(self) -> ResponseEnvelope:
        """The envelope built during finalize.

        Raises:
            LifecycleStateError: Before the lifecycle is finalized.
        """
        if self._envelope is None:
            raise LifecycleStateError("Lifecycle has not been finalized")
        return self._envelope

    async def run(self) -> ResponseEnvelope:
        """Drive the lifecycle from CREATED to FINALIZED.

        Returns:
            The request's ResponseEnvelope.

        Raises:
            LifecycleStateError: If run() was already called.
        """
        if self._state is not LifecycleState.CREATED:
            raise LifecycleStateError(
                f"Lifecycle already run (state={self._state.value})"
            )

        await self._validate()
        self._gate()
        if self._should_execute:
            await self._execute()
        else:
            self._transition(LifecycleState.SKIPPED)
        return await self._finalize()

    # Steps
    async def _validate(self) -> None:
        try:
            await self._validate_step(self._context, self._errors)
        except Exception as e:
            self._record_fault("validate", e)
        self._transition(LifecycleState.VALIDATED)

    def _gate(self) -> None:
        self._should_execute = not (
            self._errors.has_application_errors() or self._errors.has_system_faults()
        )
        self._transition(LifecycleState.GATED)
        self._logger.info(
            "Ajax command gated",
            should_execute=self._should_execute,
            application_errors=len(self._errors.application_errors),
            system_faults=self._errors.system_fault_count,
        )

    async def _execute(self) -> None:
        try:
            data = await self._execute_step(self._context)
            # Reject values the envelope could not serialize while still in
            # the step that produced them.
            json.dumps(data, allow_nan=False)
            self._data = data
        except Exception as e:
            self._record_fault("execute", e)
        self._transition(LifecycleState.EXECUTED)

    async def _finalize(self) -> ResponseEnvelope:
        self._operation_report = await self._operations.run(
            self._context,
            self._errors,
            self._operation_config,
            fault_message=self._system_error_message,
            logger=self._logger,
        )

        fragments: Mapping[str, str] = {}
        if self._compile_step is not None and not self._errors.has_errors():
            try:
                fragments = await self._compile_step(self._context, self._data)
            except Exception as e:
                self._record_fault("render", e)
                fragments = {}

        self._envelope = build_envelope(
            metadata=self._metadata(),
            html_fragments=fragments,
            data=self._data,
            errors=self._errors,
        )
        self._transition(LifecycleState.FINALIZED)
        self._logger.info(
            "Ajax command finalized",
            executed=bool(self._should_execute),
            has_errors=self._envelope.has_errors,
            fragments=list(self._envelope.html_fragments),
        )
        return self._envelope

    # Helpers
    def _metadata(self) -> dict[str, Any]:
        return {
            "command": self._context.command_name,
            "view": self._view_name,
            "executed": bool(self._should_execute),
            "operations": {
                name: outcome.value for name, outcome in self._operation_report.items()
            },
        }

    def _record_fault(self, step: str, error: Exception) -> None:
        self._logger.error("Ajax command step failed", error=error, step=step)
        self._errors.add_system_fault(
            SystemFault(message=self._system_error_message, cause=error, step=step)
        )

    def _transition(self, state: LifecycleState) -> None:
        self._logger.debug(
            "Ajax command state changed", previous=self._state.value, state=state.value
        )
        self._state = state

"""Dependency-ordered optional operations run during finalize.

An optional operation is a toggleable secondary step (recalculate the order,
sync the payment instruction) that runs after the primary operation whether or
not the primary operation ran. Operations run in registration order; an
operation runs only when it is enabled and every operation it depends on
succeeded during this run.

Registration rules:
- Names are unique.
- Every dependency must already be registered. Since dependencies always point
  backwards in registration order, the dependency graph cannot contain a cycle.

Static configuration (names, dependency graph, default flags) is fixed when the
registry is built; per-run enable/disable overrides arrive as an immutable
OptionalOperationConfig, and per-run outcomes are returned as an OperationReport.
"""

from collections.abc import Awaitable, Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from src.application.ajax.context import RequestContext
from src.application.errors import ErrorAggregator, SystemFault
from src.domain.protocols.logger_protocol import LoggerProtocol

type OperationEffect = Callable[[RequestContext, ErrorAggregator], Awaitable[None]]


class OptionalOperationConfigurationError(ValueError):
    """Raised when a registry or run configuration is inconsistent."""


class OperationOutcome(str, Enum):
    """What happened to one optional operation during a run."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"
    SKIPPED_DISABLED = "skipped_disabled"
    SKIPPED_DEPENDENCY = "skipped_dependency"


@dataclass(frozen=True, kw_only=True)
class OptionalOperation:
    """A toggleable secondary step.

    Attributes:
        name: Unique operation name.
        effect: Coroutine function run with the request context and the
            request's ErrorAggregator. It may append faults itself.
        depends_on: Names of operations that must succeed first.
        enabled_by_default: Whether the operation runs without an override.
    """

    name: str
    effect: OperationEffect
    depends_on: frozenset[str] = frozenset()
    enabled_by_default: bool = False


@dataclass(frozen=True, kw_only=True)
class OptionalOperationConfig:
    """Per-command enable/disable overrides, fixed at construction.

    Attributes:
        enabled: Operations forced on.
        disabled: Operations forced off.

    Example:
        >>> config = OptionalOperationConfig(disabled=frozenset({"orderPrepare"}))
    """

    enabled: frozenset[str] = frozenset()
    disabled: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        overlap = self.enabled & self.disabled
        if overlap:
            raise OptionalOperationConfigurationError(
                f"Operations both enabled and disabled: {sorted(overlap)}"
            )

    def is_enabled(self, operation: OptionalOperation) -> bool:
        if operation.name in self.disabled:
            return False
        if operation.name in self.enabled:
            return True
        return operation.enabled_by_default


type OperationReport = Mapping[str, OperationOutcome]


class OptionalOperationRegistry:
    """Insertion-ordered mapping from name to OptionalOperation.

    Example:
        >>> registry = OptionalOperationRegistry()
        >>> registry.register(OptionalOperation(name="orderPrepare", effect=prepare,
        ...                                     enabled_by_default=True))
        >>> registry.register(OptionalOperation(name="syncPayment", effect=sync,
        ...                                     depends_on=frozenset({"orderPrepare"})))
        >>> report = await registry.run(context, errors, OptionalOperationConfig(),
        ...                             fault_message="Try again.", logger=logger)
    """

    def __init__(self, operations: Iterable[OptionalOperation] = ()) -> None:
        self._operations: dict[str, OptionalOperation] = {}
        for operation in operations:
            self.register(operation)

    def register(self, operation: OptionalOperation) -> None:
        """Add an operation after all previously registered ones.

        Raises:
            OptionalOperationConfigurationError: If the name is taken or a
                dependency is not registered yet.
        """
        if operation.name in self._operations:
            raise OptionalOperationConfigurationError(
                f"Optional operation already registered: {operation.name}"
            )
        missing = sorted(operation.depends_on - self._operations.keys())
        if missing:
            raise OptionalOperationConfigurationError(
                f"Optional operation {operation.name} depends on unregistered "
                f"operations: {missing}"
            )
        self._operations[operation.name] = operation

    def __contains__(self, name: object) -> bool:
        return name in self._operations

    def __iter__(self) -> Iterator[OptionalOperation]:
        return iter(self._operations.values())

    def __len__(self) -> int:
        return len(self._operations)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._operations)

    def check_config(self, config: OptionalOperationConfig) -> None:
        """Reject overrides that name operations this registry does not know.

        Raises:
            OptionalOperationConfigurationError: On unknown names.
        """
        unknown = sorted((config.enabled | config.disabled) - self._operations.keys())
        if unknown:
            raise OptionalOperationConfigurationError(
                f"Unknown optional operations in configuration: {unknown}"
            )

    async def run(
        self,
        context: RequestContext,
        errors: ErrorAggregator,
        config: OptionalOperationConfig,
        *,
        fault_message: str,
        logger: LoggerProtocol,
    ) -> OperationReport:
        """Run every operation once, in registration order.

        An operation is skipped when disabled or when any dependency did not
        succeed in this run; skips record nothing in the aggregator. A raised
        exception is recorded as a SystemFault. An operation that appends a
        SystemFault itself also counts as failed.

        Args:
            context: Request context passed to each effect.
            errors: The request's ErrorAggregator.
            config: Enable/disable overrides for this command.
            fault_message: Generic message for captured faults.
            logger: Request-scoped logger.

        Returns:
            Read-only mapping of operation name to outcome, in run order.
        """
        report: dict[str, OperationOutcome] = {}
        for operation in self._operations.values():
            if not config.is_enabled(operation):
                report[operation.name] = OperationOutcome.SKIPPED_DISABLED
                continue

            unmet = sorted(
                name
                for name in operation.depends_on
                if report.get(name) is not OperationOutcome.SUCCEEDED
            )
            if unmet:
                logger.info(
                    "Optional operation skipped",
                    operation=operation.name,
                    unmet_dependencies=unmet,
                )
                report[operation.name] = OperationOutcome.SKIPPED_DEPENDENCY
                continue

            faults_before = errors.system_fault_count
            try:
                await operation.effect(context, errors)
            except Exception as e:
                logger.error(
                    "Optional operation failed",
                    error=e,
                    operation=operation.name,
                )
                errors.add_system_fault(
                    SystemFault(message=fault_message, cause=e, step=operation.name)
                )

            if errors.system_fault_count > faults_before:
                report[operation.name] = OperationOutcome.FAILED
            else:
                report[operation.name] = OperationOutcome.SUCCEEDED

        return MappingProxyType(report)

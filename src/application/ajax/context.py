"""Request context for one ajax command invocation.

The context is built once from the inbound request and is read-only from then
on: the parameter mapping is wrapped in a MappingProxyType so no step can
mutate what another step reads.
"""

from collections.abc import Collection, Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True, kw_only=True)
class RequestContext:
    """Request-scoped, read-only parameters of one command invocation.

    Attributes:
        command_name: Registered name of the command being run.
        parameters: Declared request parameters (name -> string value).
        trace_id: Request trace ID for log correlation.

    Example:
        >>> context = RequestContext.from_pairs(
        ...     command_name="update_shipping_address",
        ...     pairs=[("orderId", "1001"), ("firstName", "Ada")],
        ...     declared=("orderId", "firstName", "lastName"),
        ... )
        >>> context.get("firstName")
        'Ada'
    """

    command_name: str
    parameters: Mapping[str, str] = field(default_factory=dict)
    trace_id: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))

    @classmethod
    def from_pairs(
        cls,
        *,
        command_name: str,
        pairs: Iterable[tuple[str, str]],
        declared: Collection[str],
        trace_id: str | None = None,
    ) -> "RequestContext":
        """Build a context from raw name/value pairs.

        Parameters the command does not declare are dropped. When a name
        repeats, the first value wins.

        Args:
            command_name: Registered command name.
            pairs: Name/value pairs in request order.
            declared: Parameter names the command accepts.
            trace_id: Request trace ID.

        Returns:
            RequestContext with the filtered parameters.
        """
        parameters: dict[str, str] = {}
        for name, value in pairs:
            if name in declared and name not in parameters:
                parameters[name] = value
        return cls(command_name=command_name, parameters=parameters, trace_id=trace_id)

    def get(self, name: str, default: str | None = None) -> str | None:
        """Return a parameter value, or default when absent."""
        return self.parameters.get(name, default)

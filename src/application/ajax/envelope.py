"""Response envelope for ajax commands.

The envelope is the single JSON document answering an ajax command:

    {
        "metadata": <JSON value>,
        "payload": {"html": {"<key>": "<html>"}, "data": <JSON value>},
        "error": {"application": ["<message>"], "exception": ["<message>"]}
    }

build_envelope() is a pure function of its inputs. It reports fragments exactly
as given; skipping fragment compilation for erroring requests is the caller's
job. Serialization is deterministic, so the same envelope always produces the
same bytes.
"""

import copy
import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from src.application.errors import ErrorAggregator
from src.core.constants import ENVELOPE_JSON_SEPARATORS


@dataclass(frozen=True, kw_only=True)
class ResponseEnvelope:
    """Immutable result of one ajax command.

    Attributes:
        metadata: JSON-compatible metadata about the run.
        html_fragments: Rendered fragments keyed by element id, in compile order.
        data: JSON-compatible structured result of the primary operation.
        application_errors: User-actionable messages in accumulation order.
        system_errors: Generic failure messages in accumulation order.
        has_errors: Whether either error channel is non-empty.
    """

    metadata: Any = None
    html_fragments: Mapping[str, str] = field(default_factory=dict)
    data: Any = None
    application_errors: tuple[str, ...] = ()
    system_errors: tuple[str, ...] = ()
    has_errors: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "html_fragments", MappingProxyType(dict(self.html_fragments))
        )

    def to_wire(self) -> dict[str, Any]:
        """Return the wire representation (a fresh, mutable copy)."""
        return {
            "metadata": copy.deepcopy(self.metadata),
            "payload": {
                "html": dict(self.html_fragments),
                "data": copy.deepcopy(self.data),
            },
            "error": {
                "application": list(self.application_errors),
                "exception": list(self.system_errors),
            },
        }

    def to_json(self) -> bytes:
        """Serialize the wire representation to compact UTF-8 JSON.

        Raises:
            TypeError: If metadata or data is not JSON-compatible.
        """
        return json.dumps(
            self.to_wire(),
            separators=ENVELOPE_JSON_SEPARATORS,
            ensure_ascii=False,
            allow_nan=False,
        ).encode("utf-8")


def build_envelope(
    *,
    metadata: Any,
    html_fragments: Mapping[str, str],
    data: Any,
    errors: ErrorAggregator,
) -> ResponseEnvelope:
    """Build the response envelope for a finished command.

    Args:
        metadata: JSON-compatible run metadata.
        html_fragments: Fragments to ship, in compile order.
        data: JSON-compatible structured result.
        errors: The request's ErrorAggregator.

    Returns:
        ResponseEnvelope detached from the inputs.
    """
    return ResponseEnvelope(
        metadata=copy.deepcopy(metadata),
        html_fragments=html_fragments,
        data=copy.deepcopy(data),
        application_errors=tuple(errors.application_messages()),
        system_errors=tuple(errors.system_messages()),
        has_errors=errors.has_errors(),
    )

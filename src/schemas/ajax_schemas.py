"""Ajax command request/response schemas.

Request bodies:
    - A JSON array of {"name": ..., "value": ...} pairs (serialized form)
    - A flat JSON object of name -> scalar value

Response:
    ResponseEnvelopeSchema mirrors the wire envelope. The client controller
    validates responses against it; a body that does not validate is treated
    as a transport failure.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from src.application.ajax.envelope import ResponseEnvelope

type ParameterValue = str | int | float | bool | None


class ParameterPair(BaseModel):
    """One serialized form field."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., description="Parameter name")
    value: ParameterValue = Field(None, description="Parameter value")


AJAX_JSON_BODY: TypeAdapter[list[ParameterPair] | dict[str, ParameterValue]] = (
    TypeAdapter(list[ParameterPair] | dict[str, ParameterValue])
)
"""Validates a JSON request body (raises pydantic.ValidationError)."""


def parameter_text(value: ParameterValue) -> str | None:
    """Render a JSON scalar as the string a form field would carry.

    Returns:
        The text value, or None for JSON null (the parameter is dropped).
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def json_body_pairs(body: bytes) -> list[tuple[str, str]]:
    """Parse a JSON request body into name/value pairs in body order.

    Raises:
        pydantic.ValidationError: If the body is not valid JSON of either shape.
    """
    parsed = AJAX_JSON_BODY.validate_json(body)
    items: list[tuple[str, ParameterValue]]
    if isinstance(parsed, list):
        items = [(pair.name, pair.value) for pair in parsed]
    else:
        items = list(parsed.items())
    return [
        (name, text) for name, value in items if (text := parameter_text(value)) is not None
    ]


class EnvelopePayloadSchema(BaseModel):
    html: dict[str, str] = Field(
        default_factory=dict, description="Fragments keyed by element id"
    )
    data: Any = Field(None, description="Structured result of the primary operation")


class EnvelopeErrorSchema(BaseModel):
    application: list[str] = Field(
        default_factory=list, description="User-actionable validation messages"
    )
    exception: list[str] = Field(
        default_factory=list, description="Generic system failure messages"
    )


class ResponseEnvelopeSchema(BaseModel):
    """Wire envelope answering every ajax command.

    Examples:
        >>> ResponseEnvelopeSchema.model_validate_json(response.content)
    """

    model_config = ConfigDict(extra="forbid")

    metadata: Any = Field(None, description="Command, view, executed flag, operations")
    payload: EnvelopePayloadSchema
    error: EnvelopeErrorSchema

    def to_envelope(self) -> ResponseEnvelope:
        """Convert to the application-level envelope."""
        application = tuple(self.error.application)
        system = tuple(self.error.exception)
        return ResponseEnvelope(
            metadata=self.metadata,
            html_fragments=self.payload.html,
            data=self.payload.data,
            application_errors=application,
            system_errors=system,
            has_errors=bool(application or system),
        )

"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import ResponseEnvelopeSchema, json_body_pairs
"""

from src.schemas.ajax_schemas import (
    AJAX_JSON_BODY,
    EnvelopeErrorSchema,
    EnvelopePayloadSchema,
    ParameterPair,
    ResponseEnvelopeSchema,
    json_body_pairs,
    parameter_text,
)

__all__ = [
    "AJAX_JSON_BODY",
    "EnvelopeErrorSchema",
    "EnvelopePayloadSchema",
    "ParameterPair",
    "ResponseEnvelopeSchema",
    "json_body_pairs",
    "parameter_text",
]

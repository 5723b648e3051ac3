"""Ajax command router.

Endpoints:
    GET  /api/v1/ajax/{command_name} - Run a command with query parameters
    POST /api/v1/ajax/{command_name} - Run a command with form or JSON parameters

Every request that names a registered command is answered with a 200 and the
response envelope; validation and system failures travel inside it. Unknown
commands (404) and unparseable bodies (400) are rejected before the command
lifecycle starts, as RFC 7807 problem details.

Parameter sources, first value wins on repeated names:
    - application/x-www-form-urlencoded or multipart/form-data body
    - JSON body: an array of {name, value} pairs or a flat object
    - Query string (after the body)
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Request, status
from fastapi.responses import Response
from pydantic import ValidationError as PydanticValidationError
from starlette.datastructures import UploadFile

from src.application.ajax.command_handler import AjaxCommandHandler
from src.application.services.ajax_command_service import AjaxCommandService
from src.core.constants import ENVELOPE_MEDIA_TYPE
from src.core.container import (
    get_ajax_command_handler,
    get_ajax_command_service,
    get_logger,
)
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors.problem_details import ProblemDetails
from src.schemas.ajax_schemas import ResponseEnvelopeSchema, json_body_pairs

router = APIRouter(prefix="/ajax", tags=["Ajax"])

_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def resolve_ajax_command_handler(
    command_name: Annotated[str, Path(description="Registered command name")],
) -> AjaxCommandHandler:
    """Create the request-scoped handler for command_name.

    Raises:
        HTTPException: 404 if the command is not registered.
    """
    handler = get_ajax_command_handler(command_name)
    if handler is None:
        get_logger().warning("Ajax command not found", command=command_name)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown ajax command: {command_name}",
        )
    return handler


async def read_parameters(request: Request) -> list[tuple[str, str]]:
    """Collect the request's name/value pairs in precedence order.

    Raises:
        HTTPException: 400 if the body cannot be parsed.
    """
    pairs: list[tuple[str, str]] = []
    if request.method == "POST":
        pairs.extend(await _body_pairs(request))
    pairs.extend(request.query_params.multi_items())
    return pairs


async def _body_pairs(request: Request) -> list[tuple[str, str]]:
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()

    if content_type in _FORM_TYPES:
        form = await request.form()
        return [
            (name, value)
            for name, value in form.multi_items()
            if not isinstance(value, UploadFile)
        ]

    body = await request.body()
    if not body.strip():
        return []

    if content_type == "application/json" or content_type.endswith("+json"):
        try:
            return json_body_pairs(body)
        except PydanticValidationError:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Request body must be a JSON array of name/value pairs "
                "or a flat JSON object",
            ) from None

    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=f"Unsupported request body type: {content_type or 'unknown'}",
    )


@router.api_route(
    "/{command_name}",
    methods=["GET", "POST"],
    summary="Run an ajax command",
    response_class=Response,
    responses={
        200: {"model": ResponseEnvelopeSchema, "description": "Response envelope"},
        400: {"model": ProblemDetails, "description": "Unparseable request body"},
        404: {"model": ProblemDetails, "description": "Unknown command"},
    },
)
async def run_ajax_command(
    request: Request,
    command_name: Annotated[str, Path(description="Registered command name")],
    handler: Annotated[AjaxCommandHandler, Depends(resolve_ajax_command_handler)],
    service: Annotated[AjaxCommandService, Depends(get_ajax_command_service)],
) -> Response:
    """Run one ajax command and return its response envelope.

    Returns:
        200 with the envelope as compact JSON.
    """
    try:
        pairs = await read_parameters(request)
    except HTTPException as e:
        get_logger().warning(
            "Ajax request rejected", command=command_name, reason=e.detail
        )
        raise

    envelope = await service.run(
        handler, pairs, command_name=command_name, trace_id=get_trace_id()
    )
    return Response(content=envelope.to_json(), media_type=ENVELOPE_MEDIA_TYPE)

"""Global exception handlers for FastAPI application.

Converts errors raised outside the ajax command lifecycle into RFC 7807
problem details. Failures inside the lifecycle never reach these handlers;
they travel in the envelope.

Handlers:
    http_exception_handler: HTTPException (404 unknown command, 400 bad body,
        405 method) to problem details
    generic_exception_handler: Any other exception, with a generic detail

Exports:
    register_exception_handlers: Register the handlers with a FastAPI app
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.core.config import settings
from src.core.container import get_logger
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors.problem_details import ProblemDetails

PROBLEM_MEDIA_TYPE = "application/problem+json"


def _problem_response(
    request: Request,
    status_code: int,
    detail: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    problem = ProblemDetails.for_status(
        status_code,
        detail=detail,
        instance=request.url.path,
        trace_id=get_trace_id(),
    )
    return JSONResponse(
        status_code=status_code,
        content=problem.model_dump(exclude_none=True),
        headers=headers,
        media_type=PROBLEM_MEDIA_TYPE,
    )


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Convert HTTPException to a problem details response.

    Example:
        >>> # POST /api/v1/ajax/unknown_command returns 404 with:
        >>> # {
        >>> #   "type": "http://localhost:8000/errors/not-found",
        >>> #   "title": "Resource Not Found",
        >>> #   "status": 404,
        >>> #   "detail": "Unknown ajax command: unknown_command",
        >>> #   "instance": "/api/v1/ajax/unknown_command",
        >>> #   "trace_id": "..."
        >>> # }
    """
    # Type narrowing: FastAPI registers this handler only for HTTPException
    assert isinstance(exc, StarletteHTTPException)

    return _problem_response(
        request,
        exc.status_code,
        exc.detail if isinstance(exc.detail, str) else str(exc.detail),
        # Allow header on 405
        headers=getattr(exc, "headers", None),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log an unexpected exception and answer with the generic message."""
    get_logger().error(
        "Unhandled exception",
        error=exc,
        request_path=request.url.path,
        request_method=request.method,
    )
    return _problem_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        settings.system_error_message,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register the problem details handlers with a FastAPI app."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

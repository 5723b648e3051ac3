"""Trace middleware to inject a trace_id per request.

- Accepts a well-formed incoming X-Trace-Id, otherwise generates one
- Adds X-Trace-Id response header
- Exposes get_trace_id() for the ajax pipeline and the logging adapter
"""

from __future__ import annotations

import re
from contextvars import ContextVar
from typing import Awaitable, Callable
from uuid import uuid4

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

TRACE_HEADER = "X-Trace-Id"
_TRACE_ID_PATTERN = re.compile(r"[A-Za-z0-9._-]{1,64}")

trace_id_context: ContextVar[str | None] = ContextVar("trace_id", default=None)


def get_trace_id() -> str | None:
    """Return the current trace ID, or None outside of a request."""
    return trace_id_context.get()


def _incoming_trace_id(request: Request) -> str | None:
    value = request.headers.get(TRACE_HEADER)
    if value and _TRACE_ID_PATTERN.fullmatch(value):
        return value
    return None


class TraceMiddleware(BaseHTTPMiddleware):
    """Starlette middleware that injects a trace ID into each request context."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Set the request's trace ID, call the app and echo the ID back.

        Args:
            request: Incoming request.
            call_next: Next handler.

        Returns:
            Response with X-Trace-Id header added.
        """
        trace_id = _incoming_trace_id(request) or uuid4().hex
        token = trace_id_context.set(trace_id)
        try:
            response = await call_next(request)
            response.headers[TRACE_HEADER] = trace_id
            return response
        finally:
            trace_id_context.reset(token)

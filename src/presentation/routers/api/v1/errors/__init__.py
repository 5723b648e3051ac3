"""RFC 7807 problem details and exception handlers.

Problem details answer requests that never reach the ajax command lifecycle
(unknown commands, unparseable bodies, disallowed methods, unexpected crashes).

Exports:
    ProblemDetails: Problem details body
    register_exception_handlers: Register global exception handlers with FastAPI
"""

from src.presentation.routers.api.v1.errors.exception_handlers import (
    register_exception_handlers,
)
from src.presentation.routers.api.v1.errors.problem_details import ProblemDetails

__all__ = [
    "ProblemDetails",
    "register_exception_handlers",
]

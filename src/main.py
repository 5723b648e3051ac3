"""
Main FastAPI application entry point.

Wires the ajax command API, request tracing, CORS and the RFC 7807 exception
handlers into one FastAPI application.

Run locally:
    uvicorn src.main:app --reload
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.application.cqrs.computed_views import validate_registry_consistency
from src.core.config import settings
from src.core.container import get_logger
from src.presentation.routers import system_router
from src.presentation.routers.api.middleware.trace_middleware import (
    TRACE_HEADER,
    TraceMiddleware,
)
from src.presentation.routers.api.v1 import v1_router
from src.presentation.routers.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Startup: verify the ajax command registry against handlers and views.

    Raises:
        RuntimeError: If the registry is inconsistent.
    """
    logger = get_logger()
    problems = validate_registry_consistency()
    if problems:
        logger.critical("Ajax command registry inconsistent", problems=problems)
        raise RuntimeError(f"Ajax command registry inconsistent: {problems}")
    logger.info(
        "Application started",
        environment=settings.environment.value,
        version=settings.app_version,
    )

    yield

    logger.info("Application stopped")


# Initialize FastAPI application with settings and lifespan
app = FastAPI(
    title=settings.app_name,
    description="Ajax widget re-render API",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# CORS (browser clients calling the ajax API from another origin)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
    expose_headers=[TRACE_HEADER],
)

# Wire trace middleware (request correlation)
app.add_middleware(TraceMiddleware)

# Register global exception handlers (RFC 7807 error responses)
register_exception_handlers(app)

# System endpoints (/, /health, /config)
app.include_router(system_router)

# API v1 routers
app.include_router(v1_router)

"""API v1 routers.

Resources:
    /api/v1/ajax/{command_name} - Ajax widget commands
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.v1.ajax import router as ajax_router

v1_router = APIRouter(prefix=settings.api_v1_prefix)
v1_router.include_router(ajax_router)

__all__ = [
    "v1_router",
]

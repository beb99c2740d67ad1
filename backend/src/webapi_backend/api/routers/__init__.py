"""Route definitions for public HTTP endpoints."""

from webapi_backend.api.routers.auth import router as auth_router
from webapi_backend.api.routers.health import router as health_router
from webapi_backend.api.routers.values import router as values_router

__all__ = ["auth_router", "health_router", "values_router"]

"""Root API router with /api/v1 prefix and middleware registration."""

from fastapi import APIRouter, FastAPI

from safelog.api.middleware import RequestLoggingMiddleware, SecurityHeadersMiddleware
from safelog.core.config import Settings


def create_router(settings: Settings) -> APIRouter:
    """Create the root API router with all sub-routers included.

    Args:
        settings: Application settings.

    Returns:
        Configured API router.
    """
    from safelog.api.v1.classifications import classifications_router
    from safelog.api.v1.redactions import redactions_router

    root_router = APIRouter(prefix=settings.api_v1_prefix)

    @root_router.get("/health", tags=["health"])
    async def health() -> dict:
        """Liveness check."""
        return {"status": "healthy"}

    root_router.include_router(classifications_router)
    root_router.include_router(redactions_router)

    return root_router


def setup_middleware(app: FastAPI) -> None:
    """Register all middleware on the FastAPI app.

    Args:
        app: The FastAPI application.
    """
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

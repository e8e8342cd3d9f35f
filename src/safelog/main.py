"""FastAPI application factory.

Creates the FastAPI app with lifespan management, exception handlers,
and OpenAPI metadata.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from safelog import __version__
from safelog.core.config import get_settings
from safelog.core.logging import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifecycle: configure redacted logging on startup."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_dir, serialize=settings.log_serialize)
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title="Safelog API",
        description="Sensitive data classification catalog and log redaction previews",
        version=__version__,
        lifespan=lifespan,
    )

    # Register exception handlers
    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={"detail": str(exc)},
        )

    # Request bodies may hold raw PII; report where validation failed, never what was sent
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = [{k: v for k, v in error.items() if k in ("type", "loc", "msg")} for error in exc.errors()]
        return JSONResponse(
            status_code=422,
            content={"detail": "Request validation failed", "code": "VALIDATION_ERROR", "errors": errors},
        )

    # Register middleware and routers
    from safelog.api.router import create_router, setup_middleware

    setup_middleware(app)
    app.include_router(create_router(settings))

    return app

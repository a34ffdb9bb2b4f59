"""FastAPI application."""

import logging

from dishka import AsyncContainer
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from hdnotes.config import Settings
from hdnotes.interface.api.middleware import (
    add_security_headers,
    setup_rate_limiting,
)
from hdnotes.interface.api.routes import auth, health
from hdnotes.interface.error import APIError
from hdnotes.util.di.container import create_container, setup_di
from hdnotes.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)

logger = logging.getLogger(__name__)


def format_validation_error(exc: RequestValidationError) -> str:
    """Turn the first request validation error into one sentence.

    Messages raised by our own validators are returned as written; other
    errors are prefixed with the offending field.
    """
    errors = exc.errors()
    if not errors:
        return "Invalid request"

    error = errors[0]
    message = str(error.get("msg", "Invalid request"))
    if error.get("type") == "value_error":
        return message.removeprefix("Value error, ")

    loc = [str(part) for part in error.get("loc", ()) if part != "body"]
    if loc:
        return f"{loc[-1]}: {message}"
    return message


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Render an APIError as ``{"message": ...}``."""
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render request validation failures as 400 ``{"message": ...}``."""
    message = format_validation_error(exc)
    logger.info(f"Rejected {request.method} {request.url.path}: {message}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"message": message}
    )


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; the production container is built
            when omitted

    Returns:
        Configured application
    """
    settings = Settings()

    # Logfire must be configured before instrumentation
    instrument_httpx()

    app_instance = FastAPI(
        title="HD Notes API",
        description="Backend API for HD Notes - email OTP and Google sign-in",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    # Middleware added last runs first: CORS, then headers, then the limiter
    setup_rate_limiting(app_instance, settings.rate_limit)
    app_instance.middleware("http")(add_security_headers)

    # Exact origins first, then the pattern for preview deployments
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allowed_origins,
        allow_origin_regex=settings.cors.allowed_origin_regex,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "X-Requested-With",
        ],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())

    app_instance.add_exception_handler(APIError, api_error_handler)
    app_instance.add_exception_handler(RequestValidationError, validation_error_handler)

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)

    logger.info(f"Allowed origins: {', '.join(settings.cors.allowed_origins)}")

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()

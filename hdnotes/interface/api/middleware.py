"""Request throttling and response security headers."""

import logging

from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from hdnotes.config import RateLimitSettings

logger = logging.getLogger(__name__)

RATE_LIMITED = "Too many requests, please try again later."

# Browser hardening headers; no Content-Security-Policy or
# Cross-Origin-Embedder-Policy since the API serves JSON to another origin
SECURITY_HEADERS = {
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Origin-Agent-Cluster": "?1",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Frame-Options": "SAMEORIGIN",
    "X-Permitted-Cross-Domain-Policies": "none",
    "X-XSS-Protection": "0",
}


def rate_limit_exceeded_handler(
    request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Render a throttled request as 429 ``{"message": ...}``.

    Called synchronously by SlowAPIMiddleware.
    """
    logger.warning(
        f"Rate limit exceeded for {get_remote_address(request)} "
        f"on {request.method} {request.url.path}: {exc.detail}"
    )
    return JSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content={"message": RATE_LIMITED},
    )


def setup_rate_limiting(app: FastAPI, settings: RateLimitSettings) -> Limiter:
    """Throttle every route per client address.

    The limit is an application limit, so all routes draw from one budget
    per client. Counters live in process memory.
    """
    limiter = Limiter(
        key_func=get_remote_address,
        application_limits=[settings.limit],
        enabled=settings.enabled,
    )
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    logger.info(f"Rate limit: {settings.limit} (enabled={settings.enabled})")
    return limiter


async def add_security_headers(request: Request, call_next) -> Response:
    """Attach SECURITY_HEADERS without overriding headers set by a route."""
    response = await call_next(request)
    for name, value in SECURITY_HEADERS.items():
        response.headers.setdefault(name, value)
    return response

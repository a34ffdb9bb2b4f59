"""Logfire setup and instrumentation.

Spans and events are emitted with ``logfire`` directly, e.g.
``logfire.info("OTP issued", user_id=str(user.id))``.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from hdnotes.config import Settings

SERVICE_NAME = "hdnotes-api"

# Probed by the load balancer every few seconds
UNTRACED_URLS = "/api/health"


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process.

    Telemetry leaves the process only with a token, unless
    OBSERVABILITY__SEND_TO_LOGFIRE forces it either way.
    """
    obs = settings.observability
    send = obs.send_to_logfire
    if send is None:
        send = bool(obs.logfire_token)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send,
        token=obs.logfire_token,
        console=logfire.ConsoleOptions(
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )
    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send,
    )


def _request_attributes(request, attributes: dict) -> dict:
    # Validated bodies hold passcodes and emails; keep only the request line
    mapped = {key: value for key, value in attributes.items() if key != "values"}
    mapped["path"] = request.url.path
    if request.client:
        mapped["client_host"] = request.client.host
    return mapped


def instrument_fastapi(app: FastAPI) -> None:
    """Trace requests without headers (cookies) or validated bodies."""
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
        excluded_urls=UNTRACED_URLS,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries on the users table."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)


def instrument_httpx() -> None:
    """Trace calls to Google's token and userinfo endpoints."""
    logfire.instrument_httpx()

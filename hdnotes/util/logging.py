"""Process-wide logging for the API server."""

import logging
import sys

from hdnotes.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

# Log every request, query or throttling decision at INFO
QUIET_LOGGERS = ("httpx", "httpcore", "asyncpg", "sqlalchemy.engine", "slowapi")


def setup_logging(settings: Settings) -> None:
    """Send logs to stdout, at DEBUG when ``settings.debug`` is set."""
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%dT%H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("hdnotes").setLevel(level)

    logger = logging.getLogger(__name__)
    if not (settings.email.smtp_user and settings.email.smtp_password):
        if settings.environment == "production":
            logger.error("SMTP credentials missing: OTP emails will fail")
        else:
            logger.warning("SMTP credentials missing: emails are written to this log")

    logger.info(
        f"Logging configured: environment={settings.environment}, "
        f"level={logging.getLevelName(level)}"
    )

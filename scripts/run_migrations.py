#!/usr/bin/env python3
"""Apply database migrations, reporting the outcome to Logfire."""

import sys
import logfire
from alembic import command
from alembic.config import Config

from hdnotes.config import Settings
from hdnotes.util.observability import configure_logfire


def main() -> int:
    """Upgrade the schema to the latest revision."""
    settings = Settings()

    configure_logfire(settings)

    with logfire.span("run_migrations", environment=settings.environment):
        try:
            command.upgrade(Config("alembic.ini"), "head")
        except Exception as e:
            logfire.error(
                "Database migration failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail loudly so the app never starts against a stale schema
            raise

        logfire.info("Database migrations completed successfully")

    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Stdlib logging setup.

Application code logs through logfire. This module routes the standard
library loggers used by uvicorn, alembic and SQLAlchemy into logfire as
well, so one console and one backend see everything.
"""

import logging

import logfire

from brew.config import Settings

# Library loggers that are noisy at INFO
_QUIET_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "asyncpg", "alembic.runtime")


def setup_logging(settings: Settings) -> None:
    """Send stdlib log records to logfire.

    Call after ``configure_logfire``.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,  # Replace handlers installed by uvicorn or alembic
    )

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s level=%s",
        settings.environment,
        logging.getLevelName(level),
    )

"""Logging setup for the API process and in-process use."""

import logging
import sys
from typing import Optional

from fintrack.config.settings import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Chatty third-party loggers and the lowest level they may emit at
QUIET_LOGGERS = {
    "sqlalchemy.engine": logging.WARNING,
    "uvicorn.access": logging.WARNING,
}


def resolve_level(name: str) -> int:
    """Map a level name such as "info" to its numeric value."""
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name!r}")
    return level


def setup_logging(level: Optional[str] = None) -> None:
    """
    Send application logs to stdout.

    level overrides settings.log_level. Safe to call more than once; only
    the first call installs the handler.
    """
    settings = get_settings()
    numeric_level = resolve_level(level or settings.log_level)

    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger("fintrack").setLevel(numeric_level)
    for name, floor in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(floor)

    logging.getLogger(__name__).debug(
        "Logging configured (level=%s, timezone=%s)",
        logging.getLevelName(numeric_level), settings.timezone,
    )

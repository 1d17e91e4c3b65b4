"""Core utilities and shared functionality."""

from fintrack.core.timezone import (
    local_tz,
    now_local,
    today_local,
    to_local,
    parse_date,
)
from fintrack.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    BackendQueryError,
)

__all__ = [
    "local_tz",
    "now_local",
    "today_local",
    "to_local",
    "parse_date",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "BackendQueryError",
]

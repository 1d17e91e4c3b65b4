"""Timezone and calendar-date utilities."""

from datetime import date, datetime

import pytz
from dateutil import parser as date_parser

from fintrack.config.settings import get_settings


def local_tz() -> pytz.BaseTzInfo:
    """Return the configured application timezone."""
    return pytz.timezone(get_settings().timezone)


def now_local() -> datetime:
    """Return current time in the application timezone."""
    return datetime.now(local_tz())


def today_local() -> date:
    """Return today's calendar date in the application timezone."""
    return now_local().date()


def to_local(dt: datetime) -> datetime:
    """Convert a datetime to the application timezone."""
    tz = local_tz()
    if dt.tzinfo is None:
        # Assume naive datetime is already local
        return tz.localize(dt)
    return dt.astimezone(tz)


def parse_date(value: str) -> date:
    """
    Parse a calendar date string.

    Accepts ISO dates (YYYY-MM-DD) as stored in the ledger as well as
    any format dateutil understands; time components are discarded.
    """
    return date_parser.parse(value).date()

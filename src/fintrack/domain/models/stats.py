"""Dashboard statistics snapshot and its cache entry."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal

_ZERO = Decimal("0")


@dataclass(frozen=True)
class MonthPeriod:
    """
    A calendar month, used as a half-open date range [start, next_start).

    December rolls over into January of the following year.
    """

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"month must be in 1..12, got {self.month}")

    @classmethod
    def containing(cls, day: date) -> "MonthPeriod":
        return cls(year=day.year, month=day.month)

    @property
    def start(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def next_start(self) -> date:
        if self.month == 12:
            return date(self.year + 1, 1, 1)
        return date(self.year, self.month + 1, 1)

    def next(self) -> "MonthPeriod":
        return MonthPeriod.containing(self.next_start)

    def previous(self) -> "MonthPeriod":
        if self.month == 1:
            return MonthPeriod(self.year - 1, 12)
        return MonthPeriod(self.year, self.month - 1)

    def contains(self, day: date) -> bool:
        return self.start <= day < self.next_start

    @property
    def label(self) -> str:
        """Short display label, e.g. 'Dec 2024'."""
        return self.start.strftime("%b %Y")


@dataclass(frozen=True)
class DashboardStats:
    """
    Aggregated totals for one user at one point in time.

    balance is always derived from the two all-time totals and cannot be
    passed in, so a snapshot can never disagree with itself.
    """

    total_income: Decimal = _ZERO
    total_expenses: Decimal = _ZERO
    monthly_income: Decimal = _ZERO
    monthly_expenses: Decimal = _ZERO
    balance: Decimal = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "balance", self.total_income - self.total_expenses)

    @classmethod
    def zero(cls) -> "DashboardStats":
        return cls()


@dataclass(frozen=True)
class StatsCacheKey:
    """Cache key: one user in one calendar month."""

    user_id: str
    year: int
    month: int

    @classmethod
    def for_period(cls, user_id: str, period: MonthPeriod) -> "StatsCacheKey":
        return cls(user_id=user_id, year=period.year, month=period.month)


@dataclass(frozen=True)
class StatsCacheEntry:
    """A cached snapshot plus the time it was computed."""

    stats: DashboardStats
    created_at: datetime

    def is_fresh(self, now: datetime, ttl_seconds: float) -> bool:
        """Entries are trusted strictly below the freshness window."""
        return (now - self.created_at).total_seconds() < ttl_seconds

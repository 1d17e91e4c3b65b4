"""Dashboard statistics aggregation with a short-lived cache."""

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Callable, Iterable, Optional

from fintrack.core.timezone import now_local, to_local
from fintrack.domain.models import (
    DashboardStats,
    LedgerTable,
    MonthPeriod,
    StatsCacheEntry,
    StatsCacheKey,
)
from fintrack.repositories.memory import InMemoryStatsCache
from fintrack.repositories.protocols import RawAmount, RowStore, StatsCache

logger = logging.getLogger(__name__)

DEFAULT_CACHE_TTL_SECONDS = 5 * 60


def sum_amounts(amounts: Optional[Iterable[RawAmount]]) -> Decimal:
    """
    Sum an amount column, coercing each value to Decimal.

    A missing result set counts as zero. Raises ValueError if a value
    cannot be read as a finite number.
    """
    total = Decimal("0")
    if amounts is None:
        return total
    for value in amounts:
        if value is None:
            continue
        try:
            amount = value if isinstance(value, Decimal) else Decimal(str(value))
        except InvalidOperation as exc:
            raise ValueError(f"Non-numeric amount: {value!r}") from exc
        if not amount.is_finite():
            raise ValueError(f"Non-numeric amount: {value!r}")
        total += amount
    return total


@dataclass
class _KeyLock:
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)
    users: int = 0


class StatsAggregator:
    """
    Computes all-time and current-month income/expense totals per user.

    Results are memoized per (user, year, month) for a fixed freshness
    window. The cache is owned by this instance; share the instance to
    share the cache.
    """

    def __init__(
        self,
        row_store: RowStore,
        cache: Optional[StatsCache] = None,
        cache_ttl_seconds: float = DEFAULT_CACHE_TTL_SECONDS,
        clock: Callable[[], datetime] = now_local,
    ):
        self._store = row_store
        self._cache = cache if cache is not None else InMemoryStatsCache()
        self._cache_ttl = cache_ttl_seconds
        self._clock = clock
        # Last good snapshot per user, returned when a recompute fails
        self._last_stats: dict[str, DashboardStats] = {}
        self._key_locks: dict[StatsCacheKey, _KeyLock] = {}
        # Bumped by invalidate; a fetch started under an older value is not stored
        self._generations: dict[StatsCacheKey, int] = {}

    @property
    def cache(self) -> StatsCache:
        return self._cache

    def current_key(self, user_id: str) -> StatsCacheKey:
        """Cache key for user_id in the month the clock currently reads."""
        period = MonthPeriod.containing(self._now().date())
        return StatsCacheKey.for_period(user_id, period)

    async def get_stats(self, user_id: Optional[str]) -> DashboardStats:
        """
        Return the dashboard snapshot for user_id.

        Never raises for backend failures: the previous snapshot for the
        user (or a zeroed one) is returned instead and the error is logged.
        Cancellation propagates and leaves the cache untouched.
        """
        if not user_id:
            return DashboardStats.zero()

        now = self._now()
        period = MonthPeriod.containing(now.date())
        key = StatsCacheKey.for_period(user_id, period)

        cached = self._fresh_entry(key, now)
        if cached is not None:
            return cached.stats

        return await self._get_or_compute(user_id, period, key, force=False)

    async def refresh(self, user_id: Optional[str]) -> DashboardStats:
        """
        Drop the user's current entry and recompute it.

        A fetch already in flight for the same key is waited out but its
        result is not reused.
        """
        if not user_id:
            return DashboardStats.zero()

        self.invalidate(user_id)
        period = MonthPeriod.containing(self._now().date())
        key = StatsCacheKey.for_period(user_id, period)
        return await self._get_or_compute(user_id, period, key, force=True)

    def invalidate(self, user_id: str) -> None:
        """
        Forget the user's current-month snapshot.

        Fetches in flight for that month will not store their results.
        Entries for past months are left alone.
        """
        key = self.current_key(user_id)
        self._generations[key] = self._generations.get(key, 0) + 1
        self._cache.delete(key)

    async def _get_or_compute(
        self,
        user_id: str,
        period: MonthPeriod,
        key: StatsCacheKey,
        force: bool,
    ) -> DashboardStats:
        key_lock = self._key_locks.setdefault(key, _KeyLock())
        key_lock.users += 1
        try:
            async with key_lock.lock:
                if not force:
                    # A concurrent caller may have filled the entry while we waited
                    cached = self._fresh_entry(key, self._now())
                    if cached is not None:
                        return cached.stats
                return await self._refresh(user_id, period, key)
        finally:
            key_lock.users -= 1
            if key_lock.users == 0:
                self._key_locks.pop(key, None)

    async def _refresh(
        self,
        user_id: str,
        period: MonthPeriod,
        key: StatsCacheKey,
    ) -> DashboardStats:
        generation = self._generations.get(key, 0)
        try:
            stats = await self._compute(user_id, period)
        except asyncio.CancelledError:
            logger.debug("Stats fetch cancelled for user=%s; cache not written", user_id)
            raise
        except Exception:
            logger.exception("Error fetching dashboard stats for user=%s", user_id)
            return self._last_stats.get(user_id, DashboardStats.zero())

        if self._generations.get(key, 0) != generation:
            logger.debug("Stats for user=%s invalidated mid-fetch; cache not written", user_id)
            return stats

        self._cache.put(key, StatsCacheEntry(stats=stats, created_at=self._now()))
        self._last_stats[user_id] = stats
        return stats

    async def _compute(self, user_id: str, period: MonthPeriod) -> DashboardStats:
        start, end = period.start, period.next_start

        income, expenses, monthly_income, monthly_expenses = await asyncio.gather(
            self._store.fetch_amounts(LedgerTable.INCOME, user_id),
            self._store.fetch_amounts(LedgerTable.EXPENSES, user_id),
            self._store.fetch_amounts(LedgerTable.INCOME, user_id, start, end),
            self._store.fetch_amounts(LedgerTable.EXPENSES, user_id, start, end),
        )

        return DashboardStats(
            total_income=sum_amounts(income),
            total_expenses=sum_amounts(expenses),
            monthly_income=sum_amounts(monthly_income),
            monthly_expenses=sum_amounts(monthly_expenses),
        )

    def _now(self) -> datetime:
        # Naive clock readings are taken as local time
        return to_local(self._clock())

    def _fresh_entry(self, key: StatsCacheKey, now: datetime) -> Optional[StatsCacheEntry]:
        entry = self._cache.get(key)
        if entry is not None and entry.is_fresh(now, self._cache_ttl):
            return entry
        return None

"""Cache protocol for dashboard statistics snapshots."""

from typing import Protocol, Optional

from fintrack.domain.models import StatsCacheKey, StatsCacheEntry


class StatsCache(Protocol):
    """
    Interface for the dashboard statistics cache.

    Implementations only store and return entries; freshness is decided
    by the caller from StatsCacheEntry.created_at.
    """

    def get(self, key: StatsCacheKey) -> Optional[StatsCacheEntry]:
        """Return the entry stored under key, fresh or not."""
        ...

    def put(self, key: StatsCacheKey, entry: StatsCacheEntry) -> None:
        """Insert or overwrite the entry for key."""
        ...

    def delete(self, key: StatsCacheKey) -> None:
        """Remove the entry for key if present."""
        ...

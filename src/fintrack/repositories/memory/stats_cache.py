"""Dict-backed StatsCache."""

from typing import Optional

from fintrack.domain.models import StatsCacheKey, StatsCacheEntry


class InMemoryStatsCache:
    """
    StatsCache held in a plain dict.

    Stale entries are never evicted; they stay until overwritten or deleted.
    """

    def __init__(self) -> None:
        self._entries: dict[StatsCacheKey, StatsCacheEntry] = {}

    def get(self, key: StatsCacheKey) -> Optional[StatsCacheEntry]:
        return self._entries.get(key)

    def put(self, key: StatsCacheKey, entry: StatsCacheEntry) -> None:
        self._entries[key] = entry

    def delete(self, key: StatsCacheKey) -> None:
        self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

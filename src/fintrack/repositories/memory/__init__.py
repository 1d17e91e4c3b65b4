"""In-process repository implementations."""

from fintrack.repositories.memory.stats_cache import InMemoryStatsCache

__all__ = [
    "InMemoryStatsCache",
]

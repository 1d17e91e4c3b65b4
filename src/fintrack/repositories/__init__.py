"""Repository layer - data access abstractions and implementations."""

from fintrack.repositories.protocols import (
    CategoryRepository,
    EntryRepository,
    GoalRepository,
    RowStore,
    StatsCache,
)

__all__ = [
    "CategoryRepository",
    "EntryRepository",
    "GoalRepository",
    "RowStore",
    "StatsCache",
]

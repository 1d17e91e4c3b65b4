"""Domain layer - pure business models with no external dependencies."""

from fintrack.domain.models import (
    EntryType,
    LedgerTable,
    Category,
    LedgerEntry,
    Goal,
    MonthPeriod,
    DashboardStats,
    StatsCacheKey,
    StatsCacheEntry,
)

__all__ = [
    "EntryType",
    "LedgerTable",
    "Category",
    "LedgerEntry",
    "Goal",
    "MonthPeriod",
    "DashboardStats",
    "StatsCacheKey",
    "StatsCacheEntry",
]

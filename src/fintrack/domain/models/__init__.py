"""Domain models package."""

from fintrack.domain.models.enums import EntryType, LedgerTable
from fintrack.domain.models.category import Category, DEFAULT_CATEGORY_COLOR
from fintrack.domain.models.entry import LedgerEntry
from fintrack.domain.models.goal import Goal
from fintrack.domain.models.stats import (
    MonthPeriod,
    DashboardStats,
    StatsCacheKey,
    StatsCacheEntry,
)

__all__ = [
    "EntryType",
    "LedgerTable",
    "Category",
    "DEFAULT_CATEGORY_COLOR",
    "LedgerEntry",
    "Goal",
    "MonthPeriod",
    "DashboardStats",
    "StatsCacheKey",
    "StatsCacheEntry",
]

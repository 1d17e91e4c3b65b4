"""Repository protocol definitions (interfaces)."""

from fintrack.repositories.protocols.category_repo import CategoryRepository
from fintrack.repositories.protocols.entry_repo import EntryRepository
from fintrack.repositories.protocols.goal_repo import GoalRepository
from fintrack.repositories.protocols.row_store import RowStore, RawAmount
from fintrack.repositories.protocols.stats_cache import StatsCache

__all__ = [
    "CategoryRepository",
    "EntryRepository",
    "GoalRepository",
    "RowStore",
    "RawAmount",
    "StatsCache",
]

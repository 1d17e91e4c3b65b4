"""Service layer - business logic orchestration."""

from fintrack.services.ledger_service import LedgerService, EntryCreate, EntryUpdate
from fintrack.services.category_service import CategoryService
from fintrack.services.goal_service import GoalService, GoalCreate, GoalUpdate
from fintrack.services.report_service import ReportService
from fintrack.services.stats_aggregator import StatsAggregator, sum_amounts

__all__ = [
    "LedgerService",
    "EntryCreate",
    "EntryUpdate",
    "CategoryService",
    "GoalService",
    "GoalCreate",
    "GoalUpdate",
    "ReportService",
    "StatsAggregator",
    "sum_amounts",
]

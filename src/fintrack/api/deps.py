"""Dependency injection for FastAPI."""

from typing import Optional

from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session

from fintrack.app_context import get_app_context
from fintrack.repositories.sqlalchemy.database import get_db
from fintrack.repositories.sqlalchemy import (
    SqlAlchemyCategoryRepository,
    SqlAlchemyEntryRepository,
    SqlAlchemyGoalRepository,
)
from fintrack.services import (
    LedgerService,
    CategoryService,
    GoalService,
    ReportService,
    StatsAggregator,
)
from fintrack.csv import LedgerCsvExporter


def get_current_user_id(
    x_user_id: Optional[str] = Header(None, alias="X-User-Id"),
) -> str:
    """Resolve the calling user from the X-User-Id header."""
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=401, detail="Missing X-User-Id header")
    return x_user_id.strip()


def get_category_repo(db: Session = Depends(get_db)) -> SqlAlchemyCategoryRepository:
    """Provide CategoryRepository instance."""
    return SqlAlchemyCategoryRepository(db)


def get_entry_repo(db: Session = Depends(get_db)) -> SqlAlchemyEntryRepository:
    """Provide EntryRepository instance."""
    return SqlAlchemyEntryRepository(db)


def get_goal_repo(db: Session = Depends(get_db)) -> SqlAlchemyGoalRepository:
    """Provide GoalRepository instance."""
    return SqlAlchemyGoalRepository(db)


def get_stats_aggregator() -> StatsAggregator:
    """Provide the process-wide StatsAggregator."""
    return get_app_context().stats


def get_ledger_service(
    entry_repo: SqlAlchemyEntryRepository = Depends(get_entry_repo),
    category_repo: SqlAlchemyCategoryRepository = Depends(get_category_repo),
    aggregator: StatsAggregator = Depends(get_stats_aggregator),
) -> LedgerService:
    """Provide LedgerService instance; writes drop the user's cached stats."""
    return LedgerService(
        entry_repo=entry_repo,
        category_repo=category_repo,
        on_change=aggregator.invalidate,
    )


def get_category_service(
    category_repo: SqlAlchemyCategoryRepository = Depends(get_category_repo),
) -> CategoryService:
    """Provide CategoryService instance."""
    return CategoryService(category_repo=category_repo)


def get_goal_service(
    goal_repo: SqlAlchemyGoalRepository = Depends(get_goal_repo),
) -> GoalService:
    """Provide GoalService instance."""
    return GoalService(goal_repo=goal_repo)


def get_report_service(
    ledger_service: LedgerService = Depends(get_ledger_service),
    category_service: CategoryService = Depends(get_category_service),
) -> ReportService:
    """Provide ReportService instance."""
    return ReportService(
        ledger_service=ledger_service,
        category_service=category_service,
    )


def get_csv_exporter(
    ledger_service: LedgerService = Depends(get_ledger_service),
    category_service: CategoryService = Depends(get_category_service),
) -> LedgerCsvExporter:
    """Provide LedgerCsvExporter instance."""
    return LedgerCsvExporter(
        ledger_service=ledger_service,
        category_service=category_service,
    )

"""Application context for in-process service management.

Provides a centralized way to access all services without HTTP, and owns
the single StatsAggregator (and therefore the stats cache) of the process.
"""

from pathlib import Path
from typing import Optional

from sqlalchemy.orm import sessionmaker

from fintrack.config.settings import Settings, set_settings, get_settings
from fintrack.repositories.sqlalchemy.database import (
    init_db_with_path,
    reset_database,
    get_session,
    get_session_factory,
)
from fintrack.repositories.sqlalchemy import (
    SqlAlchemyCategoryRepository,
    SqlAlchemyEntryRepository,
    SqlAlchemyGoalRepository,
    SqlAlchemyRowStore,
)
from fintrack.repositories.memory import InMemoryStatsCache
from fintrack.services import (
    LedgerService,
    CategoryService,
    GoalService,
    ReportService,
    StatsAggregator,
)
from fintrack.csv import LedgerCsvExporter


class AppContext:
    """
    Application context providing in-process access to all services.

    Services built here share one database session; the stats aggregator
    opens its own sessions per query.
    """

    def __init__(
        self,
        data_dir: Optional[Path] = None,
        session_factory: Optional[sessionmaker] = None,
    ):
        """
        Initialize application context.

        Args:
            data_dir: Optional data directory. If not provided, uses default.
            session_factory: Optional session factory overriding the global one.
        """
        self._data_dir = data_dir
        self._session_factory = session_factory
        self._session = None
        self._initialized = False

        # Service instances (lazy initialized)
        self._stats_aggregator: Optional[StatsAggregator] = None
        self._ledger_service: Optional[LedgerService] = None
        self._category_service: Optional[CategoryService] = None
        self._goal_service: Optional[GoalService] = None
        self._report_service: Optional[ReportService] = None
        self._csv_exporter: Optional[LedgerCsvExporter] = None

    def initialize(self, data_dir: Optional[Path] = None) -> None:
        """
        Initialize or reinitialize the application with a data directory.

        Args:
            data_dir: Data directory path. Uses default if not provided.
        """
        if data_dir:
            self._data_dir = data_dir

        settings = Settings(data_dir=self._data_dir)
        set_settings(settings)

        reset_database()
        init_db_with_path(settings.get_data_dir() / "fintrack.db")

        self._session_factory = None
        self._reset_services()
        self._stats_aggregator = None
        self._initialized = True

    @property
    def is_initialized(self) -> bool:
        """Check if context is initialized."""
        return self._initialized

    @property
    def data_dir(self) -> Path:
        """Get the current data directory."""
        return get_settings().get_data_dir()

    def _get_session_factory(self) -> sessionmaker:
        return self._session_factory or get_session_factory()

    def _get_session(self):
        """Get or create database session."""
        if self._session is None:
            if self._session_factory is not None:
                self._session = self._session_factory()
            else:
                self._session = get_session()
        return self._session

    def refresh_session(self) -> None:
        """Refresh the database session (call after external changes)."""
        self._reset_services()

    def _reset_services(self) -> None:
        if self._session:
            self._session.close()
        self._session = None
        self._ledger_service = None
        self._category_service = None
        self._goal_service = None
        self._report_service = None
        self._csv_exporter = None

    @property
    def stats(self) -> StatsAggregator:
        """Get the process-wide StatsAggregator."""
        if self._stats_aggregator is None:
            settings = get_settings()
            self._stats_aggregator = StatsAggregator(
                row_store=SqlAlchemyRowStore(self._get_session_factory()),
                cache=InMemoryStatsCache(),
                cache_ttl_seconds=settings.stats_cache_ttl_seconds,
            )
        return self._stats_aggregator

    @property
    def ledger(self) -> LedgerService:
        """Get the LedgerService instance."""
        if self._ledger_service is None:
            session = self._get_session()
            self._ledger_service = LedgerService(
                entry_repo=SqlAlchemyEntryRepository(session),
                category_repo=SqlAlchemyCategoryRepository(session),
                on_change=self.stats.invalidate,
            )
        return self._ledger_service

    @property
    def categories(self) -> CategoryService:
        """Get the CategoryService instance."""
        if self._category_service is None:
            self._category_service = CategoryService(
                category_repo=SqlAlchemyCategoryRepository(self._get_session()),
            )
        return self._category_service

    @property
    def goals(self) -> GoalService:
        """Get the GoalService instance."""
        if self._goal_service is None:
            self._goal_service = GoalService(
                goal_repo=SqlAlchemyGoalRepository(self._get_session()),
            )
        return self._goal_service

    @property
    def reports(self) -> ReportService:
        """Get the ReportService instance."""
        if self._report_service is None:
            self._report_service = ReportService(
                ledger_service=self.ledger,
                category_service=self.categories,
            )
        return self._report_service

    @property
    def csv_exporter(self) -> LedgerCsvExporter:
        """Get the LedgerCsvExporter instance."""
        if self._csv_exporter is None:
            self._csv_exporter = LedgerCsvExporter(
                ledger_service=self.ledger,
                category_service=self.categories,
            )
        return self._csv_exporter

    def close(self) -> None:
        """Clean up resources."""
        if self._session:
            self._session.close()
            self._session = None


# Global application context (one per process)
_app_context: Optional[AppContext] = None


def get_app_context() -> AppContext:
    """Get or create the global application context."""
    global _app_context
    if _app_context is None:
        _app_context = AppContext()
    return _app_context


def set_app_context(context: Optional[AppContext]) -> None:
    """Set the global application context."""
    global _app_context
    _app_context = context

"""
Pytest configuration and fixtures for finance tracker tests.

This module provides:
- File-backed SQLite database fixtures (aggregation reads run in threads)
- Factory helpers for categories and ledger entries
- Deterministic in-memory row stores and a controllable clock
- Service and repository fixtures
- A FastAPI test client wired to the test database
"""

import asyncio
import uuid
from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Callable, Optional

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from fastapi.testclient import TestClient

from fintrack.main import app
from fintrack.api.deps import get_stats_aggregator
from fintrack.config.settings import Settings, set_settings, reset_settings
from fintrack.core.timezone import local_tz
from fintrack.repositories.sqlalchemy.database import Base, get_db, reset_database
# Import ORM models to register them with Base before creating tables
from fintrack.repositories.sqlalchemy import orm_models  # noqa: F401
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
    EntryCreate,
)
from fintrack.csv import LedgerCsvExporter
from fintrack.domain.models import (
    Category,
    EntryType,
    LedgerEntry,
    LedgerTable,
)


# =============================================================================
# TIME HELPERS
# =============================================================================


def local_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 10,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    """Create a localized datetime in the application timezone."""
    return local_tz().localize(datetime(year, month, day, hour, minute, second))


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now = self.now + timedelta(seconds=seconds)

    def set(self, now: datetime) -> None:
        self.now = now


@pytest.fixture
def fixed_now() -> datetime:
    """Fixed 'now' timestamp for deterministic tests."""
    return local_datetime(2024, 6, 15, 14, 30, 0)


@pytest.fixture
def clock(fixed_now) -> FakeClock:
    """Provide a controllable clock starting at fixed_now."""
    return FakeClock(fixed_now)


# =============================================================================
# ROW STORE FIXTURES
# =============================================================================


class InMemoryRowStore:
    """
    Deterministic row store for aggregation tests.

    Records every query it answers; can be made slow or failing. With
    read_first the rows are read before the delay, like a backend that
    answers from a snapshot taken when the query arrived.
    """

    def __init__(self, delay: float = 0.0, read_first: bool = False):
        self.rows: dict[LedgerTable, list[dict]] = {
            LedgerTable.INCOME: [],
            LedgerTable.EXPENSES: [],
        }
        self.calls: list[tuple[LedgerTable, str, Optional[date], Optional[date]]] = []
        self.delay = delay
        self.read_first = read_first
        self.error: Optional[Exception] = None

    def add(self, table: LedgerTable, user_id: str, amount, day: date) -> None:
        self.rows[table].append({"user_id": user_id, "amount": amount, "date": day})

    def add_income(self, user_id: str, amount, day: date) -> None:
        self.add(LedgerTable.INCOME, user_id, amount, day)

    def add_expense(self, user_id: str, amount, day: date) -> None:
        self.add(LedgerTable.EXPENSES, user_id, amount, day)

    async def fetch_amounts(
        self,
        table: LedgerTable,
        user_id: str,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ):
        self.calls.append((LedgerTable(table), user_id, start, end))
        if self.read_first:
            amounts = self._select(table, user_id, start, end)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        if not self.read_first:
            amounts = self._select(table, user_id, start, end)
        return amounts

    def _select(self, table, user_id, start, end) -> list:
        return [
            row["amount"]
            for row in self.rows[LedgerTable(table)]
            if row["user_id"] == user_id
            and (start is None or row["date"] >= start)
            and (end is None or row["date"] < end)
        ]


class NoneRowStore:
    """Row store that answers every query without a result set."""

    def __init__(self):
        self.calls = 0

    async def fetch_amounts(self, table, user_id, start=None, end=None):
        self.calls += 1
        return None


@pytest.fixture
def row_store() -> InMemoryRowStore:
    """Provide an empty in-memory row store."""
    return InMemoryRowStore()


@pytest.fixture
def stats_aggregator(row_store, clock) -> StatsAggregator:
    """Provide a StatsAggregator over the in-memory row store."""
    return StatsAggregator(
        row_store=row_store,
        cache=InMemoryStatsCache(),
        cache_ttl_seconds=300,
        clock=clock,
    )


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine(tmp_path):
    """Create test database engine on a temporary SQLite file."""
    # Reset settings for clean state
    reset_settings()

    engine = create_engine(
        f"sqlite:///{tmp_path / 'test.db'}",
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def test_session_factory(test_engine) -> sessionmaker:
    """Create test session factory."""
    return sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture(scope="function")
def test_session(test_session_factory) -> Session:
    """Create test database session."""
    session = test_session_factory()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# REPOSITORY FIXTURES
# =============================================================================


@pytest.fixture
def category_repo(test_session) -> SqlAlchemyCategoryRepository:
    """Provide test CategoryRepository."""
    return SqlAlchemyCategoryRepository(test_session)


@pytest.fixture
def entry_repo(test_session) -> SqlAlchemyEntryRepository:
    """Provide test EntryRepository."""
    return SqlAlchemyEntryRepository(test_session)


@pytest.fixture
def goal_repo(test_session) -> SqlAlchemyGoalRepository:
    """Provide test GoalRepository."""
    return SqlAlchemyGoalRepository(test_session)


@pytest.fixture
def sql_row_store(test_session_factory) -> SqlAlchemyRowStore:
    """Provide a RowStore over the test database."""
    return SqlAlchemyRowStore(test_session_factory)


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def invalidated_users() -> list[str]:
    """Collects user ids passed to LedgerService.on_change."""
    return []


@pytest.fixture
def ledger_service(entry_repo, category_repo, invalidated_users) -> LedgerService:
    """Provide test LedgerService."""
    return LedgerService(
        entry_repo=entry_repo,
        category_repo=category_repo,
        on_change=invalidated_users.append,
    )


@pytest.fixture
def category_service(category_repo) -> CategoryService:
    """Provide test CategoryService."""
    return CategoryService(category_repo=category_repo)


@pytest.fixture
def goal_service(goal_repo) -> GoalService:
    """Provide test GoalService."""
    return GoalService(goal_repo=goal_repo)


@pytest.fixture
def report_service(ledger_service, category_service) -> ReportService:
    """Provide test ReportService."""
    return ReportService(
        ledger_service=ledger_service,
        category_service=category_service,
    )


@pytest.fixture
def csv_exporter(ledger_service, category_service) -> LedgerCsvExporter:
    """Provide test LedgerCsvExporter."""
    return LedgerCsvExporter(
        ledger_service=ledger_service,
        category_service=category_service,
    )


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def category_factory(category_service) -> Callable[..., Category]:
    """Factory for creating test categories."""

    def _create_category(
        user_id: str = "u1",
        name: Optional[str] = None,
        type: EntryType = EntryType.EXPENSE,
        color: Optional[str] = None,
    ) -> Category:
        if name is None:
            name = f"Category {uuid.uuid4().hex[:8]}"
        return category_service.create_category(user_id, name, type, color)

    return _create_category


@pytest.fixture
def entry_factory(ledger_service) -> Callable[..., LedgerEntry]:
    """Factory for recording test entries."""

    def _create_entry(
        entry_type: EntryType,
        amount: Decimal,
        day: date,
        user_id: str = "u1",
        category_id: Optional[str] = None,
        source: Optional[str] = None,
        description: Optional[str] = None,
    ) -> LedgerEntry:
        return ledger_service.add_entry(
            user_id,
            EntryCreate(
                entry_type=entry_type,
                amount=Decimal(amount),
                date=day,
                category_id=category_id,
                source=source,
                description=description,
            ),
        )

    return _create_entry


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def api_aggregator(test_session_factory) -> StatsAggregator:
    """StatsAggregator used by the API during a test."""
    return StatsAggregator(
        row_store=SqlAlchemyRowStore(test_session_factory),
        cache=InMemoryStatsCache(),
        cache_ttl_seconds=300,
    )


@pytest.fixture
def client(tmp_path, test_session_factory, api_aggregator) -> TestClient:
    """Provide FastAPI test client with test database."""
    set_settings(Settings(database_url=f"sqlite:///{tmp_path / 'app.db'}"))
    reset_database()

    def override_get_db():
        session = test_session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_stats_aggregator] = lambda: api_aggregator
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    reset_database()
    reset_settings()


USER_HEADERS = {"X-User-Id": "u1"}
OTHER_USER_HEADERS = {"X-User-Id": "u2"}


# =============================================================================
# HELPER FUNCTIONS (exported for use in tests)
# =============================================================================


def run(coro):
    """Drive a coroutine to completion on a fresh event loop."""
    return asyncio.run(coro)


def assert_decimal_equal(
    actual: Decimal,
    expected: Decimal,
    tolerance: Decimal = Decimal("0.01"),
) -> None:
    """Assert two Decimals are equal within tolerance."""
    diff = abs(Decimal(actual) - Decimal(expected))
    assert diff <= tolerance, f"Expected {expected}, got {actual} (diff={diff})"

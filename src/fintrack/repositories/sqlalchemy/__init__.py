"""SQLAlchemy repository implementations."""

from fintrack.repositories.sqlalchemy.database import (
    get_engine,
    get_session_factory,
    get_db,
    get_session,
    session_scope,
    init_db,
    init_db_with_path,
    reset_database,
    Base,
)
from fintrack.repositories.sqlalchemy.category_repo import SqlAlchemyCategoryRepository
from fintrack.repositories.sqlalchemy.entry_repo import SqlAlchemyEntryRepository
from fintrack.repositories.sqlalchemy.goal_repo import SqlAlchemyGoalRepository
from fintrack.repositories.sqlalchemy.row_store import SqlAlchemyRowStore

__all__ = [
    "get_engine",
    "get_session_factory",
    "get_db",
    "get_session",
    "session_scope",
    "init_db",
    "init_db_with_path",
    "reset_database",
    "Base",
    "SqlAlchemyCategoryRepository",
    "SqlAlchemyEntryRepository",
    "SqlAlchemyGoalRepository",
    "SqlAlchemyRowStore",
]

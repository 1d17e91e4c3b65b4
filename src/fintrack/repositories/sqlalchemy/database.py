"""Engine, session factory and schema setup.

The engine is built lazily from settings and can be rebound at runtime
(AppContext.initialize, tests) with init_db_with_path/reset_database.
"""

from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Iterator, Optional

from sqlalchemy import create_engine, Engine
from sqlalchemy.orm import sessionmaker, Session, declarative_base

from fintrack.config.settings import get_settings

Base = declarative_base()

_engine: Optional[Engine] = None
_SessionLocal: Optional[sessionmaker] = None


def _build_engine(database_url: str) -> Engine:
    connect_args = {}
    if database_url.startswith("sqlite"):
        # Row-store reads run in worker threads
        connect_args["check_same_thread"] = False
    return create_engine(database_url, connect_args=connect_args, echo=False)


def _bind(engine: Engine) -> None:
    global _engine, _SessionLocal
    _engine = engine
    _SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def _create_tables(engine: Engine) -> None:
    # Registers the ledger tables on Base
    from fintrack.repositories.sqlalchemy import orm_models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def get_engine() -> Engine:
    """Return the bound engine, creating it from settings on first use."""
    if _engine is None:
        _bind(_build_engine(get_settings().get_database_url()))
    return _engine


def get_session_factory() -> sessionmaker:
    """Return the session factory for the bound engine."""
    if _SessionLocal is None:
        get_engine()
    return _SessionLocal


def get_session() -> Session:
    """Open a new session; the caller closes it."""
    return get_session_factory()()


@contextmanager
def session_scope(factory: Optional[sessionmaker] = None) -> Iterator[Session]:
    """Open a session from factory (or the global one) and always close it."""
    session = (factory or get_session_factory())()
    try:
        yield session
    finally:
        session.close()


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency yielding a request-scoped session."""
    with session_scope() as db:
        yield db


def init_db() -> None:
    """Create the ledger tables on the configured database."""
    _create_tables(get_engine())


def init_db_with_path(db_path: Path) -> None:
    """Rebind to a SQLite file at db_path and create the ledger tables."""
    reset_database()
    _bind(_build_engine(f"sqlite:///{db_path}"))
    _create_tables(_engine)


def reset_database() -> None:
    """Dispose the current engine; the next access rebuilds it from settings."""
    global _engine, _SessionLocal

    if _engine is not None:
        _engine.dispose()
    _engine = None
    _SessionLocal = None

"""SQLAlchemy implementation of RowStore."""

import asyncio
import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from fintrack.core.exceptions import BackendQueryError
from fintrack.domain.models import LedgerTable
from fintrack.repositories.sqlalchemy.database import session_scope
from fintrack.repositories.sqlalchemy.orm_models import IncomeORM, ExpenseORM

logger = logging.getLogger(__name__)

_TABLE_MODELS = {
    LedgerTable.INCOME: IncomeORM,
    LedgerTable.EXPENSES: ExpenseORM,
}


class SqlAlchemyRowStore:
    """
    SQLAlchemy-backed row store for amount aggregation.

    Every call opens its own session and runs in a worker thread, so
    several fetches can be awaited together without sharing a Session.
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    async def fetch_amounts(
        self,
        table: LedgerTable,
        user_id: str,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Optional[list[Decimal]]:
        """Return the amount column of a user's rows in [start, end)."""
        return await asyncio.to_thread(self._fetch_amounts_sync, table, user_id, start, end)

    def _fetch_amounts_sync(
        self,
        table: LedgerTable,
        user_id: str,
        start: Optional[date],
        end: Optional[date],
    ) -> list[Decimal]:
        model = _TABLE_MODELS[LedgerTable(table)]
        try:
            with session_scope(self._session_factory) as session:
                query = session.query(model.amount).filter(model.user_id == user_id)
                if start is not None:
                    query = query.filter(model.date >= start)
                if end is not None:
                    query = query.filter(model.date < end)
                amounts = [row.amount for row in query.all()]
        except SQLAlchemyError as exc:
            raise BackendQueryError(model.__tablename__, str(exc)) from exc

        logger.debug(
            "Fetched %d %s rows for user=%s range=[%s, %s)",
            len(amounts), model.__tablename__, user_id, start, end,
        )
        return amounts

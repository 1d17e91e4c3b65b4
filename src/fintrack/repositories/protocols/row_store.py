"""Row store protocol: amount-column reads used for aggregation."""

from datetime import date
from decimal import Decimal
from typing import Protocol, Optional, Union

from fintrack.domain.models import LedgerTable

# Raw amount values as they come back from the store; coerced by the caller.
RawAmount = Union[Decimal, int, float, str]


class RowStore(Protocol):
    """
    Async read interface over the income and expenses tables.

    Equivalent to:
        SELECT amount FROM <table> WHERE user_id = :user_id
            [AND date >= :start] [AND date < :end]
    Row order is unspecified.
    """

    async def fetch_amounts(
        self,
        table: LedgerTable,
        user_id: str,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Optional[list[RawAmount]]:
        """
        Return the amount column of matching rows.

        May return None when the store has no result set; callers treat
        that as an empty result. Raises BackendQueryError on failure.
        """
        ...

"""Income and expense ledger entries."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from fintrack.domain.models.enums import EntryType


@dataclass
class LedgerEntry:
    """
    A single income or expense row (source of truth for all aggregates).

    - amount is always positive; direction comes from entry_type
    - source is only meaningful for income
    - date is a calendar date, compared as YYYY-MM-DD in range queries
    """

    entry_id: str
    user_id: str
    entry_type: EntryType
    amount: Decimal
    date: date
    category_id: Optional[str] = None
    source: Optional[str] = None
    description: Optional[str] = None
    created_at: Optional[datetime] = field(default=None)

    def __post_init__(self) -> None:
        if isinstance(self.entry_type, str):
            self.entry_type = EntryType(self.entry_type)

    @property
    def is_income(self) -> bool:
        return self.entry_type == EntryType.INCOME

    @property
    def signed_amount(self) -> Decimal:
        """Positive for income, negative for expenses."""
        return self.amount if self.is_income else -self.amount

"""Ledger entry repository protocol."""

from datetime import date
from typing import Protocol, Optional

from fintrack.domain.models import LedgerEntry, EntryType


class EntryRepository(Protocol):
    """Interface for income/expense entry data access."""

    def create(self, entry: LedgerEntry) -> LedgerEntry:
        """Persist a new entry."""
        ...

    def get_by_id(self, entry_type: EntryType, entry_id: str) -> Optional[LedgerEntry]:
        """Retrieve an entry by type and ID."""
        ...

    def update(self, entry: LedgerEntry) -> LedgerEntry:
        """Update an existing entry."""
        ...

    def delete(self, entry_type: EntryType, entry_id: str) -> None:
        """Delete an entry (hard delete)."""
        ...

    def query(
        self,
        entry_type: EntryType,
        user_id: str,
        category_id: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[LedgerEntry]:
        """
        Query a user's entries, newest date first.

        start_date is inclusive, end_date exclusive.
        """
        ...

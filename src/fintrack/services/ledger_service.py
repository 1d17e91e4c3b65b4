"""Ledger service for income and expense entries."""

import logging
import uuid
from dataclasses import dataclass
import datetime as dt
from decimal import Decimal
from typing import Callable, Optional, Union

from fintrack.core.timezone import now_local, today_local, parse_date
from fintrack.core.exceptions import ValidationError, NotFoundError
from fintrack.domain.models import LedgerEntry, EntryType
from fintrack.repositories.protocols import EntryRepository, CategoryRepository

logger = logging.getLogger(__name__)


def _as_date(value: Union[dt.date, str]) -> dt.date:
    if isinstance(value, str):
        try:
            return parse_date(value)
        except (ValueError, OverflowError) as exc:
            raise ValidationError(f"Invalid date: {value!r}") from exc
    return value


@dataclass
class EntryCreate:
    """Input data for recording an income or expense entry."""

    entry_type: EntryType
    amount: Decimal
    date: Optional[Union[dt.date, str]] = None
    category_id: Optional[str] = None
    source: Optional[str] = None
    description: Optional[str] = None


@dataclass
class EntryUpdate:
    """Partial update data for editing an entry."""

    amount: Optional[Decimal] = None
    date: Optional[Union[dt.date, str]] = None
    category_id: Optional[str] = None
    clear_category: bool = False
    source: Optional[str] = None
    description: Optional[str] = None


class LedgerService:
    """
    Service for managing a user's income and expense entries.

    Every successful write calls on_change(user_id) so that derived
    aggregates (dashboard stats) can be dropped.
    """

    def __init__(
        self,
        entry_repo: EntryRepository,
        category_repo: CategoryRepository,
        on_change: Optional[Callable[[str], None]] = None,
    ):
        self._entry_repo = entry_repo
        self._category_repo = category_repo
        self._on_change = on_change

    def add_entry(self, user_id: str, data: EntryCreate) -> LedgerEntry:
        """
        Record a new entry for user_id.

        The date defaults to today in the application timezone; strings are
        parsed as calendar dates.
        """
        self._validate_amount(data.amount)
        if data.category_id:
            self._validate_category(user_id, data.category_id, data.entry_type)

        entry = LedgerEntry(
            entry_id=str(uuid.uuid4()),
            user_id=user_id,
            entry_type=data.entry_type,
            amount=data.amount,
            date=_as_date(data.date) if data.date else today_local(),
            category_id=data.category_id,
            source=data.source.strip() if data.source else None,
            description=data.description,
            created_at=now_local().replace(tzinfo=None),
        )
        created = self._entry_repo.create(entry)
        logger.info(
            "Recorded %s entry %s for user=%s",
            created.entry_type.value, created.entry_id, user_id,
        )
        self._notify(user_id)
        return created

    def get_entry(self, user_id: str, entry_type: EntryType, entry_id: str) -> LedgerEntry:
        """Get one of the user's entries."""
        entry = self._entry_repo.get_by_id(entry_type, entry_id)
        if not entry or entry.user_id != user_id:
            raise NotFoundError(entry_type.value.capitalize(), entry_id)
        return entry

    def edit_entry(
        self,
        user_id: str,
        entry_type: EntryType,
        entry_id: str,
        patch: EntryUpdate,
    ) -> LedgerEntry:
        """Apply a partial update to an existing entry."""
        entry = self.get_entry(user_id, entry_type, entry_id)

        if patch.amount is not None:
            self._validate_amount(patch.amount)
            entry.amount = patch.amount
        if patch.date is not None:
            entry.date = _as_date(patch.date)
        if patch.clear_category:
            entry.category_id = None
        elif patch.category_id is not None:
            self._validate_category(user_id, patch.category_id, entry_type)
            entry.category_id = patch.category_id
        if patch.source is not None and entry_type == EntryType.INCOME:
            entry.source = patch.source.strip()
        if patch.description is not None:
            entry.description = patch.description

        updated = self._entry_repo.update(entry)
        self._notify(user_id)
        return updated

    def delete_entry(self, user_id: str, entry_type: EntryType, entry_id: str) -> None:
        """Delete one of the user's entries."""
        self.get_entry(user_id, entry_type, entry_id)
        self._entry_repo.delete(entry_type, entry_id)
        logger.info("Deleted %s entry %s for user=%s", entry_type.value, entry_id, user_id)
        self._notify(user_id)

    def list_entries(
        self,
        user_id: str,
        entry_type: EntryType,
        category_id: Optional[str] = None,
        start_date: Optional[dt.date] = None,
        end_date: Optional[dt.date] = None,
    ) -> list[LedgerEntry]:
        """List a user's entries, newest first, optionally filtered by category."""
        return self._entry_repo.query(
            entry_type=entry_type,
            user_id=user_id,
            category_id=category_id,
            start_date=start_date,
            end_date=end_date,
        )

    def _validate_amount(self, amount: Decimal) -> None:
        if amount is None or amount <= 0:
            raise ValidationError("Amount must be greater than zero")

    def _validate_category(self, user_id: str, category_id: str, entry_type: EntryType) -> None:
        category = self._category_repo.get_by_id(category_id)
        if not category or category.user_id != user_id:
            raise NotFoundError("Category", category_id)
        if category.type != entry_type:
            raise ValidationError(
                f"Category '{category.name}' is a {category.type.value} category"
            )

    def _notify(self, user_id: str) -> None:
        if self._on_change is not None:
            self._on_change(user_id)

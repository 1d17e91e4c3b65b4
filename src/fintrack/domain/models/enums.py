"""Enumerations for domain models."""

from enum import Enum


class EntryType(str, Enum):
    """Direction of a ledger entry; also the type of a category."""

    INCOME = "income"
    EXPENSE = "expense"

    @property
    def table(self) -> "LedgerTable":
        """Row-store table holding entries of this type."""
        return LedgerTable.INCOME if self is EntryType.INCOME else LedgerTable.EXPENSES


class LedgerTable(str, Enum):
    """Row-store tables that carry an amount column."""

    INCOME = "income"
    EXPENSES = "expenses"

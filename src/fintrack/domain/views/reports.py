"""View models for report outputs."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional


@dataclass
class MonthlyBalance:
    """Income, expenses and net balance for one calendar month."""

    year: int
    month: int
    label: str
    income: Decimal = field(default_factory=lambda: Decimal("0"))
    expenses: Decimal = field(default_factory=lambda: Decimal("0"))

    @property
    def balance(self) -> Decimal:
        return self.income - self.expenses


@dataclass
class CategoryTotal:
    """Expense total for one category (or the uncategorized bucket)."""

    name: str
    color: str
    total: Decimal = field(default_factory=lambda: Decimal("0"))
    category_id: Optional[str] = None

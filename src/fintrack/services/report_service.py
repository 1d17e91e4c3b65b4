"""Report service: monthly balance history and expense breakdown."""

from datetime import date
from typing import Optional

from fintrack.core.timezone import today_local
from fintrack.core.exceptions import ValidationError
from fintrack.domain.models import EntryType, MonthPeriod, DEFAULT_CATEGORY_COLOR
from fintrack.domain.views import MonthlyBalance, CategoryTotal
from fintrack.services.ledger_service import LedgerService
from fintrack.services.category_service import CategoryService

UNCATEGORIZED_NAME = "Uncategorized"


class ReportService:
    """
    Read-only reports over a user's ledger.

    Unlike the dashboard stats these are computed on every call.
    """

    def __init__(
        self,
        ledger_service: LedgerService,
        category_service: CategoryService,
    ):
        self._ledger = ledger_service
        self._categories = category_service

    def balance_history(
        self,
        user_id: str,
        months: int = 12,
        today: Optional[date] = None,
    ) -> list[MonthlyBalance]:
        """
        Income, expenses and balance per month for the last `months` months.

        The current month is the last element; months without entries
        are present with zero totals.
        """
        if months < 1:
            raise ValidationError("months must be at least 1")

        current = MonthPeriod.containing(today or today_local())
        periods = [current]
        for _ in range(months - 1):
            periods.append(periods[-1].previous())
        periods.reverse()

        buckets = {
            (p.year, p.month): MonthlyBalance(year=p.year, month=p.month, label=p.label)
            for p in periods
        }
        start, end = periods[0].start, current.next_start

        for entry_type in (EntryType.INCOME, EntryType.EXPENSE):
            entries = self._ledger.list_entries(
                user_id, entry_type, start_date=start, end_date=end
            )
            for entry in entries:
                bucket = buckets[(entry.date.year, entry.date.month)]
                if entry_type == EntryType.INCOME:
                    bucket.income += entry.amount
                else:
                    bucket.expenses += entry.amount

        return [buckets[(p.year, p.month)] for p in periods]

    def expenses_by_category(
        self,
        user_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[CategoryTotal]:
        """
        Expense totals grouped by category, largest first.

        Entries without a category are grouped under "Uncategorized".
        """
        categories = {
            c.category_id: c
            for c in self._categories.list_categories(user_id, EntryType.EXPENSE)
        }
        totals: dict[Optional[str], CategoryTotal] = {}

        for entry in self._ledger.list_entries(
            user_id, EntryType.EXPENSE, start_date=start_date, end_date=end_date
        ):
            category = categories.get(entry.category_id) if entry.category_id else None
            key = category.category_id if category else None
            if key not in totals:
                totals[key] = CategoryTotal(
                    name=category.name if category else UNCATEGORIZED_NAME,
                    color=category.color if category else DEFAULT_CATEGORY_COLOR,
                    category_id=key,
                )
            totals[key].total += entry.amount

        return sorted(totals.values(), key=lambda t: (-t.total, t.name))


"""Report endpoints."""

from datetime import date
from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from fintrack.api.deps import get_current_user_id, get_report_service, get_csv_exporter
from fintrack.api.schemas import (
    MonthlyBalanceResponse,
    BalanceHistoryResponse,
    CategoryTotalResponse,
    ExpensesByCategoryResponse,
)
from fintrack.config.settings import get_settings
from fintrack.csv import LedgerCsvExporter
from fintrack.domain.models import EntryType
from fintrack.services import ReportService

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/balance-history", response_model=BalanceHistoryResponse)
def get_balance_history(
    months: Optional[int] = Query(None, ge=1, le=120, description="Number of months (default from settings)"),
    user_id: str = Depends(get_current_user_id),
    reports: ReportService = Depends(get_report_service),
) -> BalanceHistoryResponse:
    """Income, expenses and balance per month, oldest first."""
    history = reports.balance_history(
        user_id, months or get_settings().balance_history_months
    )
    return BalanceHistoryResponse(
        months=[
            MonthlyBalanceResponse(
                year=m.year,
                month=m.month,
                label=m.label,
                income=m.income,
                expenses=m.expenses,
                balance=m.balance,
            )
            for m in history
        ]
    )


@router.get("/expenses-by-category", response_model=ExpensesByCategoryResponse)
def get_expenses_by_category(
    start_date: Optional[date] = Query(None, description="Inclusive lower date bound"),
    end_date: Optional[date] = Query(None, description="Exclusive upper date bound"),
    user_id: str = Depends(get_current_user_id),
    reports: ReportService = Depends(get_report_service),
) -> ExpensesByCategoryResponse:
    """Expense totals per category, largest first."""
    items = reports.expenses_by_category(user_id, start_date=start_date, end_date=end_date)
    return ExpensesByCategoryResponse(
        items=[CategoryTotalResponse.model_validate(i) for i in items],
        total=sum((i.total for i in items), Decimal("0")),
    )


@router.get("/export.csv")
def export_ledger_csv(
    type: Optional[EntryType] = Query(None, description="Only income or only expenses"),
    user_id: str = Depends(get_current_user_id),
    exporter: LedgerCsvExporter = Depends(get_csv_exporter),
) -> Response:
    """Download the ledger as CSV."""
    content = exporter.export_text(user_id, type)
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="ledger.csv"'},
    )

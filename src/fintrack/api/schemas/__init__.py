"""Pydantic schemas for API request/response."""

from fintrack.api.schemas.dashboard import DashboardStatsResponse
from fintrack.api.schemas.entry import (
    EntryCreateRequest,
    EntryUpdateRequest,
    EntryResponse,
    EntryListResponse,
)
from fintrack.api.schemas.category import (
    CategoryCreate,
    CategoryResponse,
    CategoryListResponse,
)
from fintrack.api.schemas.goal import (
    GoalCreateRequest,
    GoalUpdateRequest,
    GoalResponse,
    GoalListResponse,
)
from fintrack.api.schemas.report import (
    MonthlyBalanceResponse,
    BalanceHistoryResponse,
    CategoryTotalResponse,
    ExpensesByCategoryResponse,
)

__all__ = [
    "DashboardStatsResponse",
    "EntryCreateRequest",
    "EntryUpdateRequest",
    "EntryResponse",
    "EntryListResponse",
    "CategoryCreate",
    "CategoryResponse",
    "CategoryListResponse",
    "GoalCreateRequest",
    "GoalUpdateRequest",
    "GoalResponse",
    "GoalListResponse",
    "MonthlyBalanceResponse",
    "BalanceHistoryResponse",
    "CategoryTotalResponse",
    "ExpensesByCategoryResponse",
]

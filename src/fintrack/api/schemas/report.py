"""Pydantic schemas for report endpoints."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel


class MonthlyBalanceResponse(BaseModel):
    """Response schema for one month of the balance history."""

    model_config = {"from_attributes": True}

    year: int
    month: int
    label: str
    income: Decimal
    expenses: Decimal
    balance: Decimal


class BalanceHistoryResponse(BaseModel):
    """Response schema for the balance history."""

    months: list[MonthlyBalanceResponse]


class CategoryTotalResponse(BaseModel):
    """Response schema for one category's expense total."""

    model_config = {"from_attributes": True}

    category_id: Optional[str] = None
    name: str
    color: str
    total: Decimal


class ExpensesByCategoryResponse(BaseModel):
    """Response schema for the expense breakdown."""

    items: list[CategoryTotalResponse]
    total: Decimal

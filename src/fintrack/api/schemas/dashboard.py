"""Pydantic schemas for dashboard endpoints."""

from decimal import Decimal

from pydantic import BaseModel


class DashboardStatsResponse(BaseModel):
    """Response schema for the dashboard statistics snapshot."""

    model_config = {"from_attributes": True}

    total_income: Decimal
    total_expenses: Decimal
    balance: Decimal
    monthly_income: Decimal
    monthly_expenses: Decimal

"""Pydantic schemas for goal endpoints."""

import datetime as dt
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class GoalCreateRequest(BaseModel):
    """Request schema for creating a goal."""

    name: str = Field(..., min_length=1, max_length=255)
    target_amount: Decimal = Field(..., gt=0)
    current_amount: Decimal = Field(default=Decimal("0"), ge=0)
    deadline: Optional[dt.date] = None


class GoalUpdateRequest(BaseModel):
    """Request schema for updating a goal."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    target_amount: Optional[Decimal] = Field(None, gt=0)
    current_amount: Optional[Decimal] = Field(None, ge=0)
    deadline: Optional[dt.date] = None
    clear_deadline: bool = False


class GoalResponse(BaseModel):
    """Response schema for a single goal."""

    model_config = {"from_attributes": True}

    goal_id: str
    name: str
    target_amount: Decimal
    current_amount: Decimal
    deadline: Optional[dt.date] = None
    progress_percent: Decimal
    remaining_amount: Decimal
    is_completed: bool
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None


class GoalListResponse(BaseModel):
    """Response schema for listing goals."""

    goals: list[GoalResponse]
    count: int

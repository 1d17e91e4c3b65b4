"""Pydantic schemas for income and expense endpoints."""

import datetime as dt
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from fintrack.domain.models.enums import EntryType


class EntryCreateRequest(BaseModel):
    """Request schema for recording an income or expense entry."""

    amount: Decimal = Field(..., gt=0, description="Positive amount")
    date: Optional[dt.date] = Field(None, description="Entry date (defaults to today)")
    category_id: Optional[str] = None
    source: Optional[str] = Field(None, max_length=255, description="Income source")
    description: Optional[str] = None


class EntryUpdateRequest(BaseModel):
    """Request schema for editing an entry (all fields optional)."""

    amount: Optional[Decimal] = Field(None, gt=0)
    date: Optional[dt.date] = None
    category_id: Optional[str] = None
    clear_category: bool = False
    source: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None


class EntryResponse(BaseModel):
    """Response schema for a single entry."""

    model_config = {"from_attributes": True}

    entry_id: str
    entry_type: EntryType
    amount: Decimal
    date: dt.date
    category_id: Optional[str] = None
    source: Optional[str] = None
    description: Optional[str] = None
    created_at: Optional[dt.datetime] = None


class EntryListResponse(BaseModel):
    """Response schema for listing entries."""

    entries: list[EntryResponse]
    total_amount: Decimal
    count: int

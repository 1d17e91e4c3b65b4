"""Pydantic schemas for category endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from fintrack.domain.models.enums import EntryType


class CategoryCreate(BaseModel):
    """Request schema for creating a category."""

    name: str = Field(..., min_length=1, max_length=255)
    type: EntryType
    color: Optional[str] = Field(None, description="Hex color, e.g. #10B981")


class CategoryResponse(BaseModel):
    """Response schema for a single category."""

    model_config = {"from_attributes": True}

    category_id: str
    name: str
    type: EntryType
    color: str
    created_at: Optional[datetime] = None


class CategoryListResponse(BaseModel):
    """Response schema for listing categories."""

    categories: list[CategoryResponse]
    count: int

"""Income and expense endpoints.

Both resources share one implementation; build_entries_router() binds it
to an entry type and URL prefix.
"""

from datetime import date
from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response

from fintrack.api.deps import get_current_user_id, get_ledger_service
from fintrack.api.schemas import (
    EntryCreateRequest,
    EntryUpdateRequest,
    EntryResponse,
    EntryListResponse,
)
from fintrack.domain.models import EntryType
from fintrack.services import LedgerService, EntryCreate, EntryUpdate


def build_entries_router(entry_type: EntryType, prefix: str) -> APIRouter:
    """Create the CRUD router for one entry type."""
    router = APIRouter(prefix=prefix, tags=[prefix.strip("/")])

    @router.get("/", response_model=EntryListResponse)
    def list_entries(
        category_id: Optional[str] = Query(None, description="Only entries in this category"),
        start_date: Optional[date] = Query(None, description="Inclusive lower date bound"),
        end_date: Optional[date] = Query(None, description="Exclusive upper date bound"),
        user_id: str = Depends(get_current_user_id),
        ledger: LedgerService = Depends(get_ledger_service),
    ) -> EntryListResponse:
        """List entries, newest first."""
        entries = ledger.list_entries(
            user_id,
            entry_type,
            category_id=category_id,
            start_date=start_date,
            end_date=end_date,
        )
        return EntryListResponse(
            entries=[EntryResponse.model_validate(e) for e in entries],
            total_amount=sum((e.amount for e in entries), Decimal("0")),
            count=len(entries),
        )

    @router.post("/", response_model=EntryResponse, status_code=201)
    def create_entry(
        data: EntryCreateRequest,
        user_id: str = Depends(get_current_user_id),
        ledger: LedgerService = Depends(get_ledger_service),
    ) -> EntryResponse:
        """Record a new entry."""
        entry = ledger.add_entry(
            user_id,
            EntryCreate(
                entry_type=entry_type,
                amount=data.amount,
                date=data.date,
                category_id=data.category_id,
                source=data.source,
                description=data.description,
            ),
        )
        return EntryResponse.model_validate(entry)

    @router.get("/{entry_id}", response_model=EntryResponse)
    def get_entry(
        entry_id: str,
        user_id: str = Depends(get_current_user_id),
        ledger: LedgerService = Depends(get_ledger_service),
    ) -> EntryResponse:
        """Get a single entry."""
        return EntryResponse.model_validate(ledger.get_entry(user_id, entry_type, entry_id))

    @router.patch("/{entry_id}", response_model=EntryResponse)
    def update_entry(
        entry_id: str,
        data: EntryUpdateRequest,
        user_id: str = Depends(get_current_user_id),
        ledger: LedgerService = Depends(get_ledger_service),
    ) -> EntryResponse:
        """Edit an entry."""
        entry = ledger.edit_entry(
            user_id,
            entry_type,
            entry_id,
            EntryUpdate(
                amount=data.amount,
                date=data.date,
                category_id=data.category_id,
                clear_category=data.clear_category,
                source=data.source,
                description=data.description,
            ),
        )
        return EntryResponse.model_validate(entry)

    @router.delete("/{entry_id}", status_code=204)
    def delete_entry(
        entry_id: str,
        user_id: str = Depends(get_current_user_id),
        ledger: LedgerService = Depends(get_ledger_service),
    ) -> Response:
        """Delete an entry."""
        ledger.delete_entry(user_id, entry_type, entry_id)
        return Response(status_code=204)

    return router


income_router = build_entries_router(EntryType.INCOME, "/income")
expenses_router = build_entries_router(EntryType.EXPENSE, "/expenses")

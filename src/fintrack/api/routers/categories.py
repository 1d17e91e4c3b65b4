"""Category endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response

from fintrack.api.deps import get_current_user_id, get_category_service
from fintrack.api.schemas import CategoryCreate, CategoryResponse, CategoryListResponse
from fintrack.domain.models import EntryType
from fintrack.services import CategoryService

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("/", response_model=CategoryListResponse)
def list_categories(
    type: Optional[EntryType] = Query(None, description="income or expense"),
    user_id: str = Depends(get_current_user_id),
    service: CategoryService = Depends(get_category_service),
) -> CategoryListResponse:
    """List categories ordered by name."""
    categories = service.list_categories(user_id, type)
    return CategoryListResponse(
        categories=[CategoryResponse.model_validate(c) for c in categories],
        count=len(categories),
    )


@router.post("/", response_model=CategoryResponse, status_code=201)
def create_category(
    data: CategoryCreate,
    user_id: str = Depends(get_current_user_id),
    service: CategoryService = Depends(get_category_service),
) -> CategoryResponse:
    """Create a category."""
    category = service.create_category(user_id, data.name, data.type, data.color)
    return CategoryResponse.model_validate(category)


@router.delete("/{category_id}", status_code=204)
def delete_category(
    category_id: str,
    user_id: str = Depends(get_current_user_id),
    service: CategoryService = Depends(get_category_service),
) -> Response:
    """Delete a category; its entries become uncategorized."""
    service.delete_category(user_id, category_id)
    return Response(status_code=204)

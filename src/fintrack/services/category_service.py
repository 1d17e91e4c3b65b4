"""Category management service."""

import re
import uuid
from typing import Optional

from fintrack.core.timezone import now_local
from fintrack.core.exceptions import ValidationError, NotFoundError
from fintrack.domain.models import Category, EntryType, DEFAULT_CATEGORY_COLOR
from fintrack.repositories.protocols import CategoryRepository

_COLOR_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")


class CategoryService:
    """Create, list and delete a user's income/expense categories."""

    def __init__(self, category_repo: CategoryRepository):
        self._category_repo = category_repo

    def create_category(
        self,
        user_id: str,
        name: str,
        type: EntryType,
        color: Optional[str] = None,
    ) -> Category:
        """Create a category; names are unique per user and type."""
        name = (name or "").strip()
        if not name:
            raise ValidationError("Category name is required")
        color = color or DEFAULT_CATEGORY_COLOR
        if not _COLOR_RE.match(color):
            raise ValidationError(f"Invalid color '{color}', expected #RRGGBB")

        type = EntryType(type)
        if self._category_repo.get_by_name(user_id, name, type):
            raise ValidationError(f"Category '{name}' already exists")

        category = Category(
            category_id=str(uuid.uuid4()),
            user_id=user_id,
            name=name,
            type=type,
            color=color,
            created_at=now_local().replace(tzinfo=None),
        )
        return self._category_repo.create(category)

    def get_category(self, user_id: str, category_id: str) -> Category:
        category = self._category_repo.get_by_id(category_id)
        if not category or category.user_id != user_id:
            raise NotFoundError("Category", category_id)
        return category

    def list_categories(self, user_id: str, type: Optional[EntryType] = None) -> list[Category]:
        return self._category_repo.list_by_user(user_id, type)

    def delete_category(self, user_id: str, category_id: str) -> None:
        self.get_category(user_id, category_id)
        self._category_repo.delete(category_id)

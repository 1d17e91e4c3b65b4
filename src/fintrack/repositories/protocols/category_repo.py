"""Category repository protocol."""

from typing import Protocol, Optional

from fintrack.domain.models import Category, EntryType


class CategoryRepository(Protocol):
    """Interface for category data access."""

    def create(self, category: Category) -> Category:
        """Persist a new category."""
        ...

    def get_by_id(self, category_id: str) -> Optional[Category]:
        """Retrieve category by ID."""
        ...

    def get_by_name(self, user_id: str, name: str, type: EntryType) -> Optional[Category]:
        """Retrieve a user's category by name and type."""
        ...

    def list_by_user(self, user_id: str, type: Optional[EntryType] = None) -> list[Category]:
        """List a user's categories ordered by name."""
        ...

    def delete(self, category_id: str) -> None:
        """Delete a category; entries referencing it become uncategorized."""
        ...

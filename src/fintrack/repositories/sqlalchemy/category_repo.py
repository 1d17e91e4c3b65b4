"""SQLAlchemy implementation of CategoryRepository."""

from typing import Optional

from sqlalchemy.orm import Session

from fintrack.domain.models import Category, EntryType
from fintrack.repositories.sqlalchemy.orm_models import CategoryORM, ENTRY_MODELS


class SqlAlchemyCategoryRepository:
    """SQLAlchemy-backed category repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, category: Category) -> Category:
        """Persist a new category."""
        orm_category = CategoryORM(
            category_id=category.category_id,
            user_id=category.user_id,
            name=category.name,
            type=category.type,
            color=category.color,
            created_at=category.created_at,
        )
        self._db.add(orm_category)
        self._db.commit()
        self._db.refresh(orm_category)
        return self._to_domain(orm_category)

    def get_by_id(self, category_id: str) -> Optional[Category]:
        """Retrieve category by ID."""
        orm_category = self._db.query(CategoryORM).filter(
            CategoryORM.category_id == category_id
        ).first()
        return self._to_domain(orm_category) if orm_category else None

    def get_by_name(self, user_id: str, name: str, type: EntryType) -> Optional[Category]:
        """Retrieve a user's category by name and type."""
        orm_category = (
            self._db.query(CategoryORM)
            .filter(
                CategoryORM.user_id == user_id,
                CategoryORM.name == name,
                CategoryORM.type == type,
            )
            .first()
        )
        return self._to_domain(orm_category) if orm_category else None

    def list_by_user(self, user_id: str, type: Optional[EntryType] = None) -> list[Category]:
        """List a user's categories ordered by name."""
        query = self._db.query(CategoryORM).filter(CategoryORM.user_id == user_id)
        if type is not None:
            query = query.filter(CategoryORM.type == type)
        query = query.order_by(CategoryORM.name)
        return [self._to_domain(c) for c in query.all()]

    def delete(self, category_id: str) -> None:
        """Delete a category; entries referencing it become uncategorized."""
        # SQLite does not enforce ON DELETE SET NULL unless foreign keys are enabled
        for model in ENTRY_MODELS.values():
            self._db.query(model).filter(model.category_id == category_id).update(
                {model.category_id: None}
            )
        self._db.query(CategoryORM).filter(
            CategoryORM.category_id == category_id
        ).delete()
        self._db.commit()

    @staticmethod
    def _to_domain(orm: CategoryORM) -> Category:
        """Convert ORM model to domain model."""
        return Category(
            category_id=orm.category_id,
            user_id=orm.user_id,
            name=orm.name,
            type=orm.type,
            color=orm.color,
            created_at=orm.created_at,
        )

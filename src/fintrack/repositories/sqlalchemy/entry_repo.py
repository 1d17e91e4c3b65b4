"""SQLAlchemy implementation of EntryRepository."""

from datetime import date
from decimal import Decimal
from typing import Optional, Union

from sqlalchemy.orm import Session
from sqlalchemy import and_

from fintrack.domain.models import LedgerEntry, EntryType
from fintrack.repositories.sqlalchemy.orm_models import IncomeORM, ExpenseORM, ENTRY_MODELS

EntryORM = Union[IncomeORM, ExpenseORM]


class SqlAlchemyEntryRepository:
    """SQLAlchemy-backed repository over the income and expenses tables."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, entry: LedgerEntry) -> LedgerEntry:
        """Persist a new entry."""
        orm_entry = self._to_orm(entry)
        self._db.add(orm_entry)
        self._db.commit()
        self._db.refresh(orm_entry)
        return self._to_domain(orm_entry, entry.entry_type)

    def get_by_id(self, entry_type: EntryType, entry_id: str) -> Optional[LedgerEntry]:
        """Retrieve an entry by type and ID."""
        orm_entry = self._get_orm(entry_type, entry_id)
        return self._to_domain(orm_entry, entry_type) if orm_entry else None

    def update(self, entry: LedgerEntry) -> LedgerEntry:
        """Update an existing entry."""
        orm_entry = self._get_orm(entry.entry_type, entry.entry_id)
        if not orm_entry:
            raise ValueError(f"Entry not found: {entry.entry_id}")

        orm_entry.category_id = entry.category_id
        orm_entry.amount = entry.amount
        orm_entry.description = entry.description
        orm_entry.date = entry.date
        if entry.entry_type == EntryType.INCOME:
            orm_entry.source = entry.source or ""

        self._db.commit()
        self._db.refresh(orm_entry)
        return self._to_domain(orm_entry, entry.entry_type)

    def delete(self, entry_type: EntryType, entry_id: str) -> None:
        """Delete an entry (hard delete)."""
        model = ENTRY_MODELS[entry_type]
        self._db.query(model).filter(model.entry_id == entry_id).delete()
        self._db.commit()

    def query(
        self,
        entry_type: EntryType,
        user_id: str,
        category_id: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[LedgerEntry]:
        """Query a user's entries, newest date first."""
        model = ENTRY_MODELS[entry_type]

        conditions = [model.user_id == user_id]
        if category_id:
            conditions.append(model.category_id == category_id)
        if start_date:
            conditions.append(model.date >= start_date)
        if end_date:
            conditions.append(model.date < end_date)

        query = (
            self._db.query(model)
            .filter(and_(*conditions))
            .order_by(model.date.desc(), model.created_at.desc())
        )
        return [self._to_domain(e, entry_type) for e in query.all()]

    def _get_orm(self, entry_type: EntryType, entry_id: str) -> Optional[EntryORM]:
        model = ENTRY_MODELS[entry_type]
        return self._db.query(model).filter(model.entry_id == entry_id).first()

    def _to_orm(self, entry: LedgerEntry) -> EntryORM:
        """Convert domain model to ORM model."""
        if entry.entry_type == EntryType.INCOME:
            return IncomeORM(
                entry_id=entry.entry_id,
                user_id=entry.user_id,
                category_id=entry.category_id,
                amount=entry.amount,
                source=entry.source or "",
                description=entry.description,
                date=entry.date,
                created_at=entry.created_at,
            )
        return ExpenseORM(
            entry_id=entry.entry_id,
            user_id=entry.user_id,
            category_id=entry.category_id,
            amount=entry.amount,
            description=entry.description,
            date=entry.date,
            created_at=entry.created_at,
        )

    @staticmethod
    def _to_domain(orm: EntryORM, entry_type: EntryType) -> LedgerEntry:
        """Convert ORM model to domain model."""
        return LedgerEntry(
            entry_id=orm.entry_id,
            user_id=orm.user_id,
            entry_type=entry_type,
            amount=Decimal(str(orm.amount)) if orm.amount is not None else Decimal("0"),
            date=orm.date,
            category_id=orm.category_id,
            source=getattr(orm, "source", None),
            description=orm.description,
            created_at=orm.created_at,
        )

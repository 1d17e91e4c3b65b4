"""SQLAlchemy ORM model definitions."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    Column,
    String,
    Date,
    DateTime,
    Text,
    ForeignKey,
    Numeric,
    Enum as SqlEnum,
)

from fintrack.repositories.sqlalchemy.database import Base
from fintrack.domain.models.enums import EntryType


class CategoryORM(Base):
    """SQLAlchemy model for Category."""

    __tablename__ = "categories"

    category_id = Column(String(36), primary_key=True)
    user_id = Column(String(64), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    type = Column(SqlEnum(EntryType), nullable=False)
    color = Column(String(16), nullable=False, default="#6B7280")
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)


class IncomeORM(Base):
    """SQLAlchemy model for an income row."""

    __tablename__ = "income"

    entry_id = Column(String(36), primary_key=True)
    user_id = Column(String(64), nullable=False, index=True)
    category_id = Column(
        String(36),
        ForeignKey("categories.category_id", ondelete="SET NULL"),
        nullable=True,
    )
    amount = Column(Numeric(precision=18, scale=2), nullable=False)
    source = Column(String(255), nullable=False, default="")
    description = Column(Text, nullable=True)
    date = Column(Date, nullable=False, index=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)


class ExpenseORM(Base):
    """SQLAlchemy model for an expense row."""

    __tablename__ = "expenses"

    entry_id = Column(String(36), primary_key=True)
    user_id = Column(String(64), nullable=False, index=True)
    category_id = Column(
        String(36),
        ForeignKey("categories.category_id", ondelete="SET NULL"),
        nullable=True,
    )
    amount = Column(Numeric(precision=18, scale=2), nullable=False)
    description = Column(Text, nullable=True)
    date = Column(Date, nullable=False, index=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)


class GoalORM(Base):
    """SQLAlchemy model for Goal."""

    __tablename__ = "goals"

    goal_id = Column(String(36), primary_key=True)
    user_id = Column(String(64), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    target_amount = Column(Numeric(precision=18, scale=2), nullable=False)
    current_amount = Column(Numeric(precision=18, scale=2), default=Decimal("0"))
    deadline = Column(Date, nullable=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=True, onupdate=datetime.utcnow)


# Entry type -> backing table
ENTRY_MODELS = {
    EntryType.INCOME: IncomeORM,
    EntryType.EXPENSE: ExpenseORM,
}

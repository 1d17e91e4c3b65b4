"""SQLAlchemy implementation of GoalRepository."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from fintrack.domain.models import Goal
from fintrack.repositories.sqlalchemy.orm_models import GoalORM


class SqlAlchemyGoalRepository:
    """SQLAlchemy-backed goal repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, goal: Goal) -> Goal:
        """Persist a new goal."""
        orm_goal = GoalORM(
            goal_id=goal.goal_id,
            user_id=goal.user_id,
            name=goal.name,
            target_amount=goal.target_amount,
            current_amount=goal.current_amount,
            deadline=goal.deadline,
            created_at=goal.created_at,
            updated_at=goal.updated_at,
        )
        self._db.add(orm_goal)
        self._db.commit()
        self._db.refresh(orm_goal)
        return self._to_domain(orm_goal)

    def get_by_id(self, goal_id: str) -> Optional[Goal]:
        """Retrieve goal by ID."""
        orm_goal = self._db.query(GoalORM).filter(GoalORM.goal_id == goal_id).first()
        return self._to_domain(orm_goal) if orm_goal else None

    def list_by_user(self, user_id: str) -> list[Goal]:
        """List a user's goals, newest first."""
        orm_goals = (
            self._db.query(GoalORM)
            .filter(GoalORM.user_id == user_id)
            .order_by(GoalORM.created_at.desc())
            .all()
        )
        return [self._to_domain(g) for g in orm_goals]

    def update(self, goal: Goal) -> Goal:
        """Update an existing goal."""
        orm_goal = self._db.query(GoalORM).filter(GoalORM.goal_id == goal.goal_id).first()
        if not orm_goal:
            raise ValueError(f"Goal not found: {goal.goal_id}")

        orm_goal.name = goal.name
        orm_goal.target_amount = goal.target_amount
        orm_goal.current_amount = goal.current_amount
        orm_goal.deadline = goal.deadline
        orm_goal.updated_at = goal.updated_at or datetime.utcnow()

        self._db.commit()
        self._db.refresh(orm_goal)
        return self._to_domain(orm_goal)

    def delete(self, goal_id: str) -> None:
        """Delete a goal."""
        self._db.query(GoalORM).filter(GoalORM.goal_id == goal_id).delete()
        self._db.commit()

    @staticmethod
    def _to_domain(orm: GoalORM) -> Goal:
        """Convert ORM model to domain model."""
        return Goal(
            goal_id=orm.goal_id,
            user_id=orm.user_id,
            name=orm.name,
            target_amount=Decimal(str(orm.target_amount)),
            current_amount=Decimal(str(orm.current_amount)) if orm.current_amount else Decimal("0"),
            deadline=orm.deadline,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )

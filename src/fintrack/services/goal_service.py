"""Savings goal service."""

import uuid
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from fintrack.core.timezone import now_local
from fintrack.core.exceptions import ValidationError, NotFoundError
from fintrack.domain.models import Goal
from fintrack.repositories.protocols import GoalRepository


@dataclass
class GoalCreate:
    """Input data for creating a goal."""

    name: str
    target_amount: Decimal
    current_amount: Decimal = Decimal("0")
    deadline: Optional[date] = None


@dataclass
class GoalUpdate:
    """Partial update data for a goal."""

    name: Optional[str] = None
    target_amount: Optional[Decimal] = None
    current_amount: Optional[Decimal] = None
    deadline: Optional[date] = None
    clear_deadline: bool = False


class GoalService:
    """Service for a user's savings goals."""

    def __init__(self, goal_repo: GoalRepository):
        self._goal_repo = goal_repo

    def create_goal(self, user_id: str, data: GoalCreate) -> Goal:
        name = (data.name or "").strip()
        self._validate(name, data.target_amount, data.current_amount)

        now = now_local().replace(tzinfo=None)
        goal = Goal(
            goal_id=str(uuid.uuid4()),
            user_id=user_id,
            name=name,
            target_amount=data.target_amount,
            current_amount=data.current_amount,
            deadline=data.deadline,
            created_at=now,
            updated_at=now,
        )
        return self._goal_repo.create(goal)

    def get_goal(self, user_id: str, goal_id: str) -> Goal:
        goal = self._goal_repo.get_by_id(goal_id)
        if not goal or goal.user_id != user_id:
            raise NotFoundError("Goal", goal_id)
        return goal

    def list_goals(self, user_id: str) -> list[Goal]:
        """List a user's goals, newest first."""
        return self._goal_repo.list_by_user(user_id)

    def update_goal(self, user_id: str, goal_id: str, patch: GoalUpdate) -> Goal:
        goal = self.get_goal(user_id, goal_id)

        if patch.name is not None:
            goal.name = patch.name.strip()
        if patch.target_amount is not None:
            goal.target_amount = patch.target_amount
        if patch.current_amount is not None:
            goal.current_amount = patch.current_amount
        if patch.clear_deadline:
            goal.deadline = None
        elif patch.deadline is not None:
            goal.deadline = patch.deadline

        self._validate(goal.name, goal.target_amount, goal.current_amount)
        goal.updated_at = now_local().replace(tzinfo=None)
        return self._goal_repo.update(goal)

    def delete_goal(self, user_id: str, goal_id: str) -> None:
        self.get_goal(user_id, goal_id)
        self._goal_repo.delete(goal_id)

    @staticmethod
    def _validate(name: str, target_amount: Decimal, current_amount: Decimal) -> None:
        if not name:
            raise ValidationError("Goal name is required")
        if target_amount is None or target_amount <= 0:
            raise ValidationError("Target amount must be greater than zero")
        if current_amount is None or current_amount < 0:
            raise ValidationError("Current amount cannot be negative")

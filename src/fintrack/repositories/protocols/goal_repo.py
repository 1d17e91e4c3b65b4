"""Goal repository protocol."""

from typing import Protocol, Optional

from fintrack.domain.models import Goal


class GoalRepository(Protocol):
    """Interface for savings goal data access."""

    def create(self, goal: Goal) -> Goal:
        """Persist a new goal."""
        ...

    def get_by_id(self, goal_id: str) -> Optional[Goal]:
        """Retrieve goal by ID."""
        ...

    def list_by_user(self, user_id: str) -> list[Goal]:
        """List a user's goals, newest first."""
        ...

    def update(self, goal: Goal) -> Goal:
        """Update an existing goal."""
        ...

    def delete(self, goal_id: str) -> None:
        """Delete a goal."""
        ...

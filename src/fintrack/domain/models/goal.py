"""Savings goal domain model."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Optional


@dataclass
class Goal:
    """Savings target with the amount set aside so far."""

    goal_id: str
    user_id: str
    name: str
    target_amount: Decimal
    current_amount: Decimal = field(default_factory=lambda: Decimal("0"))
    deadline: Optional[date] = None
    created_at: Optional[datetime] = field(default=None)
    updated_at: Optional[datetime] = field(default=None)

    @property
    def progress_percent(self) -> Decimal:
        """Progress towards the target, capped at 100."""
        if self.target_amount <= 0:
            return Decimal("0")
        pct = (self.current_amount / self.target_amount * 100).quantize(Decimal("0.01"))
        return min(pct, Decimal("100.00"))

    @property
    def is_completed(self) -> bool:
        return self.current_amount >= self.target_amount

    @property
    def remaining_amount(self) -> Decimal:
        return max(self.target_amount - self.current_amount, Decimal("0"))

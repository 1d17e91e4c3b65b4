"""Category domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from fintrack.domain.models.enums import EntryType

DEFAULT_CATEGORY_COLOR = "#6B7280"


@dataclass
class Category:
    """User-defined label for income or expense entries."""

    category_id: str
    user_id: str
    name: str
    type: EntryType
    color: str = DEFAULT_CATEGORY_COLOR
    created_at: Optional[datetime] = field(default=None)

    def __post_init__(self) -> None:
        if isinstance(self.type, str):
            self.type = EntryType(self.type)

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TextRecord:
    """Represents a row from the texts table."""

    id: int
    user_id: int
    title: str
    content: str
    category_id: int | None = None  # None means the user's root folder
    order_index: int = 0
    created_at: datetime | None = None

from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from typing import Optional

from shared.storage.record_store import new_id

# Never changed by a partial update
READ_ONLY_FIELDS = {"id", "created_at"}


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Book:
    title: str
    author: str
    isbn: str
    price: float
    category: str = ""
    stock: int = 0
    description: str = ""
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=_now)
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        if self.updated_at is None:
            self.updated_at = self.created_at

    def update(self, changes: dict) -> None:
        known = {f.name for f in fields(self)} - READ_ONLY_FIELDS - {"updated_at"}
        for key, value in changes.items():
            if key in known:
                setattr(self, key, value)
        self.updated_at = _now()

    def adjust_stock(self, quantity: int) -> None:
        self.stock = max(0, self.stock + quantity)
        self.updated_at = _now()

    def matches(self, term: str) -> bool:
        term = term.lower()
        return any(
            term in (value or "").lower()
            for value in (self.title, self.author, self.category, self.description)
        )

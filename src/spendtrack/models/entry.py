"""Spending records: the committed entry and the in-progress draft."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from ..constants import DEFAULT_CATEGORY, DEFAULT_CURRENCY


@dataclass(frozen=True)
class Entry:
    """A single committed spending record."""

    id: int
    category: str
    amount: float
    currency: str
    note: str = ""
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def date(self) -> str:
        """Creation date in the locale's short date form."""

        return self.created_at.strftime("%x")


@dataclass
class Draft:
    """Editable form values; ``amount`` stays raw text until commit."""

    category: str = DEFAULT_CATEGORY
    amount: str = ""
    currency: str = DEFAULT_CURRENCY
    note: str = ""

"""In-memory, newest-first ledger of committed spending entries."""

from __future__ import annotations

from datetime import datetime
from typing import Iterator

from ..logging_config import get_logger
from ..models.entry import Entry

logger = get_logger(__name__)


class Ledger:
    """Ordered collection of entries for one session.

    Entries are only ever inserted at the front; nothing is edited or removed.
    """

    def __init__(self) -> None:
        self._entries: list[Entry] = []
        self._ids: set[int] = set()
        self._last_id = 0

    def next_id(self, created_at: datetime) -> int:
        """Return a millisecond-timestamp id that is strictly greater than the last one."""

        candidate = int(created_at.timestamp() * 1000)
        # Same-millisecond creations (or a clock going backwards) bump past the last id
        candidate = max(candidate, self._last_id + 1)
        self._last_id = candidate
        return candidate

    def prepend(self, entry: Entry) -> None:
        if entry.id in self._ids:
            raise ValueError(f"Entry id {entry.id} is already in the ledger")
        self._entries.insert(0, entry)
        self._ids.add(entry.id)
        self._last_id = max(self._last_id, entry.id)
        logger.debug("Entry prepended", extra={"entry_id": entry.id, "size": len(self._entries)})

    @property
    def entries(self) -> tuple[Entry, ...]:
        return tuple(self._entries)

    @property
    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(tuple(self._entries))

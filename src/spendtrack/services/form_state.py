"""Draft normalization, the submit gate, and the commit into the ledger."""

from __future__ import annotations

import math
import re
from datetime import datetime
from typing import Optional

from ..constants import (
    CATEGORIES,
    CURRENCIES,
    INVALID_AMOUNT_MESSAGE,
    NOTE_MAX_LENGTH,
)
from ..logging_config import get_logger
from ..models.entry import Draft, Entry
from .ledger import Ledger

logger = get_logger(__name__)

_NON_AMOUNT_CHARS = re.compile(r"[^0-9.]")


class InvalidAmountError(ValueError):
    """Raised when a commit is attempted with an empty, malformed or non-positive amount."""

    def __init__(self, amount: str, message: str = INVALID_AMOUNT_MESSAGE):
        super().__init__(message)
        self.amount = amount
        self.message = message


def normalize_amount(raw: str) -> Optional[str]:
    """Keep only digits and ``.``; return None when more than one ``.`` remains.

    Fractional digits are not capped, so ``1.2345`` passes through unchanged.
    """

    cleaned = _NON_AMOUNT_CHARS.sub("", raw or "")
    if cleaned.count(".") > 1:
        return None
    return cleaned


def parse_amount(text: str) -> Optional[float]:
    """Parse amount text into a finite float, or None when it does not parse."""

    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    # Very long digit strings overflow to inf
    if not math.isfinite(value):
        return None
    return value


def is_valid_amount(text: str) -> bool:
    """True for digits-and-one-point text that parses to a positive number."""

    if normalize_amount(text) != text:
        return False
    value = parse_amount(text)
    return value is not None and value > 0


def note_length(text: str) -> int:
    """Length in UTF-16 code units, the unit the note limit is expressed in."""

    return len(text.encode("utf-16-le")) // 2


def clamp_note(raw: str, limit: int = NOTE_MAX_LENGTH) -> str:
    """Truncate ``raw`` to ``limit`` UTF-16 code units without splitting a character."""

    raw = raw or ""
    if note_length(raw) <= limit:
        return raw
    used = 0
    for index, char in enumerate(raw):
        width = 2 if ord(char) > 0xFFFF else 1
        if used + width > limit:
            return raw[:index]
        used += width
    return raw


class FormState:
    """Owns the single live draft and gates commits into a ledger."""

    def __init__(self, draft: Draft | None = None) -> None:
        self.draft = draft or Draft()

    def set_category(self, value: str) -> None:
        if value not in CATEGORIES:
            raise ValueError(f"Unknown category: {value!r}")
        self.draft.category = value

    def set_amount(self, raw: str) -> bool:
        """Apply amount input; return False when the update was dropped."""

        normalized = normalize_amount(raw)
        if normalized is None:
            logger.debug("Amount update dropped", extra={"raw_amount": raw})
            return False
        self.draft.amount = normalized
        return True

    def toggle_currency(self) -> str:
        current = CURRENCIES.index(self.draft.currency)
        self.draft.currency = CURRENCIES[(current + 1) % len(CURRENCIES)]
        return self.draft.currency

    def set_note(self, raw: str) -> None:
        note = clamp_note(raw)
        if note != raw:
            logger.debug("Note truncated", extra={"note_limit": NOTE_MAX_LENGTH})
        self.draft.note = note

    @property
    def note_length(self) -> int:
        return note_length(self.draft.note)

    @property
    def is_valid(self) -> bool:
        """True when the submit control should be enabled."""

        return is_valid_amount(self.draft.amount)

    def reset(self) -> None:
        self.draft = Draft()

    def commit(self, ledger: Ledger, now: datetime | None = None) -> Entry:
        """Turn the draft into an Entry at the front of ``ledger`` and reset the form.

        Raises:
            InvalidAmountError: amount is empty, unparsable, not positive, or holds
                characters other than digits and one point.
            ValueError: category or currency is outside its closed set.

        Neither the ledger nor the draft is touched when either is raised.
        """
        if self.draft.category not in CATEGORIES:
            raise ValueError(f"Unknown category: {self.draft.category!r}")
        if self.draft.currency not in CURRENCIES:
            raise ValueError(f"Unknown currency: {self.draft.currency!r}")
        if not is_valid_amount(self.draft.amount):
            logger.warning("Rejected commit with invalid amount", extra={"raw_amount": self.draft.amount})
            raise InvalidAmountError(self.draft.amount)

        amount = float(self.draft.amount)
        created_at = now or datetime.now()
        entry = Entry(
            id=ledger.next_id(created_at),
            category=self.draft.category,
            amount=amount,
            currency=self.draft.currency,
            note=clamp_note(self.draft.note).strip(),
            created_at=created_at,
        )
        ledger.prepend(entry)
        self.reset()
        logger.info(
            "Spending added",
            extra={
                "entry_id": entry.id,
                "category": entry.category,
                "amount": entry.amount,
                "currency": entry.currency,
            },
        )
        return entry

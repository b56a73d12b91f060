"""Derived spending views: category filtering, totals and display strings."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from ..constants import ALL_CATEGORIES, CATEGORIES, TOTAL_CURRENCY
from ..models.entry import Entry

EMPTY_LEDGER_MESSAGE = "No spendings yet. Add your first spending above!"


@dataclass(frozen=True)
class SpendingSummary:
    """Everything the list card renders for one filter value."""

    category: str
    entries: list[Entry]
    total: float
    total_label: str
    empty_message: Optional[str]


def normalize_filter(raw_value: Optional[str]) -> str:
    """Return the canonical filter value, treating falsy/'all' as All."""

    if not raw_value or not raw_value.strip():
        return ALL_CATEGORIES
    lowered = raw_value.strip().lower()
    if lowered == ALL_CATEGORIES.lower():
        return ALL_CATEGORIES
    for category in CATEGORIES:
        if category.lower() == lowered:
            return category
    raise ValueError(f"Unknown filter category: {raw_value!r}")


def filtered_entries(entries: Iterable[Entry], category: str) -> list[Entry]:
    """Entries matching ``category`` in ledger order; all of them for All."""

    if category == ALL_CATEGORIES:
        return list(entries)
    return [entry for entry in entries if entry.category == category]


def total_by_category(entries: Iterable[Entry], category: str) -> float:
    return math.fsum(entry.amount for entry in filtered_entries(entries, category))


def format_amount(amount: float, currency: str) -> str:
    return f"${amount:.2f} {currency}"


def format_total_label(category: str, total: float) -> str:
    # Mixed currencies are summed as-is; the label is not a conversion
    return f"Total ({category}): {format_amount(total, TOTAL_CURRENCY)}"


def total_label(entries: Iterable[Entry], category: str) -> str:
    return format_total_label(category, total_by_category(entries, category))


def empty_state_message(entries: Sequence[Entry], category: str) -> Optional[str]:
    if not entries:
        return EMPTY_LEDGER_MESSAGE
    if filtered_entries(entries, category):
        return None
    return f'No spendings found for "{category}" category.'


def summarize(entries: Sequence[Entry], category: str) -> SpendingSummary:
    """Compute the filtered rows and total for one render."""

    rows = filtered_entries(entries, category)
    total = math.fsum(entry.amount for entry in rows)
    return SpendingSummary(
        category=category,
        entries=rows,
        total=total,
        total_label=format_total_label(category, total),
        empty_message=empty_state_message(entries, category),
    )

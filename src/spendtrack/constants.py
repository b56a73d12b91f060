"""Closed option sets and limits shared by the form, ledger and views."""

from __future__ import annotations

CATEGORIES: tuple[str, ...] = ("General", "Personal", "Auto", "House")
CURRENCIES: tuple[str, ...] = ("MXN", "USD")

# Filter value that selects every category.
ALL_CATEGORIES = "All"

DEFAULT_CATEGORY = CATEGORIES[0]
DEFAULT_CURRENCY = CURRENCIES[0]

# Totals mix currencies without conversion and always carry this label.
TOTAL_CURRENCY = "MXN"

# Measured in UTF-16 code units.
NOTE_MAX_LENGTH = 140
NOTE_WARNING_THRESHOLD = 130

INVALID_AMOUNT_MESSAGE = "Please enter a valid amount"

"""Stable control identifiers, stored on each control's ``data``.

Tests and automation locate controls by these values rather than by layout.
"""

from __future__ import annotations

CATEGORY_SELECT = "category-select"
AMOUNT_INPUT = "amount-input"
CURRENCY_TOGGLE = "currency-toggle"
NOTE_INPUT = "note-input"
ADD_SPENDING_BTN = "add-spending-btn"
SPENDING_ITEM = "spending-item"
CATEGORY_FILTER = "category-filter"

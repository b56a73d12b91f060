"""Reusable UI components for the desktop app."""

from .dialogs import show_error_dialog
from .widgets import build_card, build_entry_row, empty_state

__all__ = [
    "show_error_dialog",
    "build_card",
    "build_entry_row",
    "empty_state",
]

"""Service module exports."""

from . import form_state, ledger, spending_view

__all__ = [
    "form_state",
    "ledger",
    "spending_view",
]

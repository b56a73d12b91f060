"""Spending model exports."""

from .entry import Draft, Entry

__all__ = [
    "Draft",
    "Entry",
]

"""Reusable widget components for the desktop app."""

from __future__ import annotations

from typing import Optional

import flet as ft

from ...models.entry import Entry
from ...services.spending_view import format_amount
from ..constants import SPENDING_ITEM


def build_card(
    title: str,
    content: ft.Control,
    header_action: Optional[ft.Control] = None,
) -> ft.Card:
    """Build a standard card with a bold title row above its content."""

    header_controls: list[ft.Control] = [ft.Text(title, size=18, weight=ft.FontWeight.BOLD)]
    if header_action is not None:
        header_controls.append(header_action)

    return ft.Card(
        content=ft.Container(
            content=ft.Column(
                [
                    ft.Row(
                        header_controls,
                        alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                        wrap=True,
                    ),
                    content,
                ],
                spacing=12,
            ),
            padding=20,
        ),
        elevation=2,
    )


def build_entry_row(entry: Entry) -> ft.Container:
    """One spending row: category, amount, quoted note (when present) and date."""

    details: list[ft.Control] = [
        ft.Text(entry.category, weight=ft.FontWeight.BOLD),
        ft.Text(format_amount(entry.amount, entry.currency), color=ft.Colors.PRIMARY),
    ]
    if entry.note:
        details.append(ft.Text(f'"{entry.note}"', italic=True))
    details.append(ft.Text(entry.date, size=12, color=ft.Colors.ON_SURFACE_VARIANT))

    return ft.Container(
        content=ft.Column(details, spacing=4),
        padding=12,
        border=ft.border.all(1, ft.Colors.OUTLINE_VARIANT),
        border_radius=8,
        data=SPENDING_ITEM,
    )


def empty_state(message: str) -> ft.Container:
    """Simple empty-state placeholder."""

    return ft.Container(
        content=ft.Column(
            [
                ft.Icon(ft.Icons.INBOX, size=40, color=ft.Colors.ON_SURFACE_VARIANT),
                ft.Text(message, color=ft.Colors.ON_SURFACE_VARIANT),
            ],
            alignment=ft.MainAxisAlignment.CENTER,
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
        ),
        padding=20,
    )

"""Dialog components for the desktop app."""

from __future__ import annotations

import flet as ft


def show_error_dialog(page: ft.Page, title: str, message: str) -> ft.AlertDialog:
    """Open a modal error dialog with a single OK action."""

    def close_dialog(_):
        page.close(dialog)

    dialog = ft.AlertDialog(
        modal=True,
        title=ft.Text(title),
        content=ft.Text(message),
        actions=[
            ft.TextButton("OK", on_click=close_dialog),
        ],
    )
    page.open(dialog)
    return dialog

"""Single-page spending form with a filtered, totalled list of entries."""

from __future__ import annotations

from typing import TYPE_CHECKING

import flet as ft

from ...constants import (
    ALL_CATEGORIES,
    CATEGORIES,
    NOTE_MAX_LENGTH,
    NOTE_WARNING_THRESHOLD,
)
from ...devtools import dev_log
from ...logging_config import get_logger
from ...services.form_state import InvalidAmountError
from ...services.spending_view import normalize_filter, summarize
from ..components import build_card, build_entry_row, empty_state, show_error_dialog
from ..constants import (
    ADD_SPENDING_BTN,
    AMOUNT_INPUT,
    CATEGORY_FILTER,
    CATEGORY_SELECT,
    CURRENCY_TOGGLE,
    NOTE_INPUT,
)

if TYPE_CHECKING:
    from ..context import AppContext

logger = get_logger(__name__)


def build_spending_view(ctx: AppContext, page: ft.Page) -> ft.View:
    """Build the add-spending form and the spendings list."""

    form = ctx.form

    category_select = ft.Dropdown(
        label="Category",
        options=[ft.dropdown.Option(category) for category in CATEGORIES],
        value=form.draft.category,
        width=220,
        data=CATEGORY_SELECT,
    )
    amount_field = ft.TextField(
        label="Amount",
        hint_text="0.00",
        prefix_text="$",
        value=form.draft.amount,
        expand=True,
        data=AMOUNT_INPUT,
    )
    currency_toggle = ft.OutlinedButton(
        text=form.draft.currency,
        tooltip="Switch currency",
        data=CURRENCY_TOGGLE,
    )
    note_field = ft.TextField(
        label="Note (optional)",
        hint_text="Add a note about this spending...",
        value=form.draft.note,
        multiline=True,
        min_lines=3,
        max_lines=3,
        data=NOTE_INPUT,
    )
    char_count = ft.Text(size=12)
    add_button = ft.FilledButton(
        text="Add Spending",
        icon=ft.Icons.ADD,
        disabled=True,
        data=ADD_SPENDING_BTN,
    )

    filter_select = ft.Dropdown(
        label="Filter by Category:",
        options=[ft.dropdown.Option(ALL_CATEGORIES, "All Categories")]
        + [ft.dropdown.Option(category) for category in CATEGORIES],
        value=ctx.filter_category,
        width=220,
        data=CATEGORY_FILTER,
    )
    total_text = ft.Text(weight=ft.FontWeight.BOLD, size=16)
    filter_section = ft.Row(
        [filter_select, total_text],
        alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
        vertical_alignment=ft.CrossAxisAlignment.CENTER,
        wrap=True,
        visible=False,
    )
    entries_column = ft.Column(spacing=8)

    def _sync_form() -> None:
        """Push the draft into the form controls and re-evaluate the submit gate."""

        draft = form.draft
        category_select.value = draft.category
        amount_field.value = draft.amount
        currency_toggle.text = draft.currency
        note_field.value = draft.note
        length = form.note_length
        char_count.value = f"{length}/{NOTE_MAX_LENGTH}"
        char_count.color = (
            ft.Colors.ERROR if length > NOTE_WARNING_THRESHOLD else ft.Colors.ON_SURFACE_VARIANT
        )
        add_button.disabled = not form.is_valid

    def _render_entries() -> None:
        summary = summarize(ctx.ledger.entries, ctx.filter_category)
        filter_section.visible = not ctx.ledger.is_empty
        filter_select.value = ctx.filter_category
        total_text.value = summary.total_label
        if summary.empty_message:
            entries_column.controls = [empty_state(summary.empty_message)]
        else:
            entries_column.controls = [build_entry_row(entry) for entry in summary.entries]

    def _on_category_change(_):
        form.set_category(category_select.value or form.draft.category)
        _sync_form()
        page.update()

    def _on_amount_change(_):
        form.set_amount(amount_field.value or "")
        _sync_form()
        page.update()

    def _on_currency_click(_):
        form.toggle_currency()
        _sync_form()
        page.update()

    def _on_note_change(_):
        form.set_note(note_field.value or "")
        _sync_form()
        page.update()

    def _on_add(_):
        try:
            form.commit(ctx.ledger)
        except InvalidAmountError as exc:
            dev_log(ctx.config, "Commit rejected", context={"amount": exc.amount})
            show_error_dialog(page, "Invalid amount", exc.message)
            return
        _sync_form()
        _render_entries()
        page.update()

    def _on_filter_change(_):
        try:
            ctx.filter_category = normalize_filter(filter_select.value)
        except ValueError as exc:
            logger.warning("Ignoring unknown filter value", extra={"error": str(exc)})
        else:
            logger.debug("Filter changed", extra={"filter_category": ctx.filter_category})
        _render_entries()
        page.update()

    category_select.on_change = _on_category_change
    amount_field.on_change = _on_amount_change
    currency_toggle.on_click = _on_currency_click
    note_field.on_change = _on_note_change
    add_button.on_click = _on_add
    filter_select.on_change = _on_filter_change

    _sync_form()
    _render_entries()

    header = ft.Column(
        [
            ft.Text("💰 Spending Tracker", size=28, weight=ft.FontWeight.BOLD),
            ft.Text("Track your expenses easily", color=ft.Colors.ON_SURFACE_VARIANT),
        ],
        horizontal_alignment=ft.CrossAxisAlignment.CENTER,
        spacing=4,
    )

    form_card = build_card(
        "Add New Spending",
        ft.Column(
            [
                category_select,
                ft.Row([amount_field, currency_toggle], vertical_alignment=ft.CrossAxisAlignment.CENTER),
                note_field,
                ft.Row([char_count], alignment=ft.MainAxisAlignment.END),
                add_button,
            ],
            spacing=12,
        ),
    )
    list_card = build_card(
        "Your Spendings",
        ft.Column([filter_section, entries_column], spacing=12),
    )

    return ft.View(
        route="/",
        controls=[
            ft.Column(
                [header, form_card, list_card],
                spacing=16,
                horizontal_alignment=ft.CrossAxisAlignment.STRETCH,
            )
        ],
        padding=24,
        scroll=ft.ScrollMode.AUTO,
    )

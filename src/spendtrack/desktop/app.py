"""Main Flet desktop application entry point."""

from __future__ import annotations

import flet as ft

from ..devtools import dev_log
from ..logging_config import setup_logging
from .context import create_app_context
from .views.spending import build_spending_view


def main(page: ft.Page) -> None:
    """Main entry point for the Flet desktop app."""

    ctx = create_app_context()
    logger = setup_logging(ctx.config)
    logger.info("Spending tracker starting")

    ctx.page = page
    page.title = f"{ctx.config.APP_NAME} (DEV)" if ctx.dev_mode else ctx.config.APP_NAME
    if ctx.dev_mode:
        dev_log(ctx.config, "Dev mode enabled", context={"data_dir": ctx.config.DATA_DIR})
    page.theme_mode = ft.ThemeMode.LIGHT
    page.padding = 0
    page.window.width = ctx.config.WINDOW_WIDTH
    page.window.height = ctx.config.WINDOW_HEIGHT

    def on_page_close(_):
        logger.info("Application closing", extra={"entries": len(ctx.ledger)})

    def on_error(e: ft.ControlEvent):  # pragma: no cover (UI callback)
        logger.error("Flet page error", extra={"event": "error", "data": getattr(e, "data", None)})

    page.on_close = on_page_close
    page.on_error = on_error

    page.views.clear()
    page.views.append(build_spending_view(ctx, page))
    page.update()


if __name__ == "__main__":
    ft.app(target=main)

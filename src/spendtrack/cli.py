"""Command line launcher for the spending tracker."""

from __future__ import annotations

import click
import flet as ft

from .desktop.app import main as app_main


@click.command()
@click.option("--web", is_flag=True, default=False, help="Open in a browser tab instead of a window")
@click.option("--port", type=int, default=0, show_default=True, help="Port for --web (0 picks a free one)")
def main(web: bool, port: int) -> None:
    """Launch the spending tracker."""

    if web:
        click.echo("Opening spending tracker in the browser...")
        ft.app(target=app_main, view=ft.AppView.WEB_BROWSER, port=port)
    else:
        ft.app(target=app_main)

#!/usr/bin/env python
"""Desktop app entrypoint for the spending tracker."""

import flet as ft

from spendtrack.desktop.app import main

if __name__ == "__main__":
    ft.app(target=main)

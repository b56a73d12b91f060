"""Application context for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import flet as ft

from ..config import BaseConfig
from ..constants import ALL_CATEGORIES
from ..services.form_state import FormState
from ..services.ledger import Ledger


@dataclass
class AppContext:
    """Session state shared by the desktop view and its handlers."""

    config: BaseConfig
    ledger: Ledger = field(default_factory=Ledger)
    form: FormState = field(default_factory=FormState)
    filter_category: str = ALL_CATEGORIES

    # Page reference (set after initialization)
    page: Optional[ft.Page] = None

    @property
    def dev_mode(self) -> bool:
        return bool(self.config.DEV_MODE)


def create_app_context(config: Optional[BaseConfig] = None) -> AppContext:
    """Create a fresh context with an empty ledger and default draft."""

    return AppContext(config=config or BaseConfig())

"""Pytest configuration and shared fixtures for spending tracker tests."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from itertools import count
from pathlib import Path

import pytest

from spendtrack.config import BaseConfig
from spendtrack.logging_config import ROOT_LOGGER_NAME
from spendtrack.models import Entry
from spendtrack.services.form_state import FormState
from spendtrack.services.ledger import Ledger


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Point every test at a throwaway data directory."""

    monkeypatch.setenv("SPENDTRACK_DATA_DIR", str(tmp_path / "instance"))
    monkeypatch.setenv("SPENDTRACK_DEV_MODE", "false")
    monkeypatch.delenv("SPENDTRACK_LOG_LEVEL", raising=False)
    yield
    # Close file handlers opened by setup_logging so tmp_path can be removed
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def config() -> BaseConfig:
    return BaseConfig()


@pytest.fixture
def ledger() -> Ledger:
    return Ledger()


@pytest.fixture
def form() -> FormState:
    return FormState()


@pytest.fixture
def entry_factory():
    """Build entries with increasing ids and timestamps."""

    ids = count(1)
    base = datetime(2024, 3, 1, 9, 30)

    def _make(category: str = "General", amount: float = 10.0, currency: str = "MXN", note: str = "") -> Entry:
        entry_id = next(ids)
        return Entry(
            id=entry_id,
            category=category,
            amount=amount,
            currency=currency,
            note=note,
            created_at=base + timedelta(minutes=entry_id),
        )

    return _make


@pytest.fixture
def type_text():
    """Feed text one keystroke at a time, the way a text field reports input.

    Each event carries the raw text typed so far, so a dropped update keeps the
    prior value while later keystrokes still carry the rejected character.
    """

    def _type(form: FormState, field: str, text: str, start: str = "") -> None:
        setter = {"amount": form.set_amount, "note": form.set_note}[field]
        for index in range(1, len(text) + 1):
            setter(start + text[:index])

    return _type

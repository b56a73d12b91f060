from __future__ import annotations

import logging

import pytest

from spendtrack.config import BaseConfig, DevConfig
from spendtrack.devtools import dev_log, format_dev_line, in_dev_mode


def test_defaults_from_environment(tmp_path):
    config = BaseConfig()
    assert config.DATA_DIR == (tmp_path / "instance").resolve()
    assert config.DATA_DIR.is_dir()
    assert config.DEV_MODE is False
    assert config.LOG_LEVEL == logging.INFO
    assert config.log_path == config.DATA_DIR / "logs" / "spendtrack.log"


@pytest.mark.parametrize("raw, expected", [("1", True), ("yes", True), ("On", True), ("0", False), ("nope", False)])
def test_dev_mode_flag(monkeypatch, raw, expected):
    monkeypatch.setenv("SPENDTRACK_DEV_MODE", raw)
    assert BaseConfig().DEV_MODE is expected


def test_dev_mode_defaults_on_when_unset(monkeypatch):
    monkeypatch.delenv("SPENDTRACK_DEV_MODE")
    assert BaseConfig().DEV_MODE is True


def test_dev_config_forces_dev_mode():
    config = DevConfig()
    assert config.DEV_MODE is True
    assert config.DEBUG is True


def test_invalid_log_level_is_rejected(monkeypatch):
    monkeypatch.setenv("SPENDTRACK_LOG_LEVEL", "chatty")
    with pytest.raises(ValueError):
        BaseConfig()


def test_dev_log_only_prints_in_dev_mode(capsys):
    dev_log(BaseConfig(), "hidden")
    assert capsys.readouterr().out == ""

    dev_log(DevConfig(), "Commit rejected", context={"amount": "0"})
    assert capsys.readouterr().out.strip() == "[DEV] Commit rejected (amount=0)"


def test_in_dev_mode_handles_missing_config():
    assert in_dev_mode(None) is False


def test_format_dev_line_without_context():
    assert format_dev_line("Started") == "[DEV] Started"
    assert format_dev_line("Started", {}) == "[DEV] Started"


def test_dev_log_records_context_and_exception(capsys, caplog):
    try:
        raise ValueError("bad amount")
    except ValueError as err:
        error = err

    with caplog.at_level(logging.DEBUG, logger="spendtrack"):
        dev_log(DevConfig(), "Commit rejected", exc=error, context={"amount": "x"})

    out = capsys.readouterr().out.splitlines()
    assert out == ["[DEV] Commit rejected (amount=x)", "ValueError: bad amount"]
    record = next(r for r in caplog.records if r.name == "spendtrack.dev")
    assert record.levelno == logging.DEBUG
    assert record.dev_context == {"amount": "x"}
    assert record.exc_info[1] is error


def test_dev_log_is_silent_outside_dev_mode(capsys, caplog):
    with caplog.at_level(logging.DEBUG, logger="spendtrack"):
        dev_log(BaseConfig(), "hidden", context={"a": 1})
    assert capsys.readouterr().out == ""
    assert not [r for r in caplog.records if r.name == "spendtrack.dev"]

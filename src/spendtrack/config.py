"""Application configuration objects and helpers."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_log_level(name: str, default: int = logging.INFO) -> int:
    """Resolve a level name such as ``debug`` into a logging constant."""

    raw = (os.getenv(name) or "").strip().upper()
    if not raw:
        return default
    level = logging.getLevelName(raw)
    if not isinstance(level, int):
        raise ValueError(f"{name} must be a logging level name, got {raw!r}")
    return level


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "Spending Tracker"
    LOG_FILENAME = "spendtrack.log"
    LOG_MAX_BYTES = 5 * 1024 * 1024
    LOG_BACKUP_COUNT = 3
    WINDOW_WIDTH = 720
    WINDOW_HEIGHT = 900

    def __init__(self) -> None:
        self.DATA_DIR = self._resolve_data_dir()
        self.DEV_MODE = _env_bool("SPENDTRACK_DEV_MODE", default=True)
        self.LOG_LEVEL = _env_log_level("SPENDTRACK_LOG_LEVEL")

    def _resolve_data_dir(self) -> Path:
        """Return the directory where log files live."""

        data_root = os.getenv("SPENDTRACK_DATA_DIR", "instance")
        path = Path(data_root).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def log_path(self) -> Path:
        return self.DATA_DIR / "logs" / self.LOG_FILENAME


class DevConfig(BaseConfig):
    """Development configuration with verbose diagnostics."""

    DEBUG = True

    def __init__(self) -> None:
        super().__init__()
        self.DEV_MODE = True

"""Console diagnostics that only show up while SPENDTRACK_DEV_MODE is on."""

from __future__ import annotations

import traceback
from typing import Any, Mapping

from .config import BaseConfig
from .logging_config import get_logger

logger = get_logger("dev")

DEV_PREFIX = "[DEV]"


def in_dev_mode(config: BaseConfig | None) -> bool:
    if config is None:
        return False
    return bool(getattr(config, "DEV_MODE", False))


def format_dev_line(message: str, context: Mapping[str, Any] | None = None) -> str:
    """Render ``message`` and its context as one ``[DEV] msg (k=v ...)`` line."""

    line = f"{DEV_PREFIX} {message}"
    pairs = [f"{key}={value}" for key, value in (context or {}).items()]
    if pairs:
        line += f" ({' '.join(pairs)})"
    return line


def dev_log(
    config: BaseConfig | None,
    message: str,
    *,
    exc: BaseException | None = None,
    context: Mapping[str, Any] | None = None,
) -> None:
    """Echo a diagnostic to stdout and the ``spendtrack.dev`` logger in dev mode.

    The console gets a one-line summary of ``exc``; the full traceback goes to
    the log record so the JSON file keeps it.
    """

    if not in_dev_mode(config):
        return

    print(format_dev_line(message, context))
    if exc is not None:
        print("".join(traceback.format_exception_only(type(exc), exc)).rstrip())
    logger.debug(message, exc_info=exc, extra={"dev_context": dict(context or {})})

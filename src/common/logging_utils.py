"""Centralized logging helpers.

The CLI calls ``configure_logging`` once; every other module only asks for
``logging.getLogger(__name__)`` and uses the helpers here to attach structured
context to DEBUG events.
"""
from __future__ import annotations

import logging
import os
import time
from typing import Any, Dict, Optional

from constants import Constants

_HANDLER_NAME = "sanepack-console"


def _resolve_level(level: Optional[str]) -> int:
    name = (level or os.environ.get(Constants.ENV_LOG_LEVEL) or "WARNING").upper()
    value = getattr(logging, name, None)
    if not isinstance(value, int):
        return logging.WARNING
    return value


def configure_logging(level: Optional[str] = None, log_file: Optional[str] = None,
                      quiet: bool = False) -> None:
    """Configure the root logger.

    Args:
        level: Level name; falls back to ``SANEPACK_LOG_LEVEL`` then WARNING.
        log_file: Optional path for an additional file handler.
        quiet: Suppress console output entirely.
    """
    root = logging.getLogger()
    root.setLevel(_resolve_level(level))

    # Re-configuring (tests, repeated main() calls) must not stack handlers.
    for handler in list(root.handlers):
        if handler.get_name() == _HANDLER_NAME or isinstance(handler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()

    if not quiet:
        console = logging.StreamHandler()
        console.set_name(_HANDLER_NAME)
        console.setFormatter(logging.Formatter(Constants.LOG_FORMAT))
        root.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(Constants.LOG_FILE_FORMAT))
        root.addHandler(file_handler)


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True when DEBUG records from ``logger`` would be emitted."""
    return logger.isEnabledFor(logging.DEBUG)


def extra_context(**fields: Any) -> Dict[str, Any]:
    """Build an ``extra`` mapping for structured log records, dropping None values."""
    return {k: v for k, v in fields.items() if v is not None}


class Timer:
    """Context manager measuring elapsed wall time in milliseconds."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, *exc: Any) -> None:
        self._end = time.perf_counter()

    def duration_ms(self) -> int:
        end = self._end if self._end is not None else time.perf_counter()
        return int((end - self._start) * 1000)

"""
Logging setup for the idle counter.
"""

from __future__ import annotations

import os
import sys
from contextlib import suppress
from pathlib import Path
from typing import Optional

from loguru import logger as _logger

_LOG_INITIALISED = False
_DEFAULT_HANDLER_ID = 0
LOG_DIR = Path(os.environ.get("IDLE_COUNTER_LOG_DIR", str(Path.home() / ".idle_counter" / "logs")))
DEFAULT_LOG_PATH = LOG_DIR / "idle_counter.log"
DEFAULT_LOG_LEVEL = os.environ.get("IDLE_COUNTER_LOG_LEVEL", "INFO")


def configure(log_path: Optional[Path] = None, *, level: Optional[str] = None) -> None:
    """
    Configure loguru for the idle counter.

    Only the first call has any effect.
    """
    global _LOG_INITIALISED
    if _LOG_INITIALISED:
        return
    target = log_path or DEFAULT_LOG_PATH
    target.parent.mkdir(parents=True, exist_ok=True)

    # Drop only loguru's default stderr handler; handlers added by a host stay.
    with suppress(ValueError):
        _logger.remove(_DEFAULT_HANDLER_ID)
    if sys.stderr is not None:
        _logger.add(sys.stderr, level=level or DEFAULT_LOG_LEVEL, enqueue=True)
    _logger.add(
        target,
        level="DEBUG",
        rotation="10 MB",
        retention=5,
        encoding="utf-8",
        enqueue=True,
        backtrace=True,
        diagnose=False,
    )
    _LOG_INITIALISED = True


def get_logger():
    """Return the shared logger instance."""
    configure()
    return _logger

"""Process logging setup (loguru).

The curses screen owns stdout/stderr while the tracker runs, so records go to
a file sink.
"""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from core.config import AppSettings, get_default_log_file

_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<7} | {name}:{function}:{line} | {message}"


def configure_logging(settings: AppSettings) -> Path:
    """Replace the default stderr sink with a file sink. Returns the log path."""

    log_path = settings.log_file or get_default_log_file()
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logger.remove()
    logger.add(
        log_path,
        level=settings.log_level.upper(),
        format=_FORMAT,
        backtrace=False,
        diagnose=False,
        encoding="utf-8",
    )
    return log_path

# src/planer/logging_setup.py

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .sync.background import SYNC_THREAD_NAME

LOG_FILE_NAME = "planer.log"


def _is_sync_record(record: logging.LogRecord) -> bool:
    """Anything logged by the mirror or from its background thread."""
    return record.name.startswith("planer.sync.") or (record.threadName or "").startswith(SYNC_THREAD_NAME)


class _ConsoleFilter(logging.Filter):
    """
    The console is the task list itself, so it only gets what the user can act on.

    Sync outcomes (success, failure, crash) are never shown there: the remote
    copy is fire-and-forget and the file log is the only place to look.
    Other libraries reach the console at ERROR+.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if _is_sync_record(record):
            return False
        if record.name.startswith("planer."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/planer",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
    max_bytes: int = 1_000_000,
    backup_count: int = 3,
) -> Path:
    """
    Console (stderr, filtered) + rotating file log in `log_dir`.

    Returns the log file path. Replaces any handlers already on the root logger.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s [%(threadName)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_ConsoleFilter())
    root.addHandler(console)

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    file_handler.setLevel(file_level)
    file_handler.setFormatter(fmt)
    root.addHandler(file_handler)

    logging.captureWarnings(True)
    return log_file

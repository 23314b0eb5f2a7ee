# src/planer/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Nothing is read from disk or network at import time.
- Every value has a sane local default, so `planer` runs with no config at all.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "PLANER"

DEFAULT_SYNC_URL = "https://jsonplaceholder.typicode.com/todos"
DEFAULT_STORAGE_KEY = "planerTasks"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float | None) -> float | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local storage (the source of truth) ----
    data_dir: Path
    storage_path: Path
    storage_key: str

    # ---- Remote mirror ----
    sync_enabled: bool
    sync_url: str
    sync_timeout_seconds: float | None

    # ---- UI ----
    notification_seconds: float
    max_task_length: int
    html_snapshot_path: Path | None

    @staticmethod
    def from_env() -> "Settings":
        load_dotenv(find_dotenv(usecwd=True), override=False)

        app_name = _env(_k("APP_NAME"), "planer").strip() or "planer"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/planer"))
        storage_path = _env_path(_k("STORAGE_PATH"), data_dir / "storage.json")
        storage_key = _env(_k("STORAGE_KEY"), DEFAULT_STORAGE_KEY).strip() or DEFAULT_STORAGE_KEY

        sync_enabled = _env_bool(_k("SYNC_ENABLED"), True)
        sync_url = _env(_k("SYNC_URL"), DEFAULT_SYNC_URL).strip() or DEFAULT_SYNC_URL
        # No timeout unless asked for: the request may resolve whenever it likes.
        sync_timeout_seconds = _env_float(_k("SYNC_TIMEOUT_SECONDS"), None)

        notification_seconds = _env_float(_k("NOTIFICATION_SECONDS"), 3.0) or 3.0
        max_task_length = max(1, _env_int(_k("MAX_TASK_LENGTH"), 500))

        raw_snapshot = _env(_k("HTML_SNAPSHOT_PATH"), "").strip()
        html_snapshot_path = Path(raw_snapshot).expanduser() if raw_snapshot else None

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            storage_path=storage_path,
            storage_key=storage_key,
            sync_enabled=sync_enabled,
            sync_url=sync_url,
            sync_timeout_seconds=sync_timeout_seconds,
            notification_seconds=notification_seconds,
            max_task_length=max_task_length,
            html_snapshot_path=html_snapshot_path,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS

# src/planer/storage/kv_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
import threading
from pathlib import Path

from ..core.errors import StorageReadFailure

logger = logging.getLogger(__name__)


class JsonFileKVStore:
    """
    localStorage-like key/value store backed by a single JSON object file.

    - values are strings (callers serialize themselves)
    - a missing file reads as an empty store
    - writes go to a temp file, then os.replace() (never a half-written file)

    A corrupt backing file is reported as StorageReadFailure on read;
    set_item() then starts from an empty object and overwrites it.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    # ---- low-level helpers ----

    def _read_all(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except (OSError, ValueError) as e:
            raise StorageReadFailure(f"cannot read {self._path}: {e}") from e
        if not isinstance(data, dict):
            raise StorageReadFailure(f"{self._path} does not hold a JSON object")
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write_all(self, data: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), "utf-8")
            os.replace(tmp, self._path)
        except OSError:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise
        with contextlib.suppress(OSError):
            os.chmod(self._path, 0o600)

    # ---- public API ----

    def get_item(self, key: str) -> str | None:
        with self._lock:
            return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        with self._lock:
            try:
                data = self._read_all()
            except StorageReadFailure:
                logger.warning("Overwriting unreadable store file %s", self._path)
                data = {}
            data[key] = value
            self._write_all(data)

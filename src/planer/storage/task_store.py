# src/planer/storage/task_store.py

from __future__ import annotations

import json
import logging
from collections.abc import Iterable

from ..config import DEFAULT_STORAGE_KEY
from ..core.errors import StorageReadFailure, StorageWriteFailure
from ..core.models import Task
from ..core.ports import KeyValueStore

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Persists the whole task list as one JSON array under a fixed key.

    Best-effort by contract:
    - load() never raises; anything unreadable becomes an empty list
    - save() never raises; a failed write is logged and reported as False

    The store never keeps a reference to the live list, only serialized snapshots.
    """

    def __init__(self, kv: KeyValueStore, key: str = DEFAULT_STORAGE_KEY) -> None:
        self._kv = kv
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    @staticmethod
    def _decode(raw: str) -> list[Task]:
        try:
            data = json.loads(raw)
        except ValueError as e:
            raise StorageReadFailure(f"stored tasks are not valid JSON: {e}") from e
        if not isinstance(data, list):
            raise StorageReadFailure("stored tasks are not a JSON array")
        return [Task.from_dict(item) for item in data]

    def load(self) -> list[Task]:
        try:
            raw = self._kv.get_item(self._key)
            if raw is None:
                return []
            tasks = self._decode(raw)
        except Exception:
            logger.exception("Failed to load tasks key=%s; starting empty", self._key)
            return []

        logger.info("Loaded %d tasks key=%s", len(tasks), self._key)
        return tasks

    def _write(self, tasks: Iterable[Task]) -> None:
        try:
            payload = json.dumps([t.to_dict() for t in tasks], ensure_ascii=False)
            self._kv.set_item(self._key, payload)
        except (OSError, TypeError, ValueError) as e:
            raise StorageWriteFailure(f"cannot write key={self._key}: {e}") from e

    def save(self, tasks: Iterable[Task]) -> bool:
        try:
            self._write(tasks)
        except Exception:
            # In-memory state stays as is; it is the truth for this session.
            logger.exception("Failed to save tasks key=%s", self._key)
            return False

        logger.debug("Saved tasks key=%s", self._key)
        return True

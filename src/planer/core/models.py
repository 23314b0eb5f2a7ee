# src/planer/core/models.py

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import date
from typing import Any

from .errors import StorageReadFailure

DATE_FORMAT = "%d.%m.%Y"


def now_ms() -> int:
    """Current epoch time in milliseconds (the source of new task ids)."""
    return int(time.time() * 1000)


def format_created_date(day: date | None = None) -> str:
    return (day or date.today()).strftime(DATE_FORMAT)


@dataclass(slots=True)
class Task:
    """
    A single to-do item.

    Notes:
    - `id` is the creation timestamp in milliseconds and the only lookup key.
    - `created_date` is fixed at creation; it is serialized as "createdDate"
      to keep the stored/wire shape stable.
    """

    id: int
    text: str
    completed: bool = False
    created_date: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "text": self.text,
            "completed": self.completed,
            "createdDate": self.created_date,
        }

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        if not isinstance(raw, dict):
            raise StorageReadFailure(f"task entry is not an object: {raw!r}")

        tid = raw.get("id")
        text = raw.get("text")
        completed = raw.get("completed", False)
        created = raw.get("createdDate", "")

        # bool is an int subclass; an id of `true` is still malformed.
        if not isinstance(tid, int) or isinstance(tid, bool):
            raise StorageReadFailure(f"task id must be an integer: {tid!r}")
        if not isinstance(text, str):
            raise StorageReadFailure(f"task text must be a string (id={tid})")
        if not isinstance(completed, bool):
            raise StorageReadFailure(f"task completed flag must be a boolean (id={tid})")
        if not isinstance(created, str):
            raise StorageReadFailure(f"task createdDate must be a string (id={tid})")

        return cls(id=tid, text=text, completed=completed, created_date=created)

# src/planer/core/collection.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator

from .errors import EmptyInput, TooLong
from .models import Task, format_created_date, now_ms

logger = logging.getLogger(__name__)

MAX_TASK_LENGTH = 500


class TaskCollection:
    """
    In-memory ordered list of tasks.

    - insertion order is kept; completing a task never moves it
    - `id` is the only lookup key
    - validation happens before a Task is built, so a rejected add leaves no trace
    """

    def __init__(
        self,
        tasks: Iterable[Task] = (),
        *,
        max_length: int = MAX_TASK_LENGTH,
        id_factory: Callable[[], int] | None = None,
        date_factory: Callable[[], str] | None = None,
    ) -> None:
        self._tasks: list[Task] = list(tasks)
        self._max_length = max_length
        self._id_factory = id_factory or now_ms
        self._date_factory = date_factory or format_created_date

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def snapshot(self) -> list[Task]:
        """Shallow copy of the current order (safe to hand to views/stores)."""
        return list(self._tasks)

    def replace(self, tasks: Iterable[Task]) -> None:
        """Swap the whole list (used after a load; never merges)."""
        self._tasks = list(tasks)

    def get(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    # ---- mutations ----

    def add(self, text: str) -> Task:
        clean = (text or "").strip()
        if not clean:
            raise EmptyInput()
        if len(clean) > self._max_length:
            raise TooLong(self._max_length)

        # Two adds in the same millisecond get the same id; accepted.
        task = Task(
            id=self._id_factory(),
            text=clean,
            completed=False,
            created_date=self._date_factory(),
        )
        self._tasks.append(task)
        logger.debug("Task added id=%s len=%d", task.id, len(clean))
        return task

    def toggle(self, task_id: int) -> Task | None:
        task = self.get(task_id)
        if task is None:
            logger.debug("toggle: no task id=%s", task_id)
            return None
        task.completed = not task.completed
        return task

    def remove(self, task_id: int) -> int:
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if t.id != task_id]
        removed = before - len(self._tasks)
        logger.debug("remove id=%s removed=%d", task_id, removed)
        return removed

    def clear(self) -> int:
        removed = len(self._tasks)
        self._tasks = []
        return removed

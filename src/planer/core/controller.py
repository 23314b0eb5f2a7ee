# src/planer/core/controller.py

from __future__ import annotations

"""
Application controller.

Every user action goes through dispatch():

    command -> validate -> mutate TaskCollection -> save -> render + stats -> toast

A successful add also hands the new task to the remote mirror. That call is
fire-and-forget: its future is dropped here, and whatever it resolves to,
the local list and storage have already been committed.
"""

import logging

from .commands import AddTask, ClearAll, Command, RemoveTask, ToggleTask
from .errors import TaskValidationError
from .models import Task
from .state import AppState

logger = logging.getLogger(__name__)

MSG_ADDED = "Task added"
MSG_COMPLETED = "Task completed"
MSG_RESUMED = "Task resumed"
MSG_DELETED = "Task deleted"
MSG_NOTHING_TO_CLEAR = "No tasks to delete"
MSG_CLEARED = "All tasks deleted"
CONFIRM_CLEAR = "Are you sure? All tasks will be deleted permanently."


class AppController:
    def __init__(self, state: AppState) -> None:
        self.state = state

    # ---- lifecycle ----

    def start(self) -> None:
        """Load the stored list (replacing whatever is in memory) and draw it."""
        self.state.tasks.replace(self.state.store.load())
        self._refresh()
        logger.info("Task list ready (%d tasks).", len(self.state.tasks))

    def shutdown(self) -> None:
        """Best-effort shutdown (no exceptions should escape)."""
        try:
            self.state.notifications.close()
        except Exception:
            logger.debug("Notification shutdown failed.", exc_info=True)

        close = getattr(self.state.mirror, "close", None)
        if close is not None:
            try:
                close()
            except Exception:
                logger.debug("Remote mirror shutdown failed.", exc_info=True)

    # ---- dispatch ----

    def dispatch(self, command: Command) -> Task | None:
        """
        Run one user action to completion.

        Returns the new Task for an accepted AddTask, the toggled Task for
        ToggleTask (None if the id is unknown), otherwise None.
        """
        if isinstance(command, AddTask):
            return self.add_task(command.text)
        if isinstance(command, ToggleTask):
            return self.toggle_task(command.task_id)
        if isinstance(command, RemoveTask):
            self.remove_task(command.task_id)
            return None
        if isinstance(command, ClearAll):
            self.clear_all()
            return None
        raise TypeError(f"Unknown command: {command!r}")

    # ---- operations ----

    def add_task(self, text: str) -> Task | None:
        try:
            task = self.state.tasks.add(text)
        except TaskValidationError as e:
            logger.debug("Task rejected: %s", e.message)
            self._notify(e.message)
            return None

        self._commit()
        self._notify(MSG_ADDED)

        # Local state is committed; the outcome of this call is never awaited.
        self.state.mirror.send(task)
        return task

    def toggle_task(self, task_id: int) -> Task | None:
        task = self.state.tasks.toggle(task_id)
        if task is None:
            return None
        self._commit()
        self._notify(MSG_COMPLETED if task.completed else MSG_RESUMED)
        return task

    def remove_task(self, task_id: int) -> int:
        removed = self.state.tasks.remove(task_id)
        self._commit()
        self._notify(MSG_DELETED)
        return removed

    def clear_all(self) -> bool:
        if len(self.state.tasks) == 0:
            self._notify(MSG_NOTHING_TO_CLEAR)
            return False

        if not self.state.confirm.confirm(CONFIRM_CLEAR):
            logger.debug("Clear-all declined.")
            return False

        self.state.tasks.clear()
        self._commit()
        self._notify(MSG_CLEARED)
        return True

    # ---- helpers ----

    def _commit(self) -> None:
        self.state.store.save(self.state.tasks.snapshot())
        self._refresh()

    def _refresh(self) -> None:
        tasks = self.state.tasks.snapshot()
        for renderer in self.state.renderers:
            renderer.render(tasks)
        self.state.statistics.update(tasks)

    def _notify(self, message: str) -> None:
        self.state.notifications.show(message)

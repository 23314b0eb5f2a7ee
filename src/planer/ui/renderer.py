# src/planer/ui/renderer.py

from __future__ import annotations

import html
import logging
from collections.abc import Sequence
from typing import Protocol

from ..core.models import Task
from ..core.ports import TaskListContainer

logger = logging.getLogger(__name__)

EMPTY_STATE_HTML = (
    '<div class="empty-state">'
    '<div class="empty-state-icon">—</div>'
    '<div class="empty-state-text">No tasks. Add the first one.</div>'
    "</div>"
)

EMPTY_STATE_TEXT = "  — No tasks. Add the first one."


class TaskFormatter(Protocol):
    def empty(self) -> str: ...
    def row(self, task: Task) -> str: ...
    def join(self, rows: list[str]) -> str: ...


class HtmlTaskFormatter:
    """
    Markup for the task container.

    Task text is escaped, so `<script>` shows up as literal text and is never
    parsed as markup. The date is escaped too; it comes from the same store.
    """

    def empty(self) -> str:
        return EMPTY_STATE_HTML

    def row(self, task: Task) -> str:
        item_class = "task-item completed" if task.completed else "task-item"
        checked = " checked" if task.completed else ""
        tid = int(task.id)
        return (
            f'<div class="{item_class}">'
            f'<input type="checkbox" class="task-checkbox"{checked} data-task-id="{tid}">'
            f'<span class="task-text">{html.escape(task.text)}</span>'
            f'<span class="task-date">{html.escape(task.created_date)}</span>'
            '<div class="task-actions">'
            f'<button class="btn btn-delete" data-task-id="{tid}">Delete</button>'
            "</div>"
            "</div>"
        )

    def join(self, rows: list[str]) -> str:
        return "\n".join(rows)


class TextTaskFormatter:
    """One line per task for the console: `[x] <id>  <text>  (<date>)`."""

    def empty(self) -> str:
        return EMPTY_STATE_TEXT

    def row(self, task: Task) -> str:
        mark = "x" if task.completed else " "
        # Keep each task on one line; the text is shown as-is otherwise.
        text = " ".join(task.text.split())
        return f"  [{mark}] {task.id}  {text}  ({task.created_date})"

    def join(self, rows: list[str]) -> str:
        return "\n".join(rows)


class Renderer:
    """Rebuilds the whole task container from the current list."""

    def __init__(self, container: TaskListContainer, formatter: TaskFormatter | None = None) -> None:
        self._container = container
        self._formatter: TaskFormatter = formatter or HtmlTaskFormatter()

    def markup(self, tasks: Sequence[Task]) -> str:
        if not tasks:
            return self._formatter.empty()
        return self._formatter.join([self._formatter.row(t) for t in tasks])

    def render(self, tasks: Sequence[Task]) -> None:
        self._container.replace_content(self.markup(tasks))
        logger.debug("Rendered %d tasks", len(tasks))

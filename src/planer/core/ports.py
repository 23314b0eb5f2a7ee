# src/planer/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete hosts.
This keeps the console / HTML snapshot / test fakes swappable.
"""

from concurrent.futures import Future
from typing import Any, Protocol

from .models import Task


class KeyValueStore(Protocol):
    """localStorage-like string store."""

    def get_item(self, key: str) -> str | None: ...
    def set_item(self, key: str, value: str) -> None: ...


class TaskListContainer(Protocol):
    """The element that receives rendered task rows."""

    def replace_content(self, content: str) -> None: ...


class StatsDisplay(Protocol):
    """Three display slots for the counters."""

    def set_counts(self, *, total: str, completed: str, pending: str) -> None: ...


class ToastHost(Protocol):
    """
    Where transient notifications live.

    remove_toast() may be called from a timer thread.
    """

    def add_toast(self, message: str) -> Any: ...
    def remove_toast(self, handle: Any) -> None: ...


class ConfirmPrompt(Protocol):
    """Blocking yes/no question."""

    def confirm(self, question: str) -> bool: ...


class TaskMirror(Protocol):
    """Fire-and-forget outbound copy of newly created tasks."""

    def send(self, task: Task) -> Future[Any] | None: ...


class PageHost(TaskListContainer, StatsDisplay, ToastHost, ConfirmPrompt, Protocol):
    """One object playing every page role (the console host, test fakes)."""

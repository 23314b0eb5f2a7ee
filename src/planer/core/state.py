# src/planer/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..storage.task_store import TaskStore
from ..ui.notifications import NotificationCenter
from ..ui.renderer import Renderer
from ..ui.statistics import StatisticsView
from .collection import TaskCollection
from .ports import ConfirmPrompt, TaskMirror


@dataclass
class AppState:
    """
    Everything one running task list needs.

    No module-level singletons: two AppState objects are two independent apps.
    """

    settings: Any
    tasks: TaskCollection
    store: TaskStore
    mirror: TaskMirror
    statistics: StatisticsView
    notifications: NotificationCenter
    confirm: ConfirmPrompt
    renderers: list[Renderer] = field(default_factory=list)

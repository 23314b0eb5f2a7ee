# src/planer/ui/statistics.py

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ..core.models import Task
from ..core.ports import StatsDisplay


@dataclass(frozen=True, slots=True)
class TaskStats:
    total: int
    completed: int
    pending: int


def compute_stats(tasks: Iterable[Task]) -> TaskStats:
    total = 0
    completed = 0
    for task in tasks:
        total += 1
        if task.completed:
            completed += 1
    return TaskStats(total=total, completed=completed, pending=total - completed)


class StatisticsView:
    """Derived counters; holds no state of its own."""

    def __init__(self, display: StatsDisplay) -> None:
        self._display = display

    def update(self, tasks: Iterable[Task]) -> TaskStats:
        stats = compute_stats(tasks)
        self._display.set_counts(
            total=str(stats.total),
            completed=str(stats.completed),
            pending=str(stats.pending),
        )
        return stats

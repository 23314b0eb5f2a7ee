# src/planer/core/commands.py

"""
User actions as plain values.

Hosts (console, tests) translate their own events into these and hand them to
AppController.dispatch(); the controller never sees where a command came from.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AddTask:
    text: str


@dataclass(frozen=True, slots=True)
class ToggleTask:
    task_id: int


@dataclass(frozen=True, slots=True)
class RemoveTask:
    task_id: int


@dataclass(frozen=True, slots=True)
class ClearAll:
    pass


Command = AddTask | ToggleTask | RemoveTask | ClearAll

# src/planer/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.commands import ClearAll, RemoveTask, ToggleTask
from ..core.controller import AppController
from ..ui.renderer import Renderer, TextTaskFormatter
from ..ui.statistics import compute_stats

CommandHandler = Callable[[AppController, list[str]], str | None]

logger = logging.getLogger(__name__)


class _Buffer:
    def __init__(self) -> None:
        self.content = ""

    def replace_content(self, content: str) -> None:
        self.content = content


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /done, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, controller: AppController, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string, or None if the line is not a command
        (or the command has nothing to say).
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            logger.debug("Unknown console command /%s", name)
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(controller, args)

    def build_help(self) -> str:
        lines = ["Type any text to add it as a task.", "Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_id(args: list[str]) -> int | None:
    if len(args) != 1:
        return None
    if not args[0].isdecimal():
        return None
    return int(args[0])


def cmd_help(controller: AppController, args: list[str]) -> str:
    return registry.build_help()


def cmd_done(controller: AppController, args: list[str]) -> str | None:
    """/done <id> -> toggle completion (unknown ids are ignored)."""
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /done <id>"
    controller.dispatch(ToggleTask(task_id))
    return None


def cmd_rm(controller: AppController, args: list[str]) -> str | None:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /rm <id>"
    controller.dispatch(RemoveTask(task_id))
    return None


def cmd_clear(controller: AppController, args: list[str]) -> str | None:
    controller.dispatch(ClearAll())
    return None


def cmd_list(controller: AppController, args: list[str]) -> str:
    buf = _Buffer()
    Renderer(buf, TextTaskFormatter()).render(controller.state.tasks.snapshot())
    return buf.content


def cmd_stats(controller: AppController, args: list[str]) -> str:
    stats = compute_stats(controller.state.tasks)
    return f"Total: {stats.total} | Completed: {stats.completed} | Pending: {stats.pending}"


def cmd_status(controller: AppController, args: list[str]) -> str:
    settings = controller.state.settings
    sync = "ON" if getattr(controller.state.mirror, "enabled", False) else "OFF"
    return (
        "Status:\n"
        f"  Storage: {getattr(settings, 'storage_path', '?')} (key={controller.state.store.key})\n"
        f"  Remote sync: {sync} -> {getattr(settings, 'sync_url', '?')}\n"
        f"  HTML snapshot: {getattr(settings, 'html_snapshot_path', None) or 'off'}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("done", cmd_done, help_text="Toggle a task: /done <id>.", aliases=["toggle", "x"])
registry.register("rm", cmd_rm, help_text="Delete a task: /rm <id>.", aliases=["delete", "del"])
registry.register("clear", cmd_clear, help_text="Delete all tasks (asks for confirmation).")
registry.register("list", cmd_list, help_text="Show the task list.", aliases=["ls"])
registry.register("stats", cmd_stats, help_text="Show total / completed / pending counts.")
registry.register("status", cmd_status, help_text="Show storage and sync settings.")

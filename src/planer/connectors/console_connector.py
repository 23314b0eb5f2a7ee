# src/planer/connectors/console_connector.py

from __future__ import annotations

import itertools
import logging
import threading
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.commands import AddTask
from ..core.controller import AppController

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
PrintFn = Callable[[str], None]


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%H:%M:%S")


class ConsoleHost:
    """
    The console as a page: task container, stats slots, toasts and the confirm dialog.

    Toasts are printed once; removal only drops them from `active_toasts`
    (a scrolling terminal cannot take a line back).
    """

    def __init__(self, *, input_fn: InputFn = input, print_fn: PrintFn = print) -> None:
        self._input = input_fn
        self._print = print_fn
        self._ids = itertools.count(1)
        self._lock = threading.Lock()
        self.active_toasts: dict[int, str] = {}

    def read(self, prompt: str) -> str:
        return self._input(prompt)

    def write(self, text: str) -> None:
        self._print(text)

    # TaskListContainer
    def replace_content(self, content: str) -> None:
        self._print(content)

    # StatsDisplay
    def set_counts(self, *, total: str, completed: str, pending: str) -> None:
        self._print(f"  Total: {total} | Completed: {completed} | Pending: {pending}")

    # ToastHost
    def add_toast(self, message: str) -> int:
        with self._lock:
            handle = next(self._ids)
            self.active_toasts[handle] = message
        self._print(f"[{_ts_local()}] * {message}")
        return handle

    def remove_toast(self, handle: int) -> None:
        with self._lock:
            self.active_toasts.pop(handle, None)

    # ConfirmPrompt
    def confirm(self, question: str) -> bool:
        try:
            answer = self._input(f"{question} [y/N]: ")
        except (EOFError, KeyboardInterrupt):
            return False
        return answer.strip().lower() in {"y", "yes"}


def run_console_loop(controller: AppController, host: ConsoleHost | None = None) -> None:
    """
    Read lines until /exit (or EOF / Ctrl+C).

    - plain text is a form submit: it becomes a new task
    - "/..." lines go to the command registry
    """
    host = host or ConsoleHost()
    read = host.read
    out = host.write

    logger.info("Console connector started.")
    out("Type a task and press Enter. Use /help for commands, /exit to quit.\n")

    while True:
        try:
            line = read(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            out("")
            break

        if not line:
            continue

        if line.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            if line.startswith("/"):
                reply = command_registry.handle(controller, line)
                if reply:
                    out(reply)
            else:
                controller.dispatch(AddTask(line))
        except Exception:
            logger.exception("Command handler crashed.")
            out("Internal error while handling a command.")

    logger.info("Console connector finished.")

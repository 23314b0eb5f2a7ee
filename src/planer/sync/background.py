# src/planer/sync/background.py

from __future__ import annotations

import asyncio
import contextlib
import logging
import threading
from collections.abc import Coroutine
from concurrent.futures import Future
from dataclasses import dataclass
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

SYNC_THREAD_NAME = "planer-sync"


@dataclass
class BackgroundLoop:
    """
    An asyncio loop running in its own daemon thread.

    Why a thread:
    - the console host is blocking (input()).
    - outbound HTTP is async and wants its own event loop.
    """

    thread: threading.Thread
    loop: asyncio.AbstractEventLoop

    def submit(self, coro: Coroutine[Any, Any, T]) -> Future[T]:
        """Schedule `coro` on the loop; returns immediately."""
        return asyncio.run_coroutine_threadsafe(coro, self.loop)

    def is_running(self) -> bool:
        return self.thread.is_alive() and self.loop.is_running()

    def stop(self) -> None:
        try:
            self.loop.call_soon_threadsafe(self.loop.stop)
        except RuntimeError:
            logger.debug("Background loop already closed.", exc_info=True)

    def join(self, timeout: float | None = None) -> None:
        self.thread.join(timeout=timeout)


def start_background_loop(name: str = SYNC_THREAD_NAME) -> BackgroundLoop:
    ready = threading.Event()
    holder: dict[str, asyncio.AbstractEventLoop] = {}

    def runner() -> None:
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        holder["loop"] = loop
        loop.call_soon(ready.set)

        try:
            loop.run_forever()
        finally:
            # Let in-flight requests see a cancellation instead of vanishing.
            pending = asyncio.all_tasks(loop)
            for task in pending:
                task.cancel()
            with contextlib.suppress(Exception):
                loop.run_until_complete(asyncio.gather(*pending, return_exceptions=True))
            with contextlib.suppress(Exception):
                loop.close()

    t = threading.Thread(target=runner, name=name, daemon=True)
    t.start()

    if not ready.wait(timeout=5.0) or "loop" not in holder:
        raise RuntimeError(f"background loop {name!r} did not start")

    logger.debug("Background loop %s started.", name)
    return BackgroundLoop(thread=t, loop=holder["loop"])

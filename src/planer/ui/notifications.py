# src/planer/ui/notifications.py

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any, Protocol

from ..core.ports import ToastHost

logger = logging.getLogger(__name__)

DEFAULT_TOAST_SECONDS = 3.0


class Cancellable(Protocol):
    def cancel(self) -> None: ...


TimerFactory = Callable[[float, Callable[[], None]], Cancellable]


def _thread_timer(delay: float, callback: Callable[[], None]) -> Cancellable:
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    timer.start()
    return timer


class NotificationCenter:
    """
    Transient toasts.

    Each show() adds its own toast and removes it again after `duration` seconds.
    No de-duplication, no queue: several toasts may be visible at once.
    """

    def __init__(
        self,
        host: ToastHost,
        *,
        duration: float = DEFAULT_TOAST_SECONDS,
        timer_factory: TimerFactory = _thread_timer,
    ) -> None:
        self._host = host
        self._duration = duration
        self._timer_factory = timer_factory
        self._timers: dict[object, Cancellable] = {}
        self._fired: set[object] = set()
        self._lock = threading.Lock()

    def show(self, message: str) -> None:
        handle = self._host.add_toast(message)
        token = object()

        def expire() -> None:
            with self._lock:
                if self._timers.pop(token, None) is None:
                    # Fired before show() registered the timer.
                    self._fired.add(token)
            self._remove(handle)

        timer = self._timer_factory(self._duration, expire)
        with self._lock:
            if token in self._fired:
                self._fired.discard(token)
            else:
                self._timers[token] = timer

    def _remove(self, handle: Any) -> None:
        try:
            self._host.remove_toast(handle)
        except Exception:
            logger.debug("Toast removal failed.", exc_info=True)

    def pending(self) -> int:
        with self._lock:
            return len(self._timers)

    def close(self) -> None:
        """Cancel timers that have not fired yet (shutdown)."""
        with self._lock:
            timers = list(self._timers.values())
            self._timers.clear()
            self._fired.clear()
        for timer in timers:
            timer.cancel()

# src/planer/sync/remote_mirror.py

from __future__ import annotations

"""
Remote mirror.

Every newly created task is POSTed to an external todo endpoint, fire-and-forget:
- the local list and storage are already committed before send() is called,
- send() returns a detached future at once; nobody waits on it,
- the outcome is only logged (no retry, no user-visible message, no state change).
"""

import asyncio
import contextlib
import logging
import threading
from concurrent.futures import CancelledError, Future
from typing import Any

import httpx

from ..config import DEFAULT_SYNC_URL
from ..core.errors import RemoteSyncFailure
from ..core.models import Task
from .background import SYNC_THREAD_NAME, BackgroundLoop, start_background_loop

logger = logging.getLogger(__name__)


class RemoteMirror:
    def __init__(
        self,
        url: str = DEFAULT_SYNC_URL,
        *,
        enabled: bool = True,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = url
        self._enabled = enabled
        self._timeout = timeout
        self._transport = transport

        self._runner: BackgroundLoop | None = None
        self._runner_lock = threading.Lock()
        self._client: httpx.AsyncClient | None = None

    @property
    def enabled(self) -> bool:
        return self._enabled

    # ---- async part (runs on the background loop) ----

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout),
                transport=self._transport,
            )
        return self._client

    async def post_task(self, payload: dict[str, Any]) -> None:
        """POST one task. Raises RemoteSyncFailure on non-2xx or network errors."""
        client = self._get_client()
        try:
            response = await client.post(self._url, json=payload)
        except httpx.HTTPError as e:
            raise RemoteSyncFailure(f"request to {self._url} failed: {e}") from e

        if not response.is_success:
            raise RemoteSyncFailure(f"server answered {response.status_code} for task id={payload.get('id')}")

    async def _mirror(self, payload: dict[str, Any]) -> bool:
        try:
            await self.post_task(payload)
        except RemoteSyncFailure as e:
            logger.warning("Task sync failed: %s", e)
            return False
        logger.debug("Task id=%s mirrored to %s", payload.get("id"), self._url)
        return True

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    # ---- sync part (called from the event thread) ----

    def _ensure_runner(self) -> BackgroundLoop:
        with self._runner_lock:
            if self._runner is None:
                self._runner = start_background_loop(SYNC_THREAD_NAME)
            return self._runner

    def send(self, task: Task) -> Future[bool] | None:
        """
        Mirror `task` in the background and return the detached future.

        The payload is copied now, so later toggles of the same task are not sent.
        """
        if not self._enabled:
            return None

        payload = task.to_dict()
        try:
            future = self._ensure_runner().submit(self._mirror(payload))
        except RuntimeError:
            logger.exception("Cannot schedule sync for task id=%s", task.id)
            return None

        future.add_done_callback(_log_unexpected)
        return future

    def close(self, timeout: float = 5.0) -> None:
        runner = self._runner
        if runner is None:
            return

        if self._client is not None and runner.is_running():
            closing = runner.submit(self.aclose())
            with contextlib.suppress(Exception):
                closing.result(timeout=timeout)

        runner.stop()
        runner.join(timeout=timeout)
        self._runner = None
        logger.debug("Remote mirror closed.")


def _log_unexpected(future: Future[bool]) -> None:
    """Done-callback: the result itself is deliberately ignored."""
    try:
        future.result()
    except (CancelledError, asyncio.CancelledError):
        logger.debug("Task sync cancelled (shutdown).")
    except Exception:
        logger.exception("Task sync crashed.")

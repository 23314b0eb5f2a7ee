# src/planer/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires concrete implementations (JSON file store, httpx mirror, console host)
  into AppState and hands it to an AppController.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import get_settings
from ..connectors.console_connector import ConsoleHost
from ..connectors.html_snapshot import HtmlSnapshotContainer
from ..core.collection import TaskCollection
from ..core.controller import AppController
from ..core.ports import PageHost, TaskMirror
from ..core.state import AppState
from ..storage.kv_store import JsonFileKVStore
from ..storage.task_store import TaskStore
from ..sync.remote_mirror import RemoteMirror
from ..ui.notifications import NotificationCenter
from ..ui.renderer import HtmlTaskFormatter, Renderer, TaskFormatter, TextTaskFormatter
from ..ui.statistics import StatisticsView

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    Path(settings.data_dir).mkdir(parents=True, exist_ok=True)
    Path(settings.storage_path).parent.mkdir(parents=True, exist_ok=True)


def create_controller(
    *,
    settings=None,
    host: PageHost | None = None,
    mirror: TaskMirror | None = None,
    list_formatter: TaskFormatter | None = None,
) -> AppController:
    """
    Build AppState from the provided settings and return its controller.

    Keeping settings/host/mirror injectable makes the app easier to test and
    avoids hidden global config reads. If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    if host is None:
        host = ConsoleHost()

    if mirror is None:
        mirror = RemoteMirror(
            settings.sync_url,
            enabled=settings.sync_enabled,
            timeout=settings.sync_timeout_seconds,
        )

    renderers = [Renderer(host, list_formatter or TextTaskFormatter())]
    snapshot_path = getattr(settings, "html_snapshot_path", None)
    if snapshot_path:
        container = HtmlSnapshotContainer(snapshot_path, title=settings.app_name)
        renderers.append(Renderer(container, HtmlTaskFormatter()))
        logger.info("HTML snapshot enabled: %s", snapshot_path)

    state = AppState(
        settings=settings,
        tasks=TaskCollection(max_length=settings.max_task_length),
        store=TaskStore(JsonFileKVStore(settings.storage_path), key=settings.storage_key),
        mirror=mirror,
        statistics=StatisticsView(host),
        notifications=NotificationCenter(host, duration=settings.notification_seconds),
        confirm=host,
        renderers=renderers,
    )
    return AppController(state)

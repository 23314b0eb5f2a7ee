# tests/conftest.py

from __future__ import annotations

import itertools
from pathlib import Path
from types import SimpleNamespace

import pytest

from planer.core.collection import TaskCollection
from planer.core.controller import AppController
from planer.core.state import AppState
from planer.storage.task_store import TaskStore
from planer.ui.notifications import NotificationCenter
from planer.ui.renderer import Renderer
from planer.ui.statistics import StatisticsView

from .fakes import FakeHost, FakeKVStore, FakeMirror, ManualTimers

TODAY = "19.10.2026"


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and AppState.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="planer-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        storage_path=tmp_path / "data" / "storage.json",
        storage_key="planerTasks",
        sync_enabled=False,
        sync_url="https://sync.test/todos",
        sync_timeout_seconds=None,
        notification_seconds=3.0,
        max_task_length=500,
        html_snapshot_path=None,
    )


@pytest.fixture()
def kv() -> FakeKVStore:
    return FakeKVStore()


@pytest.fixture()
def host() -> FakeHost:
    return FakeHost()


@pytest.fixture()
def timers() -> ManualTimers:
    return ManualTimers()


@pytest.fixture()
def mirror() -> FakeMirror:
    return FakeMirror()


@pytest.fixture()
def make_collection():
    """TaskCollection with predictable ids (1000, 1001, ...) and a fixed date."""

    def factory(**kwargs) -> TaskCollection:
        ids = itertools.count(1000)
        kwargs.setdefault("id_factory", lambda: next(ids))
        kwargs.setdefault("date_factory", lambda: TODAY)
        return TaskCollection(**kwargs)

    return factory


@pytest.fixture()
def state(settings, kv, host, timers, mirror, make_collection) -> AppState:
    """AppState wired with deterministic fakes."""
    return AppState(
        settings=settings,
        tasks=make_collection(),
        store=TaskStore(kv, key=settings.storage_key),
        mirror=mirror,
        statistics=StatisticsView(host),
        notifications=NotificationCenter(host, duration=3.0, timer_factory=timers),
        confirm=host,
        renderers=[Renderer(host)],
    )


@pytest.fixture()
def controller(state: AppState) -> AppController:
    app = AppController(state)
    app.start()
    return app

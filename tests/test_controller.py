# tests/test_controller.py

from __future__ import annotations

import json

import pytest

from planer.core.commands import AddTask, ClearAll, RemoveTask, ToggleTask
from planer.core.controller import (
    CONFIRM_CLEAR,
    MSG_ADDED,
    MSG_CLEARED,
    MSG_COMPLETED,
    MSG_DELETED,
    MSG_NOTHING_TO_CLEAR,
    MSG_RESUMED,
    AppController,
)
from planer.core.models import Task
from planer.ui.renderer import EMPTY_STATE_HTML


def _stored(kv) -> list[dict]:
    return json.loads(kv.items["planerTasks"])


def test_start_loads_and_renders(state, kv, host) -> None:
    kv.items["planerTasks"] = json.dumps(
        [{"id": 1, "text": "from disk", "completed": True, "createdDate": "01.01.2026"}]
    )
    state.tasks.add("stale in-memory task")

    AppController(state).start()

    assert [t.text for t in state.tasks] == ["from disk"]
    assert "from disk" in host.content
    assert host.counts == {"total": "1", "completed": "1", "pending": "0"}
    assert host.toasts == []


def test_start_with_corrupt_storage_is_empty(state, kv, host) -> None:
    kv.items["planerTasks"] = "{{{"
    AppController(state).start()
    assert len(state.tasks) == 0
    assert host.content == EMPTY_STATE_HTML


def test_end_to_end_add_toggle_remove(controller, state, kv, host, mirror) -> None:
    task = controller.dispatch(AddTask("Buy milk"))
    assert task is not None
    assert [(t.text, t.completed) for t in state.tasks] == [("Buy milk", False)]
    assert host.counts == {"total": "1", "completed": "0", "pending": "1"}
    assert _stored(kv) == [task.to_dict()]
    assert host.toasts[-1] == MSG_ADDED
    assert mirror.sent == [task.to_dict()]

    controller.dispatch(ToggleTask(task.id))
    assert host.counts == {"total": "1", "completed": "1", "pending": "0"}
    assert _stored(kv)[0]["completed"] is True
    assert host.toasts[-1] == MSG_COMPLETED

    controller.dispatch(ToggleTask(task.id))
    assert host.toasts[-1] == MSG_RESUMED
    controller.dispatch(ToggleTask(task.id))

    controller.dispatch(RemoveTask(task.id))
    assert len(state.tasks) == 0
    assert host.counts == {"total": "0", "completed": "0", "pending": "0"}
    assert host.content == EMPTY_STATE_HTML
    assert _stored(kv) == []
    assert host.toasts[-1] == MSG_DELETED

    # Only the add reaches the mirror.
    assert len(mirror.sent) == 1


@pytest.mark.parametrize("text", ["", "   "])
def test_blank_input_is_rejected(controller, state, kv, host, mirror, text: str) -> None:
    writes = kv.writes
    assert controller.dispatch(AddTask(text)) is None
    assert len(state.tasks) == 0
    assert host.toasts == ["Please enter the task text"]
    assert kv.writes == writes
    assert mirror.sent == []


def test_too_long_input_is_rejected(controller, state, kv, host, mirror) -> None:
    assert controller.dispatch(AddTask("x" * 501)) is None
    assert len(state.tasks) == 0
    assert host.toasts == ["Maximum 500 characters"]
    assert "planerTasks" not in kv.items
    assert mirror.sent == []


def test_toggle_unknown_id_does_nothing(controller, state, kv, host) -> None:
    controller.dispatch(AddTask("a"))
    renders, writes, toasts = host.renders, kv.writes, list(host.toasts)

    assert controller.dispatch(ToggleTask(999)) is None
    assert host.renders == renders
    assert kv.writes == writes
    assert host.toasts == toasts


def test_remove_unknown_id_keeps_list(controller, state) -> None:
    a = controller.dispatch(AddTask("a"))
    b = controller.dispatch(AddTask("b"))
    controller.dispatch(RemoveTask(12345))
    assert [t.id for t in state.tasks] == [a.id, b.id]


def test_clear_on_empty_list_skips_prompt_and_write(controller, kv, host) -> None:
    controller.dispatch(ClearAll())
    assert host.toasts == [MSG_NOTHING_TO_CLEAR]
    assert host.questions == []
    assert kv.writes == 0


def test_clear_requires_confirmation(controller, state, kv, host) -> None:
    controller.dispatch(AddTask("a"))
    controller.dispatch(AddTask("b"))
    writes = kv.writes

    host.answers = [False]
    controller.dispatch(ClearAll())
    assert host.questions == [CONFIRM_CLEAR]
    assert len(state.tasks) == 2
    assert kv.writes == writes

    host.answers = [True]
    controller.dispatch(ClearAll())
    assert len(state.tasks) == 0
    assert _stored(kv) == []
    assert host.toasts[-1] == MSG_CLEARED
    assert host.counts["total"] == "0"


def test_save_failure_keeps_memory_state(controller, state, kv, host) -> None:
    kv.fail_writes = OSError("quota exceeded")
    task = controller.dispatch(AddTask("still here"))
    assert task is not None
    assert [t.text for t in state.tasks] == ["still here"]
    assert "still here" in host.content
    assert host.toasts[-1] == MSG_ADDED


def test_mirror_is_called_after_commit(state, kv) -> None:
    committed: list[int] = []

    class CheckingMirror:
        def send(self, task: Task):
            # Local state is already saved when the mirror is called.
            committed.append(len(json.loads(kv.items["planerTasks"])))
            return None

    state.mirror = CheckingMirror()
    app = AppController(state)
    app.start()
    app.dispatch(AddTask("a"))
    app.dispatch(AddTask("b"))
    assert committed == [1, 2]


def test_statistics_invariant_holds_through_a_session(controller, state, host) -> None:
    ids = [controller.dispatch(AddTask(f"t{i}")).id for i in range(5)]
    controller.dispatch(ToggleTask(ids[1]))
    controller.dispatch(ToggleTask(ids[3]))
    controller.dispatch(RemoveTask(ids[0]))

    total = int(host.counts["total"])
    assert total == len(state.tasks) == 4
    assert total == int(host.counts["completed"]) + int(host.counts["pending"])
    assert host.counts["completed"] == "2"


def test_unknown_command_type(controller) -> None:
    with pytest.raises(TypeError):
        controller.dispatch("add milk")  # type: ignore[arg-type]


def test_shutdown_closes_mirror_and_timers(controller, mirror, timers) -> None:
    controller.dispatch(AddTask("a"))
    controller.shutdown()
    assert mirror.closed is True
    assert all(t.cancelled for t in timers.created)


def test_two_apps_are_independent(settings, make_collection) -> None:
    from planer.core.state import AppState
    from planer.storage.task_store import TaskStore
    from planer.ui.notifications import NotificationCenter
    from planer.ui.renderer import Renderer
    from planer.ui.statistics import StatisticsView

    from .fakes import FakeHost, FakeKVStore, FakeMirror, ManualTimers

    def build() -> AppController:
        page = FakeHost()
        return AppController(
            AppState(
                settings=settings,
                tasks=make_collection(),
                store=TaskStore(FakeKVStore()),
                mirror=FakeMirror(),
                statistics=StatisticsView(page),
                notifications=NotificationCenter(page, timer_factory=ManualTimers()),
                confirm=page,
                renderers=[Renderer(page)],
            )
        )

    one, two = build(), build()
    one.dispatch(AddTask("only in one"))
    assert len(one.state.tasks) == 1
    assert len(two.state.tasks) == 0

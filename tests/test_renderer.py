# tests/test_renderer.py

from __future__ import annotations

from planer.core.models import Task
from planer.ui.renderer import (
    EMPTY_STATE_HTML,
    EMPTY_STATE_TEXT,
    Renderer,
    TextTaskFormatter,
)

from .fakes import FakeHost


def test_empty_list_renders_placeholder() -> None:
    host = FakeHost(content="old rows")
    Renderer(host).render([])
    assert host.content == EMPTY_STATE_HTML
    assert "empty-state" in host.content


def test_rows_follow_list_order_and_carry_ids() -> None:
    host = FakeHost()
    tasks = [
        Task(id=2, text="second", completed=True, created_date="02.01.2026"),
        Task(id=1, text="first", completed=False, created_date="01.01.2026"),
    ]
    Renderer(host).render(tasks)

    html = host.content
    assert html.index("second") < html.index("first")
    assert html.count('class="task-item') == 2
    assert '<div class="task-item completed">' in html
    assert 'class="task-checkbox" checked data-task-id="2"' in html
    assert 'class="task-checkbox" data-task-id="1"' in html
    assert '<button class="btn btn-delete" data-task-id="1">' in html
    assert '<span class="task-date">01.01.2026</span>' in html


def test_task_text_is_escaped() -> None:
    host = FakeHost()
    Renderer(host).render([Task(id=1, text='<script>alert("x")</script> & co', created_date="01.01.2026")])

    assert "<script>" not in host.content
    assert "&lt;script&gt;alert(&quot;x&quot;)&lt;/script&gt; &amp; co" in host.content


def test_render_replaces_previous_output() -> None:
    host = FakeHost()
    renderer = Renderer(host)
    renderer.render([Task(id=1, text="a")])
    renderer.render([])
    assert host.content == EMPTY_STATE_HTML
    assert host.renders == 2


def test_text_formatter_for_console() -> None:
    host = FakeHost()
    renderer = Renderer(host, TextTaskFormatter())

    renderer.render([])
    assert host.content == EMPTY_STATE_TEXT

    renderer.render(
        [
            Task(id=10, text="multi\nline  text", completed=True, created_date="19.10.2026"),
            Task(id=11, text="<b>raw</b>", created_date="19.10.2026"),
        ]
    )
    assert host.content.splitlines() == [
        "  [x] 10  multi line text  (19.10.2026)",
        "  [ ] 11  <b>raw</b>  (19.10.2026)",
    ]

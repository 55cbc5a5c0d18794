# tests/test_task_models.py

from __future__ import annotations

from datetime import date

import pytest

from taskbot.errors import InvalidTaskError
from taskbot.tasks.task_models import Task, TaskKind


def test_todo_defaults_and_render() -> None:
    t = Task(TaskKind.TODO, "buy milk")
    assert t.done is False
    assert t.date is None
    assert t.render() == "[ ][T] buy milk"


def test_deadline_and_event_render_dates() -> None:
    d = Task(TaskKind.DEADLINE, "submit report", date=date(2024, 3, 1))
    e = Task(TaskKind.EVENT, "team lunch", done=True, date=date(2024, 12, 25))
    assert d.render() == "[ ][D] submit report (by: Mar 1 2024)"
    assert e.render() == "[X][E] team lunch (at: Dec 25 2024)"


def test_kind_accepts_stored_string() -> None:
    t = Task("deadline", "x", date=date(2024, 1, 1))  # type: ignore[arg-type]
    assert t.kind is TaskKind.DEADLINE


@pytest.mark.parametrize(
    "kind, description, when",
    [
        (TaskKind.TODO, "", None),
        (TaskKind.TODO, "   ", None),
        (TaskKind.TODO, "read", date(2024, 1, 1)),
        (TaskKind.DEADLINE, "report", None),
        (TaskKind.EVENT, "party", None),
        ("chore", "sweep", None),
    ],
)
def test_invalid_construction(kind, description, when) -> None:
    with pytest.raises(InvalidTaskError):
        Task(kind, description, date=when)


def test_mark_is_idempotent() -> None:
    t = Task(TaskKind.TODO, "read")
    t.mark_done()
    t.mark_done()
    assert t.done is True
    t.mark_undone()
    t.mark_undone()
    assert t.done is False


def test_equality_is_structural() -> None:
    a = Task(TaskKind.EVENT, "talk", date=date(2024, 5, 5))
    b = Task(TaskKind.EVENT, "talk", date=date(2024, 5, 5))
    assert a == b
    b.mark_done()
    assert a != b

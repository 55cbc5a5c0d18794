# tests/test_console_connector.py

from __future__ import annotations

from collections.abc import Iterable

import pytest

from taskbot.connectors.console_connector import DIVIDER, run_console_loop
from taskbot.tasks.task_models import Task, TaskKind


def _feed(monkeypatch: pytest.MonkeyPatch, lines: Iterable[str]) -> None:
    it = iter(lines)

    def fake_input(prompt: str = "") -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


def test_session_until_bye(state, storage, monkeypatch, capsys) -> None:
    _feed(monkeypatch, ["todo buy milk", "deadline report /by 2024-03-01", "mark 1", "list", "bye", "todo never"])
    assert run_console_loop(state) is True

    out = capsys.readouterr().out
    assert "Hello! I'm taskbot" in out
    assert "1.[X][T] buy milk" in out
    assert "2.[ ][D] report (by: Mar 1 2024)" in out
    assert "Bye. Hope to see you again soon!" in out
    assert DIVIDER in out
    assert storage.stored == [state.tasks.to_list()]
    assert state.tasks.size() == 2


def test_eof_ends_session_without_exit(state, storage, monkeypatch) -> None:
    _feed(monkeypatch, ["todo a"])
    assert run_console_loop(state) is False
    assert state.tasks.size() == 1
    assert storage.stored == []


def test_errors_do_not_stop_the_loop(state, monkeypatch, capsys) -> None:
    _feed(monkeypatch, ["", "mark 1", "delete x", "frobnicate", "todo ok", "bye"])
    assert run_console_loop(state) is True
    out = capsys.readouterr().out
    assert "Invalid command format!" in out
    assert "no task number 1" in out
    assert "The task index provided is invalid" in out
    assert "Available commands:" in out
    assert state.tasks.to_list() == [Task(TaskKind.TODO, "ok")]


def test_autosave_stores_after_mutations_only(state, storage, monkeypatch) -> None:
    state.settings.autosave = True
    _feed(monkeypatch, ["todo a", "list", "mark 1", "help"])
    assert run_console_loop(state) is False
    assert len(storage.stored) == 2
    assert storage.stored[-1] == [Task(TaskKind.TODO, "a", done=True)]


def test_autosave_failure_is_reported(state, storage, monkeypatch, capsys) -> None:
    state.settings.autosave = True
    storage.fail_store = True
    _feed(monkeypatch, ["todo a"])
    run_console_loop(state)
    out = capsys.readouterr().out
    assert "Could not save your tasks" in out
    assert state.tasks.size() == 1


def test_crashing_command_is_contained(state, monkeypatch, capsys) -> None:
    def boom(self, tasks, ui, storage):
        raise RuntimeError("boom")

    monkeypatch.setattr("taskbot.core.commands.List.execute", boom)
    _feed(monkeypatch, ["list", "bye"])
    assert run_console_loop(state) is True
    assert "Internal error while handling a command." in capsys.readouterr().out


def test_autosave_failure_is_logged_with_traceback(state, storage, monkeypatch, caplog) -> None:
    state.settings.autosave = True
    storage.fail_store = True
    _feed(monkeypatch, ["todo a"])
    with caplog.at_level("ERROR", logger="taskbot"):
        run_console_loop(state)
    errors = [r for r in caplog.records if r.levelname == "ERROR"]
    assert errors
    assert errors[0].exc_info is not None

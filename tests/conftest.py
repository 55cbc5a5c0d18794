# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskbot.core.presenter import TextPresenter
from taskbot.core.state import AppState
from taskbot.tasks.task_list import TaskList

from .fakes import FakeStorage


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the developer's environment / .env.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="taskbot",
        log_level="WARNING",
        autosave=False,
        data_dir=data_dir,
        tasks_path=data_dir / "tasks.jsonl",
        log_file=data_dir / "taskbot.log",
    )


@pytest.fixture()
def storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture()
def ui() -> TextPresenter:
    return TextPresenter()


@pytest.fixture()
def tasks() -> TaskList:
    return TaskList()


@pytest.fixture()
def state(settings: SimpleNamespace, tasks: TaskList, storage: FakeStorage, ui: TextPresenter) -> AppState:
    """AppState wired with an in-memory store (file store is tested separately)."""
    return AppState(settings=settings, tasks=tasks, storage=storage, ui=ui)

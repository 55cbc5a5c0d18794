# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from taskbot.config import Settings

_VARS = (
    "TASKBOT_APP_NAME",
    "TASKBOT_LOG_LEVEL",
    "TASKBOT_AUTOSAVE",
    "TASKBOT_DATA_DIR",
    "TASKBOT_TASKS_PATH",
    "TASKBOT_LOG_FILE",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = Settings.from_env()
    assert s.app_name == "taskbot"
    assert s.log_level == "WARNING"
    assert s.autosave is False
    assert s.tasks_path == Path(".local/taskbot") / "tasks.jsonl"
    assert s.log_file == Path(".local/taskbot") / "taskbot.log"


def test_paths_follow_data_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKBOT_DATA_DIR", str(tmp_path))
    s = Settings.from_env()
    assert s.tasks_path == tmp_path / "tasks.jsonl"


def test_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKBOT_APP_NAME", "Duke")
    monkeypatch.setenv("TASKBOT_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASKBOT_AUTOSAVE", "yes")
    monkeypatch.setenv("TASKBOT_TASKS_PATH", str(tmp_path / "t.jsonl"))
    s = Settings.from_env()
    assert (s.app_name, s.log_level, s.autosave) == ("Duke", "DEBUG", True)
    assert s.tasks_path == tmp_path / "t.jsonl"


def test_unrecognised_bool_is_false(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASKBOT_AUTOSAVE", "maybe")
    assert Settings.from_env().autosave is False

# src/taskbot/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the file store and presenter into AppState,
- loads the saved task list and saves it back.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import get_settings
from ..core.presenter import TextPresenter
from ..core.state import AppState
from ..errors import StorageUnavailableError
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskFileStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    Path(settings.data_dir).mkdir(parents=True, exist_ok=True)
    Path(settings.tasks_path).parent.mkdir(parents=True, exist_ok=True)


def load_task_list(storage) -> TaskList:
    """Load saved tasks; an unreadable store means starting with an empty list."""
    try:
        return TaskList(storage.load())
    except StorageUnavailableError as e:
        logger.warning("Starting with an empty task list: %s", e)
        return TaskList()


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    storage = TaskFileStore(settings.tasks_path)
    return AppState(
        settings=settings,
        tasks=load_task_list(storage),
        storage=storage,
        ui=TextPresenter(),
    )


def save_tasks(state: AppState) -> None:
    """Persist the task list. StorageWriteError propagates to the caller."""
    state.storage.store(state.tasks.to_list())
    logger.info("Saved %d tasks.", state.tasks.size())

# src/taskbot/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.task_list import TaskList
from .ports import TaskStorage
from .presenter import TextPresenter


@dataclass
class AppState:
    """
    Everything one session owns.

    Built once in cli/bootstrap.py and passed explicitly to the console loop.
    """

    # Settings (or a test stand-in with the same attributes).
    settings: Any

    tasks: TaskList
    storage: TaskStorage
    ui: TextPresenter

# src/taskbot/core/ports.py

"""
Ports (interfaces) used by the commands.

Commands depend on Protocols instead of concrete implementations,
so the console presenter and the file store stay swappable in tests.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol

from ..tasks.task_list import TaskList
from ..tasks.task_models import Task


class Presentation(Protocol):
    """Turns command results into displayable text. Every call is deterministic."""

    def render_added(self, task: Task, new_size: int) -> str: ...
    def render_list(self, tasks: TaskList) -> str: ...
    def render_marked(self, task: Task, was_marking: bool) -> str: ...
    def render_deleted(self, task: Task, new_size: int) -> str: ...
    def render_exit(self) -> str: ...
    def render_error(self, message: str) -> str: ...
    def render_help(self, usage: str) -> str: ...


class TaskStorage(Protocol):
    """
    Durable persistence boundary for the task list.

    load() raises StorageUnavailableError when the medium cannot be read;
    store() raises StorageWriteError when the write fails.
    """

    def load(self) -> Sequence[Task]: ...
    def store(self, tasks: Iterable[Task]) -> None: ...

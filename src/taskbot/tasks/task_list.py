# src/taskbot/tasks/task_list.py

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..errors import IndexOutOfRangeError
from .task_models import Task


class TaskList:
    """
    Ordered, mutable collection of tasks owned by one session.

    Indices are zero-based here; the one-based numbers users type are
    converted by the parser. Deleting index i shifts every later task down by one.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def size(self) -> int:
        return len(self._tasks)

    def add(self, task: Task) -> int:
        """Append `task` and return the new size."""
        self._tasks.append(task)
        return len(self._tasks)

    def _check(self, index: int) -> None:
        # Negative indices are rejected; list-style wraparound is not a valid task reference.
        if not 0 <= index < len(self._tasks):
            raise IndexOutOfRangeError(index, len(self._tasks))

    def get(self, index: int) -> Task:
        self._check(index)
        return self._tasks[index]

    def mark_at(self, index: int, done: bool) -> Task:
        """Set the done flag of the task at `index` and return it."""
        task = self.get(index)
        if done:
            task.mark_done()
        else:
            task.mark_undone()
        return task

    def delete_at(self, index: int) -> tuple[Task, int]:
        """Remove the task at `index`; returns (removed task, new size)."""
        self._check(index)
        removed = self._tasks.pop(index)
        return removed, len(self._tasks)

    def to_list(self) -> list[Task]:
        """Snapshot of the current tasks (the list itself is a copy)."""
        return list(self._tasks)

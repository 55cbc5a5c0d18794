# src/taskbot/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Iterable
from datetime import date
from pathlib import Path
from typing import Any

from ..errors import StorageUnavailableError, StorageWriteError
from .task_models import Task, TaskKind

logger = logging.getLogger(__name__)


def task_to_record(task: Task) -> dict[str, Any]:
    # Key order is part of the file format.
    return {
        "kind": task.kind.value,
        "done": task.done,
        "description": task.description,
        "date": task.date.isoformat() if task.date is not None else None,
    }


def task_from_record(record: Any) -> Task:
    """Rebuild a Task from a decoded record; raises ValueError on bad data."""
    if not isinstance(record, dict):
        raise ValueError("record is not an object")
    done = record.get("done", False)
    if not isinstance(done, bool):
        raise ValueError("done must be a boolean")
    kind = record.get("kind")
    if not isinstance(kind, str):
        raise ValueError("kind must be a string")
    description = record.get("description")
    if not isinstance(description, str):
        raise ValueError("description must be a string")
    raw_date = record.get("date")
    if raw_date is not None and not isinstance(raw_date, str):
        raise ValueError("date must be an ISO string or null")
    return Task(
        kind=TaskKind(kind),
        description=description,
        done=done,
        date=date.fromisoformat(raw_date) if raw_date is not None else None,
    )


class TaskFileStore:
    """
    JSON Lines task store: one object per task, in list order.

    Writes go to a sibling temp file which then atomically replaces the
    target, so a failed write never leaves a truncated task file behind.
    """

    def __init__(self, path: str | Path = "tasks.jsonl") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Task]:
        if not self._path.exists():
            logger.debug("No task file at %s; starting empty.", self._path)
            return []

        try:
            with open(self._path, encoding="utf-8") as f:
                lines = f.readlines()
        except (OSError, UnicodeDecodeError) as e:
            raise StorageUnavailableError(f"Cannot read task file {self._path}: {e}") from e

        tasks: list[Task] = []
        for lineno, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                tasks.append(task_from_record(json.loads(line)))
            except (ValueError, RecursionError) as e:
                # ValueError covers json.JSONDecodeError and InvalidTaskError too;
                # RecursionError comes from absurdly nested JSON.
                logger.warning("Skipping malformed task record %s:%d: %s", self._path, lineno, e)
        logger.info("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def store(self, tasks: Iterable[Task]) -> None:
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            count = 0
            with open(tmp, "w", encoding="utf-8") as f:
                for task in tasks:
                    f.write(json.dumps(task_to_record(task), ensure_ascii=False))
                    f.write("\n")
                    count += 1
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise StorageWriteError(f"Cannot write task file {self._path}: {e}") from e
        logger.debug("Stored %d tasks to %s", count, self._path)

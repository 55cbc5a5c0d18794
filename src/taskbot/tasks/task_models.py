# src/taskbot/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import StrEnum

from ..errors import InvalidTaskError


class TaskKind(StrEnum):
    """
    Kind of a task.

    The string value is what gets persisted; `tag` is the one-letter marker
    used when rendering.
    """

    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"

    @property
    def tag(self) -> str:
        return _TAGS[self]

    @property
    def needs_date(self) -> bool:
        return self is not TaskKind.TODO


_TAGS: dict[TaskKind, str] = {
    TaskKind.TODO: "T",
    TaskKind.DEADLINE: "D",
    TaskKind.EVENT: "E",
}

# Label printed in front of the date: "(by: ...)" / "(at: ...)".
_DATE_LABELS: dict[TaskKind, str] = {
    TaskKind.DEADLINE: "by",
    TaskKind.EVENT: "at",
}


def format_date(d: date) -> str:
    """Human-readable date, e.g. "Mar 1 2024"."""
    return f"{d:%b} {d.day} {d.year}"


@dataclass(slots=True)
class Task:
    kind: TaskKind
    description: str
    done: bool = False
    date: date | None = None

    def __post_init__(self) -> None:
        try:
            self.kind = TaskKind(self.kind)
        except ValueError as e:
            raise InvalidTaskError(f"Unknown task kind: {self.kind!r}") from e

        if not self.description or not self.description.strip():
            raise InvalidTaskError("Task description must not be empty.")

        if self.kind.needs_date and self.date is None:
            raise InvalidTaskError(f"A {self.kind} task requires a date.")
        if not self.kind.needs_date and self.date is not None:
            raise InvalidTaskError(f"A {self.kind} task must not carry a date.")

    def mark_done(self) -> None:
        self.done = True

    def mark_undone(self) -> None:
        self.done = False

    def render(self) -> str:
        box = "[X]" if self.done else "[ ]"
        line = f"{box}[{self.kind.tag}] {self.description}"
        if self.date is not None:
            line += f" ({_DATE_LABELS[self.kind]}: {format_date(self.date)})"
        return line

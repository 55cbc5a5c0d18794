# src/taskbot/core/commands.py

"""
Parsed user intents.

Every command is an immutable value produced by the parser. The set of
variants is closed (see `Command`); each one knows how to execute itself
against a TaskList and returns the text to show the user.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import ClassVar, TypeAlias

from ..errors import IndexOutOfRangeError, StorageWriteError, TaskIndexInvalidError
from ..tasks.task_list import TaskList
from ..tasks.task_models import Task, TaskKind
from .ports import Presentation, TaskStorage

logger = logging.getLogger(__name__)

MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format!\n{usage}"
MESSAGE_INVALID_TASK_DISPLAYED_INDEX = "The task index provided is invalid"
MESSAGE_INVALID_DATE = "Invalid date '{text}'. Use YYYY-MM-DD.\n{usage}"
MESSAGE_STORE_FAILED = "Could not save your tasks: {error}"


class _CommandBase:
    __slots__ = ()

    COMMAND_WORD: ClassVar[str] = ""
    MESSAGE_USAGE: ClassVar[str] = ""
    # True only for Exit.
    is_exit: ClassVar[bool] = False
    # Whether executing may change the task list (drives autosave).
    mutates: ClassVar[bool] = False


def _add_task(tasks: TaskList, ui: Presentation, task: Task) -> str:
    new_size = tasks.add(task)
    logger.debug("Added %s task (size=%d)", task.kind, new_size)
    return ui.render_added(task, new_size)


def _invalid_index(ui: Presentation, err: IndexOutOfRangeError) -> str:
    invalid = TaskIndexInvalidError(err.index + 1, err.size)
    logger.info("Rejected task reference: %s", err)
    return ui.render_error(str(invalid))


@dataclass(frozen=True, slots=True)
class AddTodo(_CommandBase):
    COMMAND_WORD = "todo"
    MESSAGE_USAGE = (
        "todo: Adds a todo to the task list. Parameters: DESCRIPTION\n"
        "  Example: todo borrow book"
    )
    mutates = True

    description: str

    def execute(self, tasks: TaskList, ui: Presentation, storage: TaskStorage) -> str:
        return _add_task(tasks, ui, Task(TaskKind.TODO, self.description))


@dataclass(frozen=True, slots=True)
class AddDeadline(_CommandBase):
    COMMAND_WORD = "deadline"
    MESSAGE_USAGE = (
        "deadline: Adds a deadline to the task list. Parameters: DESCRIPTION /by DATE\n"
        "  Example: deadline return book /by 2022-02-01"
    )
    mutates = True

    description: str
    by: date

    def execute(self, tasks: TaskList, ui: Presentation, storage: TaskStorage) -> str:
        return _add_task(tasks, ui, Task(TaskKind.DEADLINE, self.description, date=self.by))


@dataclass(frozen=True, slots=True)
class AddEvent(_CommandBase):
    COMMAND_WORD = "event"
    MESSAGE_USAGE = (
        "event: Adds an event to the task list. Parameters: DESCRIPTION /at DATE\n"
        "  Example: event project meeting /at 2022-02-01"
    )
    mutates = True

    description: str
    at: date

    def execute(self, tasks: TaskList, ui: Presentation, storage: TaskStorage) -> str:
        return _add_task(tasks, ui, Task(TaskKind.EVENT, self.description, date=self.at))


@dataclass(frozen=True, slots=True)
class Mark(_CommandBase):
    COMMAND_WORD = "mark"
    MESSAGE_USAGE = (
        "mark: Marks the task identified by its number as done. Parameters: INDEX\n"
        "  Example: mark 1"
    )
    mutates = True

    target_index: int

    def execute(self, tasks: TaskList, ui: Presentation, storage: TaskStorage) -> str:
        try:
            task = tasks.mark_at(self.target_index, True)
        except IndexOutOfRangeError as e:
            return _invalid_index(ui, e)
        return ui.render_marked(task, True)


@dataclass(frozen=True, slots=True)
class Unmark(_CommandBase):
    COMMAND_WORD = "unmark"
    MESSAGE_USAGE = (
        "unmark: Marks the task identified by its number as not done. Parameters: INDEX\n"
        "  Example: unmark 1"
    )
    mutates = True

    target_index: int

    def execute(self, tasks: TaskList, ui: Presentation, storage: TaskStorage) -> str:
        try:
            task = tasks.mark_at(self.target_index, False)
        except IndexOutOfRangeError as e:
            return _invalid_index(ui, e)
        return ui.render_marked(task, False)


@dataclass(frozen=True, slots=True)
class Delete(_CommandBase):
    COMMAND_WORD = "delete"
    MESSAGE_USAGE = (
        "delete: Deletes the task identified by its number. Parameters: INDEX\n"
        "  Example: delete 1"
    )
    mutates = True

    target_index: int

    def execute(self, tasks: TaskList, ui: Presentation, storage: TaskStorage) -> str:
        try:
            removed, new_size = tasks.delete_at(self.target_index)
        except IndexOutOfRangeError as e:
            return _invalid_index(ui, e)
        return ui.render_deleted(removed, new_size)


@dataclass(frozen=True, slots=True)
class List(_CommandBase):
    COMMAND_WORD = "list"
    MESSAGE_USAGE = (
        "list: Displays all tasks in the task list with their numbers.\n"
        "  Example: list"
    )

    def execute(self, tasks: TaskList, ui: Presentation, storage: TaskStorage) -> str:
        return ui.render_list(tasks)


@dataclass(frozen=True, slots=True)
class Exit(_CommandBase):
    COMMAND_WORD = "bye"
    MESSAGE_USAGE = "bye: Saves the task list and exits the program.\n  Example: bye"
    is_exit = True

    def execute(self, tasks: TaskList, ui: Presentation, storage: TaskStorage) -> str:
        # A failed save is reported, but the session still ends.
        try:
            storage.store(tasks.to_list())
        except StorageWriteError as e:
            logger.error("Failed to store %d tasks on exit: %s", tasks.size(), e, exc_info=True)
            return ui.render_error(MESSAGE_STORE_FAILED.format(error=e)) + "\n" + ui.render_exit()
        logger.info("Stored %d tasks on exit.", tasks.size())
        return ui.render_exit()


@dataclass(frozen=True, slots=True)
class Help(_CommandBase):
    COMMAND_WORD = "help"
    MESSAGE_USAGE = "help: Shows program usage instructions.\n  Example: help"

    def execute(self, tasks: TaskList, ui: Presentation, storage: TaskStorage) -> str:
        return ui.render_help(full_usage())


@dataclass(frozen=True, slots=True)
class Incorrect(_CommandBase):
    """Carries the message for input that could not be parsed."""

    message: str

    def execute(self, tasks: TaskList, ui: Presentation, storage: TaskStorage) -> str:
        return ui.render_error(self.message)


Command: TypeAlias = (
    AddTodo | AddDeadline | AddEvent | Mark | Unmark | Delete | List | Exit | Help | Incorrect
)

# Vocabulary order, used for the help text.
COMMAND_TYPES: tuple[type[_CommandBase], ...] = (
    AddTodo,
    AddDeadline,
    AddEvent,
    Mark,
    Unmark,
    Delete,
    List,
    Exit,
    Help,
)


def full_usage() -> str:
    return "\n".join(cls.MESSAGE_USAGE for cls in COMMAND_TYPES)

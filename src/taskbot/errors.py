# src/taskbot/errors.py

"""
Error taxonomy.

Each class also derives from the closest builtin so callers that only know
ValueError / IndexError / OSError keep working.
"""

from __future__ import annotations


class TaskbotError(Exception):
    """Base class for all taskbot errors."""


class InvalidTaskError(TaskbotError, ValueError):
    """A Task was constructed with fields that violate the model."""


class IndexOutOfRangeError(TaskbotError, IndexError):
    """TaskList access with an index outside [0, size)."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"index {index} out of range for task list of size {size}")
        self.index = index
        self.size = size


class TaskIndexInvalidError(TaskbotError):
    """A command referenced a task number that does not exist (user-facing)."""

    def __init__(self, number: int, size: int) -> None:
        if size == 0:
            detail = "the list is empty"
        elif size == 1:
            detail = "the list has 1 task"
        else:
            detail = f"the list has {size} tasks"
        super().__init__(f"There is no task number {number} ({detail}).")
        self.number = number
        self.size = size


class ParseSyntaxError(TaskbotError, ValueError):
    """Command arguments did not match the expected shape."""


class ParseValueError(TaskbotError, ValueError):
    """Argument shape matched but a sub-value (date, index) failed to convert."""


class StorageUnavailableError(TaskbotError, OSError):
    """The backing file exists but cannot be read."""


class StorageWriteError(TaskbotError, OSError):
    """The task list could not be written; data will not survive the session."""

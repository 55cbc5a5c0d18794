# src/taskbot/core/presenter.py

from __future__ import annotations

from ..tasks.task_list import TaskList
from ..tasks.task_models import Task


def _count(n: int) -> str:
    return f"{n} task" if n == 1 else f"{n} tasks"


class TextPresenter:
    """Plain-text renderer used by the console connector."""

    def render_greeting(self, app_name: str) -> str:
        return f"Hello! I'm {app_name}\nWhat can I do for you?"

    def render_added(self, task: Task, new_size: int) -> str:
        return (
            "Got it. I've added this task:\n"
            f"  {task.render()}\n"
            f"Now you have {_count(new_size)} in the list."
        )

    def render_list(self, tasks: TaskList) -> str:
        if tasks.size() == 0:
            return "Your task list is empty."
        lines = ["Here are the tasks in your list:"]
        for i, task in enumerate(tasks, start=1):
            lines.append(f"{i}.{task.render()}")
        return "\n".join(lines)

    def render_marked(self, task: Task, was_marking: bool) -> str:
        if was_marking:
            head = "Nice! I've marked this task as done:"
        else:
            head = "OK, I've marked this task as not done yet:"
        return f"{head}\n  {task.render()}"

    def render_deleted(self, task: Task, new_size: int) -> str:
        return (
            "Noted. I've removed this task:\n"
            f"  {task.render()}\n"
            f"Now you have {_count(new_size)} in the list."
        )

    def render_exit(self) -> str:
        return "Bye. Hope to see you again soon!"

    def render_error(self, message: str) -> str:
        return f"OOPS!!! {message}"

    def render_help(self, usage: str) -> str:
        return f"Available commands:\n{usage}"

"""Validation checks run before a task is inserted, updated or deleted."""

from datetime import date, datetime

from tasktracker.core.errors import InvalidTaskData
from tasktracker.domain.task import Task


def validate_task(task: Task | None, *, today: date | None = None) -> None:
    """Check a task's required fields.

    The due date check is date-only: a task due earlier today still passes.

    Args:
        task: Task to check
        today: Calendar day to compare the due date against (defaults to today)

    Raises:
        InvalidTaskData: On the first rule the task violates
    """
    if task is None:
        msg = "Task cannot be null."
        raise InvalidTaskData(msg)

    if not task.title or not task.title.strip():
        msg = "Task title cannot be null or empty."
        raise InvalidTaskData(msg)

    if not task.assignee or not task.assignee.strip():
        msg = "Task assignee cannot be null or empty."
        raise InvalidTaskData(msg)

    if task.due_date is None or task.due_date == datetime.min:
        msg = "Task due date is not set."
        raise InvalidTaskData(msg)

    if task.due_date.date() < (today or date.today()):
        msg = "Task due date cannot be in the past."
        raise InvalidTaskData(msg)


def validate_id(task_id: int) -> None:
    """Raise InvalidTaskData unless ``task_id`` is a positive integer."""
    if task_id <= 0:
        msg = "Task ID must be a positive integer."
        raise InvalidTaskData(msg)

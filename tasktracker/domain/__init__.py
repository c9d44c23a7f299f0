"""Domain models."""

from tasktracker.domain.task import Priority, Status, Task


__all__ = [
    "Priority",
    "Status",
    "Task",
]

"""Exception types raised by the task tracker core."""


class TaskTrackerError(Exception):
    """Base class for all task tracker errors."""


class InvalidTaskData(TaskTrackerError):
    """Input failed a validation rule, or persisted data could not be decoded.

    Always raised before any mutation is attempted.
    """


class TaskNotFound(TaskTrackerError):
    """A referenced task id is absent from the collection."""

    def __init__(self, task_id: int, message: str | None = None) -> None:
        self.task_id = task_id
        super().__init__(message or f"Task with ID {task_id} not found.")


class StorageError(TaskTrackerError):
    """Reading or writing persisted tasks failed for a reason other than encoding."""

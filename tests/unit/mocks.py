"""Fake collaborators for unit testing."""

from collections.abc import Sequence

from tasktracker.core.errors import InvalidTaskData, StorageError
from tasktracker.domain.task import Task


class InMemoryTaskStorage:
    """TaskStorage that keeps the last saved collection in memory.

    Saved tasks are deep-copied so tests can compare persisted state against the
    repository's live objects.
    """

    def __init__(self, tasks: Sequence[Task] | None = None):
        self.saved: list[Task] = [t.model_copy(deep=True) for t in tasks or []]
        self.load_calls = 0
        self.save_calls = 0
        self.fail_on_save = False

    def load(self) -> list[Task]:
        self.load_calls += 1
        return [t.model_copy(deep=True) for t in self.saved]

    def save(self, tasks: Sequence[Task]) -> None:
        self.save_calls += 1
        if self.fail_on_save:
            raise StorageError("Disk full")
        self.saved = [t.model_copy(deep=True) for t in tasks]


class CorruptTaskStorage:
    """TaskStorage whose load always fails as if the file were unreadable."""

    def __init__(self, error: Exception | None = None):
        self.error = error or InvalidTaskData("Invalid JSON format in tasks.json")
        self.saved: list[Task] = []

    def load(self) -> list[Task]:
        raise self.error

    def save(self, tasks: Sequence[Task]) -> None:
        self.saved = list(tasks)


class RecordingLogger:
    """TaskLogger that records (level, message) pairs."""

    def __init__(self):
        self.records: list[tuple[str, str]] = []

    def info(self, message: str) -> None:
        self.records.append(("info", message))

    def warning(self, message: str) -> None:
        self.records.append(("warning", message))

    def error(self, message: str) -> None:
        self.records.append(("error", message))

    def messages(self, level: str) -> list[str]:
        return [message for lvl, message in self.records if lvl == level]

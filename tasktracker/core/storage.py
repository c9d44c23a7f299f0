"""Task persistence: the storage protocol and its JSON file implementation."""

import logging
import os
import tempfile
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from pydantic import TypeAdapter, ValidationError

from tasktracker.core.errors import InvalidTaskData, StorageError
from tasktracker.core.logging import TaskLogger
from tasktracker.domain.task import Task


logger = logging.getLogger(__name__)

_TASK_LIST_ADAPTER: TypeAdapter[list[Task]] = TypeAdapter(list[Task])


class TaskStorage(Protocol):
    """Load/save contract for a whole task collection."""

    def load(self) -> list[Task]:
        """Return all persisted tasks in stored order.

        A missing document is not an error: implementations create an empty one
        and return ``[]``.

        Raises:
            InvalidTaskData: If persisted data cannot be decoded
            StorageError: For other read failures
        """
        ...

    def save(self, tasks: Sequence[Task]) -> None:
        """Replace the persisted document with ``tasks``.

        Raises:
            StorageError: If the write fails
        """
        ...


class JsonFileStorage:
    """Stores tasks as a JSON array in a single file.

    Saves go through a temporary file in the same directory followed by
    ``os.replace``, so readers see either the old or the new document.
    """

    def __init__(self, path: Path | str, activity: TaskLogger) -> None:
        self.path = Path(path)
        self._activity = activity

    def load(self) -> list[Task]:
        if not self.path.exists():
            self._activity.info(f"Tasks file not found at {self.path}. Creating new file.")
            self.save([])
            return []

        try:
            raw = self.path.read_bytes()
        except OSError as e:
            self._activity.error(f"Error reading tasks from {self.path}: {e}")
            msg = f"Error reading tasks from {self.path}"
            raise StorageError(msg) from e

        try:
            tasks = _TASK_LIST_ADAPTER.validate_json(raw)
        except ValidationError as e:
            self._activity.error(f"Invalid JSON format in {self.path}: {e.error_count()} error(s)")
            msg = f"Invalid JSON format in {self.path}"
            raise InvalidTaskData(msg) from e

        self._activity.info(f"Successfully read {len(tasks)} tasks from {self.path}")
        return tasks

    def save(self, tasks: Sequence[Task]) -> None:
        payload = _TASK_LIST_ADAPTER.dump_json(list(tasks), indent=2)
        tmp_name: str | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
            with os.fdopen(fd, "wb") as fh:
                fh.write(payload)
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            self._activity.error(f"Error writing tasks to {self.path}: {e}")
            msg = f"Error writing tasks to {self.path}"
            raise StorageError(msg) from e

        logger.debug("Wrote %d bytes to %s", len(payload), self.path)
        self._activity.info(f"Successfully wrote {len(tasks)} tasks to {self.path}")

"""In-memory task collection backed by a TaskStorage."""

import logging

from tasktracker.core.errors import TaskNotFound
from tasktracker.core.logging import TaskLogger
from tasktracker.core.storage import TaskStorage
from tasktracker.domain.task import Task


logger = logging.getLogger(__name__)


class TaskRepository:
    """Owns the authoritative list of tasks.

    Every mutation updates the in-memory list first and then saves the whole
    collection. A failed save propagates to the caller and the in-memory change
    is kept, so memory and storage disagree until the next successful save.
    """

    def __init__(self, storage: TaskStorage, activity: TaskLogger) -> None:
        self._storage = storage
        self._activity = activity
        self._tasks: list[Task] = []
        self._load_tasks()

    def _load_tasks(self) -> None:
        # Load failures degrade to an empty collection.
        try:
            self._tasks = list(self._storage.load())
        except Exception as e:  # noqa: BLE001
            self._activity.error(f"Failed to load tasks: {e}")
            self._tasks = []
            return
        self._activity.info(f"Loaded {len(self._tasks)} tasks from repository")

    def _save_tasks(self) -> None:
        try:
            self._storage.save(list(self._tasks))
        except Exception as e:
            self._activity.error(f"Failed to save tasks: {e}")
            raise

    def _index_of(self, task_id: int) -> int:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        raise TaskNotFound(task_id)

    def get_all(self) -> list[Task]:
        """Return a shallow copy of the collection (tasks themselves are shared)."""
        return list(self._tasks)

    def get_by_id(self, task_id: int) -> Task:
        """Return the first task with ``task_id``.

        Raises:
            TaskNotFound: If no task has that id
        """
        return self._tasks[self._index_of(task_id)]

    def add(self, task: Task) -> None:
        """Append ``task`` and persist. Id uniqueness is the caller's responsibility."""
        self._tasks.append(task)
        self._save_tasks()
        self._activity.info(f"Added task with ID {task.id}")

    def update(self, task: Task) -> None:
        """Replace the stored task that has ``task.id`` with ``task`` and persist.

        Raises:
            TaskNotFound: If no task has that id; the collection is left unchanged
        """
        index = self._index_of(task.id)
        self._tasks[index] = task
        self._save_tasks()
        self._activity.info(f"Updated task with ID {task.id}")

    def delete(self, task_id: int) -> None:
        """Remove the first task with ``task_id`` and persist.

        Raises:
            TaskNotFound: If no task has that id
        """
        index = self._index_of(task_id)
        del self._tasks[index]
        self._save_tasks()
        self._activity.info(f"Deleted task with ID {task_id}")

    def search(self, term: str) -> list[Task]:
        """Case-insensitive substring search over id, title, assignee and status.

        A blank term matches everything. The id check is a plain substring test
        on the id's decimal text.
        """
        if not term or not term.strip():
            return list(self._tasks)

        lowered = term.lower()
        results = [
            task
            for task in self._tasks
            if term in str(task.id)
            or lowered in task.title.lower()
            or lowered in task.assignee.lower()
            or lowered in task.status.value.lower()
        ]
        logger.debug("Search %r matched %d of %d tasks", term, len(results), len(self._tasks))
        return results

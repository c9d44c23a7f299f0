"""Task manager: validation, search, sorting and derived queries over a TaskRepository."""

from collections.abc import Mapping
from datetime import datetime, timedelta

from tasktracker.core.config import constants
from tasktracker.core.errors import InvalidTaskData, TaskNotFound
from tasktracker.core.logging import TaskLogger, span
from tasktracker.core.validator import validate_id, validate_task
from tasktracker.domain.task import Status, Task, to_local_naive
from tasktracker.services.sort_strategies import (
    SortStrategy,
    assignee_sort_key,
    default_strategies,
    due_date_sort_key,
)
from tasktracker.services.task_repository import TaskRepository


_BUILTIN_SORT_KEYS = {
    constants.SORT_BY_DUE_DATE: due_date_sort_key,
    constants.SORT_BY_PRIORITY: lambda t: t.priority.rank,
    constants.SORT_BY_ASSIGNEE: assignee_sort_key,
    constants.SORT_BY_CREATED_DATE: lambda t: t.created_date,
}


def _direction(ascending: bool) -> str:
    return "ascending" if ascending else "descending"


class TaskManager:
    """Entry point for callers working with tasks.

    Validates input before touching the repository, turns a missing task on
    ``get_by_id`` into ``None``, and provides sorting and reporting queries.
    """

    def __init__(
        self,
        repository: TaskRepository,
        activity: TaskLogger,
        strategies: Mapping[str, SortStrategy] | None = None,
    ) -> None:
        self._repository = repository
        self._activity = activity
        source = strategies if strategies is not None else default_strategies()
        self._strategies: dict[str, SortStrategy] = {name.lower(): strategy for name, strategy in source.items()}
        self._activity.info("TaskManager initialized with sorting strategies")

    @property
    def sort_strategy_names(self) -> list[str]:
        """Registered strategy keys, in registration order."""
        return list(self._strategies)

    def get_all(self) -> list[Task]:
        """Return all tasks in insertion order."""
        self._activity.info("Retrieving all tasks")
        return self._repository.get_all()

    def get_by_id(self, task_id: int) -> Task | None:
        """Return the task with ``task_id``, or None if there is none."""
        self._activity.info(f"Retrieving task with ID {task_id}")
        try:
            return self._repository.get_by_id(task_id)
        except TaskNotFound:
            self._activity.warning(f"Task with ID {task_id} not found")
            return None

    def next_id(self) -> int:
        """Return one more than the highest existing id (1 for an empty collection)."""
        tasks = self._repository.get_all()
        return max((t.id for t in tasks), default=0) + 1

    def add(self, task: Task) -> None:
        """Validate and add a task.

        Raises:
            InvalidTaskData: If the task fails validation (repository untouched)
            StorageError: If persisting fails
        """
        with span("task_manager.add"):
            try:
                validate_task(task)
            except InvalidTaskData as e:
                self._activity.error(f"Failed to add task: {e}")
                raise
            self._repository.add(task)
            self._activity.info(f"Task '{task.title}' added successfully with ID {task.id}")

    def update(self, task: Task) -> None:
        """Validate and replace an existing task.

        Raises:
            InvalidTaskData: If the task fails validation (repository untouched)
            TaskNotFound: If no task has ``task.id``
            StorageError: If persisting fails
        """
        with span("task_manager.update"):
            try:
                validate_task(task)
                self._repository.update(task)
            except (InvalidTaskData, TaskNotFound) as e:
                self._activity.error(f"Failed to update task: {e}")
                raise
            self._activity.info(f"Task '{task.title}' updated successfully")

    def update_status(self, task_id: int, status: Status) -> Task:
        """Change a task's status through ``Task.update_status`` and save it.

        Works on a copy, so a task that fails validation is left as stored.

        Raises:
            TaskNotFound: If no task has ``task_id``
            InvalidTaskData: If the updated task fails validation
        """
        with span("task_manager.update_status"):
            task = self._repository.get_by_id(task_id).model_copy()
            task.update_status(status)
            self.update(task)
            return task

    def delete(self, task_id: int) -> None:
        """Validate the id and delete the task.

        Raises:
            InvalidTaskData: If ``task_id`` is not positive
            TaskNotFound: If no task has ``task_id``
            StorageError: If persisting fails
        """
        with span("task_manager.delete"):
            try:
                validate_id(task_id)
                self._repository.delete(task_id)
            except (InvalidTaskData, TaskNotFound) as e:
                self._activity.error(f"Failed to delete task: {e}")
                raise
            self._activity.info(f"Task with ID {task_id} deleted successfully")

    def search(self, term: str) -> list[Task]:
        """Substring search delegated to the repository."""
        self._activity.info(f"Searching tasks with term: '{term}'")
        return self._repository.search(term)

    def linear_search(self, term: str) -> list[Task]:
        """Same matching rules as ``search``, applied by iterating over a snapshot."""
        self._activity.info(f"Linear searching tasks with term: '{term}'")
        all_tasks = self._repository.get_all()
        if not term or not term.strip():
            return all_tasks

        lowered = term.lower()
        results: list[Task] = []
        for task in all_tasks:
            if (
                term in str(task.id)
                or lowered in task.title.lower()
                or lowered in task.assignee.lower()
                or lowered in task.status.value.lower()
            ):
                results.append(task)
        return results

    def sort(self, strategy_name: str, ascending: bool = True) -> list[Task]:
        """Sort all tasks with a named exchange-sort strategy.

        An unknown name is logged and the tasks come back in insertion order.
        """
        with span("task_manager.sort"):
            tasks = self.get_all()
            strategy = self._strategies.get(strategy_name.lower())
            if strategy is None:
                self._activity.warning(f"Sorting strategy '{strategy_name}' not found. Returning unsorted tasks.")
                return tasks

            self._activity.info(f"Sorting {len(tasks)} tasks by {strategy_name} in {_direction(ascending)} order")
            return strategy.sort(tasks, ascending)

    def builtin_sort(self, sort_by: str, ascending: bool = True) -> list[Task]:
        """Sort all tasks with Python's stable ``sorted``.

        Accepts ``duedate``, ``priority``, ``assignee`` and ``createddate``
        (case-insensitive). Any other key returns the tasks in insertion order.
        """
        with span("task_manager.builtin_sort"):
            tasks = self.get_all()
            self._activity.info(
                f"Built-in sorting {len(tasks)} tasks by {sort_by} in {_direction(ascending)} order"
            )
            key = _BUILTIN_SORT_KEYS.get(sort_by.lower())
            if key is None:
                return tasks
            return sorted(tasks, key=key, reverse=not ascending)

    def get_overdue_tasks(self, now: datetime | None = None) -> list[Task]:
        """Open tasks whose due date/time is before ``now``."""
        self._activity.info("Retrieving overdue tasks")
        now = to_local_naive(now or datetime.now())
        return [t for t in self._repository.get_all() if t.is_overdue(now=now)]

    def get_tasks_by_assignee(self) -> dict[str, list[Task]]:
        """Group all tasks by assignee, keys in order of first appearance."""
        self._activity.info("Retrieving tasks grouped by assignee")
        grouped: dict[str, list[Task]] = {}
        for task in self._repository.get_all():
            grouped.setdefault(task.assignee, []).append(task)
        return grouped

    def get_upcoming_deadlines(self, days: int = 7, now: datetime | None = None) -> list[Task]:
        """Open tasks due between ``now`` and ``now + days`` inclusive."""
        self._activity.info(f"Retrieving tasks with deadlines in the next {days} days")
        now = to_local_naive(now or datetime.now())
        cutoff = now + timedelta(days=days)
        return [
            t
            for t in self._repository.get_all()
            if t.due_date is not None and now <= t.due_date <= cutoff and t.status != Status.DONE
        ]

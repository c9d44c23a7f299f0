"""Named sorting strategies built on a shared exchange (bubble) sort.

Each strategy returns a new list and leaves its input untouched. Adjacent
elements are swapped only when strictly out of order, so tasks with equal keys
keep their relative order.
"""

from collections.abc import Callable, Sequence
from datetime import datetime
from typing import Any, Protocol

from tasktracker.core.config import constants
from tasktracker.domain.task import Task


class SortStrategy(Protocol):
    """A swappable sorting algorithm over tasks."""

    def sort(self, tasks: Sequence[Task], ascending: bool = True) -> list[Task]:
        """Return the tasks reordered, without mutating ``tasks``."""
        ...


def exchange_sort(tasks: Sequence[Task], key: Callable[[Task], Any], *, ascending: bool = True) -> list[Task]:
    """Bubble sort ``tasks`` by ``key``. O(n^2) comparisons in the worst case."""
    sorted_tasks = list(tasks)
    n = len(sorted_tasks)
    for i in range(n - 1):
        for j in range(n - i - 1):
            left, right = key(sorted_tasks[j]), key(sorted_tasks[j + 1])
            should_swap = left > right if ascending else left < right
            if should_swap:
                sorted_tasks[j], sorted_tasks[j + 1] = sorted_tasks[j + 1], sorted_tasks[j]
    return sorted_tasks


def due_date_sort_key(task: Task) -> datetime:
    # Unset due dates sort as the earliest possible value.
    return task.due_date or datetime.min


def assignee_sort_key(task: Task) -> str:
    """Case-insensitive assignee key shared by every assignee ordering."""
    return task.assignee.casefold()


class SortByDueDate:
    """Earlier due dates first when ascending."""

    def sort(self, tasks: Sequence[Task], ascending: bool = True) -> list[Task]:
        return exchange_sort(tasks, due_date_sort_key, ascending=ascending)


class SortByPriority:
    """Lower priority rank first when ascending (Low, Medium, High)."""

    def sort(self, tasks: Sequence[Task], ascending: bool = True) -> list[Task]:
        return exchange_sort(tasks, lambda t: t.priority.rank, ascending=ascending)


class SortByAssignee:
    """Assignee names in case-insensitive order."""

    def sort(self, tasks: Sequence[Task], ascending: bool = True) -> list[Task]:
        return exchange_sort(tasks, assignee_sort_key, ascending=ascending)


def default_strategies() -> dict[str, SortStrategy]:
    """Return the built-in strategies keyed by their lookup name."""
    return {
        constants.SORT_BY_DUE_DATE: SortByDueDate(),
        constants.SORT_BY_PRIORITY: SortByPriority(),
        constants.SORT_BY_ASSIGNEE: SortByAssignee(),
    }

"""Unit tests for the exchange-sort strategies."""

from datetime import datetime

import pytest

from tasktracker.domain.task import Priority
from tasktracker.services.sort_strategies import (
    SortByAssignee,
    SortByDueDate,
    SortByPriority,
    default_strategies,
    exchange_sort,
)


@pytest.fixture
def dated_tasks(task_factory):
    return [
        task_factory(1, due_date=datetime(2023, 12, 31)),
        task_factory(2, due_date=datetime(2023, 10, 15)),
        task_factory(3, due_date=datetime(2023, 11, 20)),
    ]


@pytest.mark.unit
class TestExchangeSort:
    """Tests for the shared exchange sort."""

    def test_empty_and_single(self, task_factory):
        single = [task_factory(1)]

        assert exchange_sort([], lambda t: t.id) == []
        assert exchange_sort(single, lambda t: t.id) == single

    def test_input_not_mutated(self, dated_tasks):
        original = list(dated_tasks)

        result = exchange_sort(dated_tasks, lambda t: t.due_date)

        assert dated_tasks == original
        assert result is not dated_tasks
        assert sorted(t.id for t in result) == [1, 2, 3]

    @pytest.mark.parametrize("ascending", [True, False])
    def test_equal_keys_keep_relative_order(self, task_factory, ascending):
        tasks = [task_factory(i, priority=Priority.MEDIUM) for i in range(1, 6)]

        result = exchange_sort(tasks, lambda t: t.priority.rank, ascending=ascending)

        assert [t.id for t in result] == [1, 2, 3, 4, 5]


@pytest.mark.unit
class TestSortByDueDate:
    def test_ascending(self, dated_tasks):
        result = SortByDueDate().sort(dated_tasks, ascending=True)

        assert [t.due_date.date().isoformat() for t in result] == ["2023-10-15", "2023-11-20", "2023-12-31"]

    def test_descending(self, dated_tasks):
        result = SortByDueDate().sort(dated_tasks, ascending=False)

        assert [t.due_date.date().isoformat() for t in result] == ["2023-12-31", "2023-11-20", "2023-10-15"]


@pytest.mark.unit
class TestSortByPriority:
    def test_descending(self, task_factory):
        tasks = [
            task_factory(1, priority=Priority.LOW),
            task_factory(2, priority=Priority.HIGH),
            task_factory(3, priority=Priority.MEDIUM),
        ]

        result = SortByPriority().sort(tasks, ascending=False)

        assert [t.priority for t in result] == [Priority.HIGH, Priority.MEDIUM, Priority.LOW]

    def test_ascending_is_by_rank_not_name(self, task_factory):
        tasks = [
            task_factory(1, priority=Priority.MEDIUM),
            task_factory(2, priority=Priority.HIGH),
            task_factory(3, priority=Priority.LOW),
        ]

        result = SortByPriority().sort(tasks)

        assert [t.priority for t in result] == [Priority.LOW, Priority.MEDIUM, Priority.HIGH]


@pytest.mark.unit
class TestSortByAssignee:
    def test_case_insensitive(self, task_factory):
        tasks = [
            task_factory(1, assignee="charlie"),
            task_factory(2, assignee="Alice"),
            task_factory(3, assignee="bob"),
        ]

        ascending = SortByAssignee().sort(tasks)
        descending = SortByAssignee().sort(tasks, ascending=False)

        assert [t.assignee for t in ascending] == ["Alice", "bob", "charlie"]
        assert [t.assignee for t in descending] == ["charlie", "bob", "Alice"]

    def test_same_name_different_case_keeps_order(self, task_factory):
        tasks = [task_factory(1, assignee="ALICE"), task_factory(2, assignee="alice")]

        assert [t.id for t in SortByAssignee().sort(tasks)] == [1, 2]


@pytest.mark.unit
def test_default_strategies_keys():
    strategies = default_strategies()

    assert list(strategies) == ["duedate", "priority", "assignee"]
    assert isinstance(strategies["priority"], SortByPriority)

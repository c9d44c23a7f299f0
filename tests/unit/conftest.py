"""Pytest configuration and fixtures for unit tests."""

from datetime import datetime, timedelta

import pytest

from tasktracker.domain.task import Priority, Status, Task
from tasktracker.services.task_manager import TaskManager
from tasktracker.services.task_repository import TaskRepository
from tests.unit.mocks import InMemoryTaskStorage, RecordingLogger


@pytest.fixture
def activity():
    """Provides a fresh RecordingLogger for each test."""
    return RecordingLogger()


@pytest.fixture
def task_factory():
    """Factory for valid tasks; due dates default to tomorrow."""

    def _create_task(task_id: int = 1, **kwargs) -> Task:
        defaults = {
            "title": f"Task {task_id}",
            "description": "",
            "due_date": datetime.now() + timedelta(days=1),
            "priority": Priority.MEDIUM,
            "status": Status.TODO,
            "assignee": "Alice",
        }
        defaults.update(kwargs)
        return Task(id=task_id, **defaults)

    return _create_task


@pytest.fixture
def storage():
    """Empty in-memory storage."""
    return InMemoryTaskStorage()


@pytest.fixture
def repository(storage, activity):
    return TaskRepository(storage, activity)


@pytest.fixture
def manager(repository, activity):
    return TaskManager(repository, activity)


@pytest.fixture
def seeded_manager(task_factory, activity):
    """Manager over three tasks with distinct due dates, priorities and assignees."""

    def _build(tasks=None) -> tuple[TaskManager, InMemoryTaskStorage]:
        tasks = tasks or [
            task_factory(1, title="Write report", due_date=datetime(2023, 12, 31), priority=Priority.LOW, assignee="john"),
            task_factory(2, title="Fix bug", due_date=datetime(2023, 10, 15), priority=Priority.HIGH, assignee="Alice"),
            task_factory(
                3, title="Review code", due_date=datetime(2023, 11, 20), priority=Priority.MEDIUM, assignee="Bob"
            ),
        ]
        backing = InMemoryTaskStorage(tasks)
        return TaskManager(TaskRepository(backing, activity), activity), backing

    return _build

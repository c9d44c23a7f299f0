from tasktracker.services import (
    report_service,
    sort_strategies,
    task_manager,
    task_repository,
)


__all__ = [
    "report_service",
    "sort_strategies",
    "task_manager",
    "task_repository",
]

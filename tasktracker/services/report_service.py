"""Plain-text reports built from TaskManager queries."""

from datetime import datetime

from tasktracker.core.config import constants, settings
from tasktracker.core.logging import TaskLogger
from tasktracker.domain.task import Task, to_local_naive
from tasktracker.services.task_manager import TaskManager


def _header(title: str, now: datetime) -> list[str]:
    return [
        f"=== {title} ===",
        f"Generated on: {now.strftime(constants.REPORT_TIMESTAMP_FORMAT)}",
    ]


def _due(task: Task) -> str:
    return task.due_date.strftime(constants.REPORT_DATE_FORMAT) if task.due_date else "unset"


class ReportGenerator:
    """Formats overdue, per-assignee and upcoming-deadline reports."""

    def __init__(self, manager: TaskManager, activity: TaskLogger) -> None:
        self._manager = manager
        self._activity = activity

    def overdue_tasks_report(self, now: datetime | None = None) -> str:
        self._activity.info("Generating overdue tasks report")
        now = to_local_naive(now or datetime.now())
        overdue = self._manager.get_overdue_tasks(now=now)
        if not overdue:
            return "No overdue tasks found."

        lines = _header("OVERDUE TASKS REPORT", now)
        lines += [f"Total overdue tasks: {len(overdue)}", "", "Overdue Tasks:", constants.REPORT_SEPARATOR]
        for task in overdue:
            days_overdue = (now - task.due_date).days if task.due_date else 0
            lines += [
                f"ID: {task.id}",
                f"Title: {task.title}",
                f"Assignee: {task.assignee}",
                f"Priority: {task.priority.label}",
                f"Due Date: {_due(task)}",
                f"Days Overdue: {days_overdue}",
                constants.REPORT_SEPARATOR,
            ]
        return "\n".join(lines) + "\n"

    def tasks_by_assignee_report(self, now: datetime | None = None) -> str:
        self._activity.info("Generating tasks by assignee report")
        now = to_local_naive(now or datetime.now())
        grouped = self._manager.get_tasks_by_assignee()
        if not grouped:
            return "No tasks found."

        lines = _header("TASKS BY ASSIGNEE REPORT", now)
        lines.append("")
        for assignee, tasks in grouped.items():
            lines += [f"Assignee: {assignee}", f"Task Count: {len(tasks)}", "Tasks:"]
            lines += [
                f"  - ID: {t.id}, Title: {t.title}, Status: {t.status.label}, Due: {_due(t)}" for t in tasks
            ]
            lines.append("")
        return "\n".join(lines) + "\n"

    def upcoming_deadlines_report(self, days: int | None = None, now: datetime | None = None) -> str:
        days = settings.upcoming_deadline_days if days is None else days
        self._activity.info(f"Generating upcoming deadlines report for next {days} days")
        now = to_local_naive(now or datetime.now())
        upcoming = self._manager.get_upcoming_deadlines(days, now=now)
        if not upcoming:
            return f"No upcoming deadlines found within the next {days} days."

        lines = _header("UPCOMING DEADLINES REPORT", now)
        lines += [
            f"Next {days} days",
            f"Total upcoming tasks: {len(upcoming)}",
            "",
            "Upcoming Tasks:",
            constants.REPORT_SEPARATOR,
        ]
        # Upcoming tasks always have a due date.
        for task in sorted(upcoming, key=lambda t: t.due_date):
            lines += [
                f"ID: {task.id}",
                f"Title: {task.title}",
                f"Assignee: {task.assignee}",
                f"Priority: {task.priority.label}",
                f"Due Date: {_due(task)}",
                f"Days Until Due: {(task.due_date - now).days}",
                constants.REPORT_SEPARATOR,
            ]
        return "\n".join(lines) + "\n"

"""Task domain model and enums."""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Priority(StrEnum):
    """Task priority, ordered Low < Medium < High."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @property
    def rank(self) -> int:
        """Ordinal used for priority comparisons (Low=1, Medium=2, High=3)."""
        return _PRIORITY_RANKS[self]

    @property
    def label(self) -> str:
        """Short bracketed tag for reports."""
        return _PRIORITY_LABELS[self]


class Status(StrEnum):
    """Task lifecycle status (unordered)."""

    TODO = "ToDo"
    IN_PROGRESS = "InProgress"
    DONE = "Done"

    @property
    def label(self) -> str:
        """Short bracketed tag for reports."""
        return _STATUS_LABELS[self]


_PRIORITY_RANKS: dict[Priority, int] = {Priority.LOW: 1, Priority.MEDIUM: 2, Priority.HIGH: 3}
_PRIORITY_LABELS: dict[Priority, str] = {Priority.LOW: "[LOW]", Priority.MEDIUM: "[MED]", Priority.HIGH: "[HIGH]"}
_STATUS_LABELS: dict[Status, str] = {
    Status.TODO: "[TODO]",
    Status.IN_PROGRESS: "[IN PROGRESS]",
    Status.DONE: "[DONE]",
}


def to_local_naive(value: datetime) -> datetime:
    """Convert an offset-aware datetime to naive local time; naive values pass through."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


class Task(BaseModel):
    """A tracked work item.

    The model is mutable: update operations mutate a task in place and hand the
    whole record back to the repository. Timestamps are stored as naive local
    time, on construction and on assignment. Other field values are not
    validated here, see ``tasktracker.core.validator`` for the checks run
    before insert/update.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: int = Field(..., description="Caller-assigned identifier, unique within the collection")
    title: str = Field(default="", description="Task title")
    description: str = Field(default="", description="Free-text description")
    due_date: datetime | None = Field(default=None, description="Deadline; None means unset")
    priority: Priority = Field(default=Priority.LOW, description="Task priority")
    status: Status = Field(default=Status.TODO, description="Current status")
    assignee: str = Field(default="", description="Person responsible for the task")
    created_date: datetime = Field(default_factory=datetime.now, description="Set once at construction")
    completed_date: datetime | None = Field(default=None, description="Set while status is Done")

    @field_validator("due_date", "created_date", "completed_date", mode="after")
    @classmethod
    def _normalize_timezone(cls, value: datetime | None) -> datetime | None:
        # All stored timestamps are naive local time.
        return None if value is None else to_local_naive(value)

    def update_status(self, new_status: Status, *, now: datetime | None = None) -> None:
        """Change status, keeping completed_date in step with Done."""
        self.status = new_status
        if new_status == Status.DONE:
            self.completed_date = to_local_naive(now or datetime.now())
        elif self.completed_date is not None:
            self.completed_date = None

    def is_overdue(self, *, now: datetime | None = None) -> bool:
        """Return True if the task is not done and its due date/time has passed."""
        if self.status == Status.DONE or self.due_date is None:
            return False
        return self.due_date < to_local_naive(now or datetime.now())

    def is_due_within(self, days: int, *, now: datetime | None = None) -> bool:
        """Return True if the task is open and due between today and ``days`` days from today.

        Compares calendar dates only, so a task due earlier today still counts.
        """
        if self.status == Status.DONE or self.due_date is None:
            return False
        today = to_local_naive(now or datetime.now()).date()
        difference = (self.due_date.date() - today).days
        return 0 <= difference <= days

    def __str__(self) -> str:
        due = self.due_date.strftime("%Y-%m-%d") if self.due_date else "unset"
        return (
            f"ID: {self.id} | Title: {self.title} | Due: {due} | Priority: {self.priority.value} | "
            f"Status: {self.status.value} | Assignee: {self.assignee}"
        )

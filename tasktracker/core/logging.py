"""Logging and observability configuration using Pydantic Logfire.

Library modules use Python's standard logging (``logging.getLogger(__name__)``)
for debug records. Components that report user-visible activity (repository,
manager, storage, reports) receive a ``TaskLogger`` instead, constructed once by
the caller and shared:

    activity = ActivityLogger(log_path=settings.activity_log_path)
    storage = JsonFileStorage(settings.tasks_file_path, activity)
    repository = TaskRepository(storage, activity)
    manager = TaskManager(repository, activity)

When ``configure_logfire`` has run, every stdlib record is forwarded to Logfire.
"""

import itertools
import logging
from pathlib import Path
from typing import Protocol

import logfire

from tasktracker.core.config import Settings, constants, settings


ACTIVITY_LOGGER_NAME = "tasktracker.activity"
_instance_ids = itertools.count(1)


class TaskLogger(Protocol):
    """Severity-tagged message sink. Implementations must never raise."""

    def info(self, message: str) -> None:
        """Record an informational message."""
        ...

    def warning(self, message: str) -> None:
        """Record a warning."""
        ...

    def error(self, message: str) -> None:
        """Record an error."""
        ...


class ActivityLogger:
    """TaskLogger backed by a stdlib logger and an optional plain-text activity file.

    Lines in the activity file look like ``[2024-01-31 09:15:00] [INFO] message``.
    Each instance logs through its own child of ``name`` and owns its file
    handler, so two instances never write into each other's file. Records still
    propagate to ``name`` and above. Failures inside the handlers are reported by
    ``logging`` itself and never reach the caller.
    """

    def __init__(self, *, log_path: Path | None = None, name: str = ACTIVITY_LOGGER_NAME) -> None:
        self._logger = logging.getLogger(f"{name}.{next(_instance_ids)}")
        self._logger.setLevel(logging.INFO)
        self.log_path = log_path
        self.file_handler: logging.FileHandler | None = None
        if log_path is not None:
            self.file_handler = self._attach_file_handler(log_path)

    def _attach_file_handler(self, log_path: Path) -> logging.FileHandler | None:
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logging.getLogger(__name__).warning("Activity log directory unavailable (%s), file logging disabled", e)
            return None

        handler = logging.FileHandler(log_path, encoding="utf-8", delay=True)
        handler.setFormatter(
            logging.Formatter(constants.ACTIVITY_LOG_FORMAT, datefmt=constants.ACTIVITY_LOG_DATE_FORMAT)
        )
        self._logger.addHandler(handler)
        return handler

    def close(self) -> None:
        """Detach and close the activity file handler, if any."""
        if self.file_handler is None:
            return
        self._logger.removeHandler(self.file_handler)
        self.file_handler.close()
        self.file_handler = None

    def info(self, message: str) -> None:
        self._logger.info(message)

    def warning(self, message: str) -> None:
        self._logger.warning(message)

    def error(self, message: str) -> None:
        self._logger.error(message)


def create_activity_logger(config: Settings | None = None) -> ActivityLogger:
    """Build the shared ActivityLogger from settings."""
    config = config or settings
    return ActivityLogger(log_path=config.activity_log_path)


def configure_logfire(config: Settings | None = None) -> None:
    """Configure Pydantic Logfire with token from environment.

    Also routes the ``tasktracker`` stdlib logger hierarchy into Logfire.
    """
    config = config or settings
    logfire.configure(
        token=config.logfire_token,
        service_name="tasktracker",
        service_version="0.1.0",
        send_to_logfire="if-token-present",
    )
    package_logger = logging.getLogger("tasktracker")
    if not any(isinstance(h, logfire.LogfireLoggingHandler) for h in package_logger.handlers):
        package_logger.addHandler(logfire.LogfireLoggingHandler())

    logger = logging.getLogger(__name__)
    logger.info("Logfire configured successfully")


def span(name: str) -> logfire.LogfireSpan:
    """Create a custom span for service layer functions.

    Usage:
        with span("task_manager.add"):
            ...
    """
    return logfire.span(name)

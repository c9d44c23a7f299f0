"""Configuration management for tasktracker."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Storage Configuration
    tasks_file_path: Path = Field(default=Path("DataFiles/tasks.json"), description="JSON file holding all tasks")

    # Logging Configuration
    activity_log_path: Path = Field(
        default=Path("DataFiles/activity_log.txt"), description="Plain-text activity log written by ActivityLogger"
    )

    # Pydantic Logfire Configuration (optional)
    logfire_token: str | None = Field(default=None, description="Pydantic Logfire token for observability")

    # Reports
    upcoming_deadline_days: int = Field(
        default=7, ge=0, description="Look-ahead window (in days) for the upcoming deadlines query"
    )


# Application Constants
class Constants:
    """Application-wide constants."""

    # Sort keys accepted by TaskManager.sort (exchange sort strategies)
    SORT_BY_DUE_DATE: str = "duedate"
    SORT_BY_PRIORITY: str = "priority"
    SORT_BY_ASSIGNEE: str = "assignee"

    # Extra key accepted by TaskManager.builtin_sort
    SORT_BY_CREATED_DATE: str = "createddate"

    # Activity log line format
    ACTIVITY_LOG_FORMAT: str = "[%(asctime)s] [%(levelname)s] %(message)s"
    ACTIVITY_LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"

    # Reports
    REPORT_SEPARATOR: str = "-" * 40
    REPORT_TIMESTAMP_FORMAT: str = "%Y-%m-%d %H:%M:%S"
    REPORT_DATE_FORMAT: str = "%Y-%m-%d"


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()


# Global settings instance
settings = get_settings()
constants = Constants()

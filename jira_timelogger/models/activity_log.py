# jira_timelogger/models/activity_log.py
"""
Activity log entries shown in the user log feed.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import uuid4


class LogLevel(Enum):
    """Severity of an activity log entry."""

    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


def generate_entry_id() -> str:
    """
    Generate a unique entry ID.

    Returns:
        12-character hex string (UUID4 truncated)
    """
    return uuid4().hex[:12]


@dataclass(frozen=True)
class ActivityLogEntry:
    """
    A single message in the activity log.

    Immutable once created. entry_id identifies the rendered block, so two
    entries logged within the same second can still be removed independently.
    """

    message: str
    level: LogLevel = LogLevel.INFO
    logged_at: datetime = field(default_factory=datetime.now)
    entry_id: str = field(default_factory=generate_entry_id)

    @classmethod
    def info(cls, message: str) -> "ActivityLogEntry":
        return cls(message=message, level=LogLevel.INFO)

    @classmethod
    def warn(cls, message: str) -> "ActivityLogEntry":
        return cls(message=message, level=LogLevel.WARN)

    @classmethod
    def error(cls, message: str) -> "ActivityLogEntry":
        return cls(message=message, level=LogLevel.ERROR)

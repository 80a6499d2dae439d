# jira_timelogger/models/__init__.py
"""
Data models for jira-timelogger.

Activity log entries (dataclasses) and Pydantic form models.
"""

from jira_timelogger.models.activity_log import (
    ActivityLogEntry,
    LogLevel,
    generate_entry_id,
)
from jira_timelogger.models.snapshot import FieldKind, FormField, FormSnapshot

__all__ = [
    # Activity log
    "ActivityLogEntry",
    "LogLevel",
    "generate_entry_id",
    # Form
    "FieldKind",
    "FormField",
    "FormSnapshot",
]

# jira_timelogger/app/__init__.py
"""Application service, JIRA lookups and duration formatting."""

from .duration import format_duration
from .jira import JiraClient, is_retryable, jira_retry
from .service import AppService, TimeLoggerApp

__all__ = [
    "AppService",
    "TimeLoggerApp",
    "JiraClient",
    "is_retryable",
    "jira_retry",
    "format_duration",
]

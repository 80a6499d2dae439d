# jira_timelogger/config/__init__.py
"""Configuration system for jira-timelogger."""

from .loader import get_config_path, load_config
from .schema import (
    FormConfig,
    JiraConfig,
    TimeLoggerConfig,
    ValidationConfig,
    ViewConfig,
)

__all__ = [
    "TimeLoggerConfig",
    "ValidationConfig",
    "ViewConfig",
    "JiraConfig",
    "FormConfig",
    "load_config",
    "get_config_path",
]

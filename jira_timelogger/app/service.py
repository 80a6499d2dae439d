# jira_timelogger/app/service.py
"""
Application service consumed by the view controller.

Defines the abstract interface the view calls into, and the default
in-process implementation backed by a running timer and JiraClient.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Callable

from jira_timelogger import __version__
from jira_timelogger.app.duration import format_duration
from jira_timelogger.app.jira import JiraClient
from jira_timelogger.models.activity_log import ActivityLogEntry, LogLevel

logger = logging.getLogger(__name__)


class AppService(ABC):
    """
    Abstract application service.

    The view reads totals, the running time and the activity history from
    it, and delegates issue summary lookups to it.
    """

    @abstractmethod
    def get_time_manual(self) -> bool:
        """Whether the user is entering the time by hand."""
        pass

    @abstractmethod
    def set_time_manual(self, manual: bool) -> None:
        pass

    @abstractmethod
    def get_time_auto_as_string(self, rounding: str | None = None) -> str:
        """Elapsed time since the timer started, as a JIRA phrase."""
        pass

    @abstractmethod
    def get_logged_total_as_string(self) -> str:
        pass

    @abstractmethod
    def get_day_grand_total_as_string(self) -> str:
        pass

    @abstractmethod
    def get_version(self) -> str:
        pass

    @abstractmethod
    def get_activity_logs(self) -> list[ActivityLogEntry]:
        """Activity history, oldest first."""
        pass

    @abstractmethod
    def on_activity(self, listener: Callable[[ActivityLogEntry], None]) -> None:
        """
        Subscribe to activity entries logged from now on.

        Args:
            listener: Called with each new entry, after it joins the history
        """
        pass

    @abstractmethod
    async def get_issue_summary(self, key: str) -> str | None:
        """
        Look up an issue summary.

        Returns:
            Summary text, or None if the issue does not exist
        """
        pass

    @abstractmethod
    def reset_logged_total(self, confirmed: bool) -> None:
        pass


class TimeLoggerApp(AppService):
    """
    Default application service.

    Keeps a running timer, logged totals and the activity history in memory.
    Issue lookups go to JIRA when a client is configured.
    """

    def __init__(
        self,
        jira_client: JiraClient | None = None,
        clock: Callable[[], datetime] = datetime.now,
        logged_seconds: float = 0.0,
        day_seconds: float = 0.0,
    ) -> None:
        """
        Initialize the service.

        Args:
            jira_client: Client for summary lookups (default: no lookups)
            clock: Time source for the running timer and entry timestamps
            logged_seconds: Logged total carried over from an earlier session
            day_seconds: Day grand total carried over from an earlier session
        """
        self._jira_client = jira_client
        self._clock = clock
        self._started_at = clock()
        self._time_manual = False
        self._logged_seconds = logged_seconds
        self._day_seconds = day_seconds
        self._activity_logs: list[ActivityLogEntry] = []
        self._listeners: list[Callable[[ActivityLogEntry], None]] = []

    def get_time_manual(self) -> bool:
        return self._time_manual

    def set_time_manual(self, manual: bool) -> None:
        self._time_manual = manual

    def elapsed_seconds(self) -> float:
        return (self._clock() - self._started_at).total_seconds()

    def get_time_auto_as_string(self, rounding: str | None = None) -> str:
        return format_duration(self.elapsed_seconds(), rounding)

    def get_logged_total_as_string(self) -> str:
        return format_duration(self._logged_seconds, "min")

    def get_day_grand_total_as_string(self) -> str:
        return format_duration(self._day_seconds, "min")

    def get_version(self) -> str:
        return __version__

    def get_activity_logs(self) -> list[ActivityLogEntry]:
        return list(self._activity_logs)

    def on_activity(self, listener: Callable[[ActivityLogEntry], None]) -> None:
        """Register a callback for live activity entries (the view's add hook)."""
        self._listeners.append(listener)

    def log_activity(
        self, message: str, level: LogLevel = LogLevel.INFO
    ) -> ActivityLogEntry:
        """Record an activity entry and notify listeners."""
        entry = ActivityLogEntry(message=message, level=level, logged_at=self._clock())
        self._activity_logs.append(entry)
        for listener in self._listeners:
            listener(entry)
        return entry

    async def get_issue_summary(self, key: str) -> str | None:
        if self._jira_client is None:
            logger.info(f"No JIRA server configured, skipping lookup of {key}")
            return None
        return await self._jira_client.get_issue_summary(key)

    def reset_logged_total(self, confirmed: bool) -> None:
        if not confirmed:
            return
        self._logged_seconds = 0.0
        self.log_activity("Logged total reset")
        logger.info("Logged total reset")

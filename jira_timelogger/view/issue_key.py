# jira_timelogger/view/issue_key.py
"""
Debounced issue key validation and asynchronous summary lookup.

Cycle per settled edit:
    TYPING   -> summary shows the waiting placeholder, settle timer restarted
    settle   -> live field text resolved to a full key (bare numeric ids get
                the default project prefix) or rejected
    INVALID  -> row marked, summary shows the invalid placeholder
    CHECKING -> row cleared, summary shows the checking placeholder, one
                lookup task started
    RESOLVED -> summary shows the result, or "<key> not found"

Every edit bumps a generation counter. A lookup only writes its result if the
generation it was issued under is still current, so a slow lookup for an
old key can never overwrite state from a newer edit.
"""

import asyncio
import logging
import re
from enum import Enum
from typing import Callable

from jira_timelogger.app.service import AppService
from jira_timelogger.config.schema import TimeLoggerConfig
from jira_timelogger.models.activity_log import ActivityLogEntry
from jira_timelogger.view.constants import (
    DANGER,
    ISSUE_FIELD,
    ISSUE_ROW,
    SUMMARY,
    SUMMARY_CHECKING,
    SUMMARY_INVALID,
    SUMMARY_WAITING,
)
from jira_timelogger.view.debounce import DebounceTimer
from jira_timelogger.view.surface import PresentationSurface

logger = logging.getLogger(__name__)

_BARE_ID_RE = re.compile(r"[0-9]+")


class IssueKeyState(Enum):
    """Where the resolver is in the current edit cycle."""

    IDLE = "idle"
    TYPING = "typing"
    INVALID = "invalid"
    CHECKING = "checking"
    RESOLVED = "resolved"


class IssueKeyResolver:
    """Validates the issue field and keeps the summary region in step with it."""

    def __init__(
        self,
        surface: PresentationSurface,
        app: AppService,
        config: TimeLoggerConfig,
        on_failure: Callable[[ActivityLogEntry], None] | None = None,
        timer: DebounceTimer | None = None,
    ) -> None:
        """
        Initialize resolver.

        Args:
            surface: Rendering target
            app: Application service performing the lookups
            config: Patterns, default project key and debounce delay
            on_failure: Receives an ERROR entry when a lookup raises
            timer: Debounce timer (default: a fresh one for the issue field)
        """
        self._surface = surface
        self._app = app
        self.config = config
        self._on_failure = on_failure
        self.timer = timer or DebounceTimer(ISSUE_FIELD)
        self.state = IssueKeyState.IDLE
        self.generation = 0
        self.resolved_key: str | None = None
        self._lookup_task: asyncio.Task | None = None

    @property
    def pending_lookup(self) -> asyncio.Task | None:
        """The lookup task still in flight, if any."""
        if self._lookup_task is None or self._lookup_task.done():
            return None
        return self._lookup_task

    def on_edit(self) -> None:
        """Handle an edit event on the issue field."""
        self.timer.cancel_if_pending()
        self.generation += 1
        self.state = IssueKeyState.TYPING
        self._surface.set_text(SUMMARY, SUMMARY_WAITING)
        self.timer.schedule(self.config.view.debounce_ms, self._settle)

    def reset(self) -> None:
        """Abandon the current cycle; any in-flight result is discarded."""
        self.timer.cancel_if_pending()
        self.generation += 1
        self.state = IssueKeyState.IDLE
        self.resolved_key = None

    def resolve_key(self, value: str) -> str | None:
        """
        Turn field text into a full issue key.

        Returns:
            The key to look up, or None if the text is not a usable key
        """
        if self.config.validation.issue_key_regex.search(value):
            return value

        bare_id = value.strip()
        if _BARE_ID_RE.fullmatch(bare_id):
            project_key = self.config.get("defaultProjectKey")
            if project_key:
                return f"{project_key}-{bare_id}"
            logger.info(f"Bare id '{bare_id}' entered but no default project key is set")

        return None

    def _settle(self) -> None:
        value = self._surface.get_value(ISSUE_FIELD)
        key = self.resolve_key(value)

        if key is None:
            self.state = IssueKeyState.INVALID
            self.resolved_key = None
            self._surface.add_class(ISSUE_ROW, DANGER)
            self._surface.set_html(SUMMARY, SUMMARY_INVALID)
            return

        if key != value:
            self._surface.set_value(ISSUE_FIELD, key)
        self._check(key)

    def _check(self, key: str) -> None:
        # Placeholders go up before the lookup is issued
        self._surface.remove_class(ISSUE_ROW, DANGER)
        self._surface.set_text(SUMMARY, SUMMARY_CHECKING)
        self.state = IssueKeyState.CHECKING
        self.resolved_key = key

        self._lookup_task = asyncio.create_task(self._lookup(key, self.generation))

    async def _lookup(self, key: str, generation: int) -> None:
        error: Exception | None = None
        try:
            summary = await self._app.get_issue_summary(key)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.warning(f"Summary lookup for {key} failed: {type(e).__name__}: {e}")
            error = e
            summary = None

        if generation != self.generation:
            logger.debug(f"Discarding stale summary for {key}")
            return

        if error is not None and self._on_failure is not None:
            self._on_failure(ActivityLogEntry.error(f"Could not look up {key}: {error}"))

        self._surface.set_text(SUMMARY, summary or f"{key} not found")
        self.state = IssueKeyState.RESOLVED

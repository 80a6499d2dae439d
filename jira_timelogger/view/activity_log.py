# jira_timelogger/view/activity_log.py
"""Newest-first activity log feed with a highlight fade on live entries."""

import html
import logging
from typing import Iterable

from jira_timelogger.config.schema import TimeLoggerConfig
from jira_timelogger.models.activity_log import ActivityLogEntry, LogLevel
from jira_timelogger.view.constants import AL_COLOUR_MAP, AL_FADE_TO, USER_LOG_CONTAINER
from jira_timelogger.view.surface import PresentationSurface

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%d/%m/%Y, %H:%M:%S"


def render_entry(entry: ActivityLogEntry) -> str:
    """Render an entry as a userLog block."""
    level = entry.level or LogLevel.INFO
    message = html.escape(entry.message).replace("\n", "; ")
    logged_at = entry.logged_at.strftime(TIMESTAMP_FORMAT)
    return (
        f'<div class="userLog {level.value.lower()}" title="{logged_at}">'
        f"{level.value}: {message}</div>"
    )


class ActivityLogPresenter:
    """Renders activity entries into the user log container."""

    def __init__(self, surface: PresentationSurface, config: TimeLoggerConfig) -> None:
        self._surface = surface
        self.config = config

    def add_entry(self, entry: ActivityLogEntry, animate: bool = True) -> None:
        """
        Prepend an entry and scroll the log to the front.

        Args:
            entry: Entry to show
            animate: Flash the level colour and fade it out
        """
        self._surface.prepend_block(USER_LOG_CONTAINER, entry.entry_id, render_entry(entry))
        self._surface.scroll_to_top(USER_LOG_CONTAINER)
        if not animate:
            return

        colour = AL_COLOUR_MAP[entry.level or LogLevel.INFO]
        self._surface.animate_colour(
            entry.entry_id, colour, AL_FADE_TO, self.config.view.highlight_fade_ms
        )

    def remove_entry(self, entry: ActivityLogEntry) -> None:
        """Remove the block rendered for an entry."""
        if not self._surface.remove_block(USER_LOG_CONTAINER, entry.entry_id):
            logger.debug(f"No activity log block for entry {entry.entry_id}")

    def populate_from_history(self, entries: Iterable[ActivityLogEntry]) -> None:
        """Replay stored entries in order, without highlight."""
        count = 0
        for entry in entries:
            self.add_entry(entry, animate=False)
            count += 1
        logger.info(f"Populated activity log with {count} entries")

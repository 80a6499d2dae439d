# jira_timelogger/view/time_phrase.py
"""Debounced syntax check of the manual time-phrase field."""

import logging

from jira_timelogger.config.schema import TimeLoggerConfig
from jira_timelogger.view.constants import DANGER, TIME_MANUAL_FIELD, TIME_MANUAL_ROW
from jira_timelogger.view.debounce import DebounceTimer
from jira_timelogger.view.surface import PresentationSurface

logger = logging.getLogger(__name__)


class TimePhraseValidator:
    """
    Marks the manual time row invalid when its text isn't a JIRA time phrase.

    The check runs once input settles, against the field's text at that
    moment. No network calls.
    """

    def __init__(
        self,
        surface: PresentationSurface,
        config: TimeLoggerConfig,
        timer: DebounceTimer | None = None,
    ) -> None:
        self._surface = surface
        self.config = config
        self.timer = timer or DebounceTimer(TIME_MANUAL_FIELD)
        self.last_valid: bool | None = None

    def on_edit(self) -> None:
        """Handle an edit event: (re)start the settle timer."""
        self.timer.schedule(self.config.view.debounce_ms, self._settle)

    def reset(self) -> None:
        """Drop any pending check and clear the invalid mark."""
        self.timer.cancel_if_pending()
        self.last_valid = None
        self._surface.remove_class(TIME_MANUAL_ROW, DANGER)

    def _settle(self) -> None:
        value = self._surface.get_value(TIME_MANUAL_FIELD)
        self.last_valid = self.config.validation.time_regex.search(value) is not None

        if self.last_valid:
            self._surface.remove_class(TIME_MANUAL_ROW, DANGER)
        else:
            self._surface.add_class(TIME_MANUAL_ROW, DANGER)
            logger.debug(f"Time phrase '{value}' is not valid")

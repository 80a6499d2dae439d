# jira_timelogger/view/index.py
"""
View controller for the main time logging page.

Wires the debounced validators, the issue resolver, the activity log and the
form reconciler to one presentation surface. The methods here are the
operations the surface (or its event bindings) calls.
"""

import logging
from datetime import date
from typing import Callable

from jira_timelogger.app.service import AppService
from jira_timelogger.config.loader import load_config
from jira_timelogger.config.schema import TimeLoggerConfig
from jira_timelogger.models.activity_log import ActivityLogEntry
from jira_timelogger.models.snapshot import FormSnapshot
from jira_timelogger.view.activity_log import ActivityLogPresenter
from jira_timelogger.view.constants import (
    CLEAR_TIME_BUTTON,
    COPY_YEAR,
    DANGER,
    DAY_GRAND_TOTAL,
    ISSUE_FIELD,
    ISSUE_ROW,
    LOGGED_TOTAL,
    LOGGER_FORM,
    MASK,
    NEW_DAY_CONFIRMATION,
    SUMMARY,
    SUMMARY_BLANK_HTML,
    TIME_AUTO,
    TIME_AUTO_VALUE,
    TIME_MANUAL_FIELD,
    TIME_MANUAL_ROW,
    VERSION,
)
from jira_timelogger.view.form import FormReconciler
from jira_timelogger.view.issue_key import IssueKeyResolver
from jira_timelogger.view.surface import PresentationSurface
from jira_timelogger.view.time_phrase import TimePhraseValidator

logger = logging.getLogger(__name__)

JIRA_TEST_MASK_HTML = (
    '<div id="maskText">Testing JIRA connection, please wait<br />'
    '<img src="images/spinner.gif" alt="*" width="16" height="16" /></div>'
)


class IndexView:
    """
    Controller for the index page.

    Features:
        - Debounced time phrase and issue key validation
        - Issue summary lookup with stale result suppression
        - Activity log with history replay and live highlight
        - Form snapshot and submit-time validation
    """

    def __init__(
        self,
        surface: PresentationSurface,
        app: AppService,
        config: TimeLoggerConfig | None = None,
        config_loader: Callable[[], TimeLoggerConfig] = load_config,
        today: Callable[[], date] = date.today,
    ) -> None:
        """
        Initialize the view.

        Args:
            surface: Rendering target
            app: Application service
            config: Initial configuration (default: loaded via config_loader)
            config_loader: Called again by config_changed()
            today: Date source for the copyright year
        """
        self._surface = surface
        self._app = app
        self._config_loader = config_loader
        self._today = today
        self._config = config or config_loader()

        self.activity_log = ActivityLogPresenter(surface, self._config)
        self.time_phrase = TimePhraseValidator(surface, self._config)
        self.issue_key = IssueKeyResolver(
            surface, app, self._config, on_failure=self.add_activity_log
        )
        self.form = FormReconciler(surface, app, self._config)
        self._subscribed = False

    @property
    def config(self) -> TimeLoggerConfig:
        return self._config

    @property
    def surface(self) -> PresentationSurface:
        return self._surface

    @property
    def app(self) -> AppService:
        return self._app

    def init(self) -> None:
        """Populate the page once the surface is ready."""
        self.activity_log.populate_from_history(self._app.get_activity_logs())
        # Entries logged after the replay arrive live, and are highlighted
        if not self._subscribed:
            self._app.on_activity(self.add_activity_log)
            self._subscribed = True
        self._set_version()
        self._set_copyright_year()
        self.update_time_auto()
        self.update_logged_total()
        self.update_day_grand_total()
        logger.info("Index view initialised")

    def add_activity_log(self, entry: ActivityLogEntry, animate: bool = True) -> None:
        self.activity_log.add_entry(entry, animate)

    def remove_activity_log(self, entry: ActivityLogEntry) -> None:
        self.activity_log.remove_entry(entry)

    def show_time_manual(self) -> None:
        """Switch to manual time entry."""
        if self._surface.is_visible(TIME_MANUAL_FIELD):
            return
        self._app.set_time_manual(True)
        self._surface.hide(TIME_AUTO)
        self._surface.show(TIME_MANUAL_FIELD)
        self._surface.focus(TIME_MANUAL_FIELD)
        self._surface.set_text(CLEAR_TIME_BUTTON, "Cancel")

    def show_time_auto(self) -> None:
        """Switch back to the automatically calculated time."""
        if self._surface.is_visible(TIME_AUTO):
            return
        self._app.set_time_manual(False)
        # An emptied manual field is not an error once auto time is back
        self._surface.set_value(TIME_MANUAL_FIELD, "")
        self.time_phrase.reset()
        self._surface.hide(TIME_MANUAL_FIELD)
        self._surface.show(TIME_AUTO)
        self._surface.set_text(CLEAR_TIME_BUTTON, "Reset")

    def manual_time_entered(self) -> None:
        self.time_phrase.on_edit()

    def issue_key_entered(self) -> None:
        self.issue_key.on_edit()

    def enter_issue_key(self, key: str) -> None:
        """Set the issue field as if the user typed it."""
        self._surface.set_value(ISSUE_FIELD, key)
        self.issue_key_entered()

    def submit_time_form(self) -> None:
        self._surface.trigger(LOGGER_FORM, "submit")

    def validate_time_form(self) -> list[str]:
        return self.form.validate()

    def get_time_form_values(self) -> FormSnapshot:
        return self.form.build_snapshot()

    def reset_time_form(self) -> None:
        """Clear validation marks, summary and field values."""
        self._surface.remove_class(TIME_MANUAL_ROW, DANGER)
        self._surface.remove_class(ISSUE_ROW, DANGER)
        self.issue_key.reset()
        self._surface.set_html(SUMMARY, SUMMARY_BLANK_HTML)
        self._surface.reset_form(LOGGER_FORM, self._config.form.fields)
        self.show_time_auto()

    def show_jira_test_message(self) -> None:
        self._surface.set_html(MASK, JIRA_TEST_MASK_HTML)
        self._surface.show(MASK)

    def hide_jira_test_message(self) -> None:
        self._surface.hide(MASK)
        self._surface.set_html(MASK, "")

    def update_logged_total(self, total: str | None = None) -> None:
        total = total or self._app.get_logged_total_as_string()
        self._surface.set_text(LOGGED_TOTAL, total)

    def update_day_grand_total(self, total: str | None = None) -> None:
        total = total or self._app.get_day_grand_total_as_string()
        self._surface.set_text(DAY_GRAND_TOTAL, total)

    def update_time_auto(self, time: str | None = None) -> None:
        time = time or self._app.get_time_auto_as_string()
        self._surface.set_text(TIME_AUTO_VALUE, time)

    def config_changed(self) -> None:
        """Reload configuration and hand it to every component."""
        self._config = self._config_loader()
        self.activity_log.config = self._config
        self.time_phrase.config = self._config
        self.issue_key.config = self._config
        self.form.config = self._config
        logger.info("Configuration reloaded")

    def confirm_logged_time_reset(self) -> None:
        """Offer to reset the logged total when a new day starts."""
        app = self._app
        self._surface.confirm(NEW_DAY_CONFIRMATION, lambda: app.reset_logged_total(True))

    def _set_version(self) -> None:
        self._surface.set_text(VERSION, f"v{self._app.get_version()}")

    def _set_copyright_year(self) -> None:
        self._surface.set_text(COPY_YEAR, str(self._today().year))

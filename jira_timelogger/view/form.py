# jira_timelogger/view/form.py
"""
Submit-time reconciliation of the logger form.

Runs synchronously and never looks at debounce state: whatever the fields
hold right now is what gets validated and snapshotted.
"""

import logging

from jira_timelogger.app.service import AppService
from jira_timelogger.config.schema import TimeLoggerConfig
from jira_timelogger.models.snapshot import FieldKind, FormField, FormSnapshot
from jira_timelogger.view.constants import (
    DANGER,
    IN_FLIGHT_MARKER,
    ISSUE_FIELD,
    ISSUE_ROW,
    SUMMARY,
    TIME_MANUAL_FIELD,
    TIME_MANUAL_ROW,
)
from jira_timelogger.view.surface import PresentationSurface

logger = logging.getLogger(__name__)


class FormReconciler:
    """Builds the submission snapshot and runs the final validation gate."""

    def __init__(
        self,
        surface: PresentationSurface,
        app: AppService,
        config: TimeLoggerConfig,
    ) -> None:
        self._surface = surface
        self._app = app
        self.config = config

    @property
    def fields(self) -> list[FormField]:
        return self.config.form.fields

    def _read_field(self, declared: FormField) -> str | bool:
        if declared.kind is FieldKind.BOOLEAN:
            return self._surface.is_checked(declared.name)

        value = self._surface.get_value(declared.name)
        if declared.kind is FieldKind.ENUM and value not in declared.choices:
            logger.warning(
                f"Unknown value '{value}' for '{declared.name}', using '{declared.choices[0]}'"
            )
            return declared.choices[0]
        return value

    def build_snapshot(self) -> FormSnapshot:
        """Collect the current form values for submission."""
        values = {declared.name: self._read_field(declared) for declared in self.fields}

        if self._app.get_time_manual():
            time = self._surface.get_value(TIME_MANUAL_FIELD)
        else:
            time = self._app.get_time_auto_as_string(self.config.view.time_rounding)

        # Placeholders and "<key> not found" must not be submitted as a summary
        issue = str(values.get(ISSUE_FIELD, self._surface.get_value(ISSUE_FIELD)))
        summary_text = self._surface.get_text(SUMMARY)
        summary = None
        if (
            summary_text != ""
            and issue not in summary_text
            and IN_FLIGHT_MARKER not in summary_text
        ):
            summary = summary_text

        return FormSnapshot(values=values, time=time, summary=summary)

    def validate(self) -> list[str]:
        """
        Check both fields and mark failing rows.

        Returns:
            One human-readable error per failing field (empty if valid)
        """
        self._surface.remove_class(TIME_MANUAL_ROW, DANGER)
        self._surface.remove_class(ISSUE_ROW, DANGER)
        errors = []
        patterns = self.config.validation

        if self._app.get_time_manual():
            time = self._surface.get_value(TIME_MANUAL_FIELD)
            if time == "" or not patterns.time_regex.search(time):
                self._surface.add_class(TIME_MANUAL_ROW, DANGER)
                errors.append(f"'{time}' does not appear to be a valid JIRA time phrase")

        issue = self._surface.get_value(ISSUE_FIELD)
        if issue == "" or not patterns.issue_key_regex.search(issue):
            self._surface.add_class(ISSUE_ROW, DANGER)
            errors.append(f"'{issue}' does not appear to be a valid JIRA issue key")

        if errors:
            logger.info(f"Time form failed validation with {len(errors)} error(s)")
        return errors

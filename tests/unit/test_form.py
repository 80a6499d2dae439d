# tests/unit/test_form.py
"""Tests for the form snapshot and submit-time validation."""

from unittest.mock import MagicMock

import pytest

from jira_timelogger.app.service import AppService
from jira_timelogger.config.schema import TimeLoggerConfig
from jira_timelogger.models.snapshot import FormSnapshot
from jira_timelogger.view.constants import (
    DANGER,
    ISSUE_FIELD,
    ISSUE_ROW,
    SUMMARY,
    TIME_MANUAL_FIELD,
    TIME_MANUAL_ROW,
)
from jira_timelogger.view.form import FormReconciler
from jira_timelogger.view.surface import InMemorySurface


def _app(manual: bool = False, auto: str = "1h 5m") -> MagicMock:
    app = MagicMock(spec=AppService)
    app.get_time_manual.return_value = manual
    app.get_time_auto_as_string.return_value = auto
    return app


def _surface(**values) -> InMemorySurface:
    defaults = {
        ISSUE_FIELD: "ABC-1",
        "comment": "Reviewed PR",
        "adjustEstimate": "leave",
    }
    defaults.update(values)
    return InMemorySurface(defaults)


class TestBuildSnapshot:
    def test_declared_fields_by_kind(self):
        surface = _surface()
        surface.set_checked("keepIssue", True)
        form = FormReconciler(surface, _app(), TimeLoggerConfig())

        snapshot = form.build_snapshot()

        assert snapshot.values == {
            "issue": "ABC-1",
            "comment": "Reviewed PR",
            "adjustEstimate": "leave",
            "keepIssue": True,
        }

    def test_unchecked_boolean_is_false(self):
        form = FormReconciler(_surface(), _app(), TimeLoggerConfig())
        assert form.build_snapshot().values["keepIssue"] is False

    def test_unknown_enum_value_falls_back_to_first_choice(self):
        form = FormReconciler(_surface(adjustEstimate="bogus"), _app(), TimeLoggerConfig())
        assert form.build_snapshot().values["adjustEstimate"] == "auto"

    def test_auto_time_rounded_to_minute(self):
        app = _app(manual=False, auto="2h 10m")
        form = FormReconciler(_surface(), app, TimeLoggerConfig())

        snapshot = form.build_snapshot()

        assert snapshot.time == "2h 10m"
        app.get_time_auto_as_string.assert_called_once_with("min")

    def test_manual_time_uses_live_text(self):
        app = _app(manual=True)
        form = FormReconciler(_surface(timeManual="45m"), app, TimeLoggerConfig())

        assert form.build_snapshot().time == "45m"
        app.get_time_auto_as_string.assert_not_called()

    def test_real_summary_is_included(self):
        surface = _surface()
        surface.set_text(SUMMARY, "Fix the login page")
        form = FormReconciler(surface, _app(), TimeLoggerConfig())

        snapshot = form.build_snapshot()

        assert snapshot.summary == "Fix the login page"
        assert snapshot.as_dict()["summary"] == "Fix the login page"

    @pytest.mark.parametrize(
        "summary",
        ["", "*Waiting...*", "*Checking...*", "ABC-1 not found", "Loading..."],
    )
    def test_placeholder_or_echoed_summary_is_excluded(self, summary):
        surface = _surface()
        surface.set_text(SUMMARY, summary)
        form = FormReconciler(surface, _app(), TimeLoggerConfig())

        snapshot = form.build_snapshot()

        assert snapshot.summary is None
        assert "summary" not in snapshot.as_dict()

    def test_blank_summary_after_reset_is_excluded(self):
        surface = _surface(issue="")
        surface.set_html(SUMMARY, "&nbsp;")
        form = FormReconciler(surface, _app(), TimeLoggerConfig())

        assert form.build_snapshot().summary is None

    def test_as_dict_merges_time(self):
        snapshot = FormSnapshot(values={"issue": "ABC-1"}, time="1h")
        assert snapshot.as_dict() == {"issue": "ABC-1", "time": "1h"}


class TestValidate:
    def test_valid_form_has_no_errors(self):
        surface = _surface(timeManual="1h 30m")
        form = FormReconciler(surface, _app(manual=True), TimeLoggerConfig())

        assert form.validate() == []
        assert not surface.has_class(ISSUE_ROW, DANGER)
        assert not surface.has_class(TIME_MANUAL_ROW, DANGER)

    def test_both_fields_invalid(self):
        surface = _surface(issue="nope", timeManual="soon")
        form = FormReconciler(surface, _app(manual=True), TimeLoggerConfig())

        errors = form.validate()

        assert errors == [
            "'soon' does not appear to be a valid JIRA time phrase",
            "'nope' does not appear to be a valid JIRA issue key",
        ]
        assert surface.has_class(ISSUE_ROW, DANGER)
        assert surface.has_class(TIME_MANUAL_ROW, DANGER)

    def test_time_not_checked_in_auto_mode(self):
        surface = _surface(timeManual="soon")
        form = FormReconciler(surface, _app(manual=False), TimeLoggerConfig())

        assert form.validate() == []

    def test_empty_manual_time_is_error(self):
        surface = _surface(timeManual="")
        form = FormReconciler(surface, _app(manual=True), TimeLoggerConfig())

        assert form.validate() == ["'' does not appear to be a valid JIRA time phrase"]

    def test_empty_issue_is_error(self):
        form = FormReconciler(_surface(issue=""), _app(), TimeLoggerConfig())
        assert form.validate() == ["'' does not appear to be a valid JIRA issue key"]

    def test_bare_number_is_not_rewritten_at_submit(self):
        """The default project prefix only applies in the live validator."""
        config = TimeLoggerConfig(default_project_key="jtl")
        surface = _surface(issue="1234")
        form = FormReconciler(surface, _app(), config)

        assert form.validate() == ["'1234' does not appear to be a valid JIRA issue key"]
        assert surface.get_value(ISSUE_FIELD) == "1234"

    def test_previous_marks_are_cleared(self):
        surface = _surface()
        surface.add_class(ISSUE_ROW, DANGER)
        surface.add_class(TIME_MANUAL_ROW, DANGER)
        form = FormReconciler(surface, _app(), TimeLoggerConfig())

        assert form.validate() == []
        assert not surface.has_class(ISSUE_ROW, DANGER)
        assert not surface.has_class(TIME_MANUAL_ROW, DANGER)

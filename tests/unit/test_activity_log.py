# tests/unit/test_activity_log.py
"""Tests for the activity log presenter."""

from datetime import datetime

import pytest

from jira_timelogger.config.schema import TimeLoggerConfig, ViewConfig
from jira_timelogger.models.activity_log import ActivityLogEntry, LogLevel
from jira_timelogger.view.activity_log import ActivityLogPresenter, render_entry
from jira_timelogger.view.constants import USER_LOG_CONTAINER
from jira_timelogger.view.surface import InMemorySurface

LOGGED_AT = datetime(2026, 3, 14, 9, 26, 53)


@pytest.fixture
def surface():
    return InMemorySurface()


@pytest.fixture
def presenter(surface):
    return ActivityLogPresenter(surface, TimeLoggerConfig())


class TestRender:
    def test_block_markup(self):
        entry = ActivityLogEntry("Logged 1h to ABC-1", LogLevel.WARN, LOGGED_AT)
        assert render_entry(entry) == (
            '<div class="userLog warn" title="14/03/2026, 09:26:53">'
            "WARN: Logged 1h to ABC-1</div>"
        )

    def test_newlines_collapse(self):
        entry = ActivityLogEntry("first\nsecond\nthird", LogLevel.INFO, LOGGED_AT)
        assert "INFO: first; second; third</div>" in render_entry(entry)

    def test_message_is_escaped(self):
        entry = ActivityLogEntry("<script>x</script> & co", LogLevel.ERROR, LOGGED_AT)
        markup = render_entry(entry)
        assert "<script>" not in markup
        assert "&lt;script&gt;x&lt;/script&gt; &amp; co" in markup


class TestAddEntry:
    def test_prepends_and_scrolls(self, presenter, surface):
        first = ActivityLogEntry.info("first")
        second = ActivityLogEntry.info("second")

        presenter.add_entry(first)
        presenter.add_entry(second)

        assert surface.block_ids(USER_LOG_CONTAINER) == [second.entry_id, first.entry_id]
        assert surface.scroll_positions[USER_LOG_CONTAINER] == 0

    @pytest.mark.parametrize(
        "level,colour",
        [
            (LogLevel.INFO, "#5bb75b"),
            (LogLevel.WARN, "#f6b83f"),
            (LogLevel.ERROR, "#b75b5b"),
        ],
    )
    def test_animates_level_colour(self, presenter, surface, level, colour):
        entry = ActivityLogEntry("msg", level)

        presenter.add_entry(entry)

        assert surface.animations == [(entry.entry_id, colour, "none", 1500)]

    def test_fade_duration_from_config(self, surface):
        presenter = ActivityLogPresenter(
            surface, TimeLoggerConfig(view=ViewConfig(highlight_fade_ms=300))
        )
        entry = ActivityLogEntry.info("msg")

        presenter.add_entry(entry)

        assert surface.animations[0][3] == 300

    def test_no_animation_when_disabled(self, presenter, surface):
        presenter.add_entry(ActivityLogEntry.info("quiet"), animate=False)

        assert surface.animations == []
        assert len(surface.block_ids(USER_LOG_CONTAINER)) == 1


class TestHistory:
    def test_history_is_prepended_in_order_without_animation(self, presenter, surface):
        e1 = ActivityLogEntry.info("one")
        e2 = ActivityLogEntry.warn("two")
        e3 = ActivityLogEntry.error("three")

        presenter.populate_from_history([e1, e2, e3])

        assert surface.block_ids(USER_LOG_CONTAINER) == [e3.entry_id, e2.entry_id, e1.entry_id]
        assert surface.animations == []

    def test_live_entries_after_history_are_animated(self, presenter, surface):
        presenter.populate_from_history([ActivityLogEntry.info("old")])
        live = ActivityLogEntry.info("new")

        presenter.add_entry(live)

        assert [a[0] for a in surface.animations] == [live.entry_id]


class TestRemoveEntry:
    def test_removes_only_matching_entry_in_same_second(self, presenter, surface):
        """Two entries sharing a rendered timestamp are removed independently."""
        a = ActivityLogEntry("a", LogLevel.INFO, LOGGED_AT)
        b = ActivityLogEntry("b", LogLevel.INFO, LOGGED_AT)
        presenter.add_entry(a)
        presenter.add_entry(b)

        presenter.remove_entry(a)

        assert surface.block_ids(USER_LOG_CONTAINER) == [b.entry_id]

    def test_removing_unknown_entry_is_noop(self, presenter, surface):
        presenter.add_entry(ActivityLogEntry.info("kept"))

        presenter.remove_entry(ActivityLogEntry.info("never shown"))

        assert len(surface.block_ids(USER_LOG_CONTAINER)) == 1

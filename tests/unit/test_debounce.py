# tests/unit/test_debounce.py
"""Tests for the cancel-then-reschedule debounce timer."""

import asyncio

import pytest

from jira_timelogger.view.debounce import DebounceTimer

DELAY_MS = 50
SETTLE = 0.15


@pytest.mark.asyncio
async def test_only_last_scheduled_action_runs():
    """Rapid reschedules coalesce into the last action."""
    timer = DebounceTimer("issue")
    calls = []

    for i in range(5):
        timer.schedule(DELAY_MS, lambda i=i: calls.append(i))
        await asyncio.sleep(0.005)

    assert timer.pending is True
    await asyncio.sleep(SETTLE)

    assert calls == [4]
    assert timer.pending is False


@pytest.mark.asyncio
async def test_action_does_not_run_before_delay():
    timer = DebounceTimer("issue")
    calls = []

    timer.schedule(DELAY_MS, lambda: calls.append("fired"))
    await asyncio.sleep(0.01)

    assert calls == []
    await asyncio.sleep(SETTLE)
    assert calls == ["fired"]


@pytest.mark.asyncio
async def test_cancel_if_pending_drops_action():
    timer = DebounceTimer("timeManual")
    calls = []

    timer.schedule(DELAY_MS, lambda: calls.append("fired"))
    assert timer.cancel_if_pending() is True
    await asyncio.sleep(SETTLE)

    assert calls == []
    assert timer.pending is False


@pytest.mark.asyncio
async def test_cancel_without_pending_is_noop():
    timer = DebounceTimer("timeManual")
    assert timer.cancel_if_pending() is False


@pytest.mark.asyncio
async def test_schedule_again_after_fire():
    """A timer is reusable once its action has run."""
    timer = DebounceTimer("issue")
    calls = []

    timer.schedule(10, lambda: calls.append(1))
    await asyncio.sleep(0.05)
    timer.schedule(10, lambda: calls.append(2))
    await asyncio.sleep(0.05)

    assert calls == [1, 2]


@pytest.mark.asyncio
async def test_timers_for_different_fields_are_independent():
    issue_timer = DebounceTimer("issue")
    time_timer = DebounceTimer("timeManual")
    calls = []

    issue_timer.schedule(DELAY_MS, lambda: calls.append("issue"))
    time_timer.schedule(DELAY_MS, lambda: calls.append("time"))
    issue_timer.cancel_if_pending()
    await asyncio.sleep(SETTLE)

    assert calls == ["time"]


def test_schedule_outside_event_loop_raises():
    """Without a running loop there is nowhere to schedule."""
    timer = DebounceTimer("issue")
    with pytest.raises(RuntimeError):
        timer.schedule(DELAY_MS, lambda: None)

# jira_timelogger/view/debounce.py
"""
Debounce timer for coalescing rapid input events.

Each validated field owns one DebounceTimer. Scheduling always cancels the
previous action first, so at most one action per field is live.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable

logger = logging.getLogger(__name__)


@dataclass
class PendingTimer:
    """The single in-flight debounce for a field."""

    field: str
    delay_ms: int
    action: Callable[[], None]
    handle: asyncio.TimerHandle


class DebounceTimer:
    """
    Cancel-then-reschedule timer on the running asyncio loop.

    Of N schedule() calls made less than delay_ms apart, only the last
    action runs. Cancelled actions are dropped without side effects.
    """

    def __init__(self, field: str, loop: asyncio.AbstractEventLoop | None = None):
        """
        Initialize debounce timer.

        Args:
            field: Name of the field this timer debounces (for logging)
            loop: Event loop to schedule on (default: the running loop)
        """
        self.field = field
        self._loop = loop
        self._pending: PendingTimer | None = None

    @property
    def pending(self) -> bool:
        """Whether an action is scheduled and has not run yet."""
        return self._pending is not None

    def schedule(self, delay_ms: int, action: Callable[[], None]) -> None:
        """
        Run action after delay_ms, replacing any pending action.

        Must be called from within the event loop thread.
        """
        self.cancel_if_pending()

        loop = self._loop or asyncio.get_running_loop()
        handle = loop.call_later(delay_ms / 1000, self._fire)
        self._pending = PendingTimer(
            field=self.field, delay_ms=delay_ms, action=action, handle=handle
        )

    def cancel_if_pending(self) -> bool:
        """
        Drop the pending action without running it.

        Returns:
            True if an action was cancelled
        """
        if self._pending is None:
            return False

        self._pending.handle.cancel()
        self._pending = None
        logger.debug(f"Cancelled pending debounce for '{self.field}'")
        return True

    def _fire(self) -> None:
        pending = self._pending
        if pending is None:
            return
        self._pending = None
        pending.action()

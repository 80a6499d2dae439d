# jira_timelogger/view/surface.py
"""
Presentation surface protocol definition.

The view controller never touches a rendering target directly. It calls the
primitives below on an injected surface: a DOM bridge in the browser build,
or InMemorySurface for tests and headless CLI runs.
"""

import html
import logging
import re
from abc import ABC, abstractmethod
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from jira_timelogger.models.snapshot import FieldKind, FormField

logger = logging.getLogger(__name__)

_TAG_RE = re.compile(r"<[^>]+>")


class PresentationSurface(ABC):
    """
    Abstract base class for rendering targets.

    All calls happen on the event loop thread; implementations need no locking.
    """

    # Field values

    @abstractmethod
    def get_value(self, field: str) -> str:
        """Current text of an input field (read live, never cached)."""
        pass

    @abstractmethod
    def set_value(self, field: str, value: str) -> None:
        pass

    @abstractmethod
    def is_checked(self, field: str) -> bool:
        pass

    # Visibility and focus

    @abstractmethod
    def is_visible(self, element: str) -> bool:
        pass

    @abstractmethod
    def show(self, element: str) -> None:
        pass

    @abstractmethod
    def hide(self, element: str) -> None:
        pass

    @abstractmethod
    def focus(self, element: str) -> None:
        pass

    # Region content

    @abstractmethod
    def set_text(self, region: str, text: str) -> None:
        pass

    @abstractmethod
    def get_text(self, region: str) -> str:
        """Rendered text of a region (HTML entities decoded)."""
        pass

    @abstractmethod
    def set_html(self, region: str, markup: str) -> None:
        pass

    # State classes

    @abstractmethod
    def add_class(self, element: str, css_class: str) -> None:
        pass

    @abstractmethod
    def remove_class(self, element: str, css_class: str) -> None:
        pass

    @abstractmethod
    def has_class(self, element: str, css_class: str) -> bool:
        pass

    # Activity log blocks

    @abstractmethod
    def prepend_block(self, container: str, block_id: str, markup: str) -> None:
        """Insert a rendered block at the front of a container."""
        pass

    @abstractmethod
    def remove_block(self, container: str, block_id: str) -> bool:
        """Remove a block. Returns False if no block had that id."""
        pass

    @abstractmethod
    def scroll_to_top(self, container: str) -> None:
        pass

    @abstractmethod
    def animate_colour(
        self, block_id: str, start: str, end: str, duration_ms: int
    ) -> None:
        """Set a block's background to start, then fade it to end."""
        pass

    # Form actions and dialogs

    @abstractmethod
    def reset_form(self, form: str, fields: list[FormField]) -> None:
        """Restore declared fields to their defaults."""
        pass

    @abstractmethod
    def trigger(self, target: str, event: str) -> None:
        """Fire a UI event (e.g. 'submit') on an element."""
        pass

    @abstractmethod
    def confirm(self, message: str, on_confirm: Callable[[], None]) -> None:
        """Ask the user to confirm; call on_confirm if they accept."""
        pass


@dataclass
class Block:
    """A rendered block inside a container."""

    block_id: str
    markup: str


class InMemorySurface(PresentationSurface):
    """
    Dictionary-backed surface that records every call.

    Used by the tests and by headless CLI runs. Elements are visible unless
    listed in hidden or hidden later.
    """

    def __init__(
        self,
        values: dict[str, str] | None = None,
        hidden: Iterable[str] = (),
        confirm_response: bool = True,
    ) -> None:
        self.values: dict[str, str] = dict(values or {})
        self.checked: dict[str, bool] = {}
        self.texts: dict[str, str] = {}
        self.markup: dict[str, str] = {}
        self.classes: dict[str, set[str]] = defaultdict(set)
        self.hidden: set[str] = set(hidden)
        self.focused: str | None = None
        self.blocks: dict[str, list[Block]] = defaultdict(list)
        self.scroll_positions: dict[str, int] = {}
        self.animations: list[tuple[str, str, str, int]] = []
        self.confirm_response = confirm_response
        self.confirmations: list[str] = []
        self.calls: list[tuple[Any, ...]] = []
        self._handlers: dict[tuple[str, str], list[Callable[[], None]]] = defaultdict(list)

    def _record(self, *call: Any) -> None:
        self.calls.append(call)

    def calls_to(self, name: str) -> list[tuple[Any, ...]]:
        """Recorded calls of one primitive, in order."""
        return [c for c in self.calls if c[0] == name]

    def bind(self, target: str, event: str, handler: Callable[[], None]) -> None:
        """Register a handler for trigger(target, event)."""
        self._handlers[(target, event)].append(handler)

    def set_checked(self, field: str, checked: bool) -> None:
        self.checked[field] = checked

    def block_ids(self, container: str) -> list[str]:
        """Block ids in display order (front first)."""
        return [b.block_id for b in self.blocks[container]]

    def get_value(self, field: str) -> str:
        return self.values.get(field, "")

    def set_value(self, field: str, value: str) -> None:
        self._record("set_value", field, value)
        self.values[field] = value

    def is_checked(self, field: str) -> bool:
        return self.checked.get(field, False)

    def is_visible(self, element: str) -> bool:
        return element not in self.hidden

    def show(self, element: str) -> None:
        self._record("show", element)
        self.hidden.discard(element)

    def hide(self, element: str) -> None:
        self._record("hide", element)
        self.hidden.add(element)

    def focus(self, element: str) -> None:
        self._record("focus", element)
        self.focused = element

    def set_text(self, region: str, text: str) -> None:
        self._record("set_text", region, text)
        self.texts[region] = text
        self.markup[region] = html.escape(text)

    def get_text(self, region: str) -> str:
        return self.texts.get(region, "")

    def set_html(self, region: str, markup: str) -> None:
        self._record("set_html", region, markup)
        self.markup[region] = markup
        self.texts[region] = html.unescape(_TAG_RE.sub("", markup))

    def add_class(self, element: str, css_class: str) -> None:
        self._record("add_class", element, css_class)
        self.classes[element].add(css_class)

    def remove_class(self, element: str, css_class: str) -> None:
        self._record("remove_class", element, css_class)
        self.classes[element].discard(css_class)

    def has_class(self, element: str, css_class: str) -> bool:
        return css_class in self.classes[element]

    def prepend_block(self, container: str, block_id: str, markup: str) -> None:
        self._record("prepend_block", container, block_id)
        self.blocks[container].insert(0, Block(block_id=block_id, markup=markup))

    def remove_block(self, container: str, block_id: str) -> bool:
        self._record("remove_block", container, block_id)
        before = len(self.blocks[container])
        self.blocks[container] = [
            b for b in self.blocks[container] if b.block_id != block_id
        ]
        return len(self.blocks[container]) < before

    def scroll_to_top(self, container: str) -> None:
        self._record("scroll_to_top", container)
        self.scroll_positions[container] = 0

    def animate_colour(
        self, block_id: str, start: str, end: str, duration_ms: int
    ) -> None:
        self._record("animate_colour", block_id, start, end, duration_ms)
        self.animations.append((block_id, start, end, duration_ms))

    def reset_form(self, form: str, fields: list[FormField]) -> None:
        self._record("reset_form", form)
        for declared in fields:
            if declared.kind is FieldKind.BOOLEAN:
                self.checked[declared.name] = bool(declared.default)
            elif declared.default is None:
                self.values[declared.name] = ""
            else:
                self.values[declared.name] = str(declared.default)

    def trigger(self, target: str, event: str) -> None:
        self._record("trigger", target, event)
        handlers = self._handlers.get((target, event), [])
        if not handlers:
            logger.debug(f"No handler bound for {event} on '{target}'")
        for handler in handlers:
            handler()

    def confirm(self, message: str, on_confirm: Callable[[], None]) -> None:
        self._record("confirm", message)
        self.confirmations.append(message)
        if self.confirm_response:
            on_confirm()

"""A push button with a centred caption and tap / hold actions."""

from __future__ import annotations

import enum
from typing import Any, Callable, Optional

from .core import EventCallback, Widget
from .theme import Theme

ACTION_MAX_LEN = 63

Dispatch = Callable[[str], Any]


class ButtonField(enum.IntEnum):
    """Fields of a button that can be bound to data."""

    LABEL = 0


class _Caption(Widget):
    kind = "label"

    def __init__(self, parent: Widget) -> None:
        super().__init__(parent)
        self.text = ""
        self.align = "center"


class Button(Widget):
    """A button styled by the theme; 'clicked' is a tap, 'long_pressed' a hold."""

    kind = "button"

    def __init__(
        self,
        parent: Optional[Widget] = None,
        x: int = 0,
        y: int = 0,
        width: int = 0,
        height: int = 0,
        theme: Optional[Theme] = None,
    ) -> None:
        super().__init__(parent, x, y, width, height)
        self.theme = theme if theme is not None else Theme()
        self.theme.apply(self, "button")
        _Caption(self)

    @property
    def caption(self) -> Optional[Widget]:
        return self.children[0] if self.children else None

    @property
    def label(self) -> str:
        caption = self.caption
        return caption.text if caption is not None else ""

    def set_label(self, text: Optional[str]) -> None:
        caption = self.caption
        if caption is not None:
            caption.text = text or ""

    def on_tap(self, callback: EventCallback) -> EventCallback:
        return self.on("clicked", callback)

    def on_hold(self, callback: EventCallback) -> EventCallback:
        return self.on("long_pressed", callback)

    def _bind_action(self, event: str, action: Optional[str], dispatch: Dispatch) -> None:
        if not action:
            return
        stored = action[:ACTION_MAX_LEN]
        self.on(event, lambda _widget: dispatch(stored))

    def set_tap_action(self, action: Optional[str], dispatch: Dispatch) -> None:
        """Dispatch the action string on every tap; an empty action is ignored."""
        self._bind_action("clicked", action, dispatch)

    def set_hold_action(self, action: Optional[str], dispatch: Dispatch) -> None:
        """Dispatch the action string on every long press; an empty action is ignored."""
        self._bind_action("long_pressed", action, dispatch)

    def set_field(self, field: int, value: str) -> None:
        if field == ButtonField.LABEL:
            self.set_label(value)

    def tap(self) -> None:
        self.emit("clicked")

    def hold(self) -> None:
        self.emit("long_pressed")
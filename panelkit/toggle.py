"""An on/off switch that dispatches an action when the user flips it."""

from __future__ import annotations

import enum
from typing import Any, Callable, Optional

from .core import State, Widget
from .theme import Theme

ACTION_MAX_LEN = 63

Dispatch = Callable[[str], Any]


def _atoi(text: str) -> int:
    """Read a leading decimal integer leniently; no digits give 0."""
    s = text.lstrip(" \t\n\r\f\v")
    sign = 1
    if s[:1] in ("+", "-"):
        sign = -1 if s[0] == "-" else 1
        s = s[1:]
    digits = ""
    for ch in s:
        if not ch.isdigit() or not ch.isascii():
            break
        digits += ch
    return sign * int(digits) if digits else 0


class ToggleField(enum.IntEnum):
    """Fields of a toggle that can be bound to data."""

    STATE = 0


class Toggle(Widget):
    """A switch; only user changes dispatch actions, programmatic ones do not."""

    kind = "switch"

    def __init__(
        self,
        parent: Optional[Widget] = None,
        x: int = 0,
        y: int = 0,
        width: int = 0,
        height: int = 0,
        theme: Optional[Theme] = None,
        dispatch: Optional[Dispatch] = None,
    ) -> None:
        super().__init__(parent, x, y, width, height)
        self.theme = theme if theme is not None else Theme()
        self.theme.apply(self, "toggle")
        self.on_action = ""
        self.off_action = ""
        self.dispatch_enabled = True
        self._dispatch = dispatch
        self.on("value_changed", self._on_value_changed)

    @property
    def checked(self) -> bool:
        return bool(self.state & State.CHECKED)

    def _on_value_changed(self, _widget: Widget) -> None:
        if not self.dispatch_enabled or self._dispatch is None:
            return
        if self.checked and self.on_action:
            self._dispatch(self.on_action)
        elif not self.checked and self.off_action:
            self._dispatch(self.off_action)

    def set_actions(self, on_action: Optional[str], off_action: Optional[str]) -> None:
        """Set the actions sent when switched on and off; None keeps the current one."""
        if on_action is not None:
            self.on_action = on_action[:ACTION_MAX_LEN]
        if off_action is not None:
            self.off_action = off_action[:ACTION_MAX_LEN]

    def set_state(self, state: bool) -> None:
        """Change the state without dispatching any action."""
        self.dispatch_enabled = False
        try:
            if state:
                self.state |= State.CHECKED
            else:
                self.state &= ~State.CHECKED
        finally:
            self.dispatch_enabled = True

    def set_field(self, field: int, value: str) -> None:
        if field == ToggleField.STATE:
            self.set_state(_atoi(value) != 0)

    def toggle(self) -> None:
        """Flip the state as a user would, dispatching the matching action."""
        if not self.valid:
            return
        self.state ^= State.CHECKED
        self.emit("value_changed")
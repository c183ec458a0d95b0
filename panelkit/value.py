"""A clipped text label for live values, drawn in the accent colour."""

from __future__ import annotations

import enum
from typing import Optional

from .core import Widget
from .theme import Theme


class ValueField(enum.IntEnum):
    """Fields of a value label that can be bound to data."""

    TEXT = 0


class ValueLabel(Widget):
    """A value readout styled by the theme's 'value' style."""

    kind = "label"

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
        self.text = ""
        self.long_mode = "clip"
        self.theme.apply(self, "value")

    def set_text(self, text: str) -> None:
        self.text = text

    def set_field(self, field: int, value: str) -> None:
        """Set a bound field from its string value; unknown fields are ignored."""
        if field == ValueField.TEXT:
            self.set_text(value)
"""A single-line text label that clips what does not fit."""

from __future__ import annotations

import enum
from typing import Optional

from .core import Widget
from .theme import Theme


class LabelField(enum.IntEnum):
    """Fields of a label that can be bound to data."""

    TEXT = 0


class Label(Widget):
    """A clipped text label styled by the theme's 'label' style."""

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
        self.theme.apply(self, "label")

    def set_text(self, text: str) -> None:
        self.text = text

    def set_field(self, field: int, value: str) -> None:
        """Set a bound field from its string value; unknown fields are ignored."""
        if field == LabelField.TEXT:
            self.set_text(value)
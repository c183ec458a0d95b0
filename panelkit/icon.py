"""A centred, clipped text glyph drawn in the accent colour."""

from __future__ import annotations

import enum
from typing import Optional

from .core import Part, Widget
from .style import TextAlign
from .theme import Theme


class IconField(enum.IntEnum):
    """Fields of an icon that can be bound to data."""

    TEXT = 0


class Icon(Widget):
    """A text icon styled by the theme's 'icon' style."""

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
        self.set_style("text_align", TextAlign.CENTER, Part.MAIN)
        self.long_mode = "clip"
        self.theme.apply(self, "icon")

    def set_text(self, text: str) -> None:
        self.text = text

    def set_field(self, field: int, value: str) -> None:
        """Set a bound field from its string value; unknown fields are ignored."""
        if field == IconField.TEXT:
            self.set_text(value)
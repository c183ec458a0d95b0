"""A horizontal progress bar with an optional two-tone caption drawn over it."""

from __future__ import annotations

import enum
from typing import NamedTuple, Optional

from .core import Color, Widget
from .theme import ColorRole, Theme
from .toggle import _atoi

LABEL_MAX_LEN = 63

_FONT_LINE_HEIGHT = {
    "unscii_8": 8,
    "unscii_16": 16,
    "montserrat_12": 15,
    "montserrat_14": 16,
    "montserrat_20": 22,
}

Area = tuple  # (x1, y1, x2, y2), both corners inclusive


class BarField(enum.IntEnum):
    """Fields of a bar that can be bound to data."""

    VALUE = 0
    MAX = 1
    LABEL = 2


class _LabelRegion(NamedTuple):
    clip: Area
    color: Color
    text_area: Area


def _intersect(a: Area, b: Area) -> Optional[Area]:
    x1, y1 = max(a[0], b[0]), max(a[1], b[1])
    x2, y2 = min(a[2], b[2]), min(a[3], b[3])
    if x1 > x2 or y1 > y2:
        return None
    return (x1, y1, x2, y2)


def _half_toward_zero(value: int) -> int:
    return int(value / 2)


class Bar(Widget):
    """A bar from 0 to a maximum; the caption is readable over both fill and track."""

    kind = "bar"

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
        self.minimum = 0
        self.maximum = 100
        self.value = 0
        self.label = ""
        self.theme.apply(self, "bar")

    def _set_range(self, minimum: int, maximum: int) -> None:
        self.minimum = minimum
        self.maximum = maximum
        self._store_value(self.value)

    def _store_value(self, value: int) -> None:
        if value > self.maximum:
            value = self.maximum
        if value < self.minimum:
            value = self.minimum
        self.value = value

    def set_value(self, value: int, maximum: int) -> None:
        """Set the range to 0..maximum and the value, clamped into it."""
        self._set_range(0, maximum)
        self._store_value(value)

    def set_label(self, text: str) -> None:
        self.label = text[:LABEL_MAX_LEN]

    def set_field(self, field: int, value: str) -> None:
        """Set a bound field from its string value; unknown fields are ignored."""
        if field == BarField.VALUE:
            self._store_value(_atoi(value))
        elif field == BarField.MAX:
            self._set_range(0, _atoi(value))
        elif field == BarField.LABEL:
            self.set_label(value)

    def label_regions(self) -> list:
        """Where and in which colour the caption is drawn.

        The caption is drawn twice: over the empty track in the foreground
        colour, then over the fill in the background colour. Each region gives
        its clip area, colour and the area the text is laid out in.
        """
        if not self.label:
            return []
        span = self.maximum - self.minimum
        if span <= 0:
            return []

        x1, y1 = self.x, self.y
        x2, y2 = x1 + self.width - 1, y1 + self.height - 1
        fill_px = int((self.value - self.minimum) / span * self.width)

        filled = (x1, y1, x1 + fill_px, y2)
        unfilled = (x1 + fill_px, y1, x2, y2)

        line_height = _FONT_LINE_HEIGHT.get(self.theme.font, 8)
        y_ofs = _half_toward_zero(self.height - line_height)
        text_area = (x1, y1 + y_ofs, x2, y2)
        bounds = (x1, y1, x2, y2)

        regions = []
        for area, role in ((unfilled, ColorRole.FG), (filled, ColorRole.BG)):
            clip = _intersect(bounds, area)
            if clip is not None:
                regions.append(_LabelRegion(clip, self.theme.color(role), text_area))
        return regions
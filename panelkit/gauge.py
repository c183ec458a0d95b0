"""A circular arc gauge with a centred caption."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

from .core import Part, Widget
from .theme import OPA_TRANSP, ColorRole, Theme
from .toggle import _atoi


class GaugeField(enum.IntEnum):
    """Fields of a gauge that can be bound to data."""

    VALUE = 0
    MAX = 1
    LABEL = 2


@dataclass(frozen=True)
class GaugeConfig:
    """Arc geometry: start angle from 12 o'clock and arc length, in degrees."""

    rotation: int = 135
    sweep: int = 270


class _GaugeCaption(Widget):
    kind = "label"

    def __init__(self, parent: Widget) -> None:
        super().__init__(parent)
        self.text = ""
        self.align = "center"


class Gauge(Widget):
    """A non-clickable arc from 0 to a maximum, without a knob."""

    kind = "arc"

    def __init__(
        self,
        parent: Optional[Widget] = None,
        x: int = 0,
        y: int = 0,
        width: int = 0,
        height: int = 0,
        config: Optional[GaugeConfig] = None,
        theme: Optional[Theme] = None,
    ) -> None:
        super().__init__(parent, x, y, width, height)
        cfg = config if config is not None else GaugeConfig()
        self.theme = theme if theme is not None else Theme()
        self.rotation = cfg.rotation
        self.bg_angles = (0, cfg.sweep)
        self.minimum = 0
        self.maximum = 100
        self.value = 0
        self.flags.discard("clickable")

        arc_width = self.theme.gauge_arc_width(min(width, height))
        self.set_style("arc_color", self.theme.color(ColorRole.DIM), Part.MAIN)
        self.set_style("arc_width", arc_width, Part.MAIN)
        self.set_style("arc_color", self.theme.color(ColorRole.ACCENT), Part.INDICATOR)
        self.set_style("arc_width", arc_width, Part.INDICATOR)
        self.theme.apply(self, "gauge")

        caption = _GaugeCaption(self)
        caption.set_style("text_font", self.theme.font, Part.MAIN)
        caption.set_style("text_color", self.theme.color(ColorRole.FG), Part.MAIN)
        caption.set_style("bg_opa", OPA_TRANSP, Part.MAIN)

    @property
    def caption(self) -> Optional[Widget]:
        return self.children[0] if self.children else None

    @property
    def label(self) -> str:
        caption = self.caption
        return caption.text if caption is not None else ""

    def _set_range(self, minimum: int, maximum: int) -> None:
        self.minimum = minimum
        self.maximum = maximum
        if self.value < minimum:
            self.value = minimum
        if self.value > maximum:
            self.value = maximum

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
        caption = self.caption
        if caption is not None:
            caption.text = text

    def set_field(self, field: int, value: str) -> None:
        """Set a bound field from its string value; unknown fields are ignored."""
        if field == GaugeField.VALUE:
            self._store_value(_atoi(value))
        elif field == GaugeField.MAX:
            self._set_range(0, _atoi(value))
        elif field == GaugeField.LABEL:
            self.set_label(value)
"""A busy indicator: an arc that spins around a dimmed track."""

from __future__ import annotations

from typing import Optional

from .core import Part, Widget
from .theme import OPA_TRANSP, ColorRole, Theme


class Spinner(Widget):
    """A spinner whose speed, arc length and colours come from the theme."""

    kind = "spinner"

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
        self.speed_ms = self.theme.spinner_speed_ms
        self.arc_deg = self.theme.spinner_arc_deg

        arc_width = self.theme.gauge_arc_width(min(width, height))
        self.set_style("arc_color", self.theme.color(ColorRole.ACCENT), Part.INDICATOR)
        self.set_style("arc_width", arc_width, Part.INDICATOR)
        self.set_style("arc_color", self.theme.color(ColorRole.DIM), Part.MAIN)
        self.set_style("arc_width", arc_width, Part.MAIN)
        self.set_style("bg_opa", OPA_TRANSP, Part.MAIN)
"""A minimal line chart with no axes, grid or background."""

from __future__ import annotations

import enum
import math
import re
from typing import Optional

from .core import Part, Series, Widget
from .theme import OPA_TRANSP, SparklineConfig, Theme

_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def _atof(text: str) -> float:
    """Read a leading decimal number leniently; no number gives 0.0."""
    match = _FLOAT_PREFIX.match(text.lstrip(" \t\n\r\f\v"))
    return float(match.group()) if match else 0.0


class SparklineField(enum.IntEnum):
    """Fields of a sparkline that can be bound to data."""

    VALUE = 0


class Sparkline(Widget):
    """A scrolling line of recent values; one point per pixel unless configured."""

    kind = "chart"

    def __init__(
        self,
        parent: Optional[Widget] = None,
        x: int = 0,
        y: int = 0,
        width: int = 0,
        height: int = 0,
        config: Optional[SparklineConfig] = None,
        theme: Optional[Theme] = None,
    ) -> None:
        super().__init__(parent, x, y, width, height)
        self.theme = theme if theme is not None else Theme()
        cfg = config if config is not None else self.theme.sparkline

        points = cfg.point_count if cfg.point_count > 0 else width
        self.chart_type = "line"
        self.y_range = (cfg.y_min, cfg.y_max)
        self.div_lines = (0, 0)

        self.set_style("bg_opa", OPA_TRANSP, Part.MAIN)
        self.set_style("border_width", 0, Part.MAIN)
        for side in ("pad_top", "pad_bottom", "pad_left", "pad_right"):
            self.set_style(side, 0, Part.MAIN)
        self.set_style("radius", 0, Part.MAIN)
        self.set_style("size", 0, Part.INDICATOR)
        self.set_style("line_width", max(1, cfg.line_width), Part.ITEMS)

        self.series: Optional[Series] = Series(cfg.color, max(1, points))
        self.on("delete", self._on_delete)

    def _on_delete(self, _widget: Widget) -> None:
        self.series = None

    def push(self, value: float) -> None:
        """Append a value, scrolling the oldest one out."""
        if self.series is None or not math.isfinite(value):
            return
        self.series.push(value)

    def set_range(self, minimum: int, maximum: int) -> None:
        self.y_range = (minimum, maximum)

    def set_field(self, field: int, value: str) -> None:
        if field == SparklineField.VALUE:
            self.push(_atof(value))
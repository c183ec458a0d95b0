"""A history chart drawn as bars, a line, a filled area or a mirrored waveform."""

from __future__ import annotations

import enum
import math
from typing import Optional

from .core import Color, Part, Series, Widget
from .sparkline import _atof
from .theme import OPA_50, ColorRole, GraphConfig, GraphStyle, Theme


class GraphField(enum.IntEnum):
    """Fields of a graph that can be bound to data."""

    VALUE = 0


def resolve_point_count(
    style: GraphStyle, point_count: int, width: int, bar_width: int, bar_gap: int
) -> int:
    """The number of points to keep: explicit, one per bar slot, or one per pixel."""
    if point_count > 0:
        return point_count
    if style is GraphStyle.BARS:
        slot = max(1, bar_width) + max(0, bar_gap)
        return max(1, width // slot)
    return max(1, width)


class Graph(Widget):
    """A chart of recent values; the symmetric style paints a scrolling canvas."""

    kind = "chart"

    def __init__(
        self,
        parent: Optional[Widget] = None,
        x: int = 0,
        y: int = 0,
        width: int = 0,
        height: int = 0,
        config: Optional[GraphConfig] = None,
        theme: Optional[Theme] = None,
    ) -> None:
        width = max(1, width)
        height = max(1, height)
        super().__init__(parent, x, y, width, height)
        self.theme = theme if theme is not None else Theme()
        cfg = config if config is not None else self.theme.graph

        self.style = cfg.style
        self.range_min = cfg.y_min
        self.range_max = cfg.y_max
        self.base_color = cfg.color
        self.color_by_value = cfg.color_by_value
        self.thresholds = list(cfg.active_thresholds)
        self.sym_color_by_distance = cfg.sym_color_by_distance
        self.sym_center_color = cfg.sym_center_color
        self.sym_peak_color = cfg.sym_peak_color

        self.series: Optional[Series] = None
        self.canvas: list = []
        self.chart_type: Optional[str] = None
        self.y_range = (cfg.y_min, cfg.y_max)
        self.div_lines = (cfg.grid_h_lines, 0)

        points = resolve_point_count(cfg.style, cfg.point_count, width, cfg.bar_width, cfg.bar_gap)
        if cfg.style is GraphStyle.SYMMETRIC:
            self.kind = "canvas"
            background = self.theme.color(ColorRole.BG)
            self.canvas = [[background] * width for _ in range(height)]
        else:
            self._setup_chart(cfg, points)

        self.on("delete", self._on_delete)

    def _setup_chart(self, cfg: GraphConfig, points: int) -> None:
        for side in ("pad_top", "pad_bottom", "pad_left", "pad_right"):
            self.set_style(side, 0, Part.MAIN)
        if cfg.grid_h_lines > 0:
            self.set_style("line_color", cfg.grid_color, Part.MAIN)
            self.set_style("line_opa", OPA_50, Part.MAIN)

        if cfg.style is GraphStyle.BARS:
            self.chart_type = "bar"
            self.set_style("pad_column", max(0, cfg.bar_gap) // 2, Part.MAIN)
        else:
            self.chart_type = "line"
            self.set_style("pad_column", 0, Part.MAIN)
            self.set_style("size", 0, Part.INDICATOR)
            self.set_style("line_width", cfg.line_width, Part.ITEMS)
            if cfg.style is GraphStyle.AREA:
                self.set_style("bg_color", cfg.fill_color, Part.ITEMS)
                self.set_style("bg_opa", cfg.fill_opa, Part.ITEMS)

        self.series = Series(cfg.color, max(1, points))
        self.theme.apply(self, "graph")

    def _on_delete(self, _widget: Widget) -> None:
        self.series = None
        self.canvas = []

    def set_color(self, color: Color) -> None:
        """Change the base colour of the data."""
        if not self.valid:
            return
        self.base_color = color
        if self.series is not None:
            self.series.color = color

    def set_range(self, minimum: int, maximum: int) -> None:
        if not self.valid:
            return
        self.range_min = minimum
        self.range_max = maximum
        if self.style is not GraphStyle.SYMMETRIC:
            self.y_range = (minimum, maximum)

    def push(self, value: float) -> None:
        """Append a value, scrolling the oldest one out."""
        if not self.valid or math.isnan(value):
            return
        if self.style is GraphStyle.SYMMETRIC:
            self._sym_push(value)
            return
        if self.series is None or not math.isfinite(value):
            return
        self.series.push(value)

    def set_field(self, field: int, value: str) -> None:
        if field == GraphField.VALUE:
            self.push(_atof(value))

    def point_color(self, value: Optional[int]) -> Color:
        """The colour a point with this value is drawn in."""
        if value is None or not self.color_by_value:
            return self.base_color
        for threshold in self.thresholds:
            if value <= threshold.threshold:
                return threshold.color
        return self.base_color

    def _sym_pixel_color(self, dist_norm: float) -> Color:
        if not self.sym_color_by_distance:
            return self.base_color
        ratio = int(dist_norm * 255.0)
        return self.sym_peak_color.mix(self.sym_center_color, ratio)

    def _sym_push(self, value: float) -> None:
        if not self.canvas:
            return
        background = self.theme.color(ColorRole.BG)
        for row in self.canvas:
            row.pop(0)
            row.append(background)

        span = float(self.range_max - self.range_min)
        if span <= 0.0:
            span = 1.0
        norm = min(1.0, max(0.0, (value - self.range_min) / span))

        height = len(self.canvas)
        center = height // 2
        half = int(norm * center)
        for y, row in enumerate(self.canvas):
            dist = y - center
            if -half <= dist <= half:
                dist_norm = abs(dist) / half if half > 0 else 0.0
                row[-1] = self._sym_pixel_color(dist_norm)
            else:
                row[-1] = background
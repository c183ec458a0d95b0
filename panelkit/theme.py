"""The colour palette, fonts, chart defaults and shared widget styles of a display."""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Optional

from .core import Color, Part, State, Style, Widget, selector
from .style import WidgetStyle, _get_int, _get_str

OPA_TRANSP = 0
OPA_50 = 127
OPA_COVER = 255

GRAPH_MAX_THRESHOLDS = 4

DEFAULT_FONT = "unscii_8"
KNOWN_FONTS = frozenset(
    {"unscii_8", "unscii_16", "montserrat_12", "montserrat_14", "montserrat_20"}
)

_BLACK = Color(0, 0, 0)


class ThemeError(ValueError):
    """Raised when a theme document cannot be parsed."""


class ColorRole(enum.Enum):
    """The named slots of the palette."""

    BG = "bg"
    FG = "fg"
    ACCENT = "accent"
    DIM = "dim"
    DANGER = "danger"


class GraphStyle(enum.Enum):
    LINE = "line"
    AREA = "area"
    BARS = "bars"
    SYMMETRIC = "symmetric"


def parse_graph_style(name: Optional[str]) -> Optional[GraphStyle]:
    """Return the graph style with this name, or None for an unknown name."""
    if name in GraphStyle._value2member_map_:
        return GraphStyle(name)
    return None


@dataclass(frozen=True)
class GraphThreshold:
    """Values up to and including `threshold` are drawn in `color`."""

    threshold: int = 0
    color: Color = _BLACK


def _default_thresholds() -> list:
    return [
        GraphThreshold(50, Color.from_hex(0x5FFF35)),
        GraphThreshold(80, Color.from_hex(0xA0FF50)),
        GraphThreshold(),
        GraphThreshold(),
    ]


@dataclass
class GraphConfig:
    """How a graph widget draws its data."""

    style: GraphStyle = GraphStyle.BARS
    bar_width: int = 2
    bar_gap: int = 1
    line_width: int = 1
    color: Color = field(default_factory=lambda: Color.from_hex(0xA0FF50))
    fill_color: Color = field(default_factory=lambda: Color.from_hex(0x0C2006))
    fill_opa: int = OPA_50
    grid_h_lines: int = 2
    grid_color: Color = field(default_factory=lambda: Color.from_hex(0x0C2006))
    color_by_value: bool = False
    thresholds: list = field(default_factory=_default_thresholds)
    threshold_count: int = 0
    sym_color_by_distance: bool = False
    sym_center_color: Color = field(default_factory=lambda: Color.from_hex(0x5FFF35))
    sym_peak_color: Color = field(default_factory=lambda: Color.from_hex(0xA0FF50))
    y_min: int = 0
    y_max: int = 100
    point_count: int = 0

    @property
    def active_thresholds(self) -> list:
        """The thresholds in use, clamped to the table size."""
        count = max(0, min(self.threshold_count, GRAPH_MAX_THRESHOLDS))
        return self.thresholds[:count]

    def copy(self) -> "GraphConfig":
        return replace(self, thresholds=list(self.thresholds))


@dataclass
class SparklineConfig:
    """How a sparkline widget draws its data."""

    color: Color = field(default_factory=lambda: Color.from_hex(0x5FFF35))
    line_width: int = 1
    y_min: int = 0
    y_max: int = 100
    point_count: int = 0

    def copy(self) -> "SparklineConfig":
        return replace(self)


# Widget types with a plain override, those with an indicator override, and the rest.
_PLAIN_OVERRIDES = ("screen", "label", "button", "icon", "ticker", "value", "container")
_INDICATOR_OVERRIDES = ("bar", "gauge", "spinner")
_OVERRIDE_KEYS = (
    "screen", "label", "button", "button_pressed", "bar", "bar_indicator",
    "graph", "sparkline", "gauge", "gauge_indicator", "spinner",
    "spinner_indicator", "icon", "container", "ticker", "value", "toggle",
    "toggle_checked",
)
_STYLE_KEYS = (
    "screen", "label", "button", "button_pressed", "bar_bg", "bar_indicator",
    "graph", "sparkline", "gauge", "spinner", "icon", "container", "ticker",
    "value", "toggle", "toggle_checked", "toggle_indicator", "toggle_knob",
)

_GRAPH_INT_KEYS = (
    "bar_width", "bar_gap", "line_width", "grid_h_lines", "y_min", "y_max", "point_count",
)
_GRAPH_COLOR_KEYS = ("color", "fill_color", "grid_color")
_SPARKLINE_INT_KEYS = ("line_width", "y_min", "y_max", "point_count")


def _pad_all(value: int) -> dict:
    return {"pad_top": value, "pad_bottom": value, "pad_left": value, "pad_right": value}


def _object(data: Mapping[str, Any], key: str) -> Optional[Mapping[str, Any]]:
    value = data.get(key)
    return value if isinstance(value, dict) else None


class Theme:
    """Palette, font, chart defaults, shared styles and per-type style overrides."""

    def __init__(self) -> None:
        self.palette: dict = {
            ColorRole.BG: Color.from_hex(0x040C02),
            ColorRole.FG: Color.from_hex(0x5FFF35),
            ColorRole.ACCENT: Color.from_hex(0xA0FF50),
            ColorRole.DIM: Color.from_hex(0x0C2006),
            ColorRole.DANGER: Color.from_hex(0xC25757),
        }
        self.rotation = 0
        self.font = DEFAULT_FONT
        self.button_pad = 4
        self.button_border_w = 1
        self.bar_border_w = 1
        self.spinner_speed_ms = 1000
        self.spinner_arc_deg = 60
        self.container_gap = 2
        self.graph = GraphConfig(fill_color=self.palette[ColorRole.DIM])
        self.sparkline = SparklineConfig()
        self.overrides: dict = {key: WidgetStyle() for key in _OVERRIDE_KEYS}
        self.styles: dict = {key: Style(key) for key in _STYLE_KEYS}
        self.build_styles()

    def color(self, role: Any) -> Color:
        return self.palette[ColorRole(role)]

    def color_from_str(self, text: Optional[str]) -> Color:
        """Parse '#rrggbb' or a palette name; anything else gives black."""
        if not text:
            return _BLACK
        if text.startswith("#"):
            return Color.from_hex(text)
        if text in ColorRole._value2member_map_:
            return self.palette[ColorRole(text)]
        return _BLACK

    def font_by_name(self, name: Optional[str]) -> str:
        """Return the named font, or the theme font when the name is unknown."""
        if name in KNOWN_FONTS:
            return name
        return self.font

    def gauge_arc_width(self, dim: int) -> int:
        return max(2, dim // 10)

    def build_styles(self) -> None:
        """Rebuild the shared styles in place from the current palette and font."""
        p = self.palette
        font = self.font
        bg, fg, accent, dim = p[ColorRole.BG], p[ColorRole.FG], p[ColorRole.ACCENT], p[ColorRole.DIM]

        text_style = lambda color: dict(  # noqa: E731
            text_color=color, bg_opa=OPA_TRANSP, border_width=0, text_font=font, **_pad_all(0)
        )
        gap = self.container_gap
        specs = {
            "screen": dict(bg_color=bg, bg_opa=OPA_COVER, border_width=0, radius=0, **_pad_all(0)),
            "label": text_style(fg),
            "button": dict(
                bg_color=dim, bg_opa=OPA_COVER, text_color=fg, text_font=font,
                border_width=self.button_border_w, border_color=fg, radius=0,
                **_pad_all(self.button_pad),
            ),
            "button_pressed": dict(bg_color=fg, text_color=bg),
            "bar_bg": dict(
                bg_color=dim, bg_opa=OPA_COVER, border_width=self.bar_border_w,
                border_color=fg, radius=0,
            ),
            "bar_indicator": dict(bg_color=fg, bg_opa=OPA_COVER, radius=0),
            "graph": dict(
                bg_color=bg, bg_opa=OPA_COVER, border_width=1, border_color=dim,
                radius=0, **_pad_all(0),
            ),
            "sparkline": dict(bg_opa=OPA_TRANSP, border_width=0, radius=0, **_pad_all(0)),
            "gauge": dict(bg_color=bg, bg_opa=OPA_COVER, border_width=0),
            "spinner": dict(bg_opa=OPA_TRANSP, border_width=0),
            "icon": text_style(accent),
            "container": dict(
                bg_color=bg, bg_opa=OPA_COVER, border_width=1, border_color=dim,
                radius=0, **_pad_all(0), pad_gap=gap, pad_row=gap, pad_column=gap,
            ),
            "ticker": text_style(fg),
            "value": text_style(accent),
            "toggle": dict(
                bg_color=dim, bg_opa=OPA_COVER, border_width=1, border_color=fg, radius=0,
            ),
            "toggle_checked": dict(bg_color=accent, bg_opa=OPA_COVER),
            "toggle_indicator": dict(bg_opa=OPA_TRANSP, radius=0),
            "toggle_knob": dict(bg_color=fg, bg_opa=OPA_COVER, radius=0, **_pad_all(2)),
        }
        for key, props in specs.items():
            style = self.styles[key]
            style.clear()
            style.update(props)

    def load_json(self, text: str) -> None:
        """Merge a theme document; keys that are absent keep their previous values.

        Shared styles are not rebuilt; call build_styles() afterwards.
        """
        try:
            data = json.loads(text)
        except (TypeError, ValueError) as exc:
            raise ThemeError(f"invalid theme JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise ThemeError("theme JSON must be an object")

        palette = _object(data, "palette")
        if palette is not None:
            for role in ColorRole:
                value = _get_str(palette, role.value)
                if value is not None and value.startswith("#"):
                    self.palette[role] = Color.from_hex(value)

        rotation = _get_int(data, "rotation")
        if rotation is not None:
            self.rotation = rotation if rotation in (90, 180, 270) else 0

        font_name = _get_str(data, "font")
        if font_name is not None:
            self.font = self.font_by_name(font_name)

        widgets = _object(data, "widgets")
        if widgets is not None:
            self._load_widgets(widgets)

    def _load_widgets(self, widgets: Mapping[str, Any]) -> None:
        for key in _PLAIN_OVERRIDES:
            obj = _object(widgets, key)
            if obj is not None:
                self.overrides[key].update(obj, self)

        for key in _INDICATOR_OVERRIDES:
            obj = _object(widgets, key)
            if obj is not None:
                self.overrides[key].update(obj, self)
                indicator = _object(obj, "indicator")
                if indicator is not None:
                    self.overrides[f"{key}_indicator"].update(indicator, self)

        toggle = _object(widgets, "toggle")
        if toggle is not None:
            self.overrides["toggle"].update(toggle, self)
            checked = _object(toggle, "checked")
            if checked is not None:
                self.overrides["toggle_checked"].update(checked, self)

        graph = _object(widgets, "graph")
        if graph is not None:
            self.overrides["graph"].update(graph, self)
            self._load_graph(graph)

        sparkline = _object(widgets, "sparkline")
        if sparkline is not None:
            self.overrides["sparkline"].update(sparkline, self)
            color = _get_str(sparkline, "color")
            if color is not None:
                self.sparkline.color = self.color_from_str(color)
            for key in _SPARKLINE_INT_KEYS:
                number = _get_int(sparkline, key)
                if number is not None:
                    setattr(self.sparkline, key, number)

    def _load_graph(self, data: Mapping[str, Any]) -> None:
        cfg = self.graph
        style = parse_graph_style(_get_str(data, "style"))
        if style is not None:
            cfg.style = style

        for key in _GRAPH_INT_KEYS:
            number = _get_int(data, key)
            if number is not None:
                setattr(cfg, key, number)
        fill_opa = _get_int(data, "fill_opa")
        if fill_opa is not None:
            cfg.fill_opa = fill_opa & 0xFF

        for key in _GRAPH_COLOR_KEYS:
            text = _get_str(data, key)
            if text is not None:
                setattr(cfg, key, self.color_from_str(text))

        flag = _get_int(data, "color_by_value")
        if flag is not None:
            cfg.color_by_value = flag != 0

        thresholds = data.get("thresholds")
        if isinstance(thresholds, list):
            entries = thresholds[:GRAPH_MAX_THRESHOLDS]
            cfg.threshold_count = len(entries)
            for index, entry in enumerate(entries):
                if not isinstance(entry, dict):
                    continue
                current = cfg.thresholds[index]
                limit = _get_int(entry, "threshold")
                if limit is not None:
                    current = replace(current, threshold=limit)
                color = _get_str(entry, "color")
                if color is not None:
                    current = replace(current, color=self.color_from_str(color))
                cfg.thresholds[index] = current

        flag = _get_int(data, "sym_color_by_distance")
        if flag is not None:
            cfg.sym_color_by_distance = flag != 0
        for key in ("sym_center_color", "sym_peak_color"):
            text = _get_str(data, key)
            if text is not None:
                setattr(cfg, key, self.color_from_str(text))

    def apply(self, widget: Widget, widget_type: str) -> None:
        """Attach the shared styles for a widget type; unknown types are left alone."""
        s = self.styles
        main = Part.MAIN
        if widget_type == "screen":
            widget.remove_style_all()
            widget.flags.discard("scrollable")
            widget.add_style(s["screen"], main)
        elif widget_type == "button":
            widget.add_style(s["button"], main)
            widget.add_style(s["button_pressed"], selector(main, State.PRESSED))
        elif widget_type == "bar":
            widget.add_style(s["bar_bg"], main)
            widget.add_style(s["bar_indicator"], Part.INDICATOR)
        elif widget_type == "toggle":
            widget.add_style(s["toggle"], main)
            widget.add_style(s["toggle_checked"], selector(main, State.CHECKED))
            widget.add_style(s["toggle_indicator"], Part.INDICATOR)
            widget.add_style(s["toggle_knob"], Part.KNOB)
        elif widget_type in (
            "label", "graph", "sparkline", "gauge", "spinner", "icon",
            "container", "ticker", "value",
        ):
            widget.add_style(s[widget_type], main)
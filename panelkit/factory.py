"""Build screens and widgets from a JSON layout document."""

from __future__ import annotations

import json
import logging
import struct
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from .bar import Bar
from .button import ACTION_MAX_LEN, Button
from .container import Container
from .core import Part, State, Widget, selector
from .gauge import Gauge
from .graph import Graph
from .icon import Icon
from .image import PIXEL_BYTES, Image, ImageBuffer, ImageError
from .label import Label
from .sparkline import Sparkline
from .spinner import Spinner
from .style import WidgetStyle, _get_int, _get_str
from .theme import OPA_COVER, Theme, parse_graph_style
from .ticker import Ticker

log = logging.getLogger(__name__)

MAX_TICKER_FRAMES = 256

Dispatch = Callable[[str], Any]
Fetch = Callable[[str], Optional[bytes]]
Setter = Callable[[int, str], Any]

# Bindable keys, tried in this order for every widget.
_BIND_KEYS = ("text", "label", "value", "max", "src")

# Field ids per widget type for each bindable key.
_FIELD_IDS: dict = {
    "label": {"text": 0},
    "button": {"label": 0},
    "bar": {"value": 0, "max": 1, "label": 2},
    "graph": {"value": 0},
    "sparkline": {"value": 0},
    "gauge": {"value": 0, "max": 1, "label": 2},
    "icon": {"text": 0},
}

# Theme overrides applied to each widget type, with their selectors.
_THEME_OVERRIDES: dict = {
    "label": (("label", Part.MAIN),),
    "button": (("button", Part.MAIN),),
    "bar": (("bar", Part.MAIN), ("bar_indicator", Part.INDICATOR)),
    "graph": (("graph", Part.MAIN),),
    "sparkline": (("sparkline", Part.MAIN),),
    "gauge": (("gauge", Part.MAIN), ("gauge_indicator", Part.INDICATOR)),
    "spinner": (("spinner", Part.MAIN), ("spinner_indicator", Part.INDICATOR)),
    "icon": (("icon", Part.MAIN),),
    "container": (("container", Part.MAIN),),
    "ticker": (("ticker", Part.MAIN),),
    "screen": (("screen", Part.MAIN),),
    "toggle": (
        ("toggle", Part.MAIN),
        ("toggle_checked", selector(Part.MAIN, State.CHECKED)),
    ),
}

# Types that never take a background image.
_NO_BG_IMAGE = frozenset({"bar", "graph", "button", "sparkline", "image"})
# Types whose "bind" object is ignored.
_NO_BIND = frozenset({"container", "ticker"})


class LayoutError(ValueError):
    """Raised when a layout document cannot be built."""


@dataclass(frozen=True)
class Binding:
    """A widget field waiting for values of a named placeholder."""

    name: str
    widget: Widget
    field: int
    setter: Setter


def decode_image(data: bytes) -> ImageBuffer:
    """Decode a big-endian width and height followed by RGB565 pixels."""
    if data is None or len(data) < 4:
        raise ImageError(f"image response too short ({0 if data is None else len(data)} B)")
    width, height = struct.unpack(">HH", data[:4])
    pixel_bytes = width * height * PIXEL_BYTES
    if len(data) < 4 + pixel_bytes:
        raise ImageError(
            f"{width}x{height} image needs {4 + pixel_bytes} B, got {len(data)}"
        )
    return ImageBuffer(width, height, bytes(data[4:4 + pixel_bytes]))


def _object(data: Mapping[str, Any], key: str) -> Optional[Mapping[str, Any]]:
    value = data.get(key)
    return value if isinstance(value, dict) else None


def _bind_action(widget: Widget, event: str, action: str, dispatch: Dispatch) -> None:
    if not action:
        return
    stored = action[:ACTION_MAX_LEN]
    widget.on(event, lambda _widget: dispatch(stored))


class WidgetFactory:
    """Creates widget trees from layout JSON using a theme.

    Placeholders ("$name") are handed to `bind`, tap and hold actions to
    `dispatch`, new screens to `add_screen`, and image URLs to `fetch`.
    Left out, bindings and dispatched actions are recorded on the factory
    and images are not loaded.
    """

    def __init__(
        self,
        theme: Optional[Theme] = None,
        *,
        host_url: str = "",
        fetch: Optional[Fetch] = None,
        dispatch: Optional[Dispatch] = None,
        bind: Optional[Callable[[str, Widget, int, Setter], Any]] = None,
        add_screen: Optional[Callable[[str, Widget], Any]] = None,
    ) -> None:
        self.theme = theme if theme is not None else Theme()
        self.host_url = host_url
        self.fetch = fetch
        self.bindings: list = []
        self.actions: list = []
        self.screens: list = []
        self._dispatch = dispatch if dispatch is not None else self.actions.append
        self._bind = bind if bind is not None else self._record_binding
        self._add_screen = add_screen

    def _record_binding(self, name: str, widget: Widget, field: int, setter: Setter) -> None:
        self.bindings.append(Binding(name, widget, field, setter))

    # ------------------------------------------------------------------ build

    def build(self, layout_json: str) -> list:
        """Build every screen of the layout; returns (id, screen) pairs."""
        if layout_json is None:
            raise LayoutError("no layout given")
        try:
            data = json.loads(layout_json)
        except (TypeError, ValueError) as exc:
            raise LayoutError(f"invalid layout JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise LayoutError("layout JSON must be an object")
        screens = data.get("screens")
        if not isinstance(screens, list):
            raise LayoutError("no 'screens' array")

        built = []
        for entry in screens:
            if not isinstance(entry, dict):
                continue
            screen_id = _get_str(entry, "id")
            if screen_id is None:
                screen_id = "screen"
            screen = Widget()
            self.theme.apply(screen, "screen")
            self.screens.append((screen_id, screen))
            if self._add_screen is not None:
                self._add_screen(screen_id, screen)
            widgets = entry.get("widgets")
            if isinstance(widgets, list):
                for item in widgets:
                    if isinstance(item, dict):
                        self.build_widget(item, screen)
            built.append((screen_id, screen))
        log.info("layout built")
        return built

    def build_widget(self, data: Mapping[str, Any], parent: Optional[Widget]) -> Optional[Widget]:
        """Build one widget and its children; None for a missing or unknown type."""
        kind = _get_str(data, "type")
        if not kind:
            return None

        x = self._int(data, "x", 0)
        y = self._int(data, "y", 0)
        w = self._int(data, "w", 100)
        h = self._int(data, "h", 20)

        widget = self._create(kind, data, parent, x, y, w, h)
        if widget is None:
            return None

        self._apply_theme_overrides(kind, widget)
        self._apply_local_style(kind, data, widget)

        if kind not in _NO_BG_IMAGE:
            bg_name = _get_str(data, "bg_image")
            if bg_name:
                self._apply_bg_image(widget, bg_name)

        if kind not in _NO_BIND:
            bind = _object(data, "bind")
            if bind is not None:
                self._apply_bind(bind, kind, widget)

        on_tap = _get_str(data, "on_tap")
        if on_tap is not None:
            _bind_action(widget, "clicked", on_tap, self._dispatch)
        on_hold = _get_str(data, "on_hold")
        if on_hold is not None:
            _bind_action(widget, "long_pressed", on_hold, self._dispatch)

        if kind == "container":
            self._build_children(data, widget)
        elif kind == "ticker":
            self._start_ticker(data, widget)
        return widget

    # ---------------------------------------------------------------- helpers

    @staticmethod
    def _int(data: Mapping[str, Any], key: str, default: int) -> int:
        value = _get_int(data, key)
        return default if value is None else value

    def _create(
        self, kind: str, data: Mapping[str, Any], parent: Optional[Widget],
        x: int, y: int, w: int, h: int,
    ) -> Optional[Widget]:
        theme = self.theme
        if kind == "label":
            return Label(parent, x, y, w, h, theme=theme)
        if kind == "button":
            return Button(parent, x, y, w, h, theme=theme)
        if kind == "bar":
            return Bar(parent, x, y, w, h, theme=theme)
        if kind == "graph":
            return Graph(parent, x, y, w, h, config=self._graph_config(data), theme=theme)
        if kind == "sparkline":
            return Sparkline(parent, x, y, w, h, theme=theme)
        if kind == "gauge":
            return Gauge(parent, x, y, w, h, theme=theme)
        if kind == "spinner":
            return Spinner(parent, x, y, w, h, theme=theme)
        if kind == "icon":
            return Icon(parent, x, y, w, h, theme=theme)
        if kind == "image":
            image = Image(parent, x, y, w, h)
            src = _get_str(data, "src")
            if src:
                buffer = self._fetch_image(src)
                if buffer is not None:
                    try:
                        image.set_buffer(buffer.width, buffer.height, buffer.pixels)
                    except ImageError as exc:
                        log.error("img %s: %s", src, exc)
            return image
        if kind == "container":
            layout = _get_str(data, "layout") or "row"
            return Container(parent, x, y, w, h, layout=layout, theme=theme)
        if kind == "ticker":
            return Ticker(parent, x, y, w, h, theme=theme)
        log.warning("unknown type: %s", kind)
        return None

    def _graph_config(self, data: Mapping[str, Any]):
        cfg = self.theme.graph.copy()
        style = parse_graph_style(_get_str(data, "graph_style"))
        if style is not None:
            cfg.style = style
        for key, attr in (
            ("bar_width", "bar_width"), ("bar_gap", "bar_gap"),
            ("line_width", "line_width"), ("grid_lines", "grid_h_lines"),
            ("y_min", "y_min"), ("y_max", "y_max"), ("point_count", "point_count"),
        ):
            number = _get_int(data, key)
            if number is not None:
                setattr(cfg, attr, number)
        color = _get_str(data, "color")
        if color is not None:
            cfg.color = self.theme.color_from_str(color)
        return cfg

    def _apply_theme_overrides(self, kind: str, widget: Widget) -> None:
        for key, sel in _THEME_OVERRIDES.get(kind, ()):
            self.theme.overrides[key].apply(widget, sel)

    def _apply_local_style(self, kind: str, data: Mapping[str, Any], widget: Widget) -> None:
        style = _object(data, "style")
        if style is None:
            return
        main = WidgetStyle()
        main.update(style, self.theme)
        main.apply(widget, Part.MAIN)
        indicator = _object(style, "indicator")
        if indicator is not None:
            ind = WidgetStyle()
            ind.update(indicator, self.theme)
            ind.apply(widget, Part.INDICATOR)
        line_color = _get_str(style, "line_color")
        if kind == "graph" and line_color is not None and isinstance(widget, Graph):
            widget.set_color(self.theme.color_from_str(line_color))

    def _apply_bind(self, bind: Mapping[str, Any], kind: str, widget: Widget) -> None:
        fields = _FIELD_IDS.get(kind, {})
        setter = getattr(widget, "set_field", None)
        for key in _BIND_KEYS:
            field = fields.get(key)
            if field is None or setter is None:
                continue
            text = _get_str(bind, key)
            if text is not None:
                if text.startswith("$"):
                    self._bind(text[1:], widget, field, setter)
                else:
                    setter(field, text)
                continue
            number = _get_int(bind, key)
            if number is not None:
                setter(field, str(number))

    def _fetch_image(self, name: str) -> Optional[ImageBuffer]:
        if self.fetch is None:
            return None
        raw = self.fetch(f"{self.host_url}/images/{name}")
        if raw is None:
            return None
        try:
            buffer = decode_image(raw)
        except ImageError as exc:
            log.error("img %s: %s", name, exc)
            return None
        log.info("img %s: %dx%d loaded (%d B)", name, buffer.width, buffer.height, len(buffer.pixels))
        return buffer

    def _apply_bg_image(self, widget: Widget, name: str) -> None:
        buffer = self._fetch_image(name)
        if buffer is None:
            return
        widget.set_style("bg_image_src", buffer, Part.MAIN)
        widget.set_style("bg_opa", OPA_COVER, Part.MAIN)

    def _build_children(self, data: Mapping[str, Any], container: Widget) -> None:
        layout = _get_str(data, "layout") or "row"
        grid = layout == "grid"
        cols = 1
        if grid:
            cols = _get_int(data, "cols")
            if cols is None or cols < 1:
                cols = 1
        children = data.get("children")
        if not isinstance(children, list):
            return
        if grid:
            rows = max(1, -(-max(1, len(children)) // cols))
            container.layout_engine = "grid"
            container.grid_columns = (("fr", 1),) * cols
            container.grid_rows = ("content",) * rows
        for index, item in enumerate(children):
            if not isinstance(item, dict):
                continue
            child = self.build_widget(item, container)
            if child is not None and grid:
                child.grid_cell = ("stretch", index % cols, 1, "center", index // cols, 1)

    def _start_ticker(self, data: Mapping[str, Any], ticker: Widget) -> None:
        interval_ms = self._int(data, "interval_ms", 100)
        frames = data.get("frames")
        if not isinstance(frames, list):
            return
        if len(frames) > MAX_TICKER_FRAMES:
            log.error("ticker too many frames: %d", len(frames))
            return
        if frames and isinstance(ticker, Ticker):
            ticker.start(
                [frame if isinstance(frame, str) else "" for frame in frames], interval_ms
            )
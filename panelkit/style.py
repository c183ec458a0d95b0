"""Per-widget style overrides: parsing from JSON objects and applying to widgets."""

from __future__ import annotations

import enum
from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional, Protocol

from .core import Color, Part, State, Widget, _int16, selector as make_selector


class StyleFlag(enum.IntFlag):
    """Which fields of a WidgetStyle are set."""

    NONE = 0
    BG_COLOR = 1 << 0
    BG_OPA = 1 << 1
    BORDER_COLOR = 1 << 2
    BORDER_WIDTH = 1 << 3
    BORDER_OPA = 1 << 4
    RADIUS = 1 << 5
    PAD_TOP = 1 << 6
    PAD_BOTTOM = 1 << 7
    PAD_LEFT = 1 << 8
    PAD_RIGHT = 1 << 9
    PAD_GAP = 1 << 10
    TEXT_COLOR = 1 << 11
    TEXT_OPA = 1 << 12
    LETTER_SPACE = 1 << 13
    LINE_SPACE = 1 << 14
    FONT = 1 << 15
    FILL_COLOR = 1 << 16
    FILL_OPA = 1 << 17
    ARC_COLOR = 1 << 18
    ARC_WIDTH = 1 << 19
    LINE_COLOR = 1 << 20
    LINE_WIDTH = 1 << 21
    PRESSED_BG = 1 << 22
    PRESSED_TEXT = 1 << 23
    SHADOW_COLOR = 1 << 24
    SHADOW_WIDTH = 1 << 25
    OUTLINE_COLOR = 1 << 26
    OUTLINE_WIDTH = 1 << 27
    TEXT_ALIGN = 1 << 28
    FLEX_JUSTIFY = 1 << 29


class TextAlign(enum.Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class FlexAlign(enum.Enum):
    START = "start"
    END = "end"
    CENTER = "center"
    SPACE_BETWEEN = "space-between"
    SPACE_AROUND = "space-around"
    SPACE_EVENLY = "space-evenly"


class _ThemeLike(Protocol):
    def color_from_str(self, text: str) -> Color: ...

    def font_by_name(self, name: str) -> Any: ...


# JSON key, kind, in the order the keys are read.
_SCALAR_KEYS = (
    ("bg_color", "color"),
    ("bg_opa", "opa"),
    ("border_color", "color"),
    ("border_width", "int"),
    ("border_opa", "opa"),
    ("radius", "int"),
    ("pad_top", "int"),
    ("pad_bottom", "int"),
    ("pad_left", "int"),
    ("pad_right", "int"),
    ("pad_gap", "int"),
    ("text_color", "color"),
    ("text_opa", "opa"),
    ("letter_space", "int"),
    ("line_space", "int"),
    ("fill_color", "color"),
    ("fill_opa", "opa"),
    ("arc_color", "color"),
    ("arc_width", "int"),
    ("line_color", "color"),
    ("line_width", "int"),
    ("pressed_bg", "color"),
    ("pressed_text", "color"),
    ("shadow_color", "color"),
    ("shadow_width", "int"),
    ("outline_color", "color"),
    ("outline_width", "int"),
)

# Field, flag, style properties written on the caller's selector.
_PLAIN_PROPS = (
    ("bg_color", StyleFlag.BG_COLOR, ("bg_color",)),
    ("bg_opa", StyleFlag.BG_OPA, ("bg_opa",)),
    ("border_color", StyleFlag.BORDER_COLOR, ("border_color",)),
    ("border_width", StyleFlag.BORDER_WIDTH, ("border_width",)),
    ("border_opa", StyleFlag.BORDER_OPA, ("border_opa",)),
    ("radius", StyleFlag.RADIUS, ("radius",)),
    ("pad_top", StyleFlag.PAD_TOP, ("pad_top",)),
    ("pad_bottom", StyleFlag.PAD_BOTTOM, ("pad_bottom",)),
    ("pad_left", StyleFlag.PAD_LEFT, ("pad_left",)),
    ("pad_right", StyleFlag.PAD_RIGHT, ("pad_right",)),
    ("pad_gap", StyleFlag.PAD_GAP, ("pad_gap", "pad_row", "pad_column")),
    ("text_color", StyleFlag.TEXT_COLOR, ("text_color",)),
    ("text_opa", StyleFlag.TEXT_OPA, ("text_opa",)),
    ("letter_space", StyleFlag.LETTER_SPACE, ("text_letter_space",)),
    ("line_space", StyleFlag.LINE_SPACE, ("text_line_space",)),
    ("font", StyleFlag.FONT, ("text_font",)),
    ("arc_color", StyleFlag.ARC_COLOR, ("arc_color",)),
    ("arc_width", StyleFlag.ARC_WIDTH, ("arc_width",)),
    ("line_color", StyleFlag.LINE_COLOR, ("line_color",)),
    ("line_width", StyleFlag.LINE_WIDTH, ("line_width",)),
    ("shadow_color", StyleFlag.SHADOW_COLOR, ("shadow_color",)),
    ("shadow_width", StyleFlag.SHADOW_WIDTH, ("shadow_width",)),
    ("outline_color", StyleFlag.OUTLINE_COLOR, ("outline_color",)),
    ("outline_width", StyleFlag.OUTLINE_WIDTH, ("outline_width",)),
    ("text_align", StyleFlag.TEXT_ALIGN, ("text_align",)),
    ("flex_justify", StyleFlag.FLEX_JUSTIFY, ("flex_main_place",)),
)

_FIELD_FLAGS = {name: flag for name, flag, _ in _PLAIN_PROPS}
_FIELD_FLAGS.update(
    fill_color=StyleFlag.FILL_COLOR,
    fill_opa=StyleFlag.FILL_OPA,
    pressed_bg=StyleFlag.PRESSED_BG,
    pressed_text=StyleFlag.PRESSED_TEXT,
)


def _get_int(data: Mapping[str, Any], key: str) -> Optional[int]:
    value = data.get(key)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def _get_str(data: Mapping[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    return value if isinstance(value, str) else None


def _plain_color(text: str) -> Color:
    if text.startswith("#"):
        return Color.from_hex(text)
    return Color(0, 0, 0)


@dataclass
class WidgetStyle:
    """A sparse set of style overrides; a field left as None is not applied."""

    bg_color: Optional[Color] = None
    bg_opa: Optional[int] = None
    border_color: Optional[Color] = None
    border_width: Optional[int] = None
    border_opa: Optional[int] = None
    radius: Optional[int] = None
    pad_top: Optional[int] = None
    pad_bottom: Optional[int] = None
    pad_left: Optional[int] = None
    pad_right: Optional[int] = None
    pad_gap: Optional[int] = None
    text_color: Optional[Color] = None
    text_opa: Optional[int] = None
    letter_space: Optional[int] = None
    line_space: Optional[int] = None
    font: Any = None
    fill_color: Optional[Color] = None
    fill_opa: Optional[int] = None
    arc_color: Optional[Color] = None
    arc_width: Optional[int] = None
    line_color: Optional[Color] = None
    line_width: Optional[int] = None
    pressed_bg: Optional[Color] = None
    pressed_text: Optional[Color] = None
    shadow_color: Optional[Color] = None
    shadow_width: Optional[int] = None
    outline_color: Optional[Color] = None
    outline_width: Optional[int] = None
    text_align: Optional[TextAlign] = None
    flex_justify: Optional[FlexAlign] = None

    @property
    def flags(self) -> StyleFlag:
        result = StyleFlag.NONE
        for f in fields(self):
            if getattr(self, f.name) is not None:
                result |= _FIELD_FLAGS[f.name]
        return result

    def update(self, data: Mapping[str, Any], theme: Optional[_ThemeLike] = None) -> None:
        """Merge the keys of a parsed JSON style object; absent keys stay as they were."""
        to_color = theme.color_from_str if theme is not None else _plain_color

        for key, kind in _SCALAR_KEYS:
            if kind == "color":
                text = _get_str(data, key)
                if text is not None:
                    setattr(self, key, to_color(text))
            else:
                number = _get_int(data, key)
                if number is not None:
                    setattr(self, key, number & 0xFF if kind == "opa" else _int16(number))

        align = _get_str(data, "text_align")
        if align is not None and align in TextAlign._value2member_map_:
            self.text_align = TextAlign(align)

        justify = _get_str(data, "justify")
        if justify is not None and justify in FlexAlign._value2member_map_:
            self.flex_justify = FlexAlign(justify)

        pad_all = _get_int(data, "pad_all")
        if pad_all is not None:
            pad = _int16(pad_all)
            self.pad_top = self.pad_bottom = self.pad_left = self.pad_right = pad

        font_name = _get_str(data, "font")
        if font_name is not None and theme is not None:
            font = theme.font_by_name(font_name)
            if font is not None:
                self.font = font

    def apply(self, widget: Widget, selector: Any = Part.MAIN) -> None:
        """Write the set fields onto the widget as local styles."""
        if not self.flags:
            return

        for name, _flag, props in _PLAIN_PROPS:
            value = getattr(self, name)
            if value is None:
                continue
            for prop in props:
                widget.set_style(prop, value, selector)
            if name == "radius":
                widget.set_style("clip_corner", value > 0, selector)

        if self.fill_color is not None:
            widget.set_style("bg_color", self.fill_color, Part.INDICATOR)
            widget.set_style("arc_color", self.fill_color, Part.INDICATOR)
        if self.fill_opa is not None:
            widget.set_style("bg_opa", self.fill_opa, Part.INDICATOR)
            widget.set_style("arc_opa", self.fill_opa, Part.INDICATOR)

        pressed = make_selector(Part.MAIN, State.PRESSED)
        if self.pressed_bg is not None:
            widget.set_style("bg_color", self.pressed_bg, pressed)
        if self.pressed_text is not None:
            widget.set_style("text_color", self.pressed_text, pressed)
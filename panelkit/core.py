"""Small retained widget model: colours, parts, states, styles, series and widgets."""

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass
from itertools import takewhile
from typing import Any, Callable, Iterable, Union

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_U32_MAX = 0xFFFFFFFF


def _parse_hex(text: str) -> int:
    """Read a leading hexadecimal number the lenient way: stop at the first bad digit."""
    s = text.lstrip(" \t\n\r\f\v")
    negative = False
    if s and s[0] in "+-":
        negative = s[0] == "-"
        s = s[1:]
    if s[:2].lower() == "0x" and len(s) > 2 and s[2] in _HEX_DIGITS:
        s = s[2:]
    digits = "".join(takewhile(_HEX_DIGITS.__contains__, s))
    if not digits:
        return 0
    value = int(digits, 16)
    if value > _U32_MAX:
        return _U32_MAX
    return (-value if negative else value) & _U32_MAX


def _int16(value: int) -> int:
    """Wrap an integer to the signed 16-bit range."""
    return ((int(value) + 0x8000) & 0xFFFF) - 0x8000


@dataclass(frozen=True)
class Color:
    """An RGB colour with 8 bits per channel."""

    red: int
    green: int
    blue: int

    @classmethod
    def from_hex(cls, value: Union[int, str]) -> "Color":
        """Build a colour from 0xRRGGBB or from a hex string such as '#rrggbb'."""
        if isinstance(value, str):
            value = _parse_hex(value[1:] if value.startswith("#") else value)
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    @property
    def value(self) -> int:
        return (self.red << 16) | (self.green << 8) | self.blue

    def mix(self, other: "Color", ratio: int) -> "Color":
        """Blend towards self by ratio/255 (255 gives self, 0 gives other)."""
        if not 0 <= ratio <= 255:
            raise ValueError(f"mix ratio must be within 0..255, got {ratio}")

        def channel(a: int, b: int) -> int:
            return min(255, (a * ratio + b * (255 - ratio) + 128) // 255)

        return Color(
            channel(self.red, other.red),
            channel(self.green, other.green),
            channel(self.blue, other.blue),
        )

    def __str__(self) -> str:
        return f"#{self.value:06x}"


class Part(enum.IntEnum):
    """The drawable part of a widget a style targets."""

    MAIN = 0x000000
    SCROLLBAR = 0x010000
    INDICATOR = 0x020000
    KNOB = 0x030000
    SELECTED = 0x040000
    ITEMS = 0x050000


class State(enum.IntFlag):
    """Interaction states a style can be limited to."""

    DEFAULT = 0x0000
    CHECKED = 0x0001
    FOCUSED = 0x0002
    PRESSED = 0x0020
    DISABLED = 0x0080


SelectorLike = Union[Part, State, tuple]


def selector(part: Part = Part.MAIN, state: State = State.DEFAULT) -> tuple:
    """Combine a part and a state into a style selector."""
    return (Part(part), State(state))


def _normalise(sel: SelectorLike) -> tuple:
    if isinstance(sel, Part):
        return (sel, State.DEFAULT)
    if isinstance(sel, State):
        return (Part.MAIN, sel)
    if isinstance(sel, tuple) and len(sel) == 2:
        return (Part(sel[0]), State(sel[1]))
    raise TypeError(f"not a style selector: {sel!r}")


class Style(dict):
    """A named, shareable set of style properties."""

    def __init__(self, name: str = "", **props: Any) -> None:
        super().__init__(props)
        self.name = name

    def __repr__(self) -> str:
        return f"Style({self.name!r}, {dict.__repr__(self)})"


class Series:
    """A fixed-length run of chart points that scrolls left as values arrive."""

    def __init__(self, color: Color, point_count: int) -> None:
        if point_count < 1:
            raise ValueError("a series needs at least one point")
        self.color = color
        self._points: deque = deque([None] * point_count, maxlen=point_count)

    @property
    def point_count(self) -> int:
        return self._points.maxlen

    @property
    def points(self) -> list:
        """Points oldest first; None marks a slot with no value yet."""
        return list(self._points)

    def push(self, value: float) -> None:
        """Append a value as a 16-bit coordinate, dropping the oldest point."""
        self._points.append(_int16(int(value)))


EventCallback = Callable[["Widget"], Any]


class Widget:
    """A positioned node in the widget tree with local and shared styles."""

    kind = "object"

    def __init__(
        self,
        parent: "Widget | None" = None,
        x: int = 0,
        y: int = 0,
        width: int = 0,
        height: int = 0,
    ) -> None:
        self.parent = parent
        self.children: list[Widget] = []
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.state = State.DEFAULT
        self.flags: set[str] = {"clickable", "scrollable"}
        self.local_styles: dict[tuple, dict[str, Any]] = {}
        self.styles: list[tuple[Style, tuple]] = []
        self.valid = True
        self._handlers: dict[str, list[EventCallback]] = {}
        if parent is not None:
            parent.children.append(self)

    def set_style(self, prop: str, value: Any, selector: SelectorLike = Part.MAIN) -> None:
        """Set a local style property, which outranks every shared style."""
        self.local_styles.setdefault(_normalise(selector), {})[prop] = value

    def get_style(self, prop: str, selector: SelectorLike = Part.MAIN) -> Any:
        """Resolve a property for an exact selector; None when nothing sets it."""
        key = _normalise(selector)
        local = self.local_styles.get(key, {})
        if prop in local:
            return local[prop]
        for style, sel in reversed(self.styles):
            if sel == key and prop in style:
                return style[prop]
        return None

    def add_style(self, style: Style, selector: SelectorLike = Part.MAIN) -> None:
        """Attach a shared style; styles added later take precedence."""
        self.styles.append((style, _normalise(selector)))

    def remove_style_all(self) -> None:
        self.local_styles.clear()
        self.styles.clear()

    def on(self, event: str, callback: EventCallback) -> EventCallback:
        """Register a callback for an event name; returns the callback."""
        self._handlers.setdefault(event, []).append(callback)
        return callback

    def emit(self, event: str) -> None:
        """Run every callback registered for the event, in registration order."""
        if not self.valid:
            return
        for callback in list(self._handlers.get(event, ())):
            callback(self)

    def delete(self) -> None:
        """Send 'delete', then delete the children and detach from the parent."""
        if not self.valid:
            return
        self.emit("delete")
        for child in list(self.children):
            child.delete()
        self.valid = False
        self._handlers.clear()
        if self.parent is not None and self in self.parent.children:
            self.parent.children.remove(self)

    def iter_tree(self) -> Iterable["Widget"]:
        """Yield this widget and all its descendants, depth first."""
        yield self
        for child in self.children:
            yield from child.iter_tree()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(x={self.x}, y={self.y}, "
            f"width={self.width}, height={self.height})"
        )
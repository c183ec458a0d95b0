"""A box that lays its children out in a row, a column, a grid or freely."""

from __future__ import annotations

import enum
from typing import Optional, Union

from .core import Part, Widget
from .style import FlexAlign
from .theme import Theme


class Layout(enum.Enum):
    ROW = "row"
    COLUMN = "column"
    GRID = "grid"
    ABSOLUTE = "absolute"


def _to_layout(layout: Union[Layout, str]) -> Layout:
    if isinstance(layout, Layout):
        return layout
    return Layout._value2member_map_.get(layout, Layout.ABSOLUTE)


class Container(Widget):
    """A non-scrolling container; unknown layout names place children absolutely."""

    kind = "object"

    def __init__(
        self,
        parent: Optional[Widget] = None,
        x: int = 0,
        y: int = 0,
        width: int = 0,
        height: int = 0,
        layout: Union[Layout, str] = Layout.ROW,
        theme: Optional[Theme] = None,
    ) -> None:
        super().__init__(parent, x, y, width, height)
        self.theme = theme if theme is not None else Theme()
        self.scroll_dir = "none"
        self.flags.discard("scrollable")
        self.theme.apply(self, "container")

        self.layout = _to_layout(layout)
        self.layout_engine: Optional[str] = None
        self.flex_flow: Optional[str] = None
        self.flex_align: Optional[tuple] = None
        if self.layout in (Layout.ROW, Layout.COLUMN):
            self.layout_engine = "flex"
            self.flex_flow = self.layout.value
            self.flex_align = (FlexAlign.START, FlexAlign.START, FlexAlign.START)
        elif self.layout is Layout.GRID:
            self.layout_engine = "grid"

    def set_gap(self, gap: int) -> None:
        """Set the spacing between children in both directions."""
        for prop in ("pad_gap", "pad_row", "pad_column"):
            self.set_style(prop, gap, Part.MAIN)

    def set_pad(self, top: int, right: int, bottom: int, left: int) -> None:
        self.set_style("pad_top", top, Part.MAIN)
        self.set_style("pad_right", right, Part.MAIN)
        self.set_style("pad_bottom", bottom, Part.MAIN)
        self.set_style("pad_left", left, Part.MAIN)
"""A label that cycles through a list of text frames at a fixed interval."""

from __future__ import annotations

from typing import Iterable, Optional

from .core import Widget
from .theme import Theme


class Ticker(Widget):
    """An animated text label; call tick() once per elapsed interval."""

    kind = "label"

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
        self.text = ""
        self.long_mode = "clip"
        self.theme.apply(self, "ticker")
        self.frames: tuple = ()
        self.current = 0
        self.interval_ms = 0
        self.running = False
        self.on("delete", self._on_delete)

    def _on_delete(self, _widget: Widget) -> None:
        self.frames = ()
        self.current = 0
        self.running = False

    def start(self, frames: Iterable[str], interval_ms: int = 100) -> None:
        """Show the first frame and start cycling; an empty frame list changes nothing."""
        copied = tuple(str(frame) for frame in frames)
        if not self.valid or not copied:
            return
        self.frames = copied
        self.current = 0
        self.interval_ms = max(1, interval_ms)
        self.running = True
        self.text = copied[0]

    def stop(self) -> None:
        """Stop cycling; the current frame stays shown."""
        self.running = False

    def tick(self) -> Optional[str]:
        """Advance to the next frame, wrapping around; returns the shown text."""
        if not self.running or not self.valid or not self.frames:
            return None
        self.current = (self.current + 1) % len(self.frames)
        self.text = self.frames[self.current]
        return self.text
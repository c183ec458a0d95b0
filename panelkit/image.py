"""An image widget showing a raw RGB565 pixel buffer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core import Widget

PIXEL_BYTES = 2
MAX_DIMENSION = 0xFFFF
DEFAULT_ZOOM = 256


class ImageError(ValueError):
    """Raised when an image buffer cannot be used."""


@dataclass(frozen=True)
class ImageBuffer:
    """Raw true-colour pixels with their dimensions."""

    width: int
    height: int
    pixels: bytes
    color_format: str = "true_color"

    @property
    def data_size(self) -> int:
        return self.width * self.height * PIXEL_BYTES


class Image(Widget):
    """An image that owns its current buffer and drops it on replace or delete."""

    kind = "img"

    def __init__(
        self,
        parent: Optional[Widget] = None,
        x: int = 0,
        y: int = 0,
        width: int = 0,
        height: int = 0,
    ) -> None:
        super().__init__(parent, x, y, width, height)
        self.flags.add("overflow_visible")
        self.zoom = DEFAULT_ZOOM
        self.source: Optional[ImageBuffer] = None
        self.on("delete", self._on_delete)

    def _on_delete(self, _widget: Widget) -> None:
        self.source = None

    def set_buffer(self, width: int, height: int, pixels: bytes) -> ImageBuffer:
        """Show a new pixel buffer, replacing the old one."""
        if not self.valid:
            raise ImageError("image widget has been deleted")
        if not pixels:
            raise ImageError("image has no pixel data")
        if not (0 < width <= MAX_DIMENSION and 0 < height <= MAX_DIMENSION):
            raise ImageError(f"invalid image size {width}x{height}")
        buffer = ImageBuffer(width, height, bytes(pixels))
        self.source = None
        self.source = buffer
        return buffer
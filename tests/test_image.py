import pytest

from panelkit.core import Widget
from panelkit.image import DEFAULT_ZOOM, PIXEL_BYTES, Image, ImageBuffer, ImageError


def test_create_defaults():
    parent = Widget()
    image = Image(parent, 1, 2, 32, 16)
    assert "overflow_visible" in image.flags
    assert image.zoom == DEFAULT_ZOOM
    assert image.source is None
    assert image in parent.children


def test_set_buffer_sets_source():
    image = Image()
    pixels = bytes(2 * 3 * PIXEL_BYTES)
    buffer = image.set_buffer(2, 3, pixels)
    assert image.source is buffer
    assert (buffer.width, buffer.height, buffer.pixels) == (2, 3, pixels)
    assert buffer.data_size == len(pixels)
    assert buffer.color_format == "true_color"


def test_replace_buffer():
    image = Image()
    image.set_buffer(1, 1, b"\x00\x01")
    second = image.set_buffer(1, 1, b"\xff\xff")
    assert image.source == second
    assert image.source.pixels == b"\xff\xff"


@pytest.mark.parametrize(
    "width, height, pixels",
    [(0, 1, b"\x00\x00"), (1, 0, b"\x00\x00"), (1, 1, b""), (1, 1, None), (70000, 1, b"\x00")],
)
def test_invalid_buffer_rejected(width, height, pixels):
    image = Image()
    with pytest.raises(ImageError):
        image.set_buffer(width, height, pixels)
    assert image.source is None


def test_delete_drops_buffer():
    image = Image()
    image.set_buffer(1, 1, b"\x00\x00")
    image.delete()
    assert image.source is None
    with pytest.raises(ImageError):
        image.set_buffer(1, 1, b"\x00\x00")


def test_buffer_is_immutable_copy():
    data = bytearray(b"\x01\x02")
    buffer = ImageBuffer(1, 1, bytes(data))
    data[0] = 9
    assert buffer.pixels == b"\x01\x02"
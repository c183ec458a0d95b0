import pytest

from panelkit.container import Container, Layout
from panelkit.style import FlexAlign
from panelkit.theme import Theme


@pytest.mark.parametrize("name", ["row", "column"])
def test_flex_layouts(name):
    box = Container(None, 0, 0, 100, 50, name)
    assert box.layout is Layout(name)
    assert box.layout_engine == "flex"
    assert box.flex_flow == name
    assert box.flex_align == (FlexAlign.START,) * 3


def test_grid_layout():
    box = Container(layout=Layout.GRID)
    assert box.layout_engine == "grid"
    assert box.flex_flow is None


def test_absolute_and_unknown_layout_have_no_engine():
    assert Container(layout="absolute").layout_engine is None
    unknown = Container(layout="spiral")
    assert unknown.layout is Layout.ABSOLUTE
    assert unknown.layout_engine is None


def test_default_layout_is_row():
    assert Container().layout is Layout.ROW


def test_not_scrollable():
    box = Container()
    assert "scrollable" not in box.flags
    assert box.scroll_dir == "none"


def test_theme_gap_applied():
    theme = Theme()
    box = Container(theme=theme)
    assert box.get_style("pad_gap") == theme.container_gap


def test_set_gap_overrides_all_directions():
    box = Container()
    box.set_gap(7)
    assert [box.get_style(p) for p in ("pad_gap", "pad_row", "pad_column")] == [7, 7, 7]


def test_set_pad():
    box = Container()
    box.set_pad(1, 2, 3, 4)
    got = [box.get_style(p) for p in ("pad_top", "pad_right", "pad_bottom", "pad_left")]
    assert got == [1, 2, 3, 4]
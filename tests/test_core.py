import pytest

from panelkit.core import Color, Part, Series, State, Style, Widget, selector


def test_color_hex_round_trip():
    for value in (0x040C02, 0x5FFF35, 0xA0FF50, 0x0C2006, 0xC25757):
        assert Color.from_hex(value).value == value


def test_color_from_string_matches_int():
    assert Color.from_hex("#5fff35") == Color.from_hex(0x5FFF35)
    assert str(Color.from_hex("#c25757")) == "#c25757"


def test_color_from_invalid_string_is_black():
    assert Color.from_hex("#zz") == Color(0, 0, 0)


def test_color_from_string_stops_at_bad_digit():
    assert Color.from_hex("#a0ff50xyz") == Color.from_hex(0xA0FF50)


def test_color_mix_extremes():
    a = Color.from_hex(0x5FFF35)
    b = Color.from_hex(0xA0FF50)
    assert a.mix(b, 255) == a
    assert a.mix(b, 0) == b


def test_color_mix_same_colour_is_stable():
    c = Color.from_hex(0xC25757)
    for ratio in (0, 64, 128, 200, 255):
        assert c.mix(c, ratio) == c


def test_color_mix_stays_between_channels():
    a = Color.from_hex(0x040C02)
    b = Color.from_hex(0xA0FF50)
    m = a.mix(b, 128)
    for lo, hi, mid in zip((a.red, a.green, a.blue), (b.red, b.green, b.blue), (m.red, m.green, m.blue)):
        assert min(lo, hi) <= mid <= max(lo, hi)


def test_color_mix_rejects_bad_ratio():
    with pytest.raises(ValueError):
        Color(1, 2, 3).mix(Color(4, 5, 6), 256)


def test_selector_defaults_and_combination():
    assert selector() == (Part.MAIN, State.DEFAULT)
    assert selector(Part.INDICATOR, State.PRESSED) == (Part.INDICATOR, State.PRESSED)


def test_local_style_overrides_shared_style():
    w = Widget()
    shared = Style("base", bg_opa=255)
    w.add_style(shared)
    assert w.get_style("bg_opa") == 255
    w.set_style("bg_opa", 10)
    assert w.get_style("bg_opa") == 10


def test_later_shared_style_wins():
    w = Widget()
    w.add_style(Style("a", radius=1))
    w.add_style(Style("b", radius=7))
    assert w.get_style("radius") == 7


def test_style_lookup_is_per_selector():
    w = Widget()
    w.set_style("bg_color", Color(1, 1, 1), Part.INDICATOR)
    assert w.get_style("bg_color", Part.MAIN) is None
    assert w.get_style("bg_color", (Part.INDICATOR, State.DEFAULT)) == Color(1, 1, 1)


def test_remove_style_all_clears_everything():
    w = Widget()
    w.add_style(Style("a", radius=3))
    w.set_style("pad_top", 4)
    w.remove_style_all()
    assert w.get_style("radius") is None
    assert w.get_style("pad_top") is None


def test_bad_selector_raises():
    with pytest.raises(TypeError):
        Widget().set_style("radius", 1, "main")


def test_parent_links_children():
    root = Widget()
    child = Widget(root, 1, 2, 3, 4)
    assert root.children == [child]
    assert child.parent is root
    assert list(root.iter_tree()) == [root, child]


def test_emit_runs_callbacks_in_order():
    w = Widget()
    seen = []
    w.on("clicked", lambda obj: seen.append(("a", obj)))
    w.on("clicked", lambda obj: seen.append(("b", obj)))
    w.emit("clicked")
    assert seen == [("a", w), ("b", w)]


def test_delete_notifies_tree_and_detaches():
    root = Widget()
    parent = Widget(root)
    child = Widget(parent)
    order = []
    parent.on("delete", lambda obj: order.append("parent"))
    child.on("delete", lambda obj: order.append("child"))
    parent.delete()
    assert order == ["parent", "child"]
    assert root.children == []
    assert not parent.valid and not child.valid


def test_deleted_widget_ignores_events():
    w = Widget()
    seen = []
    w.on("clicked", seen.append)
    w.delete()
    w.emit("clicked")
    w.delete()
    assert seen == []


def test_series_starts_empty_and_shifts():
    s = Series(Color(0, 0, 0), 3)
    assert s.points == [None, None, None]
    for v in (1, 2, 3, 4):
        s.push(v)
    assert s.points == [2, 3, 4]
    assert s.point_count == 3


def test_series_truncates_values():
    s = Series(Color(0, 0, 0), 2)
    s.push(2.9)
    s.push(-2.9)
    assert s.points == [2, -2]


def test_series_needs_points():
    with pytest.raises(ValueError):
        Series(Color(0, 0, 0), 0)
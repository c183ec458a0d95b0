import pytest

from panelkit.core import Color, Part, State, Widget, selector
from panelkit.style import FlexAlign, StyleFlag, TextAlign, WidgetStyle

PALETTE = {
    "bg": Color.from_hex(0x040C02),
    "fg": Color.from_hex(0x5FFF35),
    "accent": Color.from_hex(0xA0FF50),
}


class StubTheme:
    def color_from_str(self, text):
        if text.startswith("#"):
            return Color.from_hex(text)
        return PALETTE.get(text, Color(0, 0, 0))

    def font_by_name(self, name):
        return f"font:{name}"


def parsed(data, theme=None):
    ws = WidgetStyle()
    ws.update(data, StubTheme() if theme is None else theme)
    return ws


def test_empty_style_has_no_flags():
    assert WidgetStyle().flags == StyleFlag.NONE


def test_parsed_flag_bits_match_layout():
    assert int(parsed({"bg_color": "fg"}).flags) == 1
    assert int(parsed({"justify": "center"}).flags) == 1 << 29


def test_colors_from_palette_and_hex():
    ws = parsed({"bg_color": "accent", "text_color": "#c25757"})
    assert ws.bg_color == PALETTE["accent"]
    assert ws.text_color == Color.from_hex(0xC25757)
    assert ws.flags == StyleFlag.BG_COLOR | StyleFlag.TEXT_COLOR


def test_ints_and_opacities():
    ws = parsed({"radius": 4, "bg_opa": 128, "border_width": 2})
    assert (ws.radius, ws.bg_opa, ws.border_width) == (4, 128, 2)
    assert ws.flags == StyleFlag.RADIUS | StyleFlag.BG_OPA | StyleFlag.BORDER_WIDTH


def test_opacity_wraps_to_byte():
    ws = parsed({"bg_opa": 256 + 50})
    assert ws.bg_opa == 50


def test_width_wraps_to_int16():
    ws = parsed({"radius": 65536, "pad_gap": -1})
    assert ws.radius == 0
    assert ws.pad_gap == -1


def test_wrong_types_are_ignored():
    ws = parsed({"radius": "4", "bg_color": 5, "bg_opa": True})
    assert ws.flags == StyleFlag.NONE


def test_pad_all_overrides_sides():
    ws = parsed({"pad_top": 9, "pad_all": 3})
    assert (ws.pad_top, ws.pad_bottom, ws.pad_left, ws.pad_right) == (3, 3, 3, 3)
    sides = StyleFlag.PAD_TOP | StyleFlag.PAD_BOTTOM | StyleFlag.PAD_LEFT | StyleFlag.PAD_RIGHT
    assert ws.flags == sides


@pytest.mark.parametrize("name,expected", [("left", TextAlign.LEFT), ("center", TextAlign.CENTER), ("right", TextAlign.RIGHT)])
def test_text_align(name, expected):
    assert parsed({"text_align": name}).text_align is expected


def test_unknown_text_align_ignored():
    assert parsed({"text_align": "middle"}).flags == StyleFlag.NONE


@pytest.mark.parametrize("name", ["start", "end", "center", "space-between", "space-around", "space-evenly"])
def test_justify(name):
    ws = parsed({"justify": name})
    assert ws.flex_justify is FlexAlign(name)
    assert ws.flags == StyleFlag.FLEX_JUSTIFY


def test_unknown_justify_ignored():
    assert parsed({"justify": "stretch"}).flex_justify is None


def test_font_resolved_through_theme():
    ws = parsed({"font": "unscii_16"})
    assert ws.font == "font:unscii_16"
    assert ws.flags == StyleFlag.FONT


def test_update_merges_and_keeps_old_values():
    ws = parsed({"radius": 2})
    ws.update({"bg_opa": 7}, StubTheme())
    assert ws.radius == 2
    assert ws.bg_opa == 7


def test_update_without_theme_uses_hex_only():
    ws = WidgetStyle()
    ws.update({"bg_color": "#5fff35", "text_color": "fg", "font": "unscii_8"})
    assert ws.bg_color == Color.from_hex(0x5FFF35)
    assert ws.text_color == Color(0, 0, 0)
    assert ws.font is None


def test_apply_plain_properties_on_selector():
    w = Widget()
    ws = parsed({"bg_color": "fg", "border_width": 2, "letter_space": 1})
    ws.apply(w, Part.INDICATOR)
    assert w.get_style("bg_color", Part.INDICATOR) == PALETTE["fg"]
    assert w.get_style("border_width", Part.INDICATOR) == 2
    assert w.get_style("text_letter_space", Part.INDICATOR) == 1
    assert w.get_style("bg_color", Part.MAIN) is None


def test_apply_radius_sets_clip_corner():
    w = Widget()
    parsed({"radius": 5}).apply(w)
    assert w.get_style("clip_corner") is True
    other = Widget()
    parsed({"radius": 0}).apply(other)
    assert other.get_style("clip_corner") is False


def test_apply_pad_gap_sets_rows_and_columns():
    w = Widget()
    parsed({"pad_gap": 6}).apply(w)
    assert w.get_style("pad_gap") == w.get_style("pad_row") == w.get_style("pad_column") == 6


def test_fill_always_targets_indicator():
    w = Widget()
    parsed({"fill_color": "accent", "fill_opa": 100}).apply(w, Part.MAIN)
    assert w.get_style("bg_color", Part.INDICATOR) == PALETTE["accent"]
    assert w.get_style("arc_color", Part.INDICATOR) == PALETTE["accent"]
    assert w.get_style("arc_opa", Part.INDICATOR) == 100
    assert w.get_style("bg_color", Part.MAIN) is None


def test_pressed_always_targets_pressed_state():
    w = Widget()
    parsed({"pressed_bg": "fg", "pressed_text": "bg"}).apply(w, Part.INDICATOR)
    pressed = selector(Part.MAIN, State.PRESSED)
    assert w.get_style("bg_color", pressed) == PALETTE["fg"]
    assert w.get_style("text_color", pressed) == PALETTE["bg"]


def test_apply_alignment_values():
    w = Widget()
    parsed({"text_align": "right", "justify": "end"}).apply(w)
    assert w.get_style("text_align") is TextAlign.RIGHT
    assert w.get_style("flex_main_place") is FlexAlign.END


def test_apply_empty_style_leaves_widget_untouched():
    w = Widget()
    WidgetStyle().apply(w)
    assert w.local_styles == {}
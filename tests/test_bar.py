from panelkit.bar import Bar, BarField
from panelkit.core import Part
from panelkit.theme import ColorRole, Theme


def make_bar(**kwargs):
    theme = Theme()
    bar = Bar(None, 0, 0, kwargs.pop("width", 100), kwargs.pop("height", 20), theme=theme)
    return bar, theme


def test_defaults_match_initial_range():
    bar, _ = make_bar()
    assert (bar.minimum, bar.maximum, bar.value) == (0, 100, 0)


def test_theme_styles_attached():
    bar, theme = make_bar()
    assert bar.get_style("bg_color", Part.INDICATOR) == theme.color(ColorRole.FG)
    assert bar.get_style("bg_color", Part.MAIN) == theme.color(ColorRole.DIM)


def test_set_value_sets_range_and_value():
    bar, _ = make_bar()
    bar.set_value(30, 60)
    assert (bar.minimum, bar.maximum, bar.value) == (0, 60, 30)


def test_set_value_clamps_to_maximum():
    bar, _ = make_bar()
    bar.set_value(150, 100)
    assert bar.value == 100


def test_set_field_value_and_max():
    bar, _ = make_bar()
    bar.set_field(BarField.VALUE, "42")
    assert bar.value == 42
    bar.set_field(BarField.MAX, "200")
    assert bar.maximum == 200
    assert bar.value == 42


def test_lowering_max_clamps_value():
    bar, _ = make_bar()
    bar.set_field(BarField.VALUE, "80")
    bar.set_field(BarField.MAX, "50")
    assert bar.value == 50


def test_set_field_label_and_truncation():
    bar, _ = make_bar()
    bar.set_field(BarField.LABEL, "CPU")
    assert bar.label == "CPU"
    bar.set_label("x" * 100)
    assert len(bar.label) == 63


def test_no_regions_without_label():
    bar, _ = make_bar()
    assert bar.label_regions() == []


def test_no_regions_for_empty_range():
    bar, _ = make_bar()
    bar.set_label("hi")
    bar.set_value(0, 0)
    assert bar.label_regions() == []


def test_half_filled_regions_share_boundary():
    bar, theme = make_bar()
    bar.set_label("50%")
    bar.set_value(50, 100)
    regions = bar.label_regions()
    assert [r.color for r in regions] == [theme.color(ColorRole.FG), theme.color(ColorRole.BG)]
    assert regions[0].clip[0] == regions[1].clip[2]
    assert regions[1].clip[0] == bar.x
    assert regions[0].clip[2] == bar.x + bar.width - 1


def test_full_bar_only_draws_over_fill():
    bar, theme = make_bar()
    bar.set_label("done")
    bar.set_value(100, 100)
    regions = bar.label_regions()
    assert len(regions) == 1
    assert regions[0].color == theme.color(ColorRole.BG)


def test_text_area_starts_at_top_when_height_is_font_height():
    bar, _ = make_bar(height=8)
    bar.set_label("x")
    bar.set_value(10, 100)
    for region in bar.label_regions():
        assert region.text_area[1] == bar.y
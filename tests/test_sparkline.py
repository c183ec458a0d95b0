from panelkit.core import Color, Part
from panelkit.sparkline import Sparkline, SparklineField
from panelkit.theme import OPA_TRANSP, SparklineConfig, Theme


def make(width=40, config=None):
    theme = Theme()
    return Sparkline(None, 0, 0, width, 20, config=config, theme=theme), theme


def test_point_count_defaults_to_width():
    spark, _ = make(width=40)
    assert spark.series.point_count == 40


def test_point_count_from_config():
    spark, _ = make(config=SparklineConfig(point_count=10))
    assert spark.series.point_count == 10


def test_zero_width_keeps_one_point():
    spark, _ = make(width=0)
    assert spark.series.point_count == 1


def test_uses_theme_config_and_color():
    spark, theme = make()
    assert spark.series.color == theme.sparkline.color
    assert spark.y_range == (theme.sparkline.y_min, theme.sparkline.y_max)


def test_custom_color():
    red = Color.from_hex(0xFF2222)
    spark, _ = make(config=SparklineConfig(color=red, y_max=90))
    assert spark.series.color == red
    assert spark.y_range[1] == 90


def test_styles():
    spark, _ = make(config=SparklineConfig(line_width=0))
    assert spark.get_style("bg_opa") == OPA_TRANSP
    assert spark.get_style("border_width") == 0
    assert spark.get_style("size", Part.INDICATOR) == 0
    assert spark.get_style("line_width", Part.ITEMS) == 1


def test_push_scrolls():
    spark, _ = make(config=SparklineConfig(point_count=3))
    for value in (1.0, 2.0, 3.0, 4.0):
        spark.push(value)
    assert spark.series.points == [2, 3, 4]


def test_push_truncates_toward_zero():
    spark, _ = make()
    spark.push(-3.9)
    assert spark.series.points[-1] == -3


def test_set_field_parses_number():
    spark, _ = make()
    spark.set_field(SparklineField.VALUE, "55.5 %")
    assert spark.series.points[-1] == 55
    spark.set_field(SparklineField.VALUE, "abc")
    assert spark.series.points[-1] == 0


def test_set_range():
    spark, _ = make()
    spark.set_range(5, 50)
    assert spark.y_range == (5, 50)
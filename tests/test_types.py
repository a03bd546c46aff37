import math

import pytest

from termcharts.errors import ChartConfigError, ChartDataError, UnknownChartKindError
from termcharts.types import ChartKind, LineOptions, RenderConfig, Series, VerticalBarOptions


class TestChartKind:
    @pytest.mark.parametrize(
        "token,expected",
        [
            ("bar", ChartKind.BAR),
            ("BAR", ChartKind.BAR),
            ("VBar", ChartKind.VERTICAL_BAR),
            (" line ", ChartKind.LINE),
            ("Pie", ChartKind.PIE),
            ("stacked", ChartKind.STACKED),
            ("SBAR", ChartKind.STACKED),
            ("percent", ChartKind.PERCENTAGE),
            ("pbar", ChartKind.PERCENTAGE),
        ],
    )
    def test_from_str(self, token, expected):
        assert ChartKind.from_str(token) is expected

    def test_unknown_token(self):
        with pytest.raises(UnknownChartKindError) as exc_info:
            ChartKind.from_str("donut")
        assert str(exc_info.value) == "Unsupported chart type: donut"
        assert exc_info.value.code == "unknown_chart_kind"
        assert exc_info.value.token == "donut"

    def test_unknown_token_is_a_value_error(self):
        with pytest.raises(ValueError):
            ChartKind.from_str("")

    def test_proportional_kinds(self):
        proportional = {kind for kind in ChartKind if kind.is_proportional}
        assert proportional == {ChartKind.PIE, ChartKind.STACKED, ChartKind.PERCENTAGE}


class TestSeries:
    def test_from_mapping_keeps_order(self):
        series = Series.from_mapping({"b": 2, "a": 1, "c": 3})
        assert series.labels == ("b", "a", "c")
        assert series.values == (2, 1, 3)
        assert series.total == 6
        assert len(series) == 3

    def test_from_pairs(self):
        series = Series.from_pairs([("x", 1.5), ["y", 2]])
        assert list(series) == [("x", 1.5), ("y", 2)]

    def test_coerce(self):
        series = Series.from_mapping({"a": 1})
        assert Series.coerce(series) is series
        assert Series.coerce({"a": 1}) == series
        assert Series.coerce([("a", 1)]) == series

    def test_empty_is_falsy(self):
        assert not Series()
        assert Series().total == 0

    def test_sorted_by_value_is_stable(self):
        series = Series.from_mapping({"a": 1, "b": 3, "c": 1, "d": 2})
        assert [label for label, _ in series.sorted_by_value()] == ["b", "d", "a", "c"]

    def test_duplicate_label_rejected(self):
        with pytest.raises(ChartDataError) as exc_info:
            Series.from_pairs([("a", 1), ("a", 2)])
        assert exc_info.value.code == "duplicate_label"

    @pytest.mark.parametrize("value", [math.nan, math.inf, "12", True, None])
    def test_invalid_value_rejected(self, value):
        with pytest.raises(ChartDataError) as exc_info:
            Series.from_pairs([("a", value)])
        assert exc_info.value.code == "invalid_value"

    def test_non_string_label_rejected(self):
        with pytest.raises(ChartDataError) as exc_info:
            Series.from_pairs([(1, 2)])
        assert exc_info.value.code == "invalid_label"

    def test_negative_values_allowed_in_series(self):
        assert Series.from_mapping({"loss": -5}).values == (-5,)


class TestOptions:
    def test_vbar_defaults(self):
        options = VerticalBarOptions()
        assert options.show_values is False
        assert options.grid_lines is True
        assert options.bar_width == 1

    @pytest.mark.parametrize("bar_width", [0, -1, True, 1.5])
    def test_vbar_bad_width(self, bar_width):
        with pytest.raises(ChartConfigError):
            VerticalBarOptions(bar_width=bar_width)

    def test_line_defaults(self):
        options = LineOptions()
        assert options.line_color == "cyan"
        assert options.point_color is None

    def test_line_bad_colour(self):
        with pytest.raises(ChartConfigError) as exc_info:
            LineOptions(point_color="purple")
        assert "pointColor" in str(exc_info.value)

    def test_line_reset_is_not_a_colour(self):
        with pytest.raises(ChartConfigError):
            LineOptions(line_color="reset")


class TestRenderConfig:
    def test_defaults(self):
        config = RenderConfig()
        assert (config.title, config.width, config.height, config.color_enabled) == ("", 60, 15, True)

    @pytest.mark.parametrize("field,value", [("width", 0), ("height", -3), ("width", 10.0), ("height", True)])
    def test_dimensions_must_be_positive_ints(self, field, value):
        with pytest.raises(ChartConfigError):
            RenderConfig(**{field: value})

    def test_title_must_be_string(self):
        with pytest.raises(ChartConfigError):
            RenderConfig(title=5)

    def test_options_for_defaults(self):
        config = RenderConfig()
        assert config.options_for(ChartKind.VERTICAL_BAR) == VerticalBarOptions()
        assert config.options_for(ChartKind.LINE) == LineOptions()
        assert config.options_for(ChartKind.PIE) is None

    def test_options_for_returns_configured_record(self):
        options = LineOptions(line_color="red")
        assert RenderConfig(options=options).options_for(ChartKind.LINE) is options

    def test_options_for_wrong_kind(self):
        config = RenderConfig(options=LineOptions())
        with pytest.raises(ChartConfigError) as exc_info:
            config.options_for(ChartKind.VERTICAL_BAR)
        assert exc_info.value.code == "options_kind_mismatch"
        with pytest.raises(ChartConfigError):
            config.options_for(ChartKind.BAR)

from termcharts.palette import COLOR_CODES, color_for_label
from termcharts.renderers.vbar import bar_height, render_vertical_bar
from termcharts.types import RenderConfig, Series, VerticalBarOptions

SERIES = Series.from_mapping({"A": 10, "B": 20})


def _render(**options):
    config = RenderConfig(height=12, color_enabled=False, options=VerticalBarOptions(**options))
    return render_vertical_bar(SERIES, config)


class TestBarHeight:
    def test_scales_with_ceiling(self):
        assert bar_height(10, 0, 20, 10) == 5
        assert bar_height(11, 0, 20, 10) == 6

    def test_small_positive_gets_one_row(self):
        assert bar_height(0.01, 0, 100, 10) == 1

    def test_flat_range_uses_half_height(self):
        assert bar_height(0, 0, 0, 10) == 5

    def test_clamped(self):
        assert bar_height(50, 0, 20, 10) == 10
        assert bar_height(-5, 0, 20, 10) == 0


class TestRenderVerticalBar:
    def test_layout(self):
        lines = _render().split("\n")
        assert lines[0] == "   20 │·   █"
        assert lines[9] == "    0 │ █  █"
        assert lines[10] == "      └──────"
        assert lines[11] == "        A  B"
        assert lines[12] == ""
        assert lines[13] == "      A: 10; B: 20"

    def test_grid_markers_on_even_rows(self):
        lines = _render().split("\n")
        assert lines[2][7] == "·"
        assert lines[1][7] == " "

    def test_without_grid_lines(self):
        assert "·" not in _render(grid_lines=False)

    def test_show_values_on_top_row_of_bar(self):
        lines = _render(show_values=True).split("\n")
        assert lines[0] == "   20 │·   █20"
        assert lines[5].endswith("█10█")

    def test_show_values_too_wide_for_gap_are_left_off(self):
        series = Series.from_mapping({"Jan": 120, "Feb": 180})
        config = RenderConfig(height=12, color_enabled=False, options=VerticalBarOptions(show_values=True))
        out = render_vertical_bar(series, config)
        assert "█" in out
        assert "█1" not in out
        assert "Jan: 120; Feb: 180" in out

    def test_show_values_printed_whole_when_they_fit(self):
        series = Series.from_mapping({"Month1": 120, "Month2": 180})
        config = RenderConfig(height=12, color_enabled=False, options=VerticalBarOptions(show_values=True))
        out = render_vertical_bar(series, config)
        assert "█120" in out
        assert "█180" in out

    def test_wider_bars(self):
        lines = _render(bar_width=2).split("\n")
        assert "██" in lines[0]
        assert lines[10] == "      └" + "─" * 8

    def test_long_labels_are_abbreviated(self):
        series = Series.from_mapping({"Category A": 5, "Category B": 7})
        out = render_vertical_bar(series, RenderConfig(color_enabled=False))
        assert "C A: 5; C B: 7" in out

    def test_negative_values_lower_the_floor(self):
        series = Series.from_mapping({"up": 10, "down": -10})
        out = render_vertical_bar(series, RenderConfig(height=12, color_enabled=False))
        assert "  -10 │" in out

    def test_bar_and_legend_share_label_colour(self):
        series = Series.from_mapping({"Jan": 10, "Feb": 20})
        out = render_vertical_bar(series, RenderConfig(height=12))
        reset = COLOR_CODES["reset"]
        for label, value in series:
            code = COLOR_CODES[color_for_label(label)]
            assert code + "█" in out
            assert f"{code}{label}{reset}: {value}" in out

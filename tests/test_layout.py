from termcharts.layout import (
    abbreviate_label,
    fit_label,
    format_axis_value,
    format_number,
    format_thousands,
    wrap_items,
    x_axis_label_line,
    y_axis_marks,
)
from termcharts.palette import colorize


class TestAbbreviateLabel:
    def test_short_labels_unchanged(self):
        assert abbreviate_label("Jan", limit=3, prefix=3) == "Jan"
        assert abbreviate_label("Team A", limit=6, prefix=6) == "Team A"

    def test_single_word_truncated_to_prefix(self):
        assert abbreviate_label("February", limit=3, prefix=3) == "Feb"
        assert abbreviate_label("Entertainment", limit=8, prefix=6) == "Entert"

    def test_multi_word_keeps_last_word(self):
        assert abbreviate_label("Category A", limit=6, prefix=6) == "C A"
        assert abbreviate_label("Monthly Recurring Revenue", limit=6, prefix=6) == "M R Revenue"

    def test_label_families_stay_distinct(self):
        a = abbreviate_label("Region North", limit=3, prefix=3)
        b = abbreviate_label("Region South", limit=3, prefix=3)
        assert a != b

    def test_is_pure(self):
        results = {abbreviate_label("Quarterly Sales Total", limit=6, prefix=6) for _ in range(5)}
        assert results == {"Q S Total"}


class TestYAxisMarks:
    def test_three_marks(self):
        assert y_axis_marks(0, 20, 13) == {0: 20, 6: 10, 12: 0}

    def test_flat_range_single_mark(self):
        assert y_axis_marks(50, 50, 12) == {6: 50}

    def test_single_row_keeps_max(self):
        assert y_axis_marks(0, 10, 1) == {0: 10}

    def test_two_rows(self):
        # the midpoint rounds onto the bottom row and claims it first
        assert y_axis_marks(0, 10, 2) == {0: 10, 1: 5.0}

    def test_no_rows(self):
        assert y_axis_marks(0, 10, 0) == {}


class TestXAxisLabelLine:
    def test_centres_labels(self):
        line = x_axis_label_line(["Jan", "Feb", "Mar"], [0, 26, 51], 52)
        assert line.startswith("Jan")
        assert line[25:28] == "Feb"
        assert line.endswith("Mar")
        assert len(line) == 52

    def test_colliding_label_is_skipped(self):
        line = x_axis_label_line(["AAA", "BBB"], [1, 2], 10)
        assert "AAA" in line
        assert "BBB" not in line

    def test_clips_to_width(self):
        assert len(x_axis_label_line(["Long"], [0], 2)) == 2


class TestFormatting:
    def test_format_number(self):
        assert format_number(100) == "100"
        assert format_number(100.0) == "100"
        assert format_number(12.5) == "12.5"
        assert format_number(-3) == "-3"

    def test_format_thousands(self):
        assert format_thousands(1234567) == "1,234,567"
        assert format_thousands(50) == "50"

    def test_format_axis_value(self):
        assert format_axis_value(12.5) == "13"
        assert format_axis_value(0.0) == "0"

    def test_fit_label(self):
        assert fit_label("Entertainment", 12) == "Entertainmen"
        assert fit_label("A", 3) == "A  "


class TestWrapItems:
    def test_packs_greedily(self):
        assert wrap_items(["aa", "bb", "cc"], 6) == ["aa; bb", "cc"]

    def test_ignores_escape_codes_when_measuring(self):
        items = [colorize("aa", "red"), colorize("bb", "blue")]
        assert len(wrap_items(items, 6)) == 1

    def test_oversized_item_gets_own_line(self):
        assert wrap_items(["abcdefgh", "x"], 4) == ["abcdefgh", "x"]

    def test_empty(self):
        assert wrap_items([], 10) == []

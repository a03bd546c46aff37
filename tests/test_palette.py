import zlib

from termcharts.palette import COLOR_CODES, PALETTE, color_for_label, colorize, palette_index, strip_ansi, visible_len


class TestPalette:
    def test_seven_colours_without_reset(self):
        assert len(PALETTE) == 7
        assert "reset" not in PALETTE
        assert all(name in COLOR_CODES for name in PALETTE)

    def test_index_is_crc32_mod_seven(self):
        for label in ("Food", "Rent", "Team A", ""):
            assert palette_index(label) == zlib.crc32(label.encode("utf-8")) % 7

    def test_colour_is_stable(self):
        assert color_for_label("Chrome") == color_for_label("Chrome")
        assert color_for_label("Chrome") in PALETTE


class TestColorize:
    def test_wraps_with_reset(self):
        assert colorize("x", "red") == "\033[31mx\033[0m"

    def test_disabled(self):
        assert colorize("x", "red", enabled=False) == "x"

    def test_unknown_or_missing_colour(self):
        assert colorize("x", None) == "x"
        assert colorize("x", "purple") == "x"
        assert colorize("x", "reset") == "x"

    def test_empty_text_stays_empty(self):
        assert colorize("", "red") == ""

    def test_strip_ansi(self):
        text = colorize("abc", "blue") + " d"
        assert strip_ansi(text) == "abc d"
        assert visible_len(text) == 5

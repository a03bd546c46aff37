from termcharts.grid import Grid


class TestGrid:
    def test_blank_grid_serializes_to_empty_lines(self):
        grid = Grid(3, 2)
        assert grid.serialize() == "\n\n"

    def test_write_and_clip(self):
        grid = Grid(4, 1)
        grid.write(2, 0, "abcdef")
        assert grid.serialize() == "  ab\n"

    def test_out_of_bounds_put_is_ignored(self):
        grid = Grid(2, 2)
        grid.put(-1, 0, "x")
        grid.put(0, 5, "x")
        assert grid.lines() == ["", ""]

    def test_trailing_blanks_are_stripped(self):
        grid = Grid(10, 1)
        grid.write(0, 0, "ab")
        assert grid.lines() == ["ab"]

    def test_runs_of_one_colour_share_one_escape(self):
        grid = Grid(4, 1)
        grid.write(0, 0, "██", "red")
        grid.write(2, 0, "█", "blue")
        assert grid.row_text(0) == "\033[31m██\033[0m\033[34m█\033[0m"

    def test_colour_disabled(self):
        grid = Grid(3, 1)
        grid.write(0, 0, "███", "green")
        assert grid.row_text(0, color_enabled=False) == "███"

    def test_read_back(self):
        grid = Grid(2, 1)
        grid.put(1, 0, "#", "cyan")
        assert grid.glyph(1, 0) == "#"
        assert grid.color(1, 0) == "cyan"
        assert grid.glyph(5, 5) == " "
        assert grid.color(5, 5) is None

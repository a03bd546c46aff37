from termcharts.geometry.blocks import EIGHTH_BLOCKS, block_run, partial_block
from termcharts.geometry.raster import BRAILLE_BASE, DotGrid, braille_glyph, line_points


class TestLinePoints:
    def test_includes_both_endpoints(self):
        points = list(line_points(0, 0, 5, 2))
        assert points[0] == (0, 0)
        assert points[-1] == (5, 2)

    def test_horizontal_line(self):
        assert list(line_points(0, 3, 4, 3)) == [(0, 3), (1, 3), (2, 3), (3, 3), (4, 3)]

    def test_vertical_line_upward(self):
        assert list(line_points(2, 4, 2, 1)) == [(2, 4), (2, 3), (2, 2), (2, 1)]

    def test_single_point(self):
        assert list(line_points(1, 1, 1, 1)) == [(1, 1)]

    def test_steps_are_connected(self):
        points = list(line_points(0, 0, 7, 13))
        for (x0, y0), (x1, y1) in zip(points, points[1:]):
            assert abs(x1 - x0) <= 1 and abs(y1 - y0) <= 1


class TestBrailleGlyph:
    def test_empty_mask_is_blank(self):
        assert braille_glyph(0) == " "

    def test_full_mask(self):
        assert braille_glyph(0xFF) == "⣿"

    def test_base_offset(self):
        assert braille_glyph(0x01) == chr(BRAILLE_BASE + 1)


class TestDotGrid:
    def test_dimensions(self):
        dots = DotGrid(3, 2)
        assert dots.dot_width == 6
        assert dots.dot_height == 8

    def test_dot_bits(self):
        dots = DotGrid(1, 1)
        dots.set(0, 0)
        assert dots.cell_mask(0, 0) == 0x01
        dots.set(1, 3)
        assert dots.cell_mask(0, 0) == 0x81

    def test_full_cell(self):
        dots = DotGrid(1, 1)
        for y in range(4):
            for x in range(2):
                dots.set(x, y)
        assert dots.cell_glyph(0, 0) == "⣿"

    def test_out_of_bounds_writes_are_dropped(self):
        dots = DotGrid(2, 1)
        dots.set(-1, 0)
        dots.set(4, 0)
        dots.set(0, 4)
        dots.draw_line(-5, -5, 10, 10)
        assert dots.get(-1, 0) == DotGrid.EMPTY
        assert dots.count(0) > 0

    def test_stamp_plus_marks_neighbours(self):
        dots = DotGrid(2, 2)
        dots.stamp_plus(1, 1)
        for x, y in ((1, 1), (0, 1), (2, 1), (1, 0), (1, 2)):
            assert dots.get(x, y) == 0
        assert dots.count(0) == 5

    def test_stamp_plus_at_corner_is_clipped(self):
        dots = DotGrid(1, 1)
        dots.stamp_plus(0, 0)
        assert dots.count(0) == 3

    def test_tags_are_kept_per_dot(self):
        dots = DotGrid(1, 1)
        dots.set(0, 0, 2)
        dots.set(1, 0, 5)
        assert sorted(tag for _, tag in dots.cell_tags(0, 0)) == [2, 5]


class TestBlocks:
    def test_partial_blocks(self):
        assert partial_block(0) == " "
        assert partial_block(4) == "▌"
        assert partial_block(8) == "█"
        assert len(EIGHTH_BLOCKS) == 9

    def test_block_run(self):
        assert block_run(0) == ""
        assert block_run(8) == "█"
        assert block_run(19) == "██▍"

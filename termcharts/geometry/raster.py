# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Termcharts Contributors
#
# This file is part of Termcharts.
#
# Termcharts is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Termcharts is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

from collections.abc import Iterator
from typing import Final

BRAILLE_BASE: Final[int] = 0x2800

# Dots per character cell
CELL_DOTS_X: Final[int] = 2
CELL_DOTS_Y: Final[int] = 4

# (row, col) inside a cell -> Braille bit
#   0 3
#   1 4
#   2 5
#   6 7
BRAILLE_BITS: Final[dict[tuple[int, int], int]] = {
    (0, 0): 0x01,
    (1, 0): 0x02,
    (2, 0): 0x04,
    (3, 0): 0x40,
    (0, 1): 0x08,
    (1, 1): 0x10,
    (2, 1): 0x20,
    (3, 1): 0x80,
}


def braille_glyph(mask: int) -> str:
    """Glyph for an 8-bit dot mask; an empty mask is a blank cell."""
    if not mask:
        return " "
    return chr(BRAILLE_BASE + (mask & 0xFF))


def line_points(x0: int, y0: int, x1: int, y1: int) -> Iterator[tuple[int, int]]:
    """
    Bresenham: yield every dot between (x0, y0) and (x1, y1), endpoints included.
    """
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx - dy

    while True:
        yield x0, y0
        if x0 == x1 and y0 == y1:
            return
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x0 += sx
        if e2 < dx:
            err += dx
            y0 += sy


class DotGrid:
    """
    Drawing surface at 2x4 dots per character cell.

    Each dot holds an integer tag: -1 for empty, otherwise a caller-defined
    id (0 for a plain line, the segment index for pie charts). Writes outside
    the surface are dropped.
    """

    EMPTY: Final[int] = -1

    def __init__(self, cols: int, rows: int) -> None:
        self.cols = max(0, cols)
        self.rows = max(0, rows)
        self.dot_width = self.cols * CELL_DOTS_X
        self.dot_height = self.rows * CELL_DOTS_Y
        self._dots: list[list[int]] = [[self.EMPTY] * self.dot_width for _ in range(self.dot_height)]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.dot_width and 0 <= y < self.dot_height

    def set(self, x: int, y: int, tag: int = 0) -> None:
        if self.in_bounds(x, y):
            self._dots[y][x] = tag

    def get(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            return self.EMPTY
        return self._dots[y][x]

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, tag: int = 0) -> None:
        for x, y in line_points(x0, y0, x1, y1):
            self.set(x, y, tag)

    def stamp_plus(self, x: int, y: int, tag: int = 0) -> None:
        """Mark a point and its four neighbours so it stays visible on flat runs."""
        for ddx, ddy in ((0, 0), (0, -1), (0, 1), (-1, 0), (1, 0)):
            self.set(x + ddx, y + ddy, tag)

    def cell_tags(self, col: int, row: int) -> list[tuple[int, int]]:
        """(bit, tag) for every set dot of a character cell."""
        out: list[tuple[int, int]] = []
        for (dr, dc), bit in BRAILLE_BITS.items():
            tag = self.get(col * CELL_DOTS_X + dc, row * CELL_DOTS_Y + dr)
            if tag != self.EMPTY:
                out.append((bit, tag))
        return out

    def cell_mask(self, col: int, row: int) -> int:
        mask = 0
        for bit, _ in self.cell_tags(col, row):
            mask |= bit
        return mask

    def cell_glyph(self, col: int, row: int) -> str:
        return braille_glyph(self.cell_mask(col, row))

    def count(self, tag: int) -> int:
        return sum(row.count(tag) for row in self._dots)

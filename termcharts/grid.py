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

from itertools import groupby

from termcharts.palette import colorize

Cell = tuple[str, str | None]

BLANK: Cell = (" ", None)


class Grid:
    """
    Character-cell buffer: one glyph plus an optional colour per cell.

    Allocated per render; writes outside the buffer are dropped so callers
    can clip text by simply writing past the edge.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = max(0, width)
        self.height = max(0, height)
        self._cells: list[list[Cell]] = [[BLANK] * self.width for _ in range(self.height)]

    def put(self, x: int, y: int, glyph: str, color: str | None = None) -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            self._cells[y][x] = (glyph, color)

    def write(self, x: int, y: int, text: str, color: str | None = None) -> None:
        for i, ch in enumerate(text):
            self.put(x + i, y, ch, color)

    def glyph(self, x: int, y: int) -> str:
        if 0 <= x < self.width and 0 <= y < self.height:
            return self._cells[y][x][0]
        return " "

    def color(self, x: int, y: int) -> str | None:
        if 0 <= x < self.width and 0 <= y < self.height:
            return self._cells[y][x][1]
        return None

    def row_text(self, y: int, *, color_enabled: bool = True) -> str:
        row = list(self._cells[y])
        while row and row[-1] == BLANK:
            row.pop()
        parts: list[str] = []
        for color, run in groupby(row, key=lambda cell: cell[1]):
            text = "".join(glyph for glyph, _ in run)
            parts.append(colorize(text, color, enabled=color_enabled))
        return "".join(parts)

    def lines(self, *, color_enabled: bool = True) -> list[str]:
        return [self.row_text(y, color_enabled=color_enabled) for y in range(self.height)]

    def serialize(self, *, color_enabled: bool = True) -> str:
        if self.height == 0:
            return ""
        return "\n".join(self.lines(color_enabled=color_enabled)) + "\n"

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

from itertools import pairwise
from typing import cast

from termcharts.errors import ChartDataError
from termcharts.geometry.raster import CELL_DOTS_X, CELL_DOTS_Y, DotGrid
from termcharts.geometry.scale import axis_positions, line_axis_floor, scale
from termcharts.grid import Grid
from termcharts.layout import abbreviate_label, format_axis_value, x_axis_label_line, y_axis_marks
from termcharts.renderers.base import NEED_TWO_POINTS
from termcharts.types import ChartKind, LineOptions, RenderConfig, Series

Y_LABEL_WIDTH = 5
# y label, space, axis line
PLOT_LEFT = Y_LABEL_WIDTH + 2
LABEL_LIMIT = 3


def plot_points(values: tuple[float, ...], dots: DotGrid) -> list[tuple[int, int]]:
    """
    Dot coordinates of each data point.

    A flat series sits on the second dot row of the middle character row so
    the point markers stay inside that row.
    """
    max_value = max(values)
    min_value = line_axis_floor(min(values), max_value)
    xs = axis_positions(len(values), dots.dot_width)
    if max_value == min_value:
        flat_y = (dots.rows // 2) * CELL_DOTS_Y + 1
        return [(x, flat_y) for x in xs]
    return [(x, scale(v, min_value, max_value, dots.dot_height - 1, 0)) for x, v in zip(xs, values)]


def render_line(series: Series, config: RenderConfig) -> str:
    """
    Line chart drawn with Braille dots.

    Consecutive points are joined with Bresenham lines on a 2x4-per-cell dot
    grid; each point gets a small plus marker.
    """
    if len(series) < 2:
        raise ChartDataError(NEED_TWO_POINTS, code="too_few_points", details={"points": len(series)})

    options = cast(LineOptions, config.options_for(ChartKind.LINE))
    values = series.values
    max_value = max(values)
    min_value = line_axis_floor(min(values), max_value)

    chart_width = max(2, config.width - PLOT_LEFT - 1)
    chart_height = max(1, config.height - 3)

    dots = DotGrid(chart_width, chart_height)
    points = plot_points(values, dots)
    for (x0, y0), (x1, y1) in pairwise(points):
        dots.draw_line(x0, y0, x1, y1)
    for x, y in points:
        dots.stamp_plus(x, y)
    point_cells = {(x // CELL_DOTS_X, y // CELL_DOTS_Y) for x, y in points}

    grid = Grid(PLOT_LEFT + chart_width, chart_height + 2)
    marks = y_axis_marks(min_value, max_value, chart_height)

    for row in range(chart_height):
        if row in marks:
            grid.write(0, row, format_axis_value(marks[row]).rjust(Y_LABEL_WIDTH))
        grid.put(Y_LABEL_WIDTH + 1, row, "│")
        for col in range(chart_width):
            glyph = dots.cell_glyph(col, row)
            if glyph == " ":
                continue
            color = options.line_color
            if options.point_color is not None and (col, row) in point_cells:
                color = options.point_color
            grid.put(PLOT_LEFT + col, row, glyph, color)

    axis_row = chart_height
    grid.put(Y_LABEL_WIDTH + 1, axis_row, "└")
    grid.write(PLOT_LEFT, axis_row, "─" * chart_width)

    labels = [abbreviate_label(label, limit=LABEL_LIMIT, prefix=LABEL_LIMIT) for label in series.labels]
    grid.write(PLOT_LEFT, axis_row + 1, x_axis_label_line(labels, axis_positions(len(labels), chart_width), chart_width))

    return grid.serialize(color_enabled=config.color_enabled)

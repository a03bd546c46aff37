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

import math
from typing import cast

from termcharts.geometry.blocks import FULL_BLOCK
from termcharts.geometry.scale import bar_axis_floor
from termcharts.grid import Grid
from termcharts.layout import abbreviate_label, format_axis_value, format_number, wrap_items, y_axis_marks
from termcharts.palette import color_for_label, colorize
from termcharts.renderers.base import longest_label
from termcharts.types import ChartKind, RenderConfig, Series, VerticalBarOptions

Y_LABEL_WIDTH = 5
# y label, space, axis line, grid marker
PLOT_LEFT = Y_LABEL_WIDTH + 3
GRID_MARKER = "·"
LABEL_LIMIT = 6
LEGEND_INDENT = " " * (Y_LABEL_WIDTH + 1)


def bar_height(value: float, min_value: float, value_range: float, chart_height: int) -> int:
    """Filled rows for one bar; any positive value gets at least one row."""
    if value_range == 0:
        height = chart_height // 2
    else:
        height = math.ceil((value - min_value) / value_range * chart_height)
    if value > 0 and height == 0:
        height = 1
    return max(0, min(chart_height, height))


def render_vertical_bar(series: Series, config: RenderConfig) -> str:
    options = cast(VerticalBarOptions, config.options_for(ChartKind.VERTICAL_BAR))

    min_value = bar_axis_floor(min(series.values))
    max_value = max(0, *series.values)
    value_range = max_value - min_value

    spacing = max(3, min(longest_label(series), 8), options.bar_width + 2)
    chart_height = max(1, config.height - 2)
    count = len(series)

    grid = Grid(PLOT_LEFT + count * spacing, chart_height + 2)
    marks = y_axis_marks(min_value, max_value, chart_height)

    for row in range(chart_height):
        if row in marks:
            grid.write(0, row, format_axis_value(marks[row]).rjust(Y_LABEL_WIDTH))
        grid.put(Y_LABEL_WIDTH + 1, row, "│")
        if options.grid_lines and row % 2 == 0:
            grid.put(Y_LABEL_WIDTH + 2, row, GRID_MARKER)

    for i, (label, value) in enumerate(series):
        color = color_for_label(label)
        left = PLOT_LEFT + i * spacing
        height = bar_height(value, min_value, value_range, chart_height)
        for row in range(chart_height - height, chart_height):
            grid.write(left, row, FULL_BLOCK * options.bar_width, color)

        if options.show_values and height > 0:
            # values wider than the gap are left off, never cut
            text = format_number(value)
            if len(text) <= spacing - options.bar_width:
                grid.write(left + options.bar_width, chart_height - height, text, color)

    axis_row = chart_height
    grid.put(Y_LABEL_WIDTH + 1, axis_row, "└")
    grid.write(Y_LABEL_WIDTH + 2, axis_row, "─" * (count * spacing))

    label_room = max(1, spacing - 1)
    for i, label in enumerate(series.labels):
        text = abbreviate_label(label, limit=LABEL_LIMIT, prefix=LABEL_LIMIT)[:label_room]
        grid.write(PLOT_LEFT + i * spacing, axis_row + 1, text)

    out = grid.serialize(color_enabled=config.color_enabled)
    out += "\n" + _legend(series, config)
    return out


def _legend(series: Series, config: RenderConfig) -> str:
    items = [
        colorize(
            abbreviate_label(label, limit=LABEL_LIMIT, prefix=LABEL_LIMIT),
            color_for_label(label),
            enabled=config.color_enabled,
        )
        + f": {format_number(value)}"
        for label, value in series
    ]
    lines = wrap_items(items, max(1, config.width - len(LEGEND_INDENT)))
    return "".join(f"{LEGEND_INDENT}{line}\n" for line in lines)

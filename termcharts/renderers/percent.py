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

from termcharts.geometry.blocks import block_run
from termcharts.geometry.scale import allocate_units
from termcharts.grid import Grid
from termcharts.layout import fit_label
from termcharts.palette import color_for_label
from termcharts.renderers.base import longest_label, require_positive_total
from termcharts.types import RenderConfig, Series

MAX_LABEL_WIDTH = 12
# two separating spaces plus " NN.N%"
RESERVED = 8


def render_percentage(series: Series, config: RenderConfig) -> str:
    """
    One full-width bar per entry showing its share of the total.

    Row layout: ``Label  ██████▍      45.2%``. Bar lengths are allocated in
    eighths of a cell so all rows together fill exactly one bar width; equal
    values can therefore differ by one eighth when the width does not split
    evenly.
    """
    total = require_positive_total(series)
    label_width = min(longest_label(series), MAX_LABEL_WIDTH)
    bar_width = max(1, config.width - label_width - RESERVED)
    shares = allocate_units(series.values, bar_width * 8)

    rows: list[tuple[str, str, str]] = []
    for (label, value), units in zip(series, shares):
        rows.append((label, block_run(units), f"{value / total * 100:5.1f}%"))

    grid = Grid(label_width + bar_width + 2 + max(len(pct) for _, _, pct in rows), len(rows))
    for row, (label, bar, pct) in enumerate(rows):
        color = color_for_label(label)
        grid.write(0, row, fit_label(label, label_width), color)
        grid.write(label_width + 1, row, bar, color)
        grid.write(label_width + bar_width + 2, row, pct)

    return grid.serialize(color_enabled=config.color_enabled)

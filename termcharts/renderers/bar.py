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

from termcharts.geometry.blocks import FULL_BLOCK
from termcharts.geometry.scale import round_half_up
from termcharts.grid import Grid
from termcharts.layout import format_number
from termcharts.palette import color_for_label
from termcharts.renderers.base import longest_label
from termcharts.types import RenderConfig, Series

AXIS = " │ "


def render_bar(series: Series, config: RenderConfig) -> str:
    """
    Horizontal bars, one row per entry, scaled against the largest value.

    Row layout: ``label │ ████ value``.
    """
    label_width = longest_label(series)
    available = max(0, config.width - label_width - len(AXIS))
    max_value = max(0, *series.values)

    value_texts = [format_number(v) for v in series.values]
    grid_width = label_width + len(AXIS) + available + 1 + max(len(t) for t in value_texts)
    grid = Grid(grid_width, len(series))

    for row, ((label, value), value_text) in enumerate(zip(series, value_texts)):
        length = 0
        if max_value > 0:
            length = max(0, min(available, round_half_up(value / max_value * available)))

        grid.write(0, row, label)
        grid.write(label_width, row, AXIS)
        grid.write(label_width + len(AXIS), row, FULL_BLOCK * length, color_for_label(label))
        grid.write(label_width + len(AXIS) + length + 1, row, value_text)

    return grid.serialize(color_enabled=config.color_enabled)

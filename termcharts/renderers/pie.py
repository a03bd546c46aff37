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
from bisect import bisect_right
from collections import Counter
from collections.abc import Sequence

from termcharts.geometry.raster import DotGrid
from termcharts.grid import Grid
from termcharts.layout import fit_label, format_thousands
from termcharts.palette import color_for_label, colorize
from termcharts.renderers.base import longest_label, require_positive_total
from termcharts.types import RenderConfig, Series

TAU = 2 * math.pi
MAX_RADIUS = 10
LEGEND_MARKER = "●"
LEGEND_LABEL_WIDTH = 12


def segment_ends(values: Sequence[float]) -> list[float]:
    """
    Cumulative end angle of each segment, clockwise from 12 o'clock.

    Every segment from the last non-empty one onward ends exactly at 2π so
    float drift cannot leave a sliver of the circle unowned.
    """
    total = sum(values)
    ends: list[float] = []
    cumulative = 0.0
    for value in values:
        cumulative += value
        ends.append(cumulative / total * TAU)
    last = max(i for i, v in enumerate(values) if v > 0)
    for i in range(last, len(ends)):
        ends[i] = TAU
    return ends


def dot_angle(dx: float, dy: float) -> float:
    """Clockwise angle from 12 o'clock in [0, 2π); dy grows downward."""
    theta = math.atan2(dx, -dy)
    if theta < 0:
        theta += TAU
    if theta >= TAU:
        theta -= TAU
    return theta


def assign_pie_dots(values: Sequence[float], cols: int, rows: int) -> DotGrid:
    """
    Tag every dot inside the pie's disk with the index of its segment.

    The disk is inscribed in the dot surface and tested at dot centres. A
    dot belongs to the first segment whose [start, end) range contains its
    angle, so each disk dot has exactly one owner and empty segments own
    none.
    """
    dots = DotGrid(cols, rows)
    ends = segment_ends(values)
    cx = dots.dot_width / 2
    cy = dots.dot_height / 2
    radius = min(cx, cy)

    for y in range(dots.dot_height):
        dy = y + 0.5 - cy
        for x in range(dots.dot_width):
            dx = x + 0.5 - cx
            if dx * dx + dy * dy > radius * radius:
                continue
            dots.set(x, y, bisect_right(ends, dot_angle(dx, dy)))
    return dots


def cell_owner(tags: list[tuple[int, int]]) -> int:
    """Segment with the most dots in a cell; ties go to the earlier segment."""
    counts = Counter(tag for _, tag in tags)
    return min(counts, key=lambda tag: (-counts[tag], tag))


def render_pie(series: Series, config: RenderConfig) -> str:
    total = require_positive_total(series)

    radius = max(1, min(MAX_RADIUS, config.width // 6))
    cols, rows = radius * 4, radius * 2
    dots = assign_pie_dots(series.values, cols, rows)
    labels = series.labels

    canvas = Grid(radius + cols, rows)
    for row in range(rows):
        for col in range(cols):
            tags = dots.cell_tags(col, row)
            if not tags:
                continue
            owner = cell_owner(tags)
            canvas.put(radius + col, row, dots.cell_glyph(col, row), color_for_label(labels[owner]))

    out = canvas.serialize(color_enabled=config.color_enabled)
    out += "\n" + _legend(series, config, total, indent=" " * radius)
    return out


def _legend(series: Series, config: RenderConfig, total: float, *, indent: str) -> str:
    label_width = min(longest_label(series), LEGEND_LABEL_WIDTH)
    max_items = max(1, config.height // 2)
    ordered = series.sorted_by_value()

    lines: list[str] = []
    for label, value in ordered[:max_items]:
        marker = colorize(LEGEND_MARKER, color_for_label(label), enabled=config.color_enabled)
        percentage = value / total * 100
        lines.append(
            f"{indent}{marker} {fit_label(label, label_width)}: {percentage:.1f}% ({format_thousands(value)})"
        )
    if len(ordered) > max_items:
        lines.append(f"{indent}(+{len(ordered) - max_items} more items)")
    return "".join(f"{line}\n" for line in lines)

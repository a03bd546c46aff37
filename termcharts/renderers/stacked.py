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

from collections.abc import Sequence

from termcharts.geometry.blocks import FULL_BLOCK, partial_block
from termcharts.geometry.scale import allocate_units, round_half_up
from termcharts.grid import Grid
from termcharts.layout import abbreviate_label
from termcharts.palette import color_for_label, colorize
from termcharts.renderers.base import require_positive_total
from termcharts.types import RenderConfig, Series

EIGHTHS = 8
LABEL_LIMIT = 8
LABEL_PREFIX = 6
MIN_LEGEND_GAP = 2


def segment_spans(shares: Sequence[int]) -> list[tuple[int, int]]:
    spans: list[tuple[int, int]] = []
    start = 0
    for share in shares:
        spans.append((start, start + share))
        start += share
    return spans


def stacked_cells(shares: Sequence[int], width: int) -> list[tuple[str, int]]:
    """
    (glyph, segment index) for each character of the bar.

    A cell goes to the segment covering most of its eighths (ties to the
    earlier segment). A segment that ends inside a cell it owns is drawn
    with the matching partial block.
    """
    spans = segment_spans(shares)
    cells: list[tuple[str, int]] = []
    for col in range(width):
        lo, hi = col * EIGHTHS, (col + 1) * EIGHTHS
        best, best_overlap = 0, -1
        for i, (start, end) in enumerate(spans):
            overlap = min(end, hi) - max(start, lo)
            if overlap > best_overlap:
                best, best_overlap = i, overlap
        start, end = spans[best]
        if start <= lo and end < hi:
            cells.append((partial_block(end - lo), best))
        else:
            cells.append((FULL_BLOCK, best))
    return cells


def render_stacked(series: Series, config: RenderConfig) -> str:
    """Single bracketed bar split into proportional, coloured spans plus a legend."""
    total = require_positive_total(series)
    bar_width = max(1, config.width - 2)
    shares = allocate_units(series.values, bar_width * EIGHTHS)
    labels = series.labels

    grid = Grid(bar_width + 2, 1)
    grid.put(0, 0, "[")
    for col, (glyph, owner) in enumerate(stacked_cells(shares, bar_width)):
        grid.put(col + 1, 0, glyph, color_for_label(labels[owner]))
    grid.put(bar_width + 1, 0, "]")

    return grid.serialize(color_enabled=config.color_enabled) + _legend(series, config, total)


def _legend(series: Series, config: RenderConfig, total: float) -> str:
    items = [
        (f"{abbreviate_label(label, limit=LABEL_LIMIT, prefix=LABEL_PREFIX)} {round_half_up(value / total * 100)}%", label)
        for label, value in series
    ]
    text_length = sum(len(text) for text, _ in items)
    gaps = max(1, len(items) - 1)
    spacing = max(MIN_LEGEND_GAP, (config.width - 2 - text_length) // gaps)

    parts = [colorize(text, color_for_label(label), enabled=config.color_enabled) for text, label in items]
    return " " + (" " * spacing).join(parts) + "\n"

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

from termcharts.geometry.blocks import EIGHTH_BLOCKS, FULL_BLOCK, block_run, partial_block
from termcharts.geometry.raster import BRAILLE_BASE, DotGrid, braille_glyph, line_points
from termcharts.geometry.scale import (
    allocate_units,
    axis_positions,
    bar_axis_floor,
    line_axis_floor,
    midpoint,
    round_half_up,
    scale,
)

__all__ = [
    "BRAILLE_BASE",
    "DotGrid",
    "EIGHTH_BLOCKS",
    "FULL_BLOCK",
    "allocate_units",
    "axis_positions",
    "bar_axis_floor",
    "block_run",
    "braille_glyph",
    "line_axis_floor",
    "line_points",
    "midpoint",
    "partial_block",
    "round_half_up",
    "scale",
]

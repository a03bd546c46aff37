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
from collections.abc import Sequence

# Below this share of the maximum a positive minimum is pulled down to zero
LINE_ZERO_BASELINE_RATIO = 0.3


def round_half_up(x: float) -> int:
    """Round to the nearest integer, halves upward (no banker's rounding)."""
    return int(math.floor(x + 0.5))


def midpoint(out_min: int, out_max: int) -> int:
    lo, hi = min(out_min, out_max), max(out_min, out_max)
    return lo + (hi - lo + 1) // 2


def scale(value: float, min_value: float, max_value: float, out_min: int, out_max: int) -> int:
    """
    Map value from [min_value, max_value] onto the integer range [out_min, out_max].

    out_min may be larger than out_max (inverted axes, e.g. screen rows).
    A flat input range collapses every value onto the midpoint of the output
    range. The result is clamped so float drift never leaves the grid.
    """
    if max_value == min_value:
        return midpoint(out_min, out_max)

    ratio = (value - min_value) / (max_value - min_value)
    pos = round_half_up(out_min + ratio * (out_max - out_min))
    lo, hi = min(out_min, out_max), max(out_min, out_max)
    return max(lo, min(hi, pos))


def line_axis_floor(min_value: float, max_value: float) -> float:
    """Line charts start at zero when the minimum is small relative to the maximum."""
    if 0 < min_value < LINE_ZERO_BASELINE_RATIO * max_value:
        return 0.0
    return min_value


def bar_axis_floor(min_value: float) -> float:
    """Vertical bars start at zero unless the data goes negative."""
    return min_value if min_value < 0 else 0.0


def axis_positions(n: int, length: int) -> list[int]:
    """Evenly spread n positions over an axis of the given length."""
    if n <= 0:
        return []
    if n == 1:
        return [length // 2]
    return [round_half_up(i / (n - 1) * (length - 1)) for i in range(n)]


def allocate_units(values: Sequence[float], units: int) -> list[int]:
    """
    Split ``units`` into integer shares proportional to ``values``.

    Uses cumulative rounding: boundaries are rounded, not shares, so the
    shares always add up to exactly ``units`` and never go negative.
    Equal values get equal shares when ``units`` divides evenly; otherwise
    their shares may differ by one unit, which is the price of the exact
    total. Values must be non-negative with a positive total.
    """
    total = sum(values)
    if total <= 0:
        raise ValueError("allocate_units requires a positive total")

    shares: list[int] = []
    cumulative = 0.0
    prev = 0
    for i, value in enumerate(values):
        cumulative += value
        bound = units if i == len(values) - 1 else min(units, round_half_up(cumulative / total * units))
        bound = max(prev, bound)
        shares.append(bound - prev)
        prev = bound
    return shares

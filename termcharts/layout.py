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

"""
Axis and label layout shared by the renderers.

Every function here is pure: a label abbreviates the same way wherever and
whenever it is drawn.
"""

from collections.abc import Sequence

from termcharts.geometry.scale import round_half_up, scale
from termcharts.palette import visible_len


def abbreviate_label(label: str, *, limit: int, prefix: int) -> str:
    """
    Shorten a label that is longer than ``limit`` characters.

    Multi-word labels keep the initials of every word but the last, and the
    last word intact, so families like "Team A" / "Team B" stay distinct.
    Single words are cut to ``prefix`` characters.
    """
    if len(label) <= limit:
        return label
    words = label.split()
    if len(words) > 1:
        return " ".join([w[0] for w in words[:-1]] + [words[-1]])
    return label[:prefix]


def fit_label(label: str, width: int) -> str:
    """Cut or pad a label to exactly ``width`` characters."""
    return label[:width].ljust(width)


def y_axis_marks(min_value: float, max_value: float, rows: int) -> dict[int, float]:
    """
    Row -> value for the Y-axis labels (row 0 is the top row).

    At most three marks: max, midpoint, min. When two marks land on the same
    row the earlier one wins. A flat range gets one mark on the middle row.
    """
    if rows <= 0:
        return {}
    if max_value == min_value:
        return {rows // 2: max_value}

    marks: dict[int, float] = {}
    mid_value = min_value + (max_value - min_value) / 2
    for value in (max_value, mid_value, min_value):
        row = scale(value, min_value, max_value, rows - 1, 0)
        marks.setdefault(row, value)
    return marks


def format_axis_value(value: float) -> str:
    return str(round_half_up(value))


def format_number(value: float) -> str:
    """Integral values print without decimals, others as Python prints them."""
    if isinstance(value, int):
        return str(value)
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def format_thousands(value: float) -> str:
    return f"{round_half_up(value):,}"


def x_axis_label_line(labels: Sequence[str], positions: Sequence[int], width: int) -> str:
    """
    Centre each label on its axis position.

    Labels are shifted left to fit inside ``width`` where possible. A label
    that would touch or overlap the previously placed label is skipped;
    earlier labels win. Text past ``width`` is clipped.
    """
    line = [" "] * width
    last_end = -2
    for label, pos in zip(labels, positions):
        if not label:
            continue
        start = max(0, min(pos - len(label) // 2, width - len(label)))
        if start <= last_end + 1 or start >= width:
            continue
        for j, ch in enumerate(label):
            if start + j < width:
                line[start + j] = ch
        last_end = min(width - 1, start + len(label) - 1)
    return "".join(line).rstrip()


def wrap_items(items: Sequence[str], width: int, separator: str = "; ") -> list[str]:
    """Greedy line packing by visible (escape-free) length."""
    lines: list[str] = []
    current = ""
    current_len = 0
    for item in items:
        n = visible_len(item)
        if current and current_len + len(separator) + n > width:
            lines.append(current)
            current, current_len = item, n
            continue
        if current:
            current += separator
            current_len += len(separator)
        current += item
        current_len += n
    if current:
        lines.append(current)
    return lines

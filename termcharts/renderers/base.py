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

from typing import Final

from termcharts.errors import ChartDataError
from termcharts.palette import TITLE_COLOR, colorize
from termcharts.types import RenderConfig, Series

TOTAL_NOT_POSITIVE: Final[str] = "Error: Total value must be greater than zero."
NEGATIVE_VALUES: Final[str] = "Error: Values must not be negative."
NEED_TWO_POINTS: Final[str] = "Need at least 2 data points for a line chart."


def draw_title(config: RenderConfig) -> str:
    """Centred, coloured title followed by a blank line (empty without a title)."""
    if not config.title:
        return ""
    padding = max(0, (config.width - len(config.title)) // 2)
    return " " * padding + colorize(config.title, TITLE_COLOR, enabled=config.color_enabled) + "\n\n"


def require_positive_total(series: Series) -> float:
    """
    Total of a series drawn as shares.

    Raises:
        ChartDataError if the total is not positive or a value is negative.
    """
    total = series.total
    if total <= 0:
        raise ChartDataError(TOTAL_NOT_POSITIVE, code="non_positive_total", details={"total": total})
    negatives = [label for label, value in series if value < 0]
    if negatives:
        raise ChartDataError(NEGATIVE_VALUES, code="negative_value", details={"labels": negatives})
    return total


def longest_label(series: Series) -> int:
    return max((len(label) for label in series.labels), default=0)

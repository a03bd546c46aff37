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

from termcharts.renderers.bar import render_bar
from termcharts.renderers.base import NEED_TWO_POINTS, NEGATIVE_VALUES, TOTAL_NOT_POSITIVE, draw_title
from termcharts.renderers.line import render_line
from termcharts.renderers.percent import render_percentage
from termcharts.renderers.pie import render_pie
from termcharts.renderers.stacked import render_stacked
from termcharts.renderers.vbar import render_vertical_bar

__all__ = [
    "NEED_TWO_POINTS",
    "NEGATIVE_VALUES",
    "TOTAL_NOT_POSITIVE",
    "draw_title",
    "render_bar",
    "render_line",
    "render_percentage",
    "render_pie",
    "render_stacked",
    "render_vertical_bar",
]

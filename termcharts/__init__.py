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

from termcharts._version import _detect_version
from termcharts.errors import (
    ChartConfigError,
    ChartDataError,
    ChartDocumentError,
    ChartError,
    UnknownChartKindError,
)
from termcharts.factory import Chart, create_chart, render
from termcharts.types import ChartKind, LineOptions, RenderConfig, Series, VerticalBarOptions

TERMCHARTS_VERSION = _detect_version()

__all__ = [
    "TERMCHARTS_VERSION",
    "Chart",
    "ChartConfigError",
    "ChartDataError",
    "ChartDocumentError",
    "ChartError",
    "ChartKind",
    "LineOptions",
    "RenderConfig",
    "Series",
    "UnknownChartKindError",
    "VerticalBarOptions",
    "create_chart",
    "render",
]

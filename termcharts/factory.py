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

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from termcharts.config.options import parse_options
from termcharts.errors import ChartDataError
from termcharts.renderers import (
    draw_title,
    render_bar,
    render_line,
    render_percentage,
    render_pie,
    render_stacked,
    render_vertical_bar,
)
from termcharts.types import ChartKind, RenderConfig, Series

logger = logging.getLogger(__name__)

SeriesLike = Series | Mapping[str, float] | Iterable[tuple[str, float]]


def render_body(kind: ChartKind, series: Series, config: RenderConfig) -> str:
    """Draw a non-empty series; data errors propagate as ChartDataError."""
    match kind:
        case ChartKind.BAR:
            return render_bar(series, config)
        case ChartKind.VERTICAL_BAR:
            return render_vertical_bar(series, config)
        case ChartKind.LINE:
            return render_line(series, config)
        case ChartKind.PIE:
            return render_pie(series, config)
        case ChartKind.STACKED:
            return render_stacked(series, config)
        case ChartKind.PERCENTAGE:
            return render_percentage(series, config)
    raise AssertionError(f"unhandled chart kind: {kind!r}")


@dataclass(frozen=True, slots=True)
class Chart:
    """
    A chart ready to render: kind, data and validated configuration.

    Rendering is pure; calling render() twice yields the same text.
    """

    kind: ChartKind
    series: Series
    config: RenderConfig

    def render(self) -> str:
        """
        Render to text.

        Data problems (non-positive totals, too few points) do not raise:
        the message is written after the title instead.
        """
        try:
            return self.render_checked()
        except ChartDataError as e:
            logger.debug("%s chart: %s (%s)", self.kind.value, e.message, e.code)
            return draw_title(self.config) + f"{e.message}\n"

    def render_checked(self) -> str:
        """
        Render to text, raising on data problems.

        Raises:
            ChartDataError if the series cannot be drawn by this chart kind.
        """
        title = draw_title(self.config)
        if not self.series:
            return title
        return title + render_body(self.kind, self.series, self.config)


def create_chart(
    kind: ChartKind | str,
    series: SeriesLike,
    config: RenderConfig | Mapping[str, Any] | None = None,
) -> Chart:
    """
    Build a chart from a kind token, data and options.

    ``kind`` is one of bar, vbar, line, pie, stacked (sbar), percent (pbar),
    case-insensitive. ``config`` may be a RenderConfig or an option mapping
    such as ``{"title": "Sales", "colors": False, "showValues": True}``.

    Raises:
        UnknownChartKindError for an unknown kind token.
        ChartConfigError for invalid options.
        ChartDataError for malformed series entries.
    """
    chart_kind = kind if isinstance(kind, ChartKind) else ChartKind.from_str(kind)

    if config is None:
        render_config = RenderConfig()
    elif isinstance(config, RenderConfig):
        render_config = config
    else:
        render_config = parse_options(chart_kind, config)
    render_config.options_for(chart_kind)

    chart = Chart(kind=chart_kind, series=Series.coerce(series), config=render_config)
    logger.debug("created %s chart with %d point(s)", chart_kind.value, len(chart.series))
    return chart


def render(
    kind: ChartKind | str,
    series: SeriesLike,
    config: RenderConfig | Mapping[str, Any] | None = None,
) -> str:
    """Shortcut for create_chart(...).render()."""
    return create_chart(kind, series, config).render()

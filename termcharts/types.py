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
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from numbers import Real
from typing import Final

from termcharts.errors import ChartConfigError, ChartDataError, UnknownChartKindError
from termcharts.palette import PALETTE, is_color_name

# Chart kinds


class ChartKind(StrEnum):
    """
    Closed set of chart kinds.

    Values are the canonical tokens accepted on the command line and by
    create_chart(); ALIASES adds the synonyms.
    """

    BAR = "bar"
    VERTICAL_BAR = "vbar"
    LINE = "line"
    PIE = "pie"
    STACKED = "stacked"
    PERCENTAGE = "percent"

    @property
    def is_proportional(self) -> bool:
        """Whether the kind draws shares of a positive total."""
        return self in (ChartKind.PIE, ChartKind.STACKED, ChartKind.PERCENTAGE)

    @classmethod
    def from_str(cls, token: str) -> "ChartKind":
        """
        Parse a chart kind token (case-insensitive, aliases allowed).

        Raises:
            UnknownChartKindError if the token names no chart kind.
        """
        if not isinstance(token, str):
            raise UnknownChartKindError(repr(token))
        key = token.strip().lower()
        if key in ALIASES:
            return ALIASES[key]
        for kind in cls:
            if kind.value == key:
                return kind
        raise UnknownChartKindError(token)


ALIASES: Final[dict[str, ChartKind]] = {
    "sbar": ChartKind.STACKED,
    "pbar": ChartKind.PERCENTAGE,
}


# Series


@dataclass(frozen=True, slots=True)
class Series:
    """
    Ordered label -> value pairs driving one chart.

    Order is insertion order and is never re-sorted for axis placement.
    """

    points: tuple[tuple[str, float], ...] = ()

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for point in self.points:
            if not isinstance(point, tuple) or len(point) != 2:
                raise ChartDataError(f"Series entries must be (label, value) pairs, got {point!r}.")
            label, value = point
            if not isinstance(label, str):
                raise ChartDataError(
                    f"Series label must be a string, got {label!r}.",
                    code="invalid_label",
                )
            if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value):
                raise ChartDataError(
                    f"Value for '{label}' must be a finite number, got {value!r}.",
                    code="invalid_value",
                    details={"label": label},
                )
            if label in seen:
                raise ChartDataError(
                    f"Duplicate label in series: '{label}'.",
                    code="duplicate_label",
                    details={"label": label},
                )
            seen.add(label)

    @classmethod
    def from_mapping(cls, data: Mapping[str, float]) -> "Series":
        return cls(points=tuple((label, value) for label, value in data.items()))

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, float]]) -> "Series":
        return cls(points=tuple(tuple(p) for p in pairs))

    @classmethod
    def coerce(cls, data: "Series | Mapping[str, float] | Iterable[tuple[str, float]]") -> "Series":
        if isinstance(data, Series):
            return data
        if isinstance(data, Mapping):
            return cls.from_mapping(data)
        return cls.from_pairs(data)

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(label for label, _ in self.points)

    @property
    def values(self) -> tuple[float, ...]:
        return tuple(value for _, value in self.points)

    @property
    def total(self) -> float:
        return sum(self.values)

    def sorted_by_value(self) -> tuple[tuple[str, float], ...]:
        """Pairs by value descending; ties keep series order."""
        return tuple(sorted(self.points, key=lambda p: -p[1]))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[tuple[str, float]]:
        return iter(self.points)

    def __bool__(self) -> bool:
        return bool(self.points)


# Chart-specific options


@dataclass(frozen=True, slots=True)
class VerticalBarOptions:
    show_values: bool = False
    grid_lines: bool = True
    bar_width: int = 1

    def __post_init__(self) -> None:
        if isinstance(self.bar_width, bool) or not isinstance(self.bar_width, int) or self.bar_width < 1:
            raise ChartConfigError(f"'barWidth' must be a positive integer, got {self.bar_width!r}.")


@dataclass(frozen=True, slots=True)
class LineOptions:
    line_color: str = "cyan"
    point_color: str | None = None

    def __post_init__(self) -> None:
        for key, color in (("lineColor", self.line_color), ("pointColor", self.point_color)):
            if color is None and key == "pointColor":
                continue
            if not isinstance(color, str) or not is_color_name(color):
                raise ChartConfigError(
                    f"'{key}' must be one of {', '.join(PALETTE)}, got {color!r}.",
                    details={"supported": list(PALETTE)},
                )


ChartOptions = VerticalBarOptions | LineOptions

OPTIONS_FOR_KIND: Final[dict[ChartKind, type]] = {
    ChartKind.VERTICAL_BAR: VerticalBarOptions,
    ChartKind.LINE: LineOptions,
}


# Render configuration


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """
    Layout and styling shared by every chart kind.

    ``options`` carries the chart-specific record (or None for kinds without
    extra options); renderers fall back to the record's defaults when it is
    absent.
    """

    title: str = ""
    width: int = 60
    height: int = 15
    color_enabled: bool = True
    options: ChartOptions | None = field(default=None)

    def __post_init__(self) -> None:
        if not isinstance(self.title, str):
            raise ChartConfigError(f"'title' must be a string, got {self.title!r}.")
        for key in ("width", "height"):
            value = getattr(self, key)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ChartConfigError(f"'{key}' must be a positive integer, got {value!r}.")
        if not isinstance(self.color_enabled, bool):
            raise ChartConfigError(f"'colors' must be a boolean, got {self.color_enabled!r}.")

    def options_for(self, kind: ChartKind) -> ChartOptions | None:
        """
        Return the option record for a kind, defaulted when not configured.

        Raises:
            ChartConfigError if the configured record belongs to another kind.
        """
        expected = OPTIONS_FOR_KIND.get(kind)
        if self.options is None:
            return expected() if expected is not None else None
        if expected is None or not isinstance(self.options, expected):
            raise ChartConfigError(
                f"{type(self.options).__name__} does not apply to '{kind.value}' charts.",
                code="options_kind_mismatch",
            )
        return self.options

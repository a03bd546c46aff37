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

from collections.abc import Mapping
from typing import Any, Final

from termcharts.errors import ChartConfigError
from termcharts.types import OPTIONS_FOR_KIND, ChartKind, RenderConfig

# option key (camelCase as documented, snake_case accepted) -> field name
COMMON_KEYS: Final[dict[str, str]] = {
    "title": "title",
    "width": "width",
    "height": "height",
    "colors": "color_enabled",
    "colorEnabled": "color_enabled",
    "color_enabled": "color_enabled",
}

KIND_KEYS: Final[dict[ChartKind, dict[str, str]]] = {
    ChartKind.VERTICAL_BAR: {
        "showValues": "show_values",
        "show_values": "show_values",
        "gridLines": "grid_lines",
        "grid_lines": "grid_lines",
        "barWidth": "bar_width",
        "bar_width": "bar_width",
    },
    ChartKind.LINE: {
        "lineColor": "line_color",
        "line_color": "line_color",
        "pointColor": "point_color",
        "point_color": "point_color",
    },
}

BOOLEAN_FIELDS: Final[frozenset[str]] = frozenset({"color_enabled", "show_values", "grid_lines"})


def parse_options(kind: ChartKind, options: Mapping[str, Any]) -> RenderConfig:
    """
    Build a RenderConfig from a loose option mapping.

    Only the keys of the common set and of ``kind``'s own set are accepted;
    anything else is rejected rather than silently ignored.

    Raises:
        ChartConfigError on unknown keys, keys of another chart kind,
        conflicting aliases or invalid values.
    """
    if not isinstance(options, Mapping):
        raise ChartConfigError("Chart options must be a mapping/object.")

    common: dict[str, Any] = {}
    specific: dict[str, Any] = {}
    own_keys = KIND_KEYS.get(kind, {})

    for key, value in options.items():
        if key in COMMON_KEYS:
            target, name = common, COMMON_KEYS[key]
        elif key in own_keys:
            target, name = specific, own_keys[key]
        else:
            raise _rejected(kind, key)

        if name in target:
            raise ChartConfigError(
                f"Option '{key}' conflicts with another key for the same setting.",
                code="duplicate_option",
                details={"option": key},
            )
        if name in BOOLEAN_FIELDS and not isinstance(value, bool):
            raise ChartConfigError(f"'{key}' must be a boolean, got {value!r}.", details={"option": key})
        target[name] = value

    chart_options = OPTIONS_FOR_KIND[kind](**specific) if specific else None
    return RenderConfig(**common, options=chart_options)


def _rejected(kind: ChartKind, key: str) -> ChartConfigError:
    for other, keys in KIND_KEYS.items():
        if key in keys:
            return ChartConfigError(
                f"Option '{key}' does not apply to '{kind.value}' charts (only '{other.value}').",
                code="option_kind_mismatch",
                details={"option": key, "kind": kind.value},
            )
    return ChartConfigError(
        f"Unknown chart option: '{key}'.",
        code="unknown_option",
        details={"option": key, "supported": sorted(set(COMMON_KEYS) | set(KIND_KEYS.get(kind, {})))},
    )

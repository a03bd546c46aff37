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

import re
import zlib
from typing import Final

# ANSI SGR foreground codes; "reset" is the sentinel, not a palette colour
COLOR_CODES: Final[dict[str, str]] = {
    "reset": "\033[0m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
    "magenta": "\033[35m",
    "cyan": "\033[36m",
    "white": "\033[37m",
}

PALETTE: Final[tuple[str, ...]] = ("red", "green", "yellow", "blue", "magenta", "cyan", "white")

TITLE_COLOR: Final[str] = "cyan"

_ANSI_RE = re.compile(r"\033\[\d+m")


def is_color_name(name: str) -> bool:
    return name in PALETTE


def palette_index(label: str) -> int:
    """
    Stable palette slot for a label.

    crc32 is seed-free and independent of render order, so a label keeps its
    colour across drawing passes and across charts.
    """
    return zlib.crc32(label.encode("utf-8")) % len(PALETTE)


def color_for_label(label: str) -> str:
    return PALETTE[palette_index(label)]


def colorize(text: str, color: str | None, *, enabled: bool = True) -> str:
    """Wrap text in an SGR colour escape, or return it untouched."""
    if not enabled or not color or color not in PALETTE or not text:
        return text
    return f"{COLOR_CODES[color]}{text}{COLOR_CODES['reset']}"


def strip_ansi(text: str) -> str:
    return _ANSI_RE.sub("", text)


def visible_len(text: str) -> int:
    return len(strip_ansi(text))

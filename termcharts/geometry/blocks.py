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

FULL_BLOCK: Final[str] = "█"

# Left-aligned fills in eighths of a cell, index = filled eighths
EIGHTH_BLOCKS: Final[tuple[str, ...]] = (" ", "▏", "▎", "▍", "▌", "▋", "▊", "▉", "█")


def partial_block(eighths: int) -> str:
    return EIGHTH_BLOCKS[max(0, min(8, eighths))]


def block_run(units: int) -> str:
    """A run of full blocks plus one partial block for the leftover eighths."""
    full, rest = divmod(max(0, units), 8)
    return FULL_BLOCK * full + (EIGHTH_BLOCKS[rest] if rest else "")

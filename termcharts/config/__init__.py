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

from termcharts.config.loader import ChartDocument, ChartDocumentLoader, load_chart_documents
from termcharts.config.options import parse_options

__all__ = [
    "ChartDocument",
    "ChartDocumentLoader",
    "load_chart_documents",
    "parse_options",
]

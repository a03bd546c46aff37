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
from typing import Any


class ChartError(Exception):
    """
    Base class for all chart-related errors.

    Carries a stable machine-readable ``code`` next to the human message so
    the CLI and embedding applications can branch on the kind of failure.
    """

    code: str
    message: str
    details: Mapping[str, Any] | None = None

    def __init__(
        self,
        message: str,
        code: str = "chart_error",
        details: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details

    def __str__(self) -> str:
        return self.message


class ChartConfigError(ChartError):
    """Raised when render options are invalid (bad values, unknown keys)."""

    def __init__(
        self,
        message: str,
        code: str = "invalid_config",
        details: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code=code, details=details)


class UnknownChartKindError(ChartConfigError, ValueError):
    """Raised when a chart kind token does not name a known chart."""

    token: str

    def __init__(self, token: str) -> None:
        super().__init__(
            f"Unsupported chart type: {token}",
            code="unknown_chart_kind",
            details={"token": token},
        )
        self.token = token


class ChartDataError(ChartError):
    """
    Raised when the data cannot be drawn by a chart kind.

    Chart.render() turns this into a one-line message inside the returned
    text; Chart.render_checked() lets it propagate.
    """

    def __init__(
        self,
        message: str,
        code: str = "invalid_data",
        details: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code=code, details=details)


class ChartDocumentError(ChartError):
    """Raised when a chart document file cannot be loaded."""

    def __init__(
        self,
        message: str,
        code: str = "invalid_document",
        details: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code=code, details=details)

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

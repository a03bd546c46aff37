from typing import Any

from termcharts.cli._output import emit
from termcharts.errors import ChartDataError
from termcharts.factory import create_chart
from termcharts.types import ChartKind, Series


def parse_point(text: str) -> tuple[str, float]:
    """
    Parse ``LABEL=VALUE``; the label may itself contain '='.

    Raises:
        ChartDataError if the value is missing or not a number.
    """
    label, sep, raw = text.rpartition("=")
    if not sep or not label:
        raise ChartDataError(f"Expected LABEL=VALUE, got '{text}'.", code="invalid_point")
    try:
        return label, int(raw)
    except ValueError:
        pass
    try:
        return label, float(raw)
    except ValueError as e:
        raise ChartDataError(f"Value for '{label}' is not a number: '{raw}'.", code="invalid_point") from e


def run(
    *,
    kind: str,
    points: list[str],
    title: str | None = None,
    width: int | None = None,
    height: int | None = None,
    no_color: bool = False,
    show_values: bool | None = None,
    grid_lines: bool | None = None,
    bar_width: int | None = None,
    line_color: str | None = None,
    point_color: str | None = None,
) -> int:
    """Render one chart from command-line data points."""
    chart_kind = ChartKind.from_str(kind)

    # unset flags stay out of the option map
    given: dict[str, Any] = {
        "title": title,
        "width": width,
        "height": height,
        "showValues": show_values,
        "gridLines": grid_lines,
        "barWidth": bar_width,
        "lineColor": line_color,
        "pointColor": point_color,
    }
    options = {key: value for key, value in given.items() if value is not None}
    if no_color:
        options["colors"] = False

    series = Series.from_pairs(parse_point(p) for p in points)
    return emit(create_chart(chart_kind, series, options))

from dataclasses import replace

from termcharts.cli.exitcodes import EXIT_DATA_ERROR, EXIT_OK
from termcharts.errors import ChartDataError
from termcharts.factory import Chart


def emit(chart: Chart, *, no_color: bool = False) -> int:
    """
    Print a chart and report whether it drew or fell back to an error line.

    The in-band message is still printed so the output matches Chart.render().
    """
    if no_color and chart.config.color_enabled:
        chart = replace(chart, config=replace(chart.config, color_enabled=False))

    try:
        text = chart.render_checked()
        code = EXIT_OK
    except ChartDataError:
        text = chart.render()
        code = EXIT_DATA_ERROR

    print(text, end="")
    return code

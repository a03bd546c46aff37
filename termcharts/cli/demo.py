from typing import Any

from termcharts.cli._output import emit
from termcharts.cli.exitcodes import EXIT_OK
from termcharts.factory import create_chart

SALES = {"Jan": 120, "Feb": 180, "Mar": 150, "Apr": 220, "May": 190, "Jun": 250}

EXPENSES = {"Food": 1200, "Rent": 1800, "Transport": 400, "Entertainment": 350, "Utilities": 250}

MARKET_SHARE = {"Chrome": 65, "Safari": 19, "Firefox": 8, "Edge": 5, "Other": 3}

DEMOS: tuple[tuple[str, str, dict[str, int], dict[str, Any]], ...] = (
    ("bar", "Monthly Expenses ($)", EXPENSES, {}),
    ("vbar", "Monthly Sales", SALES, {"showValues": True, "gridLines": True}),
    ("line", "Sales Trend", SALES, {"lineColor": "cyan", "pointColor": "red"}),
    ("pie", "Browser Market Share", MARKET_SHARE, {}),
    ("stacked", "Browser Market Share", MARKET_SHARE, {}),
    ("percent", "Browser Market Share", MARKET_SHARE, {}),
)


def run(*, width: int = 60, height: int = 15, no_color: bool = False) -> int:
    """Render the sample datasets with every chart kind."""
    rule = "─" * width
    worst = EXIT_OK
    for kind, title, data, extra in DEMOS:
        print(rule)
        print(f"Chart Type: {kind}")
        print(rule)
        print()

        options = {"title": title, "width": width, "height": height, **extra}
        worst = max(worst, emit(create_chart(kind, data, options), no_color=no_color))
        print()
    return worst

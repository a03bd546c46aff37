from termcharts.cli._output import emit
from termcharts.cli.exitcodes import EXIT_OK
from termcharts.config.loader import ChartDocumentLoader
from termcharts.factory import create_chart


def run(*, paths: list[str], no_color: bool = False) -> int:
    """
    Render every chart of the given YAML/JSON chart files.

    Charts are separated by a blank line. Returns the worst exit code seen.
    """
    loader = ChartDocumentLoader()
    documents = [doc for path in paths for doc in loader.load(path)]

    worst = EXIT_OK
    for i, doc in enumerate(documents):
        if i > 0:
            print()
        chart = create_chart(doc.kind, doc.series, doc.config)
        worst = max(worst, emit(chart, no_color=no_color))
    return worst

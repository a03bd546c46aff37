import argparse
import logging
import sys

from termcharts import TERMCHARTS_VERSION
from termcharts.cli import demo, plot, render
from termcharts.cli.exitcodes import EXIT_OK, EXIT_USAGE_ERROR
from termcharts.errors import ChartError
from termcharts.palette import PALETTE
from termcharts.types import ALIASES, ChartKind

logger = logging.getLogger(__name__)


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got '{text}'") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got '{text}'")
    return value


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="termcharts", description="termcharts — charts for the terminal")
    p.add_argument("--version", action="version", version=f"%(prog)s {TERMCHARTS_VERSION}")
    p.add_argument("--debug", action="store_true", help="Enable debug logging on stderr.")

    sub = p.add_subparsers(dest="cmd", required=True)

    # render
    render_p = sub.add_parser("render", help="Render charts from YAML/JSON chart files.")
    render_p.add_argument("paths", nargs="+", help="Chart files (.yaml, .yml, .json).")
    render_p.add_argument("--no-color", dest="no_color", action="store_true", help="Disable ANSI colours.")

    # plot
    plot_p = sub.add_parser("plot", help="Render one chart from LABEL=VALUE arguments.")
    plot_p.add_argument("kind", help="Chart kind (see 'termcharts kinds').")
    plot_p.add_argument("points", nargs="*", help="Data points as LABEL=VALUE, in axis order.")
    plot_p.add_argument("--title", default=None, help="Chart title.")
    plot_p.add_argument("--width", type=_positive_int, default=None, help="Width in characters (default: 60).")
    plot_p.add_argument("--height", type=_positive_int, default=None, help="Height in lines (default: 15).")
    plot_p.add_argument("--no-color", dest="no_color", action="store_true", help="Disable ANSI colours.")
    plot_p.add_argument(
        "--show-values", dest="show_values", action="store_true", default=None, help="vbar: print values on bars."
    )
    plot_p.add_argument(
        "--no-grid-lines", dest="grid_lines", action="store_false", default=None, help="vbar: hide grid lines."
    )
    plot_p.add_argument("--bar-width", dest="bar_width", type=_positive_int, default=None, help="vbar: bar width.")
    plot_p.add_argument("--line-color", dest="line_color", choices=PALETTE, default=None, help="line: line colour.")
    plot_p.add_argument("--point-color", dest="point_color", choices=PALETTE, default=None, help="line: point colour.")

    # demo
    demo_p = sub.add_parser("demo", help="Render sample datasets with every chart kind.")
    demo_p.add_argument("--width", type=_positive_int, default=60, help="Width in characters (default: 60).")
    demo_p.add_argument("--height", type=_positive_int, default=15, help="Height in lines (default: 15).")
    demo_p.add_argument("--no-color", dest="no_color", action="store_true", help="Disable ANSI colours.")

    # kinds
    sub.add_parser("kinds", help="List chart kinds and their aliases.")

    return p


def _print_kinds() -> int:
    for kind in ChartKind:
        aliases = sorted(alias for alias, target in ALIASES.items() if target is kind)
        suffix = f" (alias: {', '.join(aliases)})" if aliases else ""
        print(f"{kind.value}{suffix}")
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.cmd == "render":
            return render.run(paths=args.paths, no_color=args.no_color)

        if args.cmd == "plot":
            return plot.run(
                kind=args.kind,
                points=args.points,
                title=args.title,
                width=args.width,
                height=args.height,
                no_color=args.no_color,
                show_values=args.show_values,
                grid_lines=args.grid_lines,
                bar_width=args.bar_width,
                line_color=args.line_color,
                point_color=args.point_color,
            )

        if args.cmd == "demo":
            return demo.run(width=args.width, height=args.height, no_color=args.no_color)

        if args.cmd == "kinds":
            return _print_kinds()

        print("Unknown command.", file=sys.stderr)
        return EXIT_USAGE_ERROR

    except (ChartError, OSError) as e:
        logger.debug("command %s failed", args.cmd, exc_info=True)
        print(f"termcharts: error: {e}", file=sys.stderr)
        return EXIT_USAGE_ERROR


if __name__ == "__main__":
    sys.exit(main())

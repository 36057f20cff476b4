import argparse
import logging
import sys

from termplot._version import __version__
from termplot.cli import demo, plot
from termplot.cli.exitcodes import EXIT_CHART_ERROR, EXIT_USAGE_ERROR
from termplot.errors import ChartError


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="termplot", description="Termplot — line charts for the terminal")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-v", "--verbose", action="store_true", help="Log debug information to stderr.")

    sub = p.add_subparsers(dest="cmd", required=True)

    # plot
    plot_p = sub.add_parser("plot", help="Chart numbers read from a file or stdin.")
    plot_p.add_argument("path", nargs="?", default=None, help="Input file (default: stdin)")
    plot_p.add_argument("--config", dest="config_path", default=None, help="Chart config file (chart.yaml).")
    plot_p.add_argument("--height", type=int, default=None, help="Chart rows (default: 10).")
    plot_p.add_argument("--width", type=int, default=None, help="Chart columns incl. gutter (default: 80).")
    plot_p.add_argument("--min", type=float, default=None, help="Fixed Y-axis minimum.")
    plot_p.add_argument("--max", type=float, default=None, help="Fixed Y-axis maximum.")
    plot_p.add_argument("--ticks", type=int, default=None, help="Interior label ticks (default: 5).")
    plot_p.add_argument("--precision", type=int, choices=[0, 1, 2], default=None, help="Label decimal places.")
    plot_p.add_argument("--no-labels", dest="no_labels", action="store_true", help="Hide the label gutter.")
    plot_p.add_argument("--ascii", action="store_true", help="Use plain ASCII glyphs.")

    # demo
    demo_p = sub.add_parser("demo", help="Chart a generated series.")
    demo_p.add_argument("kind", choices=demo.KINDS, help="Series to generate.")
    demo_p.add_argument("--points", type=int, default=60, help="Number of samples (default: 60).")
    demo_p.add_argument("--frequency", type=float, default=1.0, help="Wave frequency (sine/cosine).")
    demo_p.add_argument("--phase", type=float, default=0.0, help="Wave phase in radians (sine/cosine).")
    demo_p.add_argument("--start", type=float, default=100.0, help="Starting value (walk).")
    demo_p.add_argument("--volatility", type=float, default=1.0, help="Step size (walk).")
    demo_p.add_argument("--seed", type=int, default=None, help="Random seed (walk).")
    demo_p.add_argument("--height", type=int, default=10, help="Chart rows (default: 10).")
    demo_p.add_argument("--width", type=int, default=80, help="Chart columns incl. gutter (default: 80).")

    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        if args.cmd == "plot":
            return plot.run(
                path=args.path,
                config_path=args.config_path,
                height=args.height,
                width=args.width,
                min=args.min,
                max=args.max,
                no_labels=args.no_labels,
                ascii=args.ascii,
                ticks=args.ticks,
                precision=args.precision,
            )

        if args.cmd == "demo":
            return demo.run(
                kind=args.kind,
                points=args.points,
                frequency=args.frequency,
                phase=args.phase,
                start=args.start,
                volatility=args.volatility,
                seed=args.seed,
                height=args.height,
                width=args.width,
            )

        print("Unknown command.", file=sys.stderr)
        return EXIT_USAGE_ERROR

    except ChartError as e:
        print(f"termplot: error: {e}", file=sys.stderr)
        return EXIT_CHART_ERROR

    except Exception as e:
        print(f"termplot: error: {e}", file=sys.stderr)
        return EXIT_USAGE_ERROR


if __name__ == "__main__":
    sys.exit(main())

"""Command line entry point: ``pie-chart [INPUT_FILE] [OUTPUT_FILE]``."""

import argparse
import logging
import os
import sys

from . import __version__
from .chart import PieChartSVG
from .colors import ColorSequencer
from .data import read_chart_data
from .errors import ChartIOError, PieChartError
from .layout import LegendMode, layout_chart
from .log import ConsoleLog

logger = logging.getLogger(__name__)


class _UsageExit(Exception):
    pass


class _ToolArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports through a ChartLog instead of exiting the process."""

    def __init__(self, log, **kwargs):
        super().__init__(**kwargs)
        self._log = log

    def _print_message(self, message, file=None):
        if message:
            self._log.output(message.rstrip("\n"))

    def exit(self, status=0, message=None):
        if message:
            self._print_message(message)
        raise _UsageExit(status)

    def error(self, message):
        self.print_usage()
        self.exit(2, f"{self.prog}: error: {message}\n")


def _env_flag(name):
    return os.environ.get(name, "").strip().lower() in {"1", "true", "yes"}


def build_parser(log):
    parser = _ToolArgumentParser(
        log,
        prog="pie-chart",
        description="Render a JSON5 title/items dataset as an SVG pie chart.",
    )
    parser.add_argument(
        "-n",
        "--no-color",
        action="store_true",
        default=_env_flag("NO_CLI_COLOR"),
        help="Disable colors in output (env: NO_CLI_COLOR)",
    )
    parser.add_argument(
        "-l",
        "--legend",
        choices=[mode.value for mode in LegendMode],
        default=LegendMode.COLUMN.value,
        help="Legend layout (default: %(default)s)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the starting hue")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log layout details")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("input_file", nargs="?", metavar="INPUT_FILE", help="The input file")
    parser.add_argument("output_file", nargs="?", metavar="OUTPUT_FILE", help="The output file")
    return parser


class PieChartTool:
    def __init__(self, log):
        self.log = log

    def run(self, argv=None):
        """Convert one dataset to SVG. Returns the exit status for usage output."""
        parser = build_parser(self.log)
        try:
            args = parser.parse_args(argv)
        except _UsageExit:
            return 0

        if args.no_color:
            self.log.color = False
        logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

        dataset = self.read_chart_file(args.input_file)
        if dataset.items and dataset.total == 0:
            self.log.warning(f"All values in '{dataset.title}' are zero; wedges will be empty")
        sequencer = ColorSequencer(seed=args.seed)
        model = layout_chart(dataset, mode=LegendMode(args.legend), sequencer=sequencer)
        output = PieChartSVG(model).to_string()
        self.write_svg_file(args.output_file, output)
        return 0

    @staticmethod
    def read_chart_file(path):
        if path is None:
            return read_chart_data(sys.stdin)
        try:
            f = open(path, "r", encoding="utf-8")
        except OSError as exc:
            raise ChartIOError(f"Unable to open file '{path}'", path) from exc
        with f:
            return read_chart_data(f)

    @staticmethod
    def write_svg_file(path, output):
        if path is None:
            sys.stdout.write(output)
            return
        try:
            f = open(path, "w", encoding="utf-8")
        except OSError as exc:
            raise ChartIOError(f"Unable to create file '{path}'", path) from exc
        with f:
            f.write(output)
        logger.debug("Wrote %s", path)


def main(argv=None):
    log = ConsoleLog(color=not _env_flag("NO_CLI_COLOR"))
    try:
        status = PieChartTool(log).run(argv)
    except (PieChartError, ValueError, OSError) as exc:
        log.error(str(exc))
        sys.exit(1)
    sys.exit(status)


if __name__ == "__main__":
    main()

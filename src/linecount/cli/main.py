"""CLI entrypoint for linecount."""

from __future__ import annotations

import argparse
import logging
import sys

from linecount import __version__
from linecount.constants.branding import (
    CLI_DESCRIPTION,
    EXAMPLE_TEMPLATE,
    EXIT_FAILURE,
    EXIT_SUCCESS,
    LOG_FORMAT,
    PROGRAM_NAME,
    USAGE_TEMPLATE,
)
from linecount.constants.reporting import (
    DEFAULT_OUTPUT_FORMAT,
    ERROR_PREFIX,
    OUTPUT_FORMAT_JSON,
    VALID_OUTPUT_FORMATS,
)
from linecount.counter import count_file
from linecount.exceptions import LineCounterError, MissingArgumentError
from linecount.reporting import StdoutReporter, render_json_report, render_processing_line
from linecount.validation import validate_file

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description=CLI_DESCRIPTION,
        epilog=EXAMPLE_TEMPLATE.format(prog=PROGRAM_NAME),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("path", nargs="?", default=None, help="Text file to analyse")
    parser.add_argument(
        "--output-format",
        choices=sorted(VALID_OUTPUT_FORMATS),
        default=DEFAULT_OUTPUT_FORMAT,
        help="Report format: text (default) or json",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log validation and counting details")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format=LOG_FORMAT)

    if args.path is None:
        _print_usage_help(parser.prog)
        return EXIT_FAILURE

    try:
        _run(args)
    except LineCounterError as exc:
        logger.debug("Run aborted with %s", exc.kind, exc_info=True)
        print(f"{ERROR_PREFIX} {exc}", file=sys.stderr)
        return EXIT_FAILURE
    return EXIT_SUCCESS


def _run(args: argparse.Namespace) -> None:
    """Validate, count, and print the report for ``args.path``."""
    metadata = validate_file(args.path)
    use_color = not args.no_color and sys.stdout.isatty()

    if args.output_format == OUTPUT_FORMAT_JSON:
        stats = count_file(metadata.path)
        print(render_json_report(metadata, stats))
        return

    print(render_processing_line(metadata.path, color=use_color))
    stats = count_file(metadata.path)
    print(StdoutReporter(metadata, stats, color=use_color).render())


def _print_usage_help(prog: str) -> None:
    print(f"{ERROR_PREFIX} {MissingArgumentError()}", file=sys.stderr)
    print(USAGE_TEMPLATE.format(prog=prog), file=sys.stderr)
    print(EXAMPLE_TEMPLATE.format(prog=prog), file=sys.stderr)


if __name__ == "__main__":
    raise SystemExit(main())

"""CLI entry point for pygwrap."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import structlog

from pygwrap.config import set_path
from pygwrap.errors import PygmentizeError
from pygwrap.formatters import FORMATTERS, get_formatter
from pygwrap.highlighter import highlight
from pygwrap.page import html_page

logger = structlog.get_logger(__name__)

DEFAULT_FORMAT = "terminal256"
_LOG_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


def _key_value(raw: str) -> tuple[str, str]:
    key, sep, value = raw.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {raw!r}")
    return key, value


def _configure_logging(verbose: int) -> None:
    """Send log events to stderr; stdout is reserved for highlighted output.

    No ``-v`` shows warnings only, ``-v`` adds info, ``-vv`` adds the
    runner's debug events (argv, byte counts, exit status).
    """
    level = _LOG_LEVELS[min(verbose, len(_LOG_LEVELS) - 1)]
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pygwrap",
        description="Syntax-highlight source code with pygmentize",
    )
    parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="Source file to highlight (default: stdin)",
    )
    parser.add_argument(
        "-l", "--language",
        default=None,
        help="Language name, e.g. python (guessed if omitted, unreliably)",
    )
    parser.add_argument(
        "-f", "--format",
        choices=sorted(FORMATTERS),
        default=DEFAULT_FORMAT,
        help=f"Output format (default: {DEFAULT_FORMAT})",
    )
    parser.add_argument(
        "-n", "--line-numbers",
        action="store_true",
        help="Output line numbers",
    )
    parser.add_argument(
        "-s", "--style",
        default=None,
        help="Pygments style name, e.g. monokai",
    )
    parser.add_argument(
        "-O", "--option",
        dest="options",
        action="append",
        type=_key_value,
        default=[],
        metavar="KEY=VALUE",
        help="Extra formatter option passed to pygmentize (repeatable)",
    )
    parser.add_argument(
        "--pygmentize",
        default=None,
        metavar="PATH",
        help="pygmentize executable to run (default: pygmentize on PATH)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Kill pygmentize after this many seconds",
    )
    parser.add_argument(
        "--page",
        action="store_true",
        help="Wrap html output in a standalone page with embedded CSS",
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Write output to this file instead of stdout",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Log to stderr (-vv for debug)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.page and args.format != "html":
        parser.error("--page requires --format html")
    if args.timeout is not None and args.timeout <= 0:
        parser.error("--timeout must be > 0")

    _configure_logging(args.verbose)

    if args.pygmentize is not None:
        set_path(args.pygmentize)

    formatter = get_formatter(
        args.format,
        line_numbers=args.line_numbers,
        style=args.style,
        extra_options=tuple(args.options),
    )

    try:
        if args.file == "-":
            code = sys.stdin.read()
        else:
            code = Path(args.file).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"pygwrap: cannot read {args.file}: {exc}", file=sys.stderr)
        return 1

    try:
        result = highlight(code, args.language, formatter, timeout=args.timeout)
    except PygmentizeError as exc:
        print(f"pygwrap: {exc}", file=sys.stderr)
        return 1

    logger.info(
        "highlighted",
        format=args.format,
        language=args.language or "<guessed>",
        output_chars=len(result),
    )

    if args.page:
        title = None if args.file == "-" else Path(args.file).name
        result = html_page(result, style=args.style or "default", title=title)

    if args.output is not None:
        try:
            Path(args.output).write_text(result, encoding="utf-8")
        except OSError as exc:
            print(f"pygwrap: cannot write {args.output}: {exc}", file=sys.stderr)
            return 1
    else:
        sys.stdout.write(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

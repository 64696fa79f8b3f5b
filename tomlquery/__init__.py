"""
toml-query: print a value from a TOML document in a form shell scripts can consume.
"""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from tomlquery.errors import QueryError
from tomlquery.path import resolve
from tomlquery.render import render, render_raw
from tomlquery.utils import LOG_LEVELS, input_file, load_document, log_level_from_env

__version__ = "0.1.0"

PROG = "tomlq"


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Look up a value in a TOML document and print it shell-escaped",
        epilog="Patterns are table keys separated by '.', e.g. profile.release.lto; "
        "an empty pattern selects the whole document.",
    )

    parser.add_argument(
        "pattern",
        metavar="PATTERN",
        type=str,
        nargs="?",
        default=None,
        help="Dot-separated path of the value to print",
    )

    parser.add_argument(
        "-e",
        "--eval",
        metavar="EVAL",
        dest="eval_pattern",
        type=str,
        required=False,
        default=None,
        help="Pattern given inline, as an alternative to PATTERN",
    )

    parser.add_argument(
        "-f",
        "--file",
        metavar="FILEPATH",
        type=input_file,
        required=False,
        default=None,
        help="TOML file to read (default: standard input, also selected by '-')",
    )

    parser.add_argument(
        "-r",
        "--raw",
        required=False,
        default=False,
        action="store_true",
        help="Print a string result as is, without shell quoting",
    )

    parser.add_argument(
        "--log-level",
        type=str.upper,
        required=False,
        default=None,
        choices=LOG_LEVELS,
        help="Logging level (default: $TOMLQ_LOG_LEVEL or WARNING)",
    )

    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"{PROG} {__version__}",
    )

    return parser


def get_pattern(parser: argparse.ArgumentParser, args: argparse.Namespace) -> str:
    """Pick the pattern from PATTERN or -e/--eval; exactly one must be given."""
    if args.pattern is not None and args.eval_pattern is not None:
        parser.error("PATTERN and -e/--eval are mutually exclusive")
    if args.pattern is not None:
        return args.pattern
    if args.eval_pattern is not None:
        return args.eval_pattern
    parser.error("a PATTERN or -e/--eval is required")


def query(path: Path | None, pattern: str, raw: bool = False) -> str:
    document = load_document(path)
    value = resolve(document, pattern)
    return render_raw(value) if raw else render(value)


def main(argv: Sequence[str] | None = None) -> int:
    try:
        parser = build_arg_parser()
        args = parser.parse_args(argv)
        pattern = get_pattern(parser, args)

        logging.basicConfig(
            format=f"{PROG}: %(levelname)s: %(message)s",
            level=logging.getLevelName(args.log_level or log_level_from_env()),
        )

        try:
            output = query(args.file, pattern, raw=args.raw)
        except QueryError as exc:
            logging.error(exc)
            return 1

        print(output)
        return 0
    except KeyboardInterrupt:
        logging.warning("Interrupted by user, terminating...")
        return 130  # 128 + SIGINT(2)

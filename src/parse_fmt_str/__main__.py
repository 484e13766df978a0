"""Command-line entry point for parse-fmt-str."""

import argparse
from collections.abc import Sequence
import sys

from parse_fmt_str.core import FormatStringError
from parse_fmt_str.core import ParseConfig
from parse_fmt_str.project_info import get_project_info
from parse_fmt_str.syntax import parse_format_string


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the command line."""
    parser = argparse.ArgumentParser(
        prog="parse-fmt-str",
        description="Parse a format-string template and print it as JSON.",
    )
    parser.add_argument("template", nargs="?", help="template text to parse")
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation, 0 for a single line (default: 2)",
    )
    parser.add_argument(
        "--strict-precision",
        action="store_true",
        help="reject a '.' that has no precision after it",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the template given on the command line and print the result.

    Without a template, print the project description and version.
    """
    args = build_parser().parse_args(argv)

    if args.template is None:
        info = get_project_info()
        print(f"{info.name} v{info.version}: {info.description}")
        return 0

    config = ParseConfig(strict_precision=args.strict_precision)
    try:
        result = parse_format_string(args.template, config)
    except FormatStringError as e:
        print(e.message, file=sys.stderr)
        print(f"  {e.template}", file=sys.stderr)
        print(f"  {' ' * e.offset}^", file=sys.stderr)
        return 1

    print(result.model_dump_json(indent=args.indent or None))
    return 0


if __name__ == "__main__":
    sys.exit(main())

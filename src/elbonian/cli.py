"""Command-line converter.

Usage:
    elbonian " 99 "
    elbonian MMCX --integer
    elbonian 2000 --numeral
"""

from __future__ import annotations

import argparse
import sys
from typing import get_args

from elbonian.core.config import AppSettings, LogLevel
from elbonian.core.logging_config import configure_logging
from elbonian.models.converted_number import convert


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="elbonian",
        description="Convert between base-10 integers and Elbonian numerals",
    )
    parser.add_argument("number", help="Elbonian numeral or base-10 integer (quote it to keep spaces)")
    form = parser.add_mutually_exclusive_group()
    form.add_argument("--integer", action="store_true", help="Print only the integer form")
    form.add_argument("--numeral", action="store_true", help="Print only the numeral form")
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=get_args(LogLevel),
        help="Override ELBONIAN_LOG_LEVEL",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(AppSettings(), level=args.log_level)

    result = convert(args.number)
    if not result.ok:
        print(f"error: {result.error}", file=sys.stderr)
        return 1

    value = result.unwrap()
    if args.integer:
        print(value.to_integer())
    elif args.numeral:
        print(value.to_numeral())
    else:
        print(f"{value.to_integer()}\t{value.to_numeral()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

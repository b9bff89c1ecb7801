"""
Command line entry point.

Usage:
    contacts-csv [INPUT OUTPUT] [--label TEXT] [--console-encoding ENC]
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .console import configure_console
from .convert import ConversionError, convert_file
from .logging import get_logger
from .rules import DEFAULT_INPUT_FILENAME, DEFAULT_OUTPUT_FILENAME

LABEL_PROMPT = "Contact group label (leave empty for none): "


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="contacts-csv",
        description="Convert a form export CSV into a contact-import CSV (UTF-8 with BOM).",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="PATH",
        help=f"INPUT OUTPUT, both or neither (default: {DEFAULT_INPUT_FILENAME} {DEFAULT_OUTPUT_FILENAME})",
    )
    parser.add_argument("--label", default=None, help="Labels value for every contact (prompted if omitted)")
    parser.add_argument(
        "--console-encoding",
        default=None,
        metavar="ENC",
        help="Set console input/output encoding before running, e.g. cp1251",
    )
    parser.add_argument("--log-json", action="store_true", help="Emit log records as JSON")
    parser.add_argument("--debug", action="store_true", help="Enable DEBUG logging")
    return parser


def read_label() -> str:
    try:
        return input(LABEL_PROMPT)
    except EOFError:
        return ""


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if len(args.paths) == 2:
        input_path, output_path = args.paths
    elif not args.paths:
        input_path, output_path = DEFAULT_INPUT_FILENAME, DEFAULT_OUTPUT_FILENAME
    else:
        parser.error("expected INPUT and OUTPUT paths, or none (quote paths containing spaces)")

    get_logger(level=logging.DEBUG if args.debug else logging.INFO, json_format=args.log_json)

    if args.console_encoding:
        configure_console(args.console_encoding, args.console_encoding)

    print(f"Reading from: {input_path}")
    print(f"Writing to:   {output_path} (UTF-8 with BOM)")

    label = args.label if args.label is not None else read_label()
    print(f"Using label: '{label or '[EMPTY]'}'")

    try:
        report = convert_file(input_path, output_path, label)
    except ConversionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Done. Data rows processed: {report['summary']['rows_processed']}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())

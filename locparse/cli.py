#!/usr/bin/env python3
"""
locparse - Localization resource file parser CLI

Parses a localization file and prints its strings as JSON.

Supported Formats:
    - RESX (.resx)
    - loc.json (.loc.json, .resx.json)
    - resjson (.resjson)

Commands:
    parse    - Parse a file and print its strings
    formats  - List supported formats

Examples:
    locparse parse --input Strings.resx
    locparse parse --input Strings.resx --newline lf --ignore-missing-comments
    locparse parse --input strings.txt --parser resjson --ignore-string '^debug_'

Warnings and errors found while parsing go to stderr; stdout is JSON only.
"""

import argparse
import json
import logging
import re
import sys
from pathlib import Path

from .format_handlers import FormatRegistry, ParseLocFileOptions, ParserKind, ResxOptions
from .newlines import NewlineKind
from .parser import ParseCache, parse_loc_file, select_parser_by_file_path

logger = logging.getLogger("locparse")

NEWLINE_CHOICES = {
    "none": None,
    "crlf": NewlineKind.CRLF,
    "lf": NewlineKind.LF,
    "os": NewlineKind.OS_DEFAULT,
}


def cmd_parse(args, cache: ParseCache) -> dict:
    """Parse one file and return its strings."""
    input_path = Path(args.input)
    content = input_path.read_text(encoding="utf-8-sig")
    if args.parser == "auto":
        kind = select_parser_by_file_path(str(input_path))
    else:
        kind = ParserKind(args.parser)

    ignore_string = None
    if args.ignore_string:
        ignore_pattern = re.compile(args.ignore_string)

        def ignore_string(file_path: str, string_name: str) -> bool:
            return bool(ignore_pattern.search(string_name))

    options = ParseLocFileOptions(
        file_path=str(input_path),
        content=content,
        logger=logger,
        ignore_string=ignore_string,
        parser=kind,
        resx=ResxOptions(
            newline_normalization=NEWLINE_CHOICES[args.newline],
            ignore_missing_comments=args.ignore_missing_comments,
        ),
    )
    strings = parse_loc_file(options, cache)

    return {
        "status": "ok",
        "file": str(input_path),
        "format": kind.value,
        "count": len(strings),
        "strings": {
            name: {"value": s.value, "comment": s.comment}
            for name, s in strings.items()
        },
    }


def cmd_formats(args) -> dict:
    """List supported formats."""
    return {
        "status": "ok",
        "formats": FormatRegistry.list_formats(),
    }


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="locparse",
        description="Parse RESX, loc.json and resjson localization files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Format detection (case-insensitive, first match wins):
  *.resx                  -> resx
  *.resx.json, *.loc.json -> loc.json
  *.resjson               -> resjson

Use --parser to override detection.
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # parse command
    parse_parser = subparsers.add_parser("parse", help="Parse a localization file")
    parse_parser.add_argument("--input", "-i", required=True, help="Input file")
    parse_parser.add_argument("--parser", "-p", default="auto",
                              choices=["auto", "resx", "loc.json", "resjson"],
                              help="Input format (default: auto-detect)")
    parse_parser.add_argument("--newline", "-n", default="none", choices=list(NEWLINE_CHOICES),
                              help="Newline normalization for RESX values (default: none)")
    parse_parser.add_argument("--ignore-missing-comments", action="store_true",
                              help="Don't warn about RESX strings without a comment")
    parse_parser.add_argument("--ignore-string", metavar="REGEX",
                              help="Skip strings whose name matches REGEX")
    parse_parser.add_argument("--verbose", "-v", action="store_true", help="Log debug messages")

    # formats command
    subparsers.add_parser("formats", help="List supported formats")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "verbose", False) else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        if args.command == "parse":
            result = cmd_parse(args, ParseCache())
        elif args.command == "formats":
            result = cmd_formats(args)
        print(json.dumps(result, indent=2, ensure_ascii=False))
    except Exception as e:
        print(json.dumps({
            "status": "error",
            "error": str(e),
            "error_type": type(e).__name__,
        }), file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()

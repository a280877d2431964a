"""
locparse - parser front-end for localization resource files

Detects whether a file is RESX, loc.json or resjson from its name, parses it
with the matching handler and returns a uniform mapping of string names to
values and comments. RESX results are cached per file path, newline
normalization and content.

Quick start:
    cache = ParseCache()
    strings = parse_loc_file(
        ParseLocFileOptions(file_path="Strings.resx", content=text, logger=logger),
        cache,
    )
"""

__version__ = "1.0.0"

from .errors import (
    InvalidLocFileError,
    LocParseError,
    UnsupportedFileExtensionError,
    UnsupportedParserError,
)
from .format_handlers import (
    IgnoreStringFunction,
    LocalizationFile,
    LocalizedString,
    ParseFileOptions,
    ParseLocFileOptions,
    ParserKind,
    ResxOptions,
)
from .newlines import NewlineKind, convert_newlines
from .parser import CacheEntry, ParseCache, parse_loc_file, select_parser_by_file_path

__all__ = [
    "CacheEntry",
    "IgnoreStringFunction",
    "InvalidLocFileError",
    "LocalizationFile",
    "LocalizedString",
    "LocParseError",
    "NewlineKind",
    "ParseCache",
    "ParseFileOptions",
    "ParseLocFileOptions",
    "ParserKind",
    "ResxOptions",
    "UnsupportedFileExtensionError",
    "UnsupportedParserError",
    "convert_newlines",
    "parse_loc_file",
    "select_parser_by_file_path",
]

#!/usr/bin/env python3
"""
Format selection and cached parsing of localization files.

parse_loc_file is the single entry point: it works out which format a file
uses, hands the content to that format's handler and, for RESX files,
remembers the result so an unchanged file is not parsed twice.

Cache hits require the *same* ignore_string object as the cached call, not
an equivalent one. A lambda or bound method created anew for every call
therefore never hits the cache; keep one predicate object alive and pass it
each time.
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional

from .errors import UnsupportedFileExtensionError, UnsupportedParserError
from .format_handlers import (
    FormatRegistry,
    IgnoreStringFunction,
    LocalizationFile,
    ParseLocFileOptions,
    ParserKind,
)

logger = logging.getLogger(__name__)

# Checked in order; the first match wins.
_SUFFIX_RULES: tuple[tuple[re.Pattern, ParserKind], ...] = (
    (re.compile(r"\.resx\Z", re.IGNORECASE), ParserKind.RESX),
    (re.compile(r"\.(resx|loc)\.json\Z", re.IGNORECASE), ParserKind.LOC_JSON),
    (re.compile(r"\.resjson\Z", re.IGNORECASE), ParserKind.RESJSON),
)


def select_parser_by_file_path(file_path: str) -> ParserKind:
    """
    Pick the format of a file from its name.

    Args:
        file_path: Path or file name

    Returns:
        ParserKind for the first matching suffix rule

    Raises:
        UnsupportedFileExtensionError: If no rule matches
    """
    for pattern, kind in _SUFFIX_RULES:
        if pattern.search(file_path):
            return kind
    raise UnsupportedFileExtensionError(file_path)


@dataclass(frozen=True)
class CacheEntry:
    """A parsed RESX file together with the inputs that produced it."""
    content: str
    parsed_file: LocalizationFile
    ignore_string: Optional[IgnoreStringFunction]


class ParseCache:
    """
    Unbounded in-memory cache of parsed RESX files.

    Create one per process and pass it to every parse_loc_file call. Entries
    are never evicted. Not thread-safe.
    """

    def __init__(self):
        self._entries: dict[str, CacheEntry] = {}

    def get(self, key: str) -> Optional[CacheEntry]:
        return self._entries.get(key)

    def set(self, key: str, entry: CacheEntry) -> None:
        self._entries[key] = entry

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def resx_cache_key(options: ParseLocFileOptions) -> str:
    """Cache key for a RESX parse: file path plus newline normalization."""
    newline = options.resx.newline_normalization
    return f"{options.file_path}?{newline.value if newline else 'none'}"


def _resolve_parser_kind(options: ParseLocFileOptions) -> ParserKind:
    if options.parser is None:
        return select_parser_by_file_path(options.file_path)
    try:
        return ParserKind(options.parser)
    except ValueError:
        raise UnsupportedParserError(options.parser) from None


def parse_loc_file(options: ParseLocFileOptions, cache: ParseCache) -> LocalizationFile:
    """
    Parse a localization file, reusing a cached RESX result when possible.

    The format is options.parser if given, otherwise it is selected from
    options.file_path. RESX results are cached under the file path and
    newline normalization; a cached result is returned only when both the
    content and the ignore_string object are the same as when it was stored.
    ignore_missing_comments is not part of the cache key. loc.json and
    resjson files are parsed on every call.

    Args:
        options: Parse options
        cache: Cache shared by all calls in the process

    Returns:
        Mapping of string name -> LocalizedString. RESX results are shared
        with the cache and must not be mutated.

    Raises:
        UnsupportedFileExtensionError: If no format matches the file path
        UnsupportedParserError: If options.parser names no known format
        InvalidLocFileError: If the handler cannot read the content
    """
    kind = _resolve_parser_kind(options)

    if kind is ParserKind.RESX:
        key = resx_cache_key(options)
        entry = cache.get(key)
        if (
            entry is not None
            and entry.content == options.content
            and entry.ignore_string is options.ignore_string
        ):
            logger.debug("Parse cache hit for %s", key)
            return entry.parsed_file

        parsed_file = FormatRegistry.get_handler(kind).parse(options)
        cache.set(key, CacheEntry(
            content=options.content,
            parsed_file=parsed_file,
            ignore_string=options.ignore_string,
        ))
        return parsed_file
    elif kind in (ParserKind.LOC_JSON, ParserKind.RESJSON):
        return FormatRegistry.get_handler(kind).parse(options)
    else:
        raise UnsupportedParserError(kind)

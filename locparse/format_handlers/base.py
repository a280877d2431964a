#!/usr/bin/env python3
"""
Base classes for format handlers.

FormatHandler is the abstract base class that all format-specific handlers
must implement. LocalizedString is the universal value type for a string
read from any format, and a LocalizationFile maps string names to them.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional, Union

from ..errors import UnsupportedParserError
from ..newlines import NewlineKind


# (file_path, string_name) -> True to drop the string
IgnoreStringFunction = Callable[[str, str], bool]


def should_ignore(
    ignore_string: Optional[IgnoreStringFunction],
    file_path: str,
    string_name: str,
) -> bool:
    """Whether ignore_string, if given, asks to drop string_name from file_path."""
    return bool(ignore_string and ignore_string(file_path, string_name))


class ParserKind(str, Enum):
    """Localization file formats understood by the dispatcher."""
    RESX = "resx"
    LOC_JSON = "loc.json"
    RESJSON = "resjson"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class LocalizedString:
    """
    Universal localized string that works across all formats.

    Attributes:
        value: The string value
        comment: Optional translator comment
    """
    value: str
    comment: Optional[str] = None


# Parsed files are shared with the parse cache; callers must not mutate them.
LocalizationFile = dict[str, LocalizedString]


@dataclass
class ResxOptions:
    """Options only meaningful when the resolved format is RESX."""
    newline_normalization: Optional[NewlineKind] = None
    ignore_missing_comments: bool = False


@dataclass
class ParseFileOptions:
    """
    Options shared by every format handler.

    Attributes:
        file_path: Path of the file, used in messages and as cache key
        content: Raw file content (may be empty)
        logger: Sink for warnings and errors found while parsing
        ignore_string: Optional predicate deciding which strings to drop
    """
    file_path: str
    content: str
    logger: logging.Logger
    ignore_string: Optional[IgnoreStringFunction] = None

    def __post_init__(self):
        """Reject an empty file path."""
        if not self.file_path:
            raise ValueError("file_path must be a non-empty string")


@dataclass
class ParseLocFileOptions(ParseFileOptions):
    """
    Options accepted by parse_loc_file.

    Attributes:
        parser: Explicit format, skipping detection from the file path
        resx: RESX-specific options, ignored for other formats
    """
    parser: Optional[Union[ParserKind, str]] = None
    resx: ResxOptions = field(default_factory=ResxOptions)


class FormatHandler(ABC):
    """
    Abstract base class for format-specific handlers.

    Each format handler turns the raw content of one localization file
    format into a LocalizationFile. Handlers report recoverable problems
    through options.logger and raise InvalidLocFileError for content they
    cannot read at all.
    """

    @property
    @abstractmethod
    def kind(self) -> ParserKind:
        """Format tag this handler parses."""
        pass

    @property
    @abstractmethod
    def file_suffixes(self) -> list[str]:
        """File name suffixes associated with this format (with leading dot)."""
        pass

    @property
    def name(self) -> str:
        """Human-readable format name."""
        return self.kind.value

    @abstractmethod
    def parse(self, options: ParseLocFileOptions) -> LocalizationFile:
        """
        Parse format-specific content into localized strings.

        Args:
            options: Parse options carrying path, content and logger

        Returns:
            Mapping of string name -> LocalizedString
        """
        pass

    @staticmethod
    def is_ignored(options: ParseFileOptions, string_name: str) -> bool:
        """Whether options.ignore_string asks to drop string_name."""
        return should_ignore(options.ignore_string, options.file_path, string_name)


class FormatRegistry:
    """Registry of available format handlers."""

    _handlers: dict[ParserKind, type[FormatHandler]] = {}

    @classmethod
    def register(cls, handler_class: type[FormatHandler]) -> None:
        """Register a format handler class."""
        handler = handler_class()
        cls._handlers[handler.kind] = handler_class

    @classmethod
    def get_handler(cls, kind: Union[ParserKind, str]) -> FormatHandler:
        """Get handler instance by format tag."""
        try:
            kind = ParserKind(kind)
        except ValueError:
            raise UnsupportedParserError(kind) from None
        if kind not in cls._handlers:
            raise UnsupportedParserError(kind)
        return cls._handlers[kind]()

    @classmethod
    def list_formats(cls) -> list[dict[str, Any]]:
        """List all registered formats with their suffixes."""
        result = []
        for handler_class in cls._handlers.values():
            handler = handler_class()
            result.append({
                'name': handler.name,
                'suffixes': handler.file_suffixes,
                'cached': handler.kind is ParserKind.RESX,
            })
        return result

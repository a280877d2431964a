"""
Exception hierarchy for locparse.

Every exception raised by this package derives from LocParseError and, since
all of them describe bad input, from ValueError as well.
"""


class LocParseError(Exception):
    """Base exception for all locparse errors."""


class UnsupportedFileExtensionError(LocParseError, ValueError):
    """Raised when no format matches the suffix of a file path."""

    def __init__(self, file_path: str):
        self.file_path = file_path
        super().__init__(f"Unsupported file extension in file: {file_path}")


class UnsupportedParserError(LocParseError, ValueError):
    """Raised when an explicit parser tag names no known format."""

    def __init__(self, parser: object):
        self.parser = parser
        super().__init__(f"Unsupported parser: {parser}")


class InvalidLocFileError(LocParseError, ValueError):
    """Raised when file content does not conform to its format."""

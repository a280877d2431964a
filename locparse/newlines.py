"""Newline normalization for string values read from localization files."""

import os
import re
from enum import Enum


class NewlineKind(str, Enum):
    """Target newline style."""
    CRLF = "\r\n"
    LF = "\n"
    OS_DEFAULT = "os"

    @property
    def newline(self) -> str:
        """Concrete newline sequence for this kind."""
        if self is NewlineKind.OS_DEFAULT:
            return os.linesep
        return self.value


# \r\n and \n\r must come before the single characters
_NEWLINE_RE = re.compile(r"\r\n|\n\r|\r|\n")


def convert_newlines(text: str, kind: NewlineKind) -> str:
    """
    Replace every newline in text with the newline of the given kind.

    Args:
        text: Text with any mix of newline styles
        kind: Target newline style

    Returns:
        Text with uniform newlines
    """
    return _NEWLINE_RE.sub(kind.newline, text)

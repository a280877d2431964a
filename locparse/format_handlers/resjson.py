#!/usr/bin/env python3
"""
resjson format handler.

A resjson file is a flat JSON object of strings. A key of the form
`_<name>.comment` holds the translator comment for `<name>`:
```json
{
  "greeting": "Hello",
  "_greeting.comment": "Shown on the start page"
}
```
"""

import json

from ..errors import InvalidLocFileError
from .base import FormatHandler, LocalizationFile, LocalizedString, ParseLocFileOptions, ParserKind

COMMENT_PREFIX = "_"
COMMENT_SUFFIX = ".comment"


def _is_comment_key(key: str) -> bool:
    return key.startswith(COMMENT_PREFIX) and key.endswith(COMMENT_SUFFIX)


def _comment_key(string_name: str) -> str:
    return f"{COMMENT_PREFIX}{string_name}{COMMENT_SUFFIX}"


class ResJsonHandler(FormatHandler):
    """Handler for .resjson files."""

    @property
    def kind(self) -> ParserKind:
        return ParserKind.RESJSON

    @property
    def file_suffixes(self) -> list[str]:
        return [".resjson"]

    def parse(self, options: ParseLocFileOptions) -> LocalizationFile:
        """
        Parse resjson content, pairing each string with its comment.

        Raises:
            InvalidLocFileError: If content is not a JSON object of strings, or
                if a comment exists for a string that does not
        """
        try:
            data = json.loads(options.content)
        except json.JSONDecodeError as e:
            raise InvalidLocFileError(f"Invalid JSON in {options.file_path}: {e}") from e

        if not isinstance(data, dict):
            raise InvalidLocFileError(f"The resjson file is invalid. {options.file_path} must contain a JSON object.")

        non_strings = [key for key, value in data.items() if not isinstance(value, str)]
        if non_strings:
            raise InvalidLocFileError(
                "The resjson file is invalid. Values must be strings for the following keys: "
                f"{', '.join(non_strings)}."
            )

        parsed: LocalizationFile = {}
        # comment key -> whether a string uses it
        used_comments: dict[str, bool] = {}
        for key, value in data.items():
            if _is_comment_key(key):
                used_comments.setdefault(key, False)
                continue

            comment_key = _comment_key(key)
            used_comments[comment_key] = True
            if not self.is_ignored(options, key):
                parsed[key] = LocalizedString(value=value, comment=data.get(comment_key))

        orphans = [
            key[len(COMMENT_PREFIX):-len(COMMENT_SUFFIX)]
            for key, used in used_comments.items()
            if not used
        ]
        if orphans:
            raise InvalidLocFileError(
                "The resjson file is invalid. Comments exist for the following string keys "
                f"that don't have values: {', '.join(orphans)}."
            )

        return parsed

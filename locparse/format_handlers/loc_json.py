#!/usr/bin/env python3
"""
loc.json format handler.

A loc.json file maps string names to objects with a required value and an
optional translator comment:
```json
{
  "$schema": "...",
  "greeting": {
    "value": "Hello",
    "comment": "Shown on the start page"
  }
}
```
"""

import json
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, StringConstraints, TypeAdapter, ValidationError

from ..errors import InvalidLocFileError
from .base import FormatHandler, LocalizationFile, LocalizedString, ParseLocFileOptions, ParserKind

SCHEMA_KEY = "$schema"

StringName = Annotated[str, StringConstraints(pattern=r"^[A-Za-z_][0-9A-Za-z_]*$")]


class LocJsonString(BaseModel):
    """One entry of a loc.json file."""

    model_config = ConfigDict(extra="forbid", strict=True)

    value: str
    comment: Optional[str] = None


_LOC_JSON_ADAPTER = TypeAdapter(dict[StringName, LocJsonString])


class LocJsonHandler(FormatHandler):
    """Handler for .loc.json and .resx.json files."""

    @property
    def kind(self) -> ParserKind:
        return ParserKind.LOC_JSON

    @property
    def file_suffixes(self) -> list[str]:
        return [".loc.json", ".resx.json"]

    def parse(self, options: ParseLocFileOptions) -> LocalizationFile:
        """
        Parse and validate loc.json content.

        Raises:
            InvalidLocFileError: If content is not JSON or violates the loc.json layout
        """
        try:
            data = json.loads(options.content)
        except json.JSONDecodeError as e:
            raise InvalidLocFileError(f"Invalid JSON in {options.file_path}: {e}") from e

        if isinstance(data, dict):
            data.pop(SCHEMA_KEY, None)

        try:
            strings = _LOC_JSON_ADAPTER.validate_python(data)
        except ValidationError as e:
            raise InvalidLocFileError(f"The loc file is invalid. Error: {e}") from e

        return {
            name: LocalizedString(value=entry.value, comment=entry.comment)
            for name, entry in strings.items()
            if not self.is_ignored(options, name)
        }

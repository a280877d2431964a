#!/usr/bin/env python3
"""
Format handlers for localization file formats.

Supported formats:
- RESX: .NET resource files (.resx)
- loc.json: JSON with value/comment objects (.loc.json, .resx.json)
- resjson: flat JSON with _<name>.comment keys (.resjson)
"""

from .base import (
    FormatHandler,
    FormatRegistry,
    IgnoreStringFunction,
    LocalizationFile,
    LocalizedString,
    ParseFileOptions,
    ParseLocFileOptions,
    ParserKind,
    ResxOptions,
)
from .loc_json import LocJsonHandler
from .resjson import ResJsonHandler
from .resx import ResxHandler, ResxReaderOptions, read_resx_as_loc_file

FormatRegistry.register(ResxHandler)
FormatRegistry.register(LocJsonHandler)
FormatRegistry.register(ResJsonHandler)

__all__ = [
    'FormatHandler',
    'FormatRegistry',
    'IgnoreStringFunction',
    'LocalizationFile',
    'LocalizedString',
    'ParseFileOptions',
    'ParseLocFileOptions',
    'ParserKind',
    'ResxOptions',
    'ResxHandler',
    'ResxReaderOptions',
    'LocJsonHandler',
    'ResJsonHandler',
    'read_resx_as_loc_file',
]

#!/usr/bin/env python3
"""
RESX format handler.

Reads .NET resource files into localized strings. Structural problems are
reported through the logger and the offending string is skipped; only
content that is not well-formed XML raises.
"""

import logging
from dataclasses import dataclass
from typing import Optional
from xml.etree import ElementTree as ET

from ..errors import InvalidLocFileError
from ..newlines import NewlineKind, convert_newlines
from .base import (
    FormatHandler,
    IgnoreStringFunction,
    LocalizationFile,
    LocalizedString,
    ParseLocFileOptions,
    ParserKind,
    should_ignore,
)

# Elements allowed at the top level besides <data>
_SKIPPED_ELEMENTS = {'resheader', 'schema'}


@dataclass
class ResxReaderOptions:
    """Options for read_resx_as_loc_file."""
    logger: logging.Logger
    resx_file_path: str
    newline_normalization: Optional[NewlineKind] = None
    warn_on_missing_comment: bool = True
    ignore_string: Optional[IgnoreStringFunction] = None


class ResxHandler(FormatHandler):
    """
    Handler for .resx resource files.

    RESX structure:
    ```xml
    <?xml version="1.0" encoding="utf-8"?>
    <root>
      <resheader name="resmimetype">
        <value>text/microsoft-resx</value>
      </resheader>
      <data name="Greeting" xml:space="preserve">
        <value>Hello</value>
        <comment>Shown on the start page</comment>
      </data>
    </root>
    ```
    """

    @property
    def kind(self) -> ParserKind:
        return ParserKind.RESX

    @property
    def file_suffixes(self) -> list[str]:
        return [".resx"]

    def parse(self, options: ParseLocFileOptions) -> LocalizationFile:
        """Parse RESX content, forwarding the RESX-specific options."""
        return read_resx_as_loc_file(options.content, ResxReaderOptions(
            logger=options.logger,
            resx_file_path=options.file_path,
            newline_normalization=options.resx.newline_normalization,
            warn_on_missing_comment=not options.resx.ignore_missing_comments,
            ignore_string=options.ignore_string,
        ))


def read_resx_as_loc_file(content: str, options: ResxReaderOptions) -> LocalizationFile:
    """
    Read RESX content into a LocalizationFile.

    Args:
        content: Raw RESX file content
        options: Reader options

    Returns:
        Mapping of string name -> LocalizedString, in document order

    Raises:
        InvalidLocFileError: If content is not well-formed XML
    """
    try:
        root = ET.fromstring(content.lstrip('\ufeff'))
    except ET.ParseError as e:
        raise InvalidLocFileError(f"Invalid RESX in {options.resx_file_path}: {e}") from e

    loc_file: LocalizationFile = {}
    if _has_text(root.text):
        _write_error(options, "Found unexpected non-empty text node in RESX root element")

    for elem in root:
        tag = _local_name(elem.tag)
        if tag == 'data':
            string_name = elem.get('name')
            if not string_name:
                _write_error(options, "Unexpected missing or empty string name in <data> element")
                continue

            if string_name in loc_file:
                _write_error(options, f'Duplicate string value "{string_name}"')

            loc_string = _read_data_element(options, string_name, elem)
            if loc_string is not None and not should_ignore(
                options.ignore_string, options.resx_file_path, string_name
            ):
                loc_file[string_name] = loc_string
        elif tag not in _SKIPPED_ELEMENTS:
            _write_error(options, f"Unexpected RESX element {tag}")

        if _has_text(elem.tail):
            _write_error(options, "Found unexpected non-empty text node in RESX root element")

    return loc_file


def _read_data_element(
    options: ResxReaderOptions,
    string_name: str,
    data_elem: ET.Element,
) -> Optional[LocalizedString]:
    """Read the <value> and <comment> children of a <data> element."""
    found_value = False
    found_comment = False
    value: Optional[str] = None
    comment: Optional[str] = None

    if _has_text(data_elem.text):
        _write_error(options, "Found unexpected non-empty text node in RESX <data> element")

    for child in data_elem:
        tag = _local_name(child.tag)
        if tag == 'value':
            if found_value:
                _write_error(options, f'Duplicate <value> element found in "{string_name}"')
            else:
                found_value = True
                value = _read_text_element(options, child)
                if value and options.newline_normalization:
                    value = convert_newlines(value, options.newline_normalization)
        elif tag == 'comment':
            if found_comment:
                _write_error(options, f'Duplicate <comment> element found in "{string_name}"')
            else:
                found_comment = True
                comment = _read_text_element(options, child)
        else:
            _write_error(options, f"Unexpected RESX element {tag}")

        if _has_text(child.tail):
            _write_error(options, "Found unexpected non-empty text node in RESX <data> element")

    if not found_value:
        _write_error(options, f'Missing string value in <data> element "{string_name}"')
        return None

    if comment is None and options.warn_on_missing_comment:
        options.logger.warning(
            "%s: Missing string comment in <data> element \"%s\"",
            options.resx_file_path, string_name,
        )

    return LocalizedString(value=value or '', comment=comment)


def _read_text_element(options: ResxReaderOptions, elem: ET.Element) -> Optional[str]:
    """Text of a <value> or <comment> element; CDATA is already merged by the parser."""
    if len(elem):
        _write_error(options, f"Unexpected element {_local_name(elem[0].tag)} in RESX <{_local_name(elem.tag)}> element")
        return None
    return elem.text


def _local_name(tag: str) -> str:
    """Strip the namespace from an ElementTree tag ('{ns}schema' -> 'schema')."""
    return tag.rsplit('}', 1)[-1]


def _has_text(text: Optional[str]) -> bool:
    return bool(text and text.strip())


def _write_error(options: ResxReaderOptions, message: str) -> None:
    options.logger.error("%s: %s", options.resx_file_path, message)

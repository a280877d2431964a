#!/usr/bin/env python3
"""
Tests for parse_loc_file dispatch and the RESX parse cache.

Tests verify:
1. Identical RESX requests parse once and return the same object
2. Changed content or a different ignore_string object re-parses
3. Newline normalization is part of the cache key, ignore_missing_comments is not
4. An explicit parser overrides suffix detection
5. loc.json and resjson never touch the cache
6. Failed parses propagate and leave the cache untouched
"""

import pytest

import locparse.format_handlers.resx as resx_module
from locparse import (
    InvalidLocFileError,
    LocalizedString,
    NewlineKind,
    ParseCache,
    ParserKind,
    ResxOptions,
    UnsupportedFileExtensionError,
    UnsupportedParserError,
    parse_loc_file,
)
from locparse.format_handlers import LocJsonHandler, ResJsonHandler


RESX_CONTENT = """<?xml version="1.0" encoding="utf-8"?>
<root>
  <data name="Greeting" xml:space="preserve">
    <value>Hello</value>
    <comment>Start page</comment>
  </data>
</root>"""


@pytest.fixture
def resx_calls(monkeypatch):
    """Count calls to the RESX reader while still parsing for real."""
    calls = []
    real_reader = resx_module.read_resx_as_loc_file

    def counting_reader(content, options):
        calls.append((content, options))
        return real_reader(content, options)

    monkeypatch.setattr(resx_module, "read_resx_as_loc_file", counting_reader)
    return calls


def test_identical_requests_parse_once(make_options, cache, resx_calls):
    """Two identical calls invoke the reader once and return the same object."""
    first = parse_loc_file(make_options("a.resx", RESX_CONTENT), cache)
    second = parse_loc_file(make_options("a.resx", RESX_CONTENT), cache)

    assert len(resx_calls) == 1
    assert second is first
    assert first == {"Greeting": LocalizedString(value="Hello", comment="Start page")}


def test_minimal_document_cached(make_options, cache, resx_calls):
    """An empty <root/> document is cached like any other."""
    first = parse_loc_file(make_options("a.resx", "<root/>"), cache)
    second = parse_loc_file(make_options("a.resx", "<root/>"), cache)

    assert len(resx_calls) == 1
    assert first == second == {}
    assert second is first


def test_changed_content_reparses_and_replaces(make_options, cache, resx_calls):
    """New content re-parses and the new result replaces the cached one."""
    changed = RESX_CONTENT.replace("Hello", "Hi")

    first = parse_loc_file(make_options("a.resx", RESX_CONTENT), cache)
    second = parse_loc_file(make_options("a.resx", changed), cache)
    third = parse_loc_file(make_options("a.resx", changed), cache)

    assert len(resx_calls) == 2
    assert second["Greeting"].value == "Hi"
    assert third is second
    assert third is not first
    assert cache.get("a.resx?none").content == changed


def test_equivalent_predicates_do_not_share_cache(make_options, cache, resx_calls):
    """Behaviorally identical but distinct predicates both parse."""
    def ignore_a(file_path, name):
        return False

    def ignore_b(file_path, name):
        return False

    parse_loc_file(make_options("a.resx", RESX_CONTENT, ignore_string=ignore_a), cache)
    parse_loc_file(make_options("a.resx", RESX_CONTENT, ignore_string=ignore_b), cache)

    assert len(resx_calls) == 2


def test_same_predicate_object_hits_cache(make_options, cache, resx_calls):
    """Reusing one predicate object hits the cache."""
    def ignore_none(file_path, name):
        return False

    first = parse_loc_file(make_options("a.resx", RESX_CONTENT, ignore_string=ignore_none), cache)
    second = parse_loc_file(make_options("a.resx", RESX_CONTENT, ignore_string=ignore_none), cache)

    assert len(resx_calls) == 1
    assert second is first


def test_predicate_versus_no_predicate(make_options, cache, resx_calls):
    """Adding a predicate where there was none is a miss."""
    parse_loc_file(make_options("a.resx", RESX_CONTENT), cache)
    parse_loc_file(make_options("a.resx", RESX_CONTENT, ignore_string=lambda path, name: False), cache)

    assert len(resx_calls) == 2


def test_newline_normalization_is_part_of_key(make_options, cache, resx_calls):
    """Different normalization settings are cached separately."""
    lf = ResxOptions(newline_normalization=NewlineKind.LF)
    crlf = ResxOptions(newline_normalization=NewlineKind.CRLF)

    parse_loc_file(make_options("a.resx", RESX_CONTENT, resx=lf), cache)
    parse_loc_file(make_options("a.resx", RESX_CONTENT, resx=crlf), cache)
    parse_loc_file(make_options("a.resx", RESX_CONTENT, resx=lf), cache)

    assert len(resx_calls) == 2
    assert len(cache) == 2
    assert "a.resx?\n" in cache
    assert "a.resx?\r\n" in cache


def test_ignore_missing_comments_not_part_of_key(make_options, cache, resx_calls):
    """A cached result is reused even if ignore_missing_comments changed."""
    first = parse_loc_file(make_options("a.resx", RESX_CONTENT), cache)
    second = parse_loc_file(
        make_options("a.resx", RESX_CONTENT, resx=ResxOptions(ignore_missing_comments=True)),
        cache,
    )

    assert len(resx_calls) == 1
    assert second is first


def test_different_paths_cached_separately(make_options, cache, resx_calls):
    """The file path is part of the key."""
    parse_loc_file(make_options("a.resx", RESX_CONTENT), cache)
    parse_loc_file(make_options("b.resx", RESX_CONTENT), cache)

    assert len(resx_calls) == 2
    assert len(cache) == 2


def test_options_forwarded_to_reader(make_options, cache, resx_calls, logger):
    """The reader receives path, normalization, negated comment flag, predicate and logger."""
    def ignore_none(file_path, name):
        return False

    options = make_options(
        "dir/a.resx",
        RESX_CONTENT,
        ignore_string=ignore_none,
        resx=ResxOptions(newline_normalization=NewlineKind.CRLF, ignore_missing_comments=True),
    )
    parse_loc_file(options, cache)

    content, reader_options = resx_calls[0]
    assert content == RESX_CONTENT
    assert reader_options.resx_file_path == "dir/a.resx"
    assert reader_options.newline_normalization is NewlineKind.CRLF
    assert reader_options.warn_on_missing_comment is False
    assert reader_options.ignore_string is ignore_none
    assert reader_options.logger is logger


def test_warn_on_missing_comment_defaults_on(make_options, cache, resx_calls):
    parse_loc_file(make_options("a.resx", RESX_CONTENT), cache)

    assert resx_calls[0][1].warn_on_missing_comment is True


def test_explicit_parser_overrides_suffix(make_options, cache, resx_calls):
    """parser='resjson' on a .resx path goes to the resjson handler, uncached."""
    result = parse_loc_file(
        make_options("a.resx", '{"greeting": "Hello"}', parser="resjson"),
        cache,
    )

    assert result == {"greeting": LocalizedString(value="Hello")}
    assert resx_calls == []
    assert len(cache) == 0


def test_explicit_parser_enum(make_options, cache):
    """ParserKind members are accepted as well as their string values."""
    result = parse_loc_file(
        make_options("strings.txt", '{"greeting": {"value": "Hello"}}', parser=ParserKind.LOC_JSON),
        cache,
    )

    assert result == {"greeting": LocalizedString(value="Hello")}


def test_explicit_resx_on_other_suffix_is_cached(make_options, cache, resx_calls):
    """An explicit resx parser caches under the given path."""
    parse_loc_file(make_options("strings.xml", RESX_CONTENT, parser="resx"), cache)
    parse_loc_file(make_options("strings.xml", RESX_CONTENT, parser="resx"), cache)

    assert len(resx_calls) == 1
    assert "strings.xml?none" in cache


@pytest.mark.parametrize("handler_class, path, content", [
    (LocJsonHandler, "a.loc.json", '{"greeting": {"value": "Hello"}}'),
    (ResJsonHandler, "a.resjson", '{"greeting": "Hello"}'),
])
def test_json_formats_never_cached(make_options, cache, monkeypatch, handler_class, path, content):
    """loc.json and resjson parse on every call and leave the cache empty."""
    calls = []
    real_parse = handler_class.parse

    def counting_parse(self, options):
        calls.append(options)
        return real_parse(self, options)

    monkeypatch.setattr(handler_class, "parse", counting_parse)

    first = parse_loc_file(make_options(path, content), cache)
    second = parse_loc_file(make_options(path, content), cache)

    assert len(calls) == 2
    assert first == second
    assert first is not second
    assert len(cache) == 0


def test_full_options_passed_to_json_handlers(make_options, cache, monkeypatch):
    """The loc.json handler receives the caller's options object."""
    received = []
    monkeypatch.setattr(LocJsonHandler, "parse", lambda self, options: received.append(options) or {})

    options = make_options("a.loc.json", "{}")
    parse_loc_file(options, cache)

    assert received == [options]


def test_unsupported_extension(make_options, cache):
    with pytest.raises(UnsupportedFileExtensionError, match="Unsupported file extension in file: a.po"):
        parse_loc_file(make_options("a.po", ""), cache)


def test_unsupported_explicit_parser(make_options, cache):
    """An unknown explicit parser tag is rejected by name."""
    with pytest.raises(UnsupportedParserError) as exc_info:
        parse_loc_file(make_options("a.resx", RESX_CONTENT, parser="xliff"), cache)

    assert str(exc_info.value) == "Unsupported parser: xliff"
    assert len(cache) == 0


def test_failed_parse_leaves_cache_untouched(make_options, cache):
    """A RESX parse error propagates and keeps the previous entry."""
    first = parse_loc_file(make_options("a.resx", RESX_CONTENT), cache)

    with pytest.raises(InvalidLocFileError):
        parse_loc_file(make_options("a.resx", "<root>"), cache)

    entry = cache.get("a.resx?none")
    assert entry.content == RESX_CONTENT
    assert entry.parsed_file is first


def test_failed_first_parse_stores_nothing(make_options, cache):
    with pytest.raises(InvalidLocFileError):
        parse_loc_file(make_options("a.resx", "not xml"), cache)

    assert len(cache) == 0


def test_handler_errors_propagate_unwrapped(make_options, cache):
    """Delegated parse errors reach the caller as raised."""
    with pytest.raises(InvalidLocFileError, match="The loc file is invalid"):
        parse_loc_file(make_options("a.loc.json", '{"greeting": "not an object"}'), cache)


def test_caches_are_independent(make_options, resx_calls):
    """Separate ParseCache objects do not share entries."""
    parse_loc_file(make_options("a.resx", RESX_CONTENT), ParseCache())
    parse_loc_file(make_options("a.resx", RESX_CONTENT), ParseCache())

    assert len(resx_calls) == 2


def test_trailing_newline_path_rejected(make_options, cache):
    """A path with a trailing newline is not a .resx file and is never cached."""
    with pytest.raises(UnsupportedFileExtensionError):
        parse_loc_file(make_options("a.resx\n", RESX_CONTENT), cache)

    assert len(cache) == 0

"""Shared fixtures for locparse tests."""

import logging

import pytest

from locparse import ParseCache, ParseLocFileOptions


@pytest.fixture
def logger():
    """Logger used as the diagnostics sink; records are visible to caplog."""
    return logging.getLogger("locparse.tests")


@pytest.fixture
def cache():
    """Fresh parse cache per test."""
    return ParseCache()


@pytest.fixture
def make_options(logger):
    """Build ParseLocFileOptions with the test logger filled in."""
    def _make(file_path, content, **kwargs):
        return ParseLocFileOptions(file_path=file_path, content=content, logger=logger, **kwargs)
    return _make

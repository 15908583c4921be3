"""Tests for app.config."""

import pytest

from app.config import validate_environment
from app.errors import ConfigurationError


def test_passes_when_set(monkeypatch):
    monkeypatch.setenv("DIARY_TEST_KEY", "x")
    validate_environment(["DIARY_TEST_KEY"])


def test_raises_listing_missing(monkeypatch):
    monkeypatch.delenv("DIARY_TEST_KEY", raising=False)
    monkeypatch.setenv("DIARY_OTHER_KEY", "x")
    with pytest.raises(ConfigurationError, match="DIARY_TEST_KEY"):
        validate_environment(["DIARY_OTHER_KEY", "DIARY_TEST_KEY"])


def test_empty_value_counts_as_missing(monkeypatch):
    monkeypatch.setenv("DIARY_TEST_KEY", "")
    with pytest.raises(ConfigurationError):
        validate_environment(["DIARY_TEST_KEY"])


def test_nothing_required():
    validate_environment([])

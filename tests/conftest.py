"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from cursoralgs.config import get_settings


@pytest.fixture
def settings_env(monkeypatch):
    """Set CURSORALGS_* variables for one test.

    Returns a setter taking field names as keywords. The settings cache is
    cleared after every change and again on teardown.
    """

    def apply(**values: object) -> None:
        for name, value in values.items():
            monkeypatch.setenv(f"CURSORALGS_{name.upper()}", str(value))
        get_settings.cache_clear()

    get_settings.cache_clear()
    yield apply
    get_settings.cache_clear()


@pytest.fixture
def check_categories(settings_env):
    """Enable cursor category checks for the duration of a test."""
    settings_env(check_categories="true")


@pytest.fixture
def ascending() -> list[int]:
    """0..9"""
    return list(range(10))


@pytest.fixture
def ascending_copy() -> list[int]:
    """A second, distinct 0..9."""
    return list(range(10))


@pytest.fixture
def descending() -> list[int]:
    """10..1"""
    return [10 - i for i in range(10)]


@pytest.fixture
def odds() -> list[int]:
    """Odd numbers below 21."""
    return [i for i in range(21) if i % 2 != 0]


@pytest.fixture
def evens() -> list[int]:
    """Even numbers up to 20."""
    return [i for i in range(21) if i % 2 == 0]


@pytest.fixture
def zeros() -> list[int]:
    """Twenty-one zeros."""
    return [0] * 21

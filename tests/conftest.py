"""Global pytest fixtures for consequences."""

import locale
from collections.abc import Iterator

import pytest

pytest_plugins = [
    "tests.fixtures.records",
]


@pytest.fixture
def restore_collation_locale() -> Iterator[str]:
    """Restore the process ``LC_COLLATE`` setting after the test."""
    saved = locale.setlocale(locale.LC_COLLATE)
    yield saved
    locale.setlocale(locale.LC_COLLATE, saved)

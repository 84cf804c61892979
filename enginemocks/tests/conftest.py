"""Shared fixtures for the enginemocks test suite."""

from collections.abc import Iterator

import pytest

from enginemocks.config import get_settings


@pytest.fixture
def fresh_settings() -> Iterator[None]:
    """Drop cached settings before and after the test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

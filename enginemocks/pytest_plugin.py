"""pytest plugin exposing the doubles as fixtures.

Register it from a conftest.py:

    pytest_plugins = ["enginemocks.pytest_plugin"]
"""

from collections.abc import Mapping
from typing import Any

import pytest

from enginemocks import catalog as example_catalog
from enginemocks import factories
from enginemocks.config import Settings, configure_logging, get_settings
from enginemocks.core.filter import Filter
from enginemocks.core.models import ProcessDefinitionStatistics, Task
from enginemocks.fakes import FakeFilterQuery


def pytest_configure(config: pytest.Config) -> None:
    """Configure logging from the fixture settings.

    Debug mode forces DEBUG so builds and query scoping are logged.
    """
    settings = get_settings()
    log_level = "DEBUG" if settings.debug else settings.log_level
    configure_logging(log_level, settings.log_format)


@pytest.fixture
def settings() -> Settings:
    return get_settings()


@pytest.fixture
def catalog() -> Mapping[str, Any]:
    """Read-only view of every example value."""
    return example_catalog.CATALOG


@pytest.fixture
def mock_task() -> Task:
    return factories.create_mock_task()


@pytest.fixture
def mock_filter() -> Filter:
    """The example filter, with validating mutators."""
    return factories.create_mock_filter()


@pytest.fixture
def mock_filter_query() -> FakeFilterQuery:
    return factories.create_mock_filter_query()


@pytest.fixture
def mock_process_definition_statistics() -> list[ProcessDefinitionStatistics]:
    return factories.create_mock_process_definition_statistics()

"""Tests for the fixtures exposed by the pytest plugin."""

from enginemocks import catalog as example_catalog
from enginemocks.config import Settings
from enginemocks.core.filter import ValidatingFilter
from enginemocks.fakes import FakeFilterQuery


class TestPluginFixtures:
    def test_settings_fixture(self, settings: Settings) -> None:
        assert isinstance(settings, Settings)

    def test_catalog_fixture(self, catalog) -> None:
        assert catalog["EXAMPLE_TASK_ID"] == example_catalog.EXAMPLE_TASK_ID
        assert catalog is example_catalog.CATALOG

    def test_mock_task_fixture(self, mock_task) -> None:
        assert mock_task.id == "anId"

    def test_mock_filter_fixture_validates(self, mock_filter) -> None:
        assert isinstance(mock_filter, ValidatingFilter)

    def test_mock_filter_fixture_is_fresh(self, mock_filter) -> None:
        mock_filter.set_name("renamed")
        assert example_catalog.EXAMPLE_FILTER_NAME == "aFilterName"

    def test_mock_filter_query_fixture(self, mock_filter_query: FakeFilterQuery) -> None:
        assert mock_filter_query.count() == 2
        assert mock_filter_query.filter_by_id_calls == []

    def test_statistics_fixture(self, mock_process_definition_statistics) -> None:
        ids = [row.id for row in mock_process_definition_statistics]
        assert ids == ["aProcDefId", "aProcessDefinitionId:2"]

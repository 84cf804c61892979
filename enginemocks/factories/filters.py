"""Factories for filters and the filter query."""

from enginemocks import catalog
from enginemocks.builders import MockFilterBuilder
from enginemocks.core.filter import Filter
from enginemocks.fakes import FakeFilterQuery


def mock_filter() -> MockFilterBuilder:
    """Return a filter builder preloaded with the example filter."""
    return MockFilterBuilder()


def create_mock_filter(filter_id: str = catalog.EXAMPLE_FILTER_ID) -> Filter:
    """Build the example filter with validating mutators.

    Args:
        filter_id: Id of the filter.

    Returns:
        A ValidatingFilter; set_name(None), set_name("") and set_query(None)
        raise ValidationError.
    """
    return mock_filter().with_id(filter_id).validating().build()


def create_mock_filters() -> list[Filter]:
    return [
        create_mock_filter(catalog.EXAMPLE_FILTER_ID),
        create_mock_filter(catalog.ANOTHER_EXAMPLE_FILTER_ID),
    ]


def create_mock_filter_query() -> FakeFilterQuery:
    """Filter query over the two example filters."""
    return FakeFilterQuery(create_mock_filters())

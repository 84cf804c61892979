"""Unit tests for the filter doubles and their mutators."""

import pytest

from enginemocks.core.filter import Filter, ValidatingFilter, ValidationError
from enginemocks.core.query import TaskQuery


@pytest.fixture
def query() -> TaskQuery:
    return TaskQuery().with_task_name("test")


@pytest.fixture
def plain_filter(query: TaskQuery) -> Filter:
    return Filter(
        id="aFilterId",
        resource_type="Task",
        name="aFilterName",
        owner="aFilterOwner",
        query=query,
        properties={"color": "#112233"},
    )


@pytest.fixture
def validating_filter(query: TaskQuery) -> ValidatingFilter:
    return ValidatingFilter(
        id="aFilterId",
        resource_type="Task",
        name="aFilterName",
        owner="aFilterOwner",
        query=query,
        properties={"color": "#112233"},
    )


# ============================================================================
# Plain filter
# ============================================================================


class TestFilter:
    """Plain filter mutators assign whatever they receive."""

    def test_set_name_accepts_none(self, plain_filter: Filter) -> None:
        plain_filter.set_name(None)
        assert plain_filter.name is None

    def test_set_name_accepts_empty(self, plain_filter: Filter) -> None:
        plain_filter.set_name("")
        assert plain_filter.name == ""

    def test_set_query_accepts_none(self, plain_filter: Filter) -> None:
        plain_filter.set_query(None)
        assert plain_filter.query is None

    def test_mutators_chain(self, plain_filter: Filter) -> None:
        result = plain_filter.set_name("renamed").set_owner("someoneElse")

        assert result is plain_filter
        assert plain_filter.name == "renamed"
        assert plain_filter.owner == "someoneElse"

    def test_set_properties_copies_mapping(self, plain_filter: Filter) -> None:
        properties = {"priority": 10}
        plain_filter.set_properties(properties)
        properties["priority"] = 20

        assert plain_filter.properties == {"priority": 10}

    def test_set_properties_none_clears(self, plain_filter: Filter) -> None:
        plain_filter.set_properties(None)
        assert plain_filter.properties == {}


# ============================================================================
# Validating filter
# ============================================================================


class TestValidatingFilter:
    """Validating filter rejects null/empty names and null queries."""

    def test_set_name_none_raises(self, validating_filter: ValidatingFilter) -> None:
        with pytest.raises(ValidationError, match="Name must not be null"):
            validating_filter.set_name(None)

    def test_set_name_empty_raises(self, validating_filter: ValidatingFilter) -> None:
        with pytest.raises(ValidationError, match="Name must not be empty"):
            validating_filter.set_name("")

    def test_set_query_none_raises(self, validating_filter: ValidatingFilter) -> None:
        with pytest.raises(ValidationError, match="Query must not be null"):
            validating_filter.set_query(None)

    def test_rejected_call_leaves_filter_unchanged(
        self, validating_filter: ValidatingFilter, query: TaskQuery
    ) -> None:
        with pytest.raises(ValidationError):
            validating_filter.set_name(None)
        with pytest.raises(ValidationError):
            validating_filter.set_query(None)

        assert validating_filter.name == "aFilterName"
        assert validating_filter.query == query

    def test_error_carries_message(self, validating_filter: ValidatingFilter) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validating_filter.set_name("")

        assert exc_info.value.message == "Name must not be empty"
        assert isinstance(exc_info.value, ValueError)

    def test_valid_values_are_assigned(self, validating_filter: ValidatingFilter) -> None:
        new_query = TaskQuery().with_task_name("other")

        validating_filter.set_name("renamed").set_query(new_query)

        assert validating_filter.name == "renamed"
        assert validating_filter.query == new_query

    def test_owner_and_properties_are_unconstrained(
        self, validating_filter: ValidatingFilter
    ) -> None:
        validating_filter.set_owner(None).set_properties(None)

        assert validating_filter.owner is None
        assert validating_filter.properties == {}


# ============================================================================
# Task query
# ============================================================================


class TestTaskQuery:
    def test_criteria_accumulate(self) -> None:
        query = (
            TaskQuery()
            .with_task_name("test")
            .process_variable_value_equals("foo", "bar")
            .task_variable_value_equals("baz", 1)
        )

        assert query.task_name == "test"
        assert len(query.process_variables) == 1
        assert query.process_variables[0].operator == "eq"
        assert query.task_variables[0].value == 1
        assert query.case_instance_variables == ()

    def test_extending_leaves_source_untouched(self) -> None:
        base = TaskQuery().with_task_name("test")
        extended = base.process_variable_value_equals("foo", "bar")

        assert base.process_variables == ()
        assert extended is not base

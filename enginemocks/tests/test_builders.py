"""Unit tests for the fluent builders."""

from collections.abc import Mapping
from dataclasses import fields
from datetime import datetime
from typing import Any

import pytest

from enginemocks import catalog
from enginemocks.builders import (
    MockCaseDefinitionBuilder,
    MockFilterBuilder,
    MockHistoricVariableInstanceBuilder,
    MockHistoricVariableUpdateBuilder,
    MockJobBuilder,
    MockProcessDefinitionBuilder,
    MockTaskBuilder,
    MockVariableInstanceBuilder,
)
from enginemocks.core.filter import Filter, ValidatingFilter, ValidationError
from enginemocks.core.models import DelegationState
from enginemocks.core.values import INTEGER, integer_value, serialized_object_value, string_value

ALL_BUILDERS = [
    MockTaskBuilder,
    MockVariableInstanceBuilder,
    MockHistoricVariableInstanceBuilder,
    MockHistoricVariableUpdateBuilder,
    MockJobBuilder,
    MockProcessDefinitionBuilder,
    MockCaseDefinitionBuilder,
    MockFilterBuilder,
]


# ============================================================================
# Defaulting
# ============================================================================


class TestDefaulting:
    @pytest.mark.parametrize("builder_class", ALL_BUILDERS)
    def test_every_field_has_a_default(self, builder_class) -> None:
        builder = builder_class()
        entity = builder.build()

        defaults = builder.defaults()
        for field in fields(entity):
            if field.name in ("value", "type_name"):
                continue
            expected = defaults[field.name]
            if isinstance(expected, Mapping):
                expected = dict(expected)
            assert getattr(entity, field.name) == expected, field.name

    def test_task_defaults(self) -> None:
        task = MockTaskBuilder().build()

        assert task.id == "anId"
        assert task.name == "aName"
        assert task.assignee == "anAssignee"
        assert task.create_time == datetime(2013, 1, 23, 13, 42, 42)
        assert task.due_date == datetime(2013, 1, 23, 13, 42, 43)
        assert task.follow_up_date == datetime(2013, 1, 23, 13, 42, 44)
        assert task.delegation_state is DelegationState.RESOLVED
        assert task.priority == 42
        assert task.process_instance_id == catalog.EXAMPLE_PROCESS_INSTANCE_ID
        assert task.case_execution_id == catalog.EXAMPLE_CASE_EXECUTION_ID
        assert task.form_key == "aFormKey"
        assert task.suspended is False

    def test_process_definition_defaults(self) -> None:
        definition = MockProcessDefinitionBuilder().build()

        assert definition.id == "aProcDefId"
        assert definition.version == 42
        assert definition.diagram_resource_name == "aResourceName.png"
        assert definition.deployment_id == catalog.EXAMPLE_DEPLOYMENT_ID
        assert definition.suspended is True

    def test_case_definition_defaults(self) -> None:
        definition = MockCaseDefinitionBuilder().build()

        assert definition.id == catalog.EXAMPLE_CASE_DEFINITION_ID
        assert definition.version == 1

    def test_case_definition_has_no_description_or_diagram(self) -> None:
        definition = MockCaseDefinitionBuilder().build()

        assert definition.description is None
        assert definition.diagram_resource_name is None

    def test_case_definition_description_and_diagram_overrides(self) -> None:
        definition = (
            MockCaseDefinitionBuilder()
            .with_description("aCaseDescription")
            .with_diagram_resource_name("aCaseDiagram.png")
            .build()
        )

        assert definition.description == "aCaseDescription"
        assert definition.diagram_resource_name == "aCaseDiagram.png"

    def test_job_defaults(self) -> None:
        job = MockJobBuilder().build()

        assert job.id == "aJobId"
        assert job.retries == 3
        assert job.exception_message == ""
        assert job.due_date == datetime(2013, 4, 23, 13, 42, 43)
        assert job.job_definition_id == catalog.EXAMPLE_JOB_DEFINITION_ID

    def test_historic_variable_instance_leaves_other_scopes_empty(self) -> None:
        variable = MockHistoricVariableInstanceBuilder().build()

        assert variable.process_instance_id == catalog.EXAMPLE_VARIABLE_INSTANCE_PROC_INST_ID
        assert variable.execution_id is None
        assert variable.case_instance_id is None
        assert variable.task_id is None


# ============================================================================
# Override precedence
# ============================================================================


class TestOverrides:
    def test_override_wins(self) -> None:
        task = MockTaskBuilder().with_name("other").with_priority(7).build()

        assert task.name == "other"
        assert task.priority == 7
        assert task.id == catalog.EXAMPLE_TASK_ID

    def test_explicit_none_wins(self) -> None:
        task = (
            MockTaskBuilder()
            .with_assignee(None)
            .with_due_date(None)
            .with_delegation_state(None)
            .build()
        )

        assert task.assignee is None
        assert task.due_date is None
        assert task.delegation_state is None

    def test_definition_without_diagram(self) -> None:
        definition = MockProcessDefinitionBuilder().with_diagram_resource_name(None).build()
        assert definition.diagram_resource_name is None

    def test_setters_return_same_builder(self) -> None:
        builder = MockJobBuilder()
        assert builder.with_retries(1) is builder

    def test_builders_are_independent(self) -> None:
        first = MockTaskBuilder().with_name("first").build()
        second = MockTaskBuilder().build()

        assert first.name == "first"
        assert second.name == catalog.EXAMPLE_TASK_NAME

    def test_each_build_returns_new_double(self) -> None:
        assert MockTaskBuilder().build() is not MockTaskBuilder().build()

    @pytest.mark.parametrize(
        "builder_class, setter",
        [
            (builder_class, name)
            for builder_class in ALL_BUILDERS
            for name in sorted(dir(builder_class))
            if name.startswith("with_")
        ],
    )
    def test_every_setter_writes_its_own_field(self, builder_class, setter: str) -> None:
        field_name = setter.removeprefix("with_")
        value = _sentinel_for(field_name)

        built = getattr(builder_class(), setter)(value).build()

        assert getattr(built, field_name) == value
        for other in fields(built):
            if other.name in (field_name, "value", "type_name", "properties"):
                continue
            assert getattr(built, other.name) == builder_class().defaults()[other.name]


def _sentinel_for(field_name: str) -> Any:
    if field_name == "typed_value":
        return string_value("overriddenValue")
    if field_name == "properties":
        return {"overridden": True}
    return f"overridden-{field_name}"


class TestJobBuilder:
    """Retries and exception message are independent."""

    def test_negative_retries_without_exception(self) -> None:
        job = MockJobBuilder().with_retries(catalog.EXAMPLE_NEGATIVE_JOB_RETRIES).build()

        assert job.retries == -3
        assert job.exception_message == ""

    def test_exception_with_retries_left(self) -> None:
        job = MockJobBuilder().with_exception_message(catalog.EXAMPLE_EXCEPTION_MESSAGE).build()

        assert job.retries == catalog.EXAMPLE_JOB_RETRIES
        assert job.exception_message == "aExceptionMessage"

    def test_both_toggles(self) -> None:
        job = (
            MockJobBuilder()
            .with_retries(-3)
            .with_exception_message("aExceptionMessage")
            .build()
        )

        assert job.retries == -3
        assert job.exception_message == "aExceptionMessage"


# ============================================================================
# Variables
# ============================================================================


class TestVariableBuilders:
    def test_value_and_type_taken_from_typed_value(self) -> None:
        variable = MockVariableInstanceBuilder().build()

        assert variable.typed_value == catalog.EXAMPLE_PRIMITIVE_VARIABLE_VALUE
        assert variable.value == "aVariableInstanceValue"
        assert variable.type_name == "String"

    def test_overridden_typed_value(self) -> None:
        variable = MockVariableInstanceBuilder().with_typed_value(integer_value(5)).build()

        assert variable.value == 5
        assert variable.type_name == INTEGER

    def test_serialized_value(self) -> None:
        typed_value = serialized_object_value(
            catalog.EXAMPLE_VARIABLE_INSTANCE_SERIALIZED_VALUE,
            catalog.EXAMPLE_SPIN_DATA_FORMAT,
            catalog.EXAMPLE_SPIN_ROOT_TYPE,
        )
        variable = (
            MockHistoricVariableInstanceBuilder()
            .with_id(catalog.SPIN_VARIABLE_INSTANCE_ID)
            .with_typed_value(typed_value)
            .build()
        )

        assert variable.id == "spinVariableInstanceId"
        assert variable.type_name == "Object"
        assert variable.value is None
        assert variable.typed_value.serialization_data_format == "aDataFormatId"

    def test_missing_typed_value(self) -> None:
        variable = MockVariableInstanceBuilder().with_typed_value(None).build()

        assert variable.value is None
        assert variable.type_name is None

    def test_error_message(self) -> None:
        variable = (
            MockVariableInstanceBuilder()
            .with_typed_value(None)
            .with_error_message(catalog.EXAMPLE_VARIABLE_INSTANCE_ERROR_MESSAGE)
            .build()
        )
        assert variable.error_message == "aVariableInstanceErrorMessage"

    def test_historic_variable_update(self) -> None:
        update = MockHistoricVariableUpdateBuilder().with_revision(2).build()

        assert update.variable_name == "aVariableName"
        assert update.time == datetime(2014, 1, 1)
        assert update.revision == 2
        assert update.type_name == "String"


# ============================================================================
# Filters
# ============================================================================


class TestFilterBuilder:
    def test_plain_filter_by_default(self) -> None:
        built = MockFilterBuilder().build()

        assert type(built) is Filter
        built.set_name(None)
        assert built.name is None

    def test_validating_filter(self) -> None:
        built = MockFilterBuilder().validating().build()

        assert isinstance(built, ValidatingFilter)
        with pytest.raises(ValidationError, match="Name must not be null"):
            built.set_name(None)

    def test_properties_are_copied(self) -> None:
        built = MockFilterBuilder().build()
        built.properties["color"] = "#000000"

        assert catalog.EXAMPLE_FILTER_PROPERTIES["color"] == "#112233"
        assert isinstance(built.properties, dict)

    def test_overrides(self) -> None:
        built = (
            MockFilterBuilder()
            .with_id(catalog.ANOTHER_EXAMPLE_FILTER_ID)
            .with_owner(None)
            .with_properties({"priority": 1})
            .build()
        )

        assert built.id == "anotherFilterId"
        assert built.owner is None
        assert built.properties == {"priority": 1}

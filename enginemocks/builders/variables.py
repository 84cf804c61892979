"""Builders for runtime and historic variable doubles.

A variable double carries its typed value plus the plain ``value`` and
``type_name`` of that typed value, both derived when the double is built.
"""

from datetime import datetime
from typing import Any, Self, TypeVar

from enginemocks import catalog
from enginemocks.core.history import HistoricVariableInstance, HistoricVariableUpdate
from enginemocks.core.models import VariableInstance
from enginemocks.core.values import TypedValue
from enginemocks.dates import parse_date

from .base import MockBuilder

V = TypeVar("V", VariableInstance, HistoricVariableInstance, HistoricVariableUpdate)


def _unwrap_typed_value(fields: dict[str, Any]) -> dict[str, Any]:
    typed_value: TypedValue | None = fields["typed_value"]
    fields["value"] = typed_value.value if typed_value is not None else None
    fields["type_name"] = typed_value.type_name if typed_value is not None else None
    return fields


class _VariableBuilder(MockBuilder[V]):
    """Setters shared by every variable builder."""

    def _prepare(self, fields: dict[str, Any]) -> dict[str, Any]:
        return _unwrap_typed_value(fields)

    def with_id(self, id: str | None) -> Self:
        return self._with("id", id)

    def with_typed_value(self, typed_value: TypedValue | None) -> Self:
        return self._with("typed_value", typed_value)

    def with_process_instance_id(self, process_instance_id: str | None) -> Self:
        return self._with("process_instance_id", process_instance_id)

    def with_execution_id(self, execution_id: str | None) -> Self:
        return self._with("execution_id", execution_id)

    def with_task_id(self, task_id: str | None) -> Self:
        return self._with("task_id", task_id)

    def with_activity_instance_id(self, activity_instance_id: str | None) -> Self:
        return self._with("activity_instance_id", activity_instance_id)

    def with_error_message(self, error_message: str | None) -> Self:
        return self._with("error_message", error_message)


class _ScopedVariableBuilder(_VariableBuilder[V]):
    """Variable builders whose doubles also carry case scope ids."""

    def with_name(self, name: str | None) -> Self:
        return self._with("name", name)

    def with_case_instance_id(self, case_instance_id: str | None) -> Self:
        return self._with("case_instance_id", case_instance_id)

    def with_case_execution_id(self, case_execution_id: str | None) -> Self:
        return self._with("case_execution_id", case_execution_id)


class MockVariableInstanceBuilder(_ScopedVariableBuilder[VariableInstance]):
    model = VariableInstance

    def defaults(self) -> dict[str, Any]:
        return {
            "id": catalog.EXAMPLE_VARIABLE_INSTANCE_ID,
            "name": catalog.EXAMPLE_VARIABLE_INSTANCE_NAME,
            "typed_value": catalog.EXAMPLE_PRIMITIVE_VARIABLE_VALUE,
            "process_instance_id": catalog.EXAMPLE_VARIABLE_INSTANCE_PROC_INST_ID,
            "execution_id": catalog.EXAMPLE_VARIABLE_INSTANCE_EXECUTION_ID,
            "case_instance_id": catalog.EXAMPLE_VARIABLE_INSTANCE_CASE_INST_ID,
            "case_execution_id": catalog.EXAMPLE_VARIABLE_INSTANCE_CASE_EXECUTION_ID,
            "task_id": catalog.EXAMPLE_VARIABLE_INSTANCE_TASK_ID,
            "activity_instance_id": catalog.EXAMPLE_VARIABLE_INSTANCE_ACTIVITY_INSTANCE_ID,
            "error_message": None,
        }


class MockHistoricVariableInstanceBuilder(_ScopedVariableBuilder[HistoricVariableInstance]):
    """Builds historic variable instances.

    Only the process scope is populated by default; execution, case and
    task ids stay None unless assigned.
    """

    model = HistoricVariableInstance

    def defaults(self) -> dict[str, Any]:
        return {
            "id": catalog.EXAMPLE_VARIABLE_INSTANCE_ID,
            "name": catalog.EXAMPLE_VARIABLE_INSTANCE_NAME,
            "typed_value": catalog.EXAMPLE_PRIMITIVE_VARIABLE_VALUE,
            "process_instance_id": catalog.EXAMPLE_VARIABLE_INSTANCE_PROC_INST_ID,
            "execution_id": None,
            "case_instance_id": None,
            "case_execution_id": None,
            "task_id": None,
            "activity_instance_id": catalog.EXAMPLE_VARIABLE_INSTANCE_ACTIVITY_INSTANCE_ID,
            "error_message": None,
        }


class MockHistoricVariableUpdateBuilder(_VariableBuilder[HistoricVariableUpdate]):
    model = HistoricVariableUpdate

    def defaults(self) -> dict[str, Any]:
        return {
            "id": catalog.EXAMPLE_HISTORIC_VAR_UPDATE_ID,
            "process_instance_id": catalog.EXAMPLE_HISTORIC_VAR_UPDATE_PROC_INST_ID,
            "activity_instance_id": catalog.EXAMPLE_HISTORIC_VAR_UPDATE_ACT_INST_ID,
            "execution_id": catalog.EXAMPLE_HISTORIC_VAR_UPDATE_EXEC_ID,
            "task_id": catalog.EXAMPLE_HISTORIC_VAR_UPDATE_TASK_ID,
            "time": parse_date(catalog.EXAMPLE_HISTORIC_VAR_UPDATE_TIME),
            "variable_name": catalog.EXAMPLE_HISTORIC_VAR_UPDATE_NAME,
            "typed_value": catalog.EXAMPLE_PRIMITIVE_VARIABLE_VALUE,
            "revision": catalog.EXAMPLE_HISTORIC_VAR_UPDATE_REVISION,
            "error_message": None,
        }

    def with_time(self, time: datetime | None) -> "MockHistoricVariableUpdateBuilder":
        return self._with("time", time)

    def with_variable_name(self, name: str | None) -> "MockHistoricVariableUpdateBuilder":
        return self._with("variable_name", name)

    def with_revision(self, revision: int) -> "MockHistoricVariableUpdateBuilder":
        return self._with("revision", revision)

"""The task query a filter carries.

Only the criteria the example filter uses are modeled: a task name and
variable equality conditions on the process, case instance and task scopes.
"""

from dataclasses import dataclass, field, replace
from typing import Any


@dataclass(frozen=True)
class VariableCondition:
    """A single variable criterion, e.g. ``foo eq "bar"``."""

    name: str
    operator: str
    value: Any


@dataclass(frozen=True)
class TaskQuery:
    """Immutable task query.

    The ``with_*`` methods return a new query, so a catalog query can be
    extended without affecting other filters that share it.
    """

    task_name: str | None = None
    process_variables: tuple[VariableCondition, ...] = field(default_factory=tuple)
    case_instance_variables: tuple[VariableCondition, ...] = field(default_factory=tuple)
    task_variables: tuple[VariableCondition, ...] = field(default_factory=tuple)

    def with_task_name(self, name: str) -> "TaskQuery":
        return replace(self, task_name=name)

    def process_variable_value_equals(self, name: str, value: Any) -> "TaskQuery":
        condition = VariableCondition(name, "eq", value)
        return replace(self, process_variables=self.process_variables + (condition,))

    def case_instance_variable_value_equals(self, name: str, value: Any) -> "TaskQuery":
        condition = VariableCondition(name, "eq", value)
        return replace(
            self, case_instance_variables=self.case_instance_variables + (condition,)
        )

    def task_variable_value_equals(self, name: str, value: Any) -> "TaskQuery":
        condition = VariableCondition(name, "eq", value)
        return replace(self, task_variables=self.task_variables + (condition,))

"""Doubles for the engine's history entities.

Finished and unfinished history records share one type; unfinished records
carry ``None`` end times and durations.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from .values import TypedValue


@dataclass(frozen=True)
class HistoricProcessInstance:
    id: str
    business_key: str | None
    process_definition_id: str
    delete_reason: str | None
    start_time: datetime
    end_time: datetime | None
    duration_in_millis: int | None
    start_user_id: str | None = None
    start_activity_id: str | None = None
    super_process_instance_id: str | None = None
    case_instance_id: str | None = None


@dataclass(frozen=True)
class HistoricCaseInstance:
    """History of a case instance.

    A case instance that is not closed has no close time and no duration.
    """

    id: str
    business_key: str | None
    case_definition_id: str
    create_time: datetime
    close_time: datetime | None
    duration_in_millis: int | None
    create_user_id: str | None
    super_case_instance_id: str | None
    active: bool
    completed: bool
    terminated: bool
    closed: bool


@dataclass(frozen=True)
class HistoricActivityInstance:
    id: str
    parent_activity_instance_id: str
    activity_id: str
    activity_name: str
    activity_type: str
    process_definition_id: str
    process_instance_id: str
    execution_id: str
    task_id: str | None
    called_process_instance_id: str | None
    assignee: str | None
    start_time: datetime
    end_time: datetime | None
    duration_in_millis: int | None
    canceled: bool
    complete_scope: bool


@dataclass(frozen=True)
class HistoricCaseActivityInstance:
    id: str
    parent_case_activity_instance_id: str
    case_activity_id: str
    case_activity_name: str
    case_definition_id: str
    case_instance_id: str
    case_execution_id: str
    task_id: str | None
    called_process_instance_id: str | None
    called_case_instance_id: str | None
    create_time: datetime
    end_time: datetime | None
    duration_in_millis: int | None
    available: bool
    enabled: bool
    disabled: bool
    active: bool
    completed: bool
    terminated: bool


@dataclass(frozen=True)
class HistoricActivityStatistics:
    """Per-activity counts over finished and running instances."""

    id: str
    instances: int
    canceled: int
    finished: int
    complete_scope: int


@dataclass(frozen=True)
class HistoricTaskInstance:
    id: str
    process_definition_id: str
    process_instance_id: str
    execution_id: str
    activity_instance_id: str
    name: str
    description: str
    delete_reason: str | None
    owner: str | None
    assignee: str | None
    start_time: datetime
    end_time: datetime | None
    duration_in_millis: int | None
    task_definition_key: str
    priority: int
    due_date: datetime | None
    follow_up_date: datetime | None
    parent_task_id: str | None
    case_definition_id: str | None
    case_instance_id: str | None
    case_execution_id: str | None


@dataclass(frozen=True)
class HistoricVariableInstance:
    """Latest historic state of a variable."""

    id: str | None
    name: str | None
    typed_value: TypedValue | None
    value: Any
    type_name: str | None
    process_instance_id: str | None
    execution_id: str | None
    case_instance_id: str | None
    case_execution_id: str | None
    task_id: str | None
    activity_instance_id: str | None
    error_message: str | None


@dataclass(frozen=True)
class HistoricVariableUpdate:
    """A historic detail recording one change of a variable."""

    id: str | None
    process_instance_id: str | None
    activity_instance_id: str | None
    execution_id: str | None
    task_id: str | None
    time: datetime | None
    variable_name: str | None
    typed_value: TypedValue | None
    value: Any
    type_name: str | None
    revision: int
    error_message: str | None


@dataclass(frozen=True)
class HistoricFormField:
    """A historic detail recording a submitted form field."""

    id: str
    process_instance_id: str
    activity_instance_id: str
    execution_id: str
    task_id: str
    time: datetime
    field_id: str
    field_value: Any


HistoricDetail = HistoricVariableUpdate | HistoricFormField


@dataclass(frozen=True)
class HistoricIncident:
    """History of an incident.

    Exactly one of ``open``, ``deleted`` and ``resolved`` is true.
    """

    id: str
    create_time: datetime
    end_time: datetime | None
    incident_type: str
    execution_id: str
    activity_id: str
    process_instance_id: str
    process_definition_id: str
    cause_incident_id: str
    root_cause_incident_id: str
    configuration: str
    incident_message: str
    open: bool
    deleted: bool
    resolved: bool

    def __post_init__(self) -> None:
        """Validate that the incident is in exactly one state."""
        states = [self.open, self.deleted, self.resolved]
        if states.count(True) != 1:
            raise ValueError(
                "exactly one of open, deleted and resolved must be true, got "
                f"open={self.open} deleted={self.deleted} resolved={self.resolved}"
            )


@dataclass(frozen=True)
class UserOperationLogEntry:
    """Audit record of an operation a user performed."""

    id: str
    process_definition_id: str | None
    process_definition_key: str | None
    process_instance_id: str | None
    execution_id: str | None
    case_definition_id: str | None
    case_instance_id: str | None
    case_execution_id: str | None
    task_id: str | None
    user_id: str
    timestamp: datetime
    operation_id: str
    operation_type: str
    entity_type: str
    property: str | None
    org_value: str | None
    new_value: str | None

"""Doubles for the engine's runtime, repository and identity entities.

All models in this module use only Python standard library types. Every
double is a frozen snapshot: once built, its attributes never change.
Historic entities live in ``history.py``, filters in ``filter.py``.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Any

from .values import TypedValue


class DelegationState(Enum):
    """Delegation state of a task."""

    PENDING = "PENDING"
    RESOLVED = "RESOLVED"


class IdentityLinkType(Enum):
    """Relation between a task and a user or group."""

    ASSIGNEE = "assignee"
    CANDIDATE = "candidate"
    OWNER = "owner"


class AuthorizationType(IntEnum):
    """Authorization kinds, with the engine's integer codes."""

    GLOBAL = 0
    GRANT = 1
    REVOKE = 2


class Permission(Enum):
    """Opaque capability flags an authorization grants or revokes."""

    NONE = 0
    READ = 2
    UPDATE = 4
    CREATE = 8
    DELETE = 16
    ACCESS = 32
    ALL = 2**31 - 1


# user id of global authorizations
ANY = "*"

# entity type names used by filters and the user operation log
ENTITY_TYPE_TASK = "Task"

# ============================================================================
# Tasks
# ============================================================================


@dataclass(frozen=True)
class Task:
    """A user task."""

    id: str | None
    name: str | None
    assignee: str | None
    create_time: datetime | None
    due_date: datetime | None
    follow_up_date: datetime | None
    delegation_state: DelegationState | None
    description: str | None
    execution_id: str | None
    owner: str | None
    parent_task_id: str | None
    priority: int
    process_definition_id: str | None
    process_instance_id: str | None
    case_definition_id: str | None
    case_instance_id: str | None
    case_execution_id: str | None
    task_definition_key: str | None
    form_key: str | None
    suspended: bool


@dataclass(frozen=True)
class Comment:
    """A comment on a task."""

    id: str
    task_id: str
    user_id: str
    time: datetime
    full_message: str


@dataclass(frozen=True)
class Attachment:
    """A file or URL attached to a task."""

    id: str
    name: str
    description: str
    type: str
    url: str
    task_id: str
    process_instance_id: str


@dataclass(frozen=True)
class IdentityLink:
    """Links a task to a user or group."""

    task_id: str
    type: IdentityLinkType
    user_id: str | None = None
    group_id: str | None = None


# ============================================================================
# Forms
# ============================================================================


@dataclass(frozen=True)
class FormType:
    name: str


@dataclass(frozen=True)
class FormProperty:
    """A form property of a legacy (property based) form."""

    id: str
    name: str
    type: FormType
    value: str | None
    readable: bool
    writable: bool
    required: bool


@dataclass(frozen=True)
class FormField:
    """A field of a generated form."""

    id: str
    label: str
    type: FormType
    default_value: Any


@dataclass(frozen=True)
class TaskFormData:
    """Form metadata of a task.

    A form either declares properties or fields; the other tuple is empty.
    """

    form_key: str | None
    deployment_id: str
    form_properties: tuple[FormProperty, ...] = ()
    form_fields: tuple[FormField, ...] = ()


@dataclass(frozen=True)
class StartFormData(TaskFormData):
    """Form metadata of a process definition's start event."""

    process_definition: "ProcessDefinition | None" = None


# ============================================================================
# Runtime
# ============================================================================


@dataclass(frozen=True)
class ProcessInstance:
    id: str
    business_key: str | None
    case_instance_id: str | None
    process_definition_id: str
    process_instance_id: str
    suspended: bool
    ended: bool


@dataclass(frozen=True)
class Execution:
    id: str
    process_instance_id: str
    ended: bool


@dataclass(frozen=True)
class EventSubscription:
    """A message or signal subscription of an execution."""

    id: str
    event_type: str
    event_name: str
    execution_id: str
    process_instance_id: str
    activity_id: str
    created: datetime


@dataclass(frozen=True)
class CaseInstance:
    id: str
    business_key: str | None
    case_definition_id: str
    active: bool
    completed: bool
    terminated: bool


@dataclass(frozen=True)
class CaseExecution:
    id: str
    case_instance_id: str
    parent_id: str | None
    case_definition_id: str
    activity_id: str
    activity_name: str
    active: bool
    enabled: bool
    disabled: bool


@dataclass(frozen=True)
class VariableInstance:
    """A runtime variable.

    ``value`` and ``type_name`` are copied from ``typed_value`` when the
    double is built.
    """

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
class Job:
    """An asynchronous job.

    Negative ``retries`` signal a failed job with no retries left; an empty
    ``exception_message`` means the job has not failed.
    """

    id: str | None
    job_definition_id: str | None
    process_instance_id: str | None
    execution_id: str | None
    process_definition_id: str | None
    process_definition_key: str | None
    retries: int
    exception_message: str | None
    due_date: datetime | None
    suspended: bool


@dataclass(frozen=True)
class JobDefinition:
    id: str
    process_definition_id: str
    process_definition_key: str
    job_type: str
    job_configuration: str
    activity_id: str
    suspended: bool


@dataclass(frozen=True)
class Incident:
    """An open incident, e.g. a job that ran out of retries."""

    id: str
    incident_timestamp: datetime
    incident_type: str
    execution_id: str
    activity_id: str
    process_instance_id: str
    process_definition_id: str
    cause_incident_id: str
    root_cause_incident_id: str
    configuration: str
    incident_message: str


# ============================================================================
# Repository
# ============================================================================


@dataclass(frozen=True)
class ProcessDefinition:
    id: str | None
    key: str | None
    name: str | None
    category: str | None
    description: str | None
    version: int
    resource_name: str | None
    diagram_resource_name: str | None
    deployment_id: str | None
    suspended: bool


@dataclass(frozen=True)
class CaseDefinition:
    id: str | None
    key: str | None
    name: str | None
    category: str | None
    description: str | None
    version: int
    resource_name: str | None
    diagram_resource_name: str | None
    deployment_id: str | None


@dataclass(frozen=True)
class Deployment:
    id: str
    name: str
    deployment_time: datetime


@dataclass(frozen=True)
class Resource:
    """A file belonging to a deployment."""

    id: str
    name: str
    deployment_id: str


@dataclass(frozen=True)
class ProcessApplicationInfo:
    """Deployment metadata of a process application."""

    name: str
    properties: Mapping[str, str]  # immutable at runtime

    PROP_SERVLET_CONTEXT_PATH = "servletContextPath"

    def __post_init__(self) -> None:
        """Convert properties dict to read-only proxy."""
        if isinstance(self.properties, dict):
            object.__setattr__(self, "properties", MappingProxyType(self.properties))


# ============================================================================
# Statistics
# ============================================================================


@dataclass(frozen=True)
class IncidentStatistics:
    incident_type: str
    incident_count: int


@dataclass(frozen=True)
class ProcessDefinitionStatistics:
    """Aggregated instance, job and incident counts of a definition."""

    id: str
    name: str
    key: str
    failed_jobs: int
    instances: int
    incident_statistics: tuple[IncidentStatistics, ...]  # immutable for frozen dataclass


@dataclass(frozen=True)
class ActivityStatistics:
    id: str
    failed_jobs: int
    instances: int
    incident_statistics: tuple[IncidentStatistics, ...]


# ============================================================================
# Identity
# ============================================================================


@dataclass(frozen=True)
class Group:
    id: str
    name: str
    type: str | None = None


@dataclass(frozen=True)
class User:
    id: str
    first_name: str
    last_name: str
    email: str
    password: str


@dataclass(frozen=True)
class Authentication:
    """The currently authenticated user."""

    user_id: str
    group_ids: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Authorization:
    """Grants or revokes permissions on a resource.

    Global authorizations apply to every user (``user_id == ANY``).
    """

    id: str
    authorization_type: AuthorizationType
    user_id: str | None
    resource_type: int
    resource_id: str
    permissions: tuple[Permission, ...]
    group_id: str | None = None

    def __post_init__(self) -> None:
        """Validate the owner of global authorizations."""
        if self.authorization_type == AuthorizationType.GLOBAL and self.user_id != ANY:
            raise ValueError(
                f"global authorizations must belong to {ANY!r}, got {self.user_id!r}"
            )

"""Domain doubles for the process engine.

This package contains zero external dependencies: plain dataclasses that
stand in for the engine's entities, the typed value union, the filter
doubles and the query ports.
"""

from .filter import Filter, ValidatingFilter, ValidationError
from .history import (
    HistoricActivityInstance,
    HistoricActivityStatistics,
    HistoricCaseActivityInstance,
    HistoricCaseInstance,
    HistoricDetail,
    HistoricFormField,
    HistoricIncident,
    HistoricProcessInstance,
    HistoricTaskInstance,
    HistoricVariableInstance,
    HistoricVariableUpdate,
    UserOperationLogEntry,
)
from .models import (
    ANY,
    ActivityStatistics,
    Attachment,
    Authentication,
    Authorization,
    AuthorizationType,
    CaseDefinition,
    CaseExecution,
    CaseInstance,
    Comment,
    DelegationState,
    Deployment,
    EventSubscription,
    Execution,
    FormField,
    FormProperty,
    FormType,
    Group,
    IdentityLink,
    IdentityLinkType,
    Incident,
    IncidentStatistics,
    Job,
    JobDefinition,
    Permission,
    ProcessApplicationInfo,
    ProcessDefinition,
    ProcessDefinitionStatistics,
    ProcessInstance,
    Resource,
    StartFormData,
    Task,
    TaskFormData,
    User,
    VariableInstance,
)
from .ports import FilterQueryPort, QueryPort
from .query import TaskQuery, VariableCondition
from .values import PrimitiveValue, SerializedObjectValue, TypedValue

__all__ = [
    "ANY",
    "ActivityStatistics",
    "Attachment",
    "Authentication",
    "Authorization",
    "AuthorizationType",
    "CaseDefinition",
    "CaseExecution",
    "CaseInstance",
    "Comment",
    "DelegationState",
    "Deployment",
    "EventSubscription",
    "Execution",
    "Filter",
    "FilterQueryPort",
    "FormField",
    "FormProperty",
    "FormType",
    "Group",
    "HistoricActivityInstance",
    "HistoricActivityStatistics",
    "HistoricCaseActivityInstance",
    "HistoricCaseInstance",
    "HistoricDetail",
    "HistoricFormField",
    "HistoricIncident",
    "HistoricProcessInstance",
    "HistoricTaskInstance",
    "HistoricVariableInstance",
    "HistoricVariableUpdate",
    "IdentityLink",
    "IdentityLinkType",
    "Incident",
    "IncidentStatistics",
    "Job",
    "JobDefinition",
    "Permission",
    "PrimitiveValue",
    "ProcessApplicationInfo",
    "ProcessDefinition",
    "ProcessDefinitionStatistics",
    "ProcessInstance",
    "QueryPort",
    "Resource",
    "SerializedObjectValue",
    "StartFormData",
    "Task",
    "TaskFormData",
    "TaskQuery",
    "TypedValue",
    "User",
    "UserOperationLogEntry",
    "ValidatingFilter",
    "ValidationError",
    "VariableCondition",
    "VariableInstance",
]

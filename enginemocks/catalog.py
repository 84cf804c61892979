"""Canonical example values shared by every builder and factory.

Doubles that reference the same logical entity read its id from here, so a
task's ``process_instance_id`` and the example process instance's ``id`` agree
byte for byte. Timestamps are kept as literals and parsed when a double is
built (see ``enginemocks.dates``).

``CATALOG`` is a read-only view of every constant in this module and
``lookup`` resolves a value by its symbolic name.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from enginemocks.core.models import ENTITY_TYPE_TASK, DelegationState, Permission
from enginemocks.core.query import TaskQuery
from enginemocks.core.values import string_value
from enginemocks.dto import TaskQueryDto

# general non existing id
NON_EXISTING_ID = "nonExistingId"

# engine
EXAMPLE_PROCESS_ENGINE_NAME = "default"
ANOTHER_EXAMPLE_PROCESS_ENGINE_NAME = "anotherEngineName"
NON_EXISTING_PROCESS_ENGINE_NAME = "aNonExistingEngineName"

# task properties
EXAMPLE_TASK_ID = "anId"
EXAMPLE_TASK_NAME = "aName"
EXAMPLE_TASK_ASSIGNEE_NAME = "anAssignee"
EXAMPLE_TASK_CREATE_TIME = "2013-01-23T13:42:42"
EXAMPLE_TASK_DUE_DATE = "2013-01-23T13:42:43"
EXAMPLE_FOLLOW_UP_DATE = "2013-01-23T13:42:44"
EXAMPLE_TASK_DELEGATION_STATE = DelegationState.RESOLVED
EXAMPLE_TASK_DESCRIPTION = "aDescription"
EXAMPLE_TASK_EXECUTION_ID = "anExecution"
EXAMPLE_TASK_OWNER = "anOwner"
EXAMPLE_TASK_PARENT_TASK_ID = "aParentId"
EXAMPLE_TASK_PRIORITY = 42
EXAMPLE_TASK_DEFINITION_KEY = "aTaskDefinitionKey"
EXAMPLE_TASK_SUSPENSION_STATE = False

# task comment
EXAMPLE_TASK_COMMENT_ID = "aTaskCommentId"
EXAMPLE_TASK_COMMENT_FULL_MESSAGE = "aTaskCommentFullMessage"
EXAMPLE_TASK_COMMENT_TIME = "2014-04-24T14:10:44"

# task attachment
EXAMPLE_TASK_ATTACHMENT_ID = "aTaskAttachmentId"
EXAMPLE_TASK_ATTACHMENT_NAME = "aTaskAttachmentName"
EXAMPLE_TASK_ATTACHMENT_DESCRIPTION = "aTaskAttachmentDescription"
EXAMPLE_TASK_ATTACHMENT_TYPE = "aTaskAttachmentType"
EXAMPLE_TASK_ATTACHMENT_URL = "aTaskAttachmentUrl"

# form data
EXAMPLE_FORM_KEY = "aFormKey"
EXAMPLE_DEPLOYMENT_ID = "aDeploymentId"

# form property data
EXAMPLE_FORM_PROPERTY_ID = "aFormPropertyId"
EXAMPLE_FORM_PROPERTY_NAME = "aFormName"
EXAMPLE_FORM_PROPERTY_TYPE_NAME = "aFormPropertyTypeName"
EXAMPLE_FORM_PROPERTY_VALUE = "aValue"
EXAMPLE_FORM_PROPERTY_READABLE = True
EXAMPLE_FORM_PROPERTY_WRITABLE = True
EXAMPLE_FORM_PROPERTY_REQUIRED = True

# process instance
EXAMPLE_PROCESS_INSTANCE_BUSINESS_KEY = "aKey"
EXAMPLE_PROCESS_INSTANCE_BUSINESS_KEY_LIKE = "aKeyLike"
EXAMPLE_PROCESS_INSTANCE_ID = "aProcInstId"
ANOTHER_EXAMPLE_PROCESS_INSTANCE_ID = "anotherId"
EXAMPLE_PROCESS_INSTANCE_IS_SUSPENDED = False
EXAMPLE_PROCESS_INSTANCE_IS_ENDED = False
EXAMPLE_PROCESS_INSTANCE_ID_LIST = f"{EXAMPLE_PROCESS_INSTANCE_ID},{ANOTHER_EXAMPLE_PROCESS_INSTANCE_ID}"
EXAMPLE_PROCESS_INSTANCE_ID_LIST_WITH_DUP = (
    f"{EXAMPLE_PROCESS_INSTANCE_ID},{ANOTHER_EXAMPLE_PROCESS_INSTANCE_ID},{EXAMPLE_PROCESS_INSTANCE_ID}"
)
EXAMPLE_NON_EXISTENT_PROCESS_INSTANCE_ID = "aNonExistentProcInstId"
EXAMPLE_PROCESS_INSTANCE_ID_LIST_WITH_NONEXISTENT_ID = (
    f"{EXAMPLE_PROCESS_INSTANCE_ID},{EXAMPLE_NON_EXISTENT_PROCESS_INSTANCE_ID}"
)

# variable instance
EXAMPLE_VARIABLE_INSTANCE_ID = "aVariableInstanceId"
SERIALIZABLE_VARIABLE_INSTANCE_ID = "serializableVariableInstanceId"
SPIN_VARIABLE_INSTANCE_ID = "spinVariableInstanceId"
EXAMPLE_VARIABLE_INSTANCE_NAME = "aVariableInstanceName"
EXAMPLE_PRIMITIVE_VARIABLE_VALUE = string_value("aVariableInstanceValue")
EXAMPLE_VARIABLE_INSTANCE_PROC_INST_ID = "aVariableInstanceProcInstId"
EXAMPLE_VARIABLE_INSTANCE_EXECUTION_ID = "aVariableInstanceExecutionId"
EXAMPLE_VARIABLE_INSTANCE_CASE_INST_ID = "aVariableInstanceCaseInstId"
EXAMPLE_VARIABLE_INSTANCE_CASE_EXECUTION_ID = "aVariableInstanceCaseExecutionId"
EXAMPLE_VARIABLE_INSTANCE_TASK_ID = "aVariableInstanceTaskId"
EXAMPLE_VARIABLE_INSTANCE_ACTIVITY_INSTANCE_ID = "aVariableInstanceVariableInstanceId"
EXAMPLE_VARIABLE_INSTANCE_ERROR_MESSAGE = "aVariableInstanceErrorMessage"
EXAMPLE_VARIABLE_INSTANCE_SERIALIZED_VALUE = "aSerializedValue"
EXAMPLE_VARIABLE_INSTANCE_BYTE = b"aSerializedValue"
EXAMPLE_SPIN_DATA_FORMAT = "aDataFormatId"
EXAMPLE_SPIN_ROOT_TYPE = "path.to.a.RootType"

# execution
EXAMPLE_EXECUTION_ID = "anExecutionId"
EXAMPLE_EXECUTION_IS_ENDED = False

# event subscription
EXAMPLE_EVENT_SUBSCRIPTION_ID = "anEventSubscriptionId"
EXAMPLE_EVENT_SUBSCRIPTION_TYPE = "message"
EXAMPLE_EVENT_SUBSCRIPTION_NAME = "anEvent"
EXAMPLE_EVENT_SUBSCRIPTION_CREATION_DATE = "2013-01-23T13:59:43"

# process definition
EXAMPLE_PROCESS_DEFINITION_ID = "aProcDefId"
NON_EXISTING_PROCESS_DEFINITION_ID = "aNonExistingProcDefId"
EXAMPLE_PROCESS_DEFINITION_NAME = "aName"
EXAMPLE_PROCESS_DEFINITION_NAME_LIKE = "aNameLike"
EXAMPLE_PROCESS_DEFINITION_KEY = "aKey"
NON_EXISTING_PROCESS_DEFINITION_KEY = "aNonExistingKey"
EXAMPLE_PROCESS_DEFINITION_CATEGORY = "aCategory"
EXAMPLE_PROCESS_DEFINITION_DESCRIPTION = "aDescription"
EXAMPLE_PROCESS_DEFINITION_VERSION = 42
EXAMPLE_PROCESS_DEFINITION_RESOURCE_NAME = "aResourceName"
EXAMPLE_PROCESS_DEFINITION_DIAGRAM_RESOURCE_NAME = "aResourceName.png"
EXAMPLE_PROCESS_DEFINITION_IS_SUSPENDED = True
ANOTHER_EXAMPLE_PROCESS_DEFINITION_ID = "aProcessDefinitionId:2"

EXAMPLE_ACTIVITY_ID = "anActivity"
ANOTHER_EXAMPLE_ACTIVITY_ID = "anotherActivity"
EXAMPLE_ACTIVITY_NAME = "anActivityName"
EXAMPLE_ACTIVITY_TYPE = "anActivityType"
EXAMPLE_PROCESS_DEFINITION_DELAYED_EXECUTION = "2013-04-23T13:42:43"

# deployment
NON_EXISTING_DEPLOYMENT_ID = "aNonExistingDeploymentId"
EXAMPLE_DEPLOYMENT_NAME = "aName"
EXAMPLE_DEPLOYMENT_NAME_LIKE = "aNameLike"
EXAMPLE_DEPLOYMENT_TIME = "2013-01-23T13:59:43"
NON_EXISTING_DEPLOYMENT_TIME = "2013-04-23T13:42:43"

# deployment resources
EXAMPLE_DEPLOYMENT_RESOURCE_ID = "aDeploymentResourceId"
NON_EXISTING_DEPLOYMENT_RESOURCE_ID = "aNonExistingDeploymentResourceId"
EXAMPLE_DEPLOYMENT_RESOURCE_NAME = "aDeploymentResourceName"

# statistics
EXAMPLE_FAILED_JOBS = 42
EXAMPLE_INSTANCES = 123

EXAMPLE_INSTANCES_LONG = 123
EXAMPLE_FINISHED_LONG = 124
EXAMPLE_CANCELED_LONG = 125
EXAMPLE_COMPLETE_SCOPE_LONG = 126

ANOTHER_EXAMPLE_INSTANCES_LONG = 127
ANOTHER_EXAMPLE_FINISHED_LONG = 128
ANOTHER_EXAMPLE_CANCELED_LONG = 129
ANOTHER_EXAMPLE_COMPLETE_SCOPE_LONG = 130

ANOTHER_EXAMPLE_FAILED_JOBS = 43
ANOTHER_EXAMPLE_INSTANCES = 124

ANOTHER_EXAMPLE_INCIDENT_TYPE = "anotherIncidentType"
ANOTHER_EXAMPLE_INCIDENT_COUNT = 2

# user & groups
EXAMPLE_GROUP_ID = "groupId1"
EXAMPLE_GROUP_ID2 = "groupId2"
EXAMPLE_GROUP_NAME = "group1"
EXAMPLE_GROUP_TYPE = "organizational-unit"
EXAMPLE_GROUP_NAME_UPDATE = "group1Update"

EXAMPLE_USER_ID = "userId"
EXAMPLE_USER_ID2 = "userId2"
EXAMPLE_USER_FIRST_NAME = "firstName"
EXAMPLE_USER_LAST_NAME = "lastName"
EXAMPLE_USER_EMAIL = "test@example.org"
EXAMPLE_USER_PASSWORD = "s3cret"

EXAMPLE_USER_FIRST_NAME_UPDATE = "firstNameUpdate"
EXAMPLE_USER_LAST_NAME_UPDATE = "lastNameUpdate"
EXAMPLE_USER_EMAIL_UPDATE = "testUpdate@example.org"

# job definitions
EXAMPLE_JOB_DEFINITION_ID = "aJobDefId"
NON_EXISTING_JOB_DEFINITION_ID = "aNonExistingJobDefId"
EXAMPLE_JOB_TYPE = "aJobType"
EXAMPLE_JOB_CONFIG = "aJobConfig"
EXAMPLE_JOB_DEFINITION_IS_SUSPENDED = True
EXAMPLE_JOB_DEFINITION_DELAYED_EXECUTION = "2013-04-23T13:42:43"

# jobs
EXAMPLE_JOB_ID = "aJobId"
NON_EXISTING_JOB_ID = "aNonExistingJobId"
EXAMPLE_NEGATIVE_JOB_RETRIES = -3
EXAMPLE_JOB_RETRIES = 3
EXAMPLE_JOB_NO_EXCEPTION_MESSAGE = ""
EXAMPLE_EXCEPTION_MESSAGE = "aExceptionMessage"
EXAMPLE_EMPTY_JOB_ID = ""
EXAMPLE_DUE_DATE = "2013-04-23T13:42:43"
EXAMPLE_WITH_RETRIES_LEFT = True
EXAMPLE_EXECUTABLE = True
EXAMPLE_TIMERS = True
EXAMPLE_MESSAGES = True
EXAMPLE_WITH_EXCEPTION = True
EXAMPLE_NO_RETRIES_LEFT = True
EXAMPLE_JOB_IS_SUSPENDED = True

# authorizations
EXAMPLE_RESOURCE_TYPE_NAME = "exampleResource"
EXAMPLE_RESOURCE_TYPE_ID = 12345678
EXAMPLE_RESOURCE_TYPE_ID_STRING = "12345678"
EXAMPLE_RESOURCE_ID = "exampleResourceId"
EXAMPLE_PERMISSION_NAME = "READ"
EXAMPLE_GRANT_PERMISSION_VALUES = (Permission.NONE, Permission.READ, Permission.UPDATE)
EXAMPLE_REVOKE_PERMISSION_VALUES = (Permission.ALL, Permission.READ, Permission.UPDATE)
EXAMPLE_PERMISSION_VALUES_STRING = ("READ", "UPDATE")

EXAMPLE_AUTHORIZATION_ID = "someAuthorizationId"
EXAMPLE_AUTHORIZATION_TYPE = 0
EXAMPLE_AUTHORIZATION_TYPE_STRING = "0"

# process applications
EXAMPLE_PROCESS_APPLICATION_NAME = "aProcessApplication"
EXAMPLE_PROCESS_APPLICATION_CONTEXT_PATH = "http://camunda.org/someContext"

# historic process instance
EXAMPLE_HISTORIC_PROCESS_INSTANCE_DELETE_REASON = "aDeleteReason"
EXAMPLE_HISTORIC_PROCESS_INSTANCE_DURATION_MILLIS = 2000
EXAMPLE_HISTORIC_PROCESS_INSTANCE_START_TIME = "2013-04-23T13:42:43"
EXAMPLE_HISTORIC_PROCESS_INSTANCE_END_TIME = "2013-04-23T13:42:43"
EXAMPLE_HISTORIC_PROCESS_INSTANCE_START_USER_ID = "aStartUserId"
EXAMPLE_HISTORIC_PROCESS_INSTANCE_START_ACTIVITY_ID = "aStartActivityId"
EXAMPLE_HISTORIC_PROCESS_INSTANCE_SUPER_PROCESS_INSTANCE_ID = "aSuperProcessInstanceId"
EXAMPLE_HISTORIC_PROCESS_INSTANCE_SUB_PROCESS_INSTANCE_ID = "aSubProcessInstanceId"
EXAMPLE_HISTORIC_PROCESS_INSTANCE_CASE_INSTANCE_ID = "aCaseInstanceId"

EXAMPLE_HISTORIC_PROCESS_INSTANCE_STARTED_AFTER = "2013-04-23T13:42:43"
EXAMPLE_HISTORIC_PROCESS_INSTANCE_STARTED_BEFORE = "2013-01-23T13:42:43"
EXAMPLE_HISTORIC_PROCESS_INSTANCE_FINISHED_AFTER = "2013-01-23T13:42:43"
EXAMPLE_HISTORIC_PROCESS_INSTANCE_FINISHED_BEFORE = "2013-04-23T13:42:43"

# historic case instance
EXAMPLE_HISTORIC_CASE_INSTANCE_DURATION_MILLIS = 2000
EXAMPLE_HISTORIC_CASE_INSTANCE_CREATE_TIME = "2013-04-23T13:42:43"
EXAMPLE_HISTORIC_CASE_INSTANCE_CLOSE_TIME = "2013-04-23T13:42:43"
EXAMPLE_HISTORIC_CASE_INSTANCE_CREATE_USER_ID = "aCreateUserId"
EXAMPLE_HISTORIC_CASE_INSTANCE_SUPER_CASE_INSTANCE_ID = "aSuperCaseInstanceId"
EXAMPLE_HISTORIC_CASE_INSTANCE_SUB_CASE_INSTANCE_ID = "aSubCaseInstanceId"

EXAMPLE_HISTORIC_CASE_INSTANCE_CREATED_AFTER = "2013-04-23T13:42:43"
EXAMPLE_HISTORIC_CASE_INSTANCE_CREATED_BEFORE = "2013-01-23T13:42:43"
EXAMPLE_HISTORIC_CASE_INSTANCE_CLOSED_AFTER = "2013-01-23T13:42:43"
EXAMPLE_HISTORIC_CASE_INSTANCE_CLOSED_BEFORE = "2013-04-23T13:42:43"

EXAMPLE_HISTORIC_CASE_INSTANCE_IS_ACTIVE = True
EXAMPLE_HISTORIC_CASE_INSTANCE_IS_COMPLETED = True
EXAMPLE_HISTORIC_CASE_INSTANCE_IS_TERMINATED = True
EXAMPLE_HISTORIC_CASE_INSTANCE_IS_CLOSED = True

# historic activity instance
EXAMPLE_HISTORIC_ACTIVITY_INSTANCE_ID = "aHistoricActivityInstanceId"
EXAMPLE_HISTORIC_ACTIVITY_INSTANCE_PARENT_ACTIVITY_INSTANCE_ID = "aHistoricParentActivityInstanceId"
EXAMPLE_HISTORIC_ACTIVITY_INSTANCE_CALLED_PROCESS_INSTANCE_ID = "aHistoricCalledProcessInstanceId"
EXAMPLE_HISTORIC_ACTIVITY_INSTANCE_START_TIME = "2013-04-23T13:42:43"
EXAMPLE_HISTORIC_ACTIVITY_INSTANCE_END_TIME = "2013-04-23T18:42:43"
EXAMPLE_HISTORIC_ACTIVITY_INSTANCE_DURATION = 2000
EXAMPLE_HISTORIC_ACTIVITY_INSTANCE_STARTED_AFTER = "2013-04-23T13:42:43"
EXAMPLE_HISTORIC_ACTIVITY_INSTANCE_STARTED_BEFORE = "2013-01-23T13:42:43"
EXAMPLE_HISTORIC_ACTIVITY_INSTANCE_FINISHED_AFTER = "2013-01-23T13:42:43"
EXAMPLE_HISTORIC_ACTIVITY_INSTANCE_FINISHED_BEFORE = "2013-04-23T13:42:43"
EXAMPLE_HISTORIC_ACTIVITY_INSTANCE_IS_CANCELED = True
EXAMPLE_HISTORIC_ACTIVITY_INSTANCE_IS_COMPLETE_SCOPE = True

# historic case activity instance
EXAMPLE_HISTORIC_CASE_ACTIVITY_INSTANCE_ID = "aCaseActivityInstanceId"
EXAMPLE_HISTORIC_CASE_ACTIVITY_INSTANCE_PARENT_CASE_ACTIVITY_INSTANCE_ID = "aParentCaseActivityId"
EXAMPLE_HISTORIC_CASE_ACTIVITY_ID = "aCaseActivityId"
EXAMPLE_HISTORIC_CASE_ACTIVITY_NAME = "aCaseActivityName"
EXAMPLE_HISTORIC_CASE_ACTIVITY_INSTANCE_CALLED_PROCESS_INSTANCE_ID = "aCalledProcessInstanceId"
EXAMPLE_HISTORIC_CASE_ACTIVITY_INSTANCE_CALLED_CASE_INSTANCE_ID = "aCalledCaseInstanceId"
EXAMPLE_HISTORIC_CASE_ACTIVITY_INSTANCE_CREATE_TIME = "2014-04-23T18:42:42"
EXAMPLE_HISTORIC_CASE_ACTIVITY_INSTANCE_END_TIME = "2014-04-23T18:42:43"
EXAMPLE_HISTORIC_CASE_ACTIVITY_INSTANCE_DURATION = 2000
EXAMPLE_HISTORIC_CASE_ACTIVITY_INSTANCE_IS_AVAILABLE = True
EXAMPLE_HISTORIC_CASE_ACTIVITY_INSTANCE_IS_ENABLED = True
EXAMPLE_HISTORIC_CASE_ACTIVITY_INSTANCE_IS_DISABLED = True
EXAMPLE_HISTORIC_CASE_ACTIVITY_INSTANCE_IS_ACTIVE = True
EXAMPLE_HISTORIC_CASE_ACTIVITY_INSTANCE_IS_FAILED = True
EXAMPLE_HISTORIC_CASE_ACTIVITY_INSTANCE_IS_SUSPENDED = True
EXAMPLE_HISTORIC_CASE_ACTIVITY_INSTANCE_IS_COMPLETED = True
EXAMPLE_HISTORIC_CASE_ACTIVITY_INSTANCE_IS_TERMINATED = True
EXAMPLE_HISTORIC_CASE_ACTIVITY_INSTANCE_IS_UNFINISHED = True
EXAMPLE_HISTORIC_CASE_ACTIVITY_INSTANCE_IS_FINISHED = True

EXAMPLE_HISTORIC_CASE_ACTIVITY_INSTANCE_CREATED_AFTER = "2014-04-23T18:41:42"
EXAMPLE_HISTORIC_CASE_ACTIVITY_INSTANCE_CREATED_BEFORE = "2014-04-23T18:43:42"
EXAMPLE_HISTORIC_CASE_ACTIVITY_INSTANCE_ENDED_AFTER = "2014-04-23T18:41:43"
EXAMPLE_HISTORIC_CASE_ACTIVITY_INSTANCE_ENDED_BEFORE = "2014-04-23T18:43:43"

# user operation log
EXAMPLE_USER_OPERATION_LOG_ID = "userOpLogId"
EXAMPLE_USER_OPERATION_ID = "opId"
EXAMPLE_USER_OPERATION_TYPE = "Claim"
EXAMPLE_USER_OPERATION_ENTITY = ENTITY_TYPE_TASK
EXAMPLE_USER_OPERATION_PROPERTY = "opProperty"
EXAMPLE_USER_OPERATION_ORG_VALUE = "orgValue"
EXAMPLE_USER_OPERATION_NEW_VALUE = "newValue"
EXAMPLE_USER_OPERATION_TIMESTAMP = "2014-02-20T16:53:37"

# historic detail
EXAMPLE_HISTORIC_VAR_UPDATE_ID = "aHistoricVariableUpdateId"
EXAMPLE_HISTORIC_VAR_UPDATE_PROC_INST_ID = "aProcInst"
EXAMPLE_HISTORIC_VAR_UPDATE_ACT_INST_ID = "anActInst"
EXAMPLE_HISTORIC_VAR_UPDATE_EXEC_ID = "anExecutionId"
EXAMPLE_HISTORIC_VAR_UPDATE_TASK_ID = "aTaskId"
EXAMPLE_HISTORIC_VAR_UPDATE_TIME = "2014-01-01T00:00:00"
EXAMPLE_HISTORIC_VAR_UPDATE_NAME = "aVariableName"
EXAMPLE_HISTORIC_VAR_UPDATE_TYPE_NAME = "String"
EXAMPLE_HISTORIC_VAR_UPDATE_VALUE_TYPE_NAME = "String"
EXAMPLE_HISTORIC_VAR_UPDATE_REVISION = 1
EXAMPLE_HISTORIC_VAR_UPDATE_ERROR = "anErrorMessage"

EXAMPLE_HISTORIC_FORM_FIELD_ID = "anId"
EXAMPLE_HISTORIC_FORM_FIELD_PROC_INST_ID = "aProcInst"
EXAMPLE_HISTORIC_FORM_FIELD_ACT_INST_ID = "anActInst"
EXAMPLE_HISTORIC_FORM_FIELD_EXEC_ID = "anExecutionId"
EXAMPLE_HISTORIC_FORM_FIELD_TASK_ID = "aTaskId"
EXAMPLE_HISTORIC_FORM_FIELD_TIME = "2014-01-01T00:00:00"
EXAMPLE_HISTORIC_FORM_FIELD_FIELD_ID = "aFormFieldId"
EXAMPLE_HISTORIC_FORM_FIELD_VALUE = "aFormFieldValue"

# historic task instance
EXAMPLE_HISTORIC_TASK_INST_ID = "aHistoricTaskInstanceId"
EXAMPLE_HISTORIC_TASK_INST_PROC_DEF_ID = "aProcDefId"
EXAMPLE_HISTORIC_TASK_INST_PROC_INST_ID = "aProcInstId"
EXAMPLE_HISTORIC_TASK_INST_EXEC_ID = "anExecId"
EXAMPLE_HISTORIC_TASK_INST_ACT_INST_ID = "anActInstId"
EXAMPLE_HISTORIC_TASK_INST_NAME = "aName"
EXAMPLE_HISTORIC_TASK_INST_DESCRIPTION = "aDescription"
EXAMPLE_HISTORIC_TASK_INST_DELETE_REASON = "aDeleteReason"
EXAMPLE_HISTORIC_TASK_INST_OWNER = "anOwner"
EXAMPLE_HISTORIC_TASK_INST_ASSIGNEE = "anAssignee"
EXAMPLE_HISTORIC_TASK_INST_START_TIME = "2014-01-01T00:00:00"
EXAMPLE_HISTORIC_TASK_INST_END_TIME = "2014-01-01T00:00:00"
EXAMPLE_HISTORIC_TASK_INST_DURATION = 5000
EXAMPLE_HISTORIC_TASK_INST_DEF_KEY = "aTaskDefinitionKey"
EXAMPLE_HISTORIC_TASK_INST_PRIORITY = 60
EXAMPLE_HISTORIC_TASK_INST_DUE_DATE = "2014-01-01T00:00:00"
EXAMPLE_HISTORIC_TASK_INST_FOLLOW_UP_DATE = "2014-01-01T00:00:00"
EXAMPLE_HISTORIC_TASK_INST_PARENT_TASK_ID = "aParentTaskId"
EXAMPLE_HISTORIC_TASK_INST_CASE_DEF_ID = "aCaseDefinitionId"
EXAMPLE_HISTORIC_TASK_INST_CASE_INST_ID = "aCaseInstanceId"
EXAMPLE_HISTORIC_TASK_INST_CASE_EXEC_ID = "aCaseExecutionId"

# incident
EXAMPLE_INCIDENT_ID = "anIncidentId"
EXAMPLE_INCIDENT_TIMESTAMP = "2014-01-01T00:00:00"
EXAMPLE_INCIDENT_TYPE = "anIncidentType"
EXAMPLE_INCIDENT_EXECUTION_ID = "anExecutionId"
EXAMPLE_INCIDENT_ACTIVITY_ID = "anActivityId"
EXAMPLE_INCIDENT_PROC_INST_ID = "aProcInstId"
EXAMPLE_INCIDENT_PROC_DEF_ID = "aProcDefId"
EXAMPLE_INCIDENT_CAUSE_INCIDENT_ID = "aCauseIncidentId"
EXAMPLE_INCIDENT_ROOT_CAUSE_INCIDENT_ID = "aRootCauseIncidentId"
EXAMPLE_INCIDENT_CONFIGURATION = "aConfiguration"
EXAMPLE_INCIDENT_MESSAGE = "anIncidentMessage"

EXAMPLE_INCIDENT_COUNT = 1

# historic incident
EXAMPLE_HIST_INCIDENT_ID = "anIncidentId"
EXAMPLE_HIST_INCIDENT_CREATE_TIME = "2014-01-01T00:00:00"
EXAMPLE_HIST_INCIDENT_END_TIME = "2014-01-01T00:00:00"
EXAMPLE_HIST_INCIDENT_TYPE = "anIncidentType"
EXAMPLE_HIST_INCIDENT_EXECUTION_ID = "anExecutionId"
EXAMPLE_HIST_INCIDENT_ACTIVITY_ID = "anActivityId"
EXAMPLE_HIST_INCIDENT_PROC_INST_ID = "aProcInstId"
EXAMPLE_HIST_INCIDENT_PROC_DEF_ID = "aProcDefId"
EXAMPLE_HIST_INCIDENT_CAUSE_INCIDENT_ID = "aCauseIncidentId"
EXAMPLE_HIST_INCIDENT_ROOT_CAUSE_INCIDENT_ID = "aRootCauseIncidentId"
EXAMPLE_HIST_INCIDENT_CONFIGURATION = "aConfiguration"
EXAMPLE_HIST_INCIDENT_MESSAGE = "anIncidentMessage"
EXAMPLE_HIST_INCIDENT_STATE_OPEN = False
EXAMPLE_HIST_INCIDENT_STATE_DELETED = False
EXAMPLE_HIST_INCIDENT_STATE_RESOLVED = True

# case definition
EXAMPLE_CASE_DEFINITION_ID = "aCaseDefnitionId"
EXAMPLE_CASE_DEFINITION_KEY = "aCaseDefinitionKey"
EXAMPLE_CASE_DEFINITION_VERSION = 1
EXAMPLE_CASE_DEFINITION_CATEGORY = "aCaseDefinitionCategory"
EXAMPLE_CASE_DEFINITION_NAME = "aCaseDefinitionName"
EXAMPLE_CASE_DEFINITION_NAME_LIKE = "aCaseDefinitionNameLike"
EXAMPLE_CASE_DEFINITION_RESOURCE_NAME = "aCaseDefinitionResourceName"

# case instance
EXAMPLE_CASE_INSTANCE_ID = "aCaseInstId"
EXAMPLE_CASE_INSTANCE_BUSINESS_KEY = "aBusinessKey"
EXAMPLE_CASE_INSTANCE_BUSINESS_KEY_LIKE = "aBusinessKeyLike"
EXAMPLE_CASE_INSTANCE_CASE_DEFINITION_ID = "aCaseDefinitionId"
EXAMPLE_CASE_INSTANCE_IS_ACTIVE = True
EXAMPLE_CASE_INSTANCE_IS_COMPLETED = True
EXAMPLE_CASE_INSTANCE_IS_TERMINATED = True

# case execution
EXAMPLE_CASE_EXECUTION_ID = "aCaseExecutionId"
ANOTHER_EXAMPLE_CASE_EXECUTION_ID = "anotherCaseExecutionId"
EXAMPLE_CASE_EXECUTION_CASE_INSTANCE_ID = "aCaseInstanceId"
EXAMPLE_CASE_EXECUTION_PARENT_ID = "aParentId"
EXAMPLE_CASE_EXECUTION_CASE_DEFINITION_ID = "aCaseDefinitionId"
EXAMPLE_CASE_EXECUTION_ACTIVITY_ID = "anActivityId"
EXAMPLE_CASE_EXECUTION_ACTIVITY_NAME = "anActivityName"
EXAMPLE_CASE_EXECUTION_IS_ENABLED = True
EXAMPLE_CASE_EXECUTION_IS_ACTIVE = True
EXAMPLE_CASE_EXECUTION_IS_DISABLED = True

# filter
EXAMPLE_FILTER_ID = "aFilterId"
ANOTHER_EXAMPLE_FILTER_ID = "anotherFilterId"
EXAMPLE_FILTER_RESOURCE_TYPE = ENTITY_TYPE_TASK
EXAMPLE_FILTER_NAME = "aFilterName"
EXAMPLE_FILTER_OWNER = "aFilterOwner"
EXAMPLE_FILTER_QUERY = (
    TaskQuery()
    .with_task_name("test")
    .process_variable_value_equals("foo", "bar")
    .case_instance_variable_value_equals("foo", "bar")
    .task_variable_value_equals("foo", "bar")
)
EXAMPLE_FILTER_QUERY_DTO = TaskQueryDto.from_query(EXAMPLE_FILTER_QUERY)
EXAMPLE_FILTER_PROPERTIES: Mapping[str, Any] = MappingProxyType({"color": "#112233"})


def _is_catalog_name(name: str) -> bool:
    return name.isupper() and not name.startswith("_") and name not in {"ENTITY_TYPE_TASK"}


CATALOG: Mapping[str, Any] = MappingProxyType(
    {name: value for name, value in globals().items() if _is_catalog_name(name)}
)


def lookup(name: str) -> Any:
    """Return the catalog value registered under ``name``.

    Raises:
        KeyError: If no catalog value has that name.
    """
    try:
        return CATALOG[name]
    except KeyError:
        raise KeyError(f"Unknown catalog value: {name}") from None

"""Factories for historic records.

Finished records carry the example end times and durations. The running,
unfinished and not-closed variants carry ``None`` end/close times and
durations, with the status flags of a record that is still in progress.
"""

from dataclasses import replace

from enginemocks import catalog
from enginemocks.builders import (
    MockHistoricVariableInstanceBuilder,
    MockHistoricVariableUpdateBuilder,
)
from enginemocks.core.history import (
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
from enginemocks.dates import parse_date

# ============================================================================
# Activity instances
# ============================================================================


def create_mock_historic_activity_instance() -> HistoricActivityInstance:
    return HistoricActivityInstance(
        id=catalog.EXAMPLE_HISTORIC_ACTIVITY_INSTANCE_ID,
        parent_activity_instance_id=(
            catalog.EXAMPLE_HISTORIC_ACTIVITY_INSTANCE_PARENT_ACTIVITY_INSTANCE_ID
        ),
        activity_id=catalog.EXAMPLE_ACTIVITY_ID,
        activity_name=catalog.EXAMPLE_ACTIVITY_NAME,
        activity_type=catalog.EXAMPLE_ACTIVITY_TYPE,
        process_definition_id=catalog.EXAMPLE_PROCESS_DEFINITION_ID,
        process_instance_id=catalog.EXAMPLE_PROCESS_INSTANCE_ID,
        execution_id=catalog.EXAMPLE_EXECUTION_ID,
        task_id=catalog.EXAMPLE_TASK_ID,
        called_process_instance_id=(
            catalog.EXAMPLE_HISTORIC_ACTIVITY_INSTANCE_CALLED_PROCESS_INSTANCE_ID
        ),
        assignee=catalog.EXAMPLE_TASK_ASSIGNEE_NAME,
        start_time=parse_date(catalog.EXAMPLE_HISTORIC_ACTIVITY_INSTANCE_START_TIME),
        end_time=parse_date(catalog.EXAMPLE_HISTORIC_ACTIVITY_INSTANCE_END_TIME),
        duration_in_millis=catalog.EXAMPLE_HISTORIC_ACTIVITY_INSTANCE_DURATION,
        canceled=catalog.EXAMPLE_HISTORIC_ACTIVITY_INSTANCE_IS_CANCELED,
        complete_scope=catalog.EXAMPLE_HISTORIC_ACTIVITY_INSTANCE_IS_COMPLETE_SCOPE,
    )


def create_mock_historic_activity_instances() -> list[HistoricActivityInstance]:
    return [create_mock_historic_activity_instance()]


def create_mock_running_historic_activity_instance() -> HistoricActivityInstance:
    return replace(
        create_mock_historic_activity_instance(),
        end_time=None,
        duration_in_millis=None,
        canceled=False,
        complete_scope=False,
    )


def create_mock_running_historic_activity_instances() -> list[HistoricActivityInstance]:
    return [create_mock_running_historic_activity_instance()]


def create_mock_historic_case_activity_instance() -> HistoricCaseActivityInstance:
    return HistoricCaseActivityInstance(
        id=catalog.EXAMPLE_HISTORIC_CASE_ACTIVITY_INSTANCE_ID,
        parent_case_activity_instance_id=(
            catalog.EXAMPLE_HISTORIC_CASE_ACTIVITY_INSTANCE_PARENT_CASE_ACTIVITY_INSTANCE_ID
        ),
        case_activity_id=catalog.EXAMPLE_HISTORIC_CASE_ACTIVITY_ID,
        case_activity_name=catalog.EXAMPLE_HISTORIC_CASE_ACTIVITY_NAME,
        case_definition_id=catalog.EXAMPLE_CASE_DEFINITION_ID,
        case_instance_id=catalog.EXAMPLE_CASE_INSTANCE_ID,
        case_execution_id=catalog.EXAMPLE_CASE_EXECUTION_ID,
        task_id=catalog.EXAMPLE_TASK_ID,
        called_process_instance_id=(
            catalog.EXAMPLE_HISTORIC_CASE_ACTIVITY_INSTANCE_CALLED_PROCESS_INSTANCE_ID
        ),
        called_case_instance_id=(
            catalog.EXAMPLE_HISTORIC_CASE_ACTIVITY_INSTANCE_CALLED_CASE_INSTANCE_ID
        ),
        create_time=parse_date(catalog.EXAMPLE_HISTORIC_CASE_ACTIVITY_INSTANCE_CREATE_TIME),
        end_time=parse_date(catalog.EXAMPLE_HISTORIC_CASE_ACTIVITY_INSTANCE_END_TIME),
        duration_in_millis=catalog.EXAMPLE_HISTORIC_CASE_ACTIVITY_INSTANCE_DURATION,
        available=catalog.EXAMPLE_HISTORIC_CASE_ACTIVITY_INSTANCE_IS_AVAILABLE,
        enabled=catalog.EXAMPLE_HISTORIC_CASE_ACTIVITY_INSTANCE_IS_ENABLED,
        disabled=catalog.EXAMPLE_HISTORIC_CASE_ACTIVITY_INSTANCE_IS_DISABLED,
        active=catalog.EXAMPLE_HISTORIC_CASE_ACTIVITY_INSTANCE_IS_ACTIVE,
        completed=catalog.EXAMPLE_HISTORIC_CASE_ACTIVITY_INSTANCE_IS_COMPLETED,
        terminated=catalog.EXAMPLE_HISTORIC_CASE_ACTIVITY_INSTANCE_IS_TERMINATED,
    )


def create_mock_historic_case_activity_instances() -> list[HistoricCaseActivityInstance]:
    return [create_mock_historic_case_activity_instance()]


def create_mock_running_historic_case_activity_instance() -> HistoricCaseActivityInstance:
    return replace(
        create_mock_historic_case_activity_instance(),
        end_time=None,
        duration_in_millis=None,
        available=False,
        enabled=False,
        disabled=False,
        active=True,
        completed=False,
        terminated=False,
    )


def create_mock_running_historic_case_activity_instances() -> list[HistoricCaseActivityInstance]:
    return [create_mock_running_historic_case_activity_instance()]


def create_mock_historic_activity_statistics() -> list[HistoricActivityStatistics]:
    return [
        HistoricActivityStatistics(
            id=catalog.EXAMPLE_ACTIVITY_ID,
            instances=catalog.EXAMPLE_INSTANCES_LONG,
            canceled=catalog.EXAMPLE_CANCELED_LONG,
            finished=catalog.EXAMPLE_FINISHED_LONG,
            complete_scope=catalog.EXAMPLE_COMPLETE_SCOPE_LONG,
        ),
        HistoricActivityStatistics(
            id=catalog.ANOTHER_EXAMPLE_ACTIVITY_ID,
            instances=catalog.ANOTHER_EXAMPLE_INSTANCES_LONG,
            canceled=catalog.ANOTHER_EXAMPLE_CANCELED_LONG,
            finished=catalog.ANOTHER_EXAMPLE_FINISHED_LONG,
            complete_scope=catalog.ANOTHER_EXAMPLE_COMPLETE_SCOPE_LONG,
        ),
    ]


# ============================================================================
# Process and case instances
# ============================================================================


def create_mock_historic_process_instance() -> HistoricProcessInstance:
    return HistoricProcessInstance(
        id=catalog.EXAMPLE_PROCESS_INSTANCE_ID,
        business_key=catalog.EXAMPLE_PROCESS_INSTANCE_BUSINESS_KEY,
        process_definition_id=catalog.EXAMPLE_PROCESS_DEFINITION_ID,
        delete_reason=catalog.EXAMPLE_HISTORIC_PROCESS_INSTANCE_DELETE_REASON,
        start_time=parse_date(catalog.EXAMPLE_HISTORIC_PROCESS_INSTANCE_START_TIME),
        end_time=parse_date(catalog.EXAMPLE_HISTORIC_PROCESS_INSTANCE_END_TIME),
        duration_in_millis=catalog.EXAMPLE_HISTORIC_PROCESS_INSTANCE_DURATION_MILLIS,
        start_user_id=catalog.EXAMPLE_HISTORIC_PROCESS_INSTANCE_START_USER_ID,
        start_activity_id=catalog.EXAMPLE_HISTORIC_PROCESS_INSTANCE_START_ACTIVITY_ID,
        super_process_instance_id=(
            catalog.EXAMPLE_HISTORIC_PROCESS_INSTANCE_SUPER_PROCESS_INSTANCE_ID
        ),
        case_instance_id=catalog.EXAMPLE_HISTORIC_PROCESS_INSTANCE_CASE_INSTANCE_ID,
    )


def create_mock_historic_process_instances() -> list[HistoricProcessInstance]:
    return [create_mock_historic_process_instance()]


def create_mock_historic_process_instance_unfinished() -> HistoricProcessInstance:
    """A process instance that has not ended yet.

    Only identity, definition, delete reason and start time are set.
    """
    return HistoricProcessInstance(
        id=catalog.EXAMPLE_PROCESS_INSTANCE_ID,
        business_key=catalog.EXAMPLE_PROCESS_INSTANCE_BUSINESS_KEY,
        process_definition_id=catalog.EXAMPLE_PROCESS_DEFINITION_ID,
        delete_reason=catalog.EXAMPLE_HISTORIC_PROCESS_INSTANCE_DELETE_REASON,
        start_time=parse_date(catalog.EXAMPLE_HISTORIC_PROCESS_INSTANCE_START_TIME),
        end_time=None,
        duration_in_millis=None,
    )


def create_mock_running_historic_process_instances() -> list[HistoricProcessInstance]:
    return [create_mock_historic_process_instance_unfinished()]


def create_mock_historic_case_instance() -> HistoricCaseInstance:
    return HistoricCaseInstance(
        id=catalog.EXAMPLE_CASE_INSTANCE_ID,
        business_key=catalog.EXAMPLE_CASE_INSTANCE_BUSINESS_KEY,
        case_definition_id=catalog.EXAMPLE_CASE_DEFINITION_ID,
        create_time=parse_date(catalog.EXAMPLE_HISTORIC_CASE_INSTANCE_CREATE_TIME),
        close_time=parse_date(catalog.EXAMPLE_HISTORIC_CASE_INSTANCE_CLOSE_TIME),
        duration_in_millis=catalog.EXAMPLE_HISTORIC_CASE_INSTANCE_DURATION_MILLIS,
        create_user_id=catalog.EXAMPLE_HISTORIC_CASE_INSTANCE_CREATE_USER_ID,
        super_case_instance_id=catalog.EXAMPLE_HISTORIC_CASE_INSTANCE_SUPER_CASE_INSTANCE_ID,
        active=catalog.EXAMPLE_HISTORIC_CASE_INSTANCE_IS_ACTIVE,
        completed=catalog.EXAMPLE_HISTORIC_CASE_INSTANCE_IS_COMPLETED,
        terminated=catalog.EXAMPLE_HISTORIC_CASE_INSTANCE_IS_TERMINATED,
        closed=catalog.EXAMPLE_HISTORIC_CASE_INSTANCE_IS_CLOSED,
    )


def create_mock_historic_case_instances() -> list[HistoricCaseInstance]:
    return [create_mock_historic_case_instance()]


def create_mock_historic_case_instance_not_closed() -> HistoricCaseInstance:
    return replace(
        create_mock_historic_case_instance(),
        close_time=None,
        duration_in_millis=None,
        active=True,
        completed=False,
        terminated=False,
        closed=False,
    )


def create_mock_running_historic_case_instances() -> list[HistoricCaseInstance]:
    return [create_mock_historic_case_instance_not_closed()]


# ============================================================================
# Variables and details
# ============================================================================


def mock_historic_variable_instance() -> MockHistoricVariableInstanceBuilder:
    return MockHistoricVariableInstanceBuilder()


def create_mock_historic_variable_instance() -> HistoricVariableInstance:
    return mock_historic_variable_instance().build()


def mock_historic_variable_update() -> MockHistoricVariableUpdateBuilder:
    return MockHistoricVariableUpdateBuilder()


def create_mock_historic_variable_update() -> HistoricVariableUpdate:
    return mock_historic_variable_update().build()


def create_mock_historic_form_field() -> HistoricFormField:
    return HistoricFormField(
        id=catalog.EXAMPLE_HISTORIC_FORM_FIELD_ID,
        process_instance_id=catalog.EXAMPLE_HISTORIC_FORM_FIELD_PROC_INST_ID,
        activity_instance_id=catalog.EXAMPLE_HISTORIC_FORM_FIELD_ACT_INST_ID,
        execution_id=catalog.EXAMPLE_HISTORIC_FORM_FIELD_EXEC_ID,
        task_id=catalog.EXAMPLE_HISTORIC_FORM_FIELD_TASK_ID,
        time=parse_date(catalog.EXAMPLE_HISTORIC_FORM_FIELD_TIME),
        field_id=catalog.EXAMPLE_HISTORIC_FORM_FIELD_FIELD_ID,
        field_value=catalog.EXAMPLE_HISTORIC_FORM_FIELD_VALUE,
    )


def create_mock_historic_form_fields() -> list[HistoricFormField]:
    return [create_mock_historic_form_field()]


def create_mock_historic_details() -> list[HistoricDetail]:
    """A variable update followed by a form field."""
    return [create_mock_historic_variable_update(), create_mock_historic_form_field()]


# ============================================================================
# Tasks, incidents and the operation log
# ============================================================================


def create_mock_historic_task_instance() -> HistoricTaskInstance:
    return HistoricTaskInstance(
        id=catalog.EXAMPLE_HISTORIC_TASK_INST_ID,
        process_definition_id=catalog.EXAMPLE_HISTORIC_TASK_INST_PROC_DEF_ID,
        process_instance_id=catalog.EXAMPLE_HISTORIC_TASK_INST_PROC_INST_ID,
        execution_id=catalog.EXAMPLE_HISTORIC_TASK_INST_EXEC_ID,
        activity_instance_id=catalog.EXAMPLE_HISTORIC_TASK_INST_ACT_INST_ID,
        name=catalog.EXAMPLE_HISTORIC_TASK_INST_NAME,
        description=catalog.EXAMPLE_HISTORIC_TASK_INST_DESCRIPTION,
        delete_reason=catalog.EXAMPLE_HISTORIC_TASK_INST_DELETE_REASON,
        owner=catalog.EXAMPLE_HISTORIC_TASK_INST_OWNER,
        assignee=catalog.EXAMPLE_HISTORIC_TASK_INST_ASSIGNEE,
        start_time=parse_date(catalog.EXAMPLE_HISTORIC_TASK_INST_START_TIME),
        end_time=parse_date(catalog.EXAMPLE_HISTORIC_TASK_INST_END_TIME),
        duration_in_millis=catalog.EXAMPLE_HISTORIC_TASK_INST_DURATION,
        task_definition_key=catalog.EXAMPLE_HISTORIC_TASK_INST_DEF_KEY,
        priority=catalog.EXAMPLE_HISTORIC_TASK_INST_PRIORITY,
        due_date=parse_date(catalog.EXAMPLE_HISTORIC_TASK_INST_DUE_DATE),
        follow_up_date=parse_date(catalog.EXAMPLE_HISTORIC_TASK_INST_FOLLOW_UP_DATE),
        parent_task_id=catalog.EXAMPLE_HISTORIC_TASK_INST_PARENT_TASK_ID,
        case_definition_id=catalog.EXAMPLE_HISTORIC_TASK_INST_CASE_DEF_ID,
        case_instance_id=catalog.EXAMPLE_HISTORIC_TASK_INST_CASE_INST_ID,
        case_execution_id=catalog.EXAMPLE_HISTORIC_TASK_INST_CASE_EXEC_ID,
    )


def create_mock_historic_task_instances() -> list[HistoricTaskInstance]:
    return [create_mock_historic_task_instance()]


def create_mock_historic_incident() -> HistoricIncident:
    """A resolved historic incident."""
    return HistoricIncident(
        id=catalog.EXAMPLE_HIST_INCIDENT_ID,
        create_time=parse_date(catalog.EXAMPLE_HIST_INCIDENT_CREATE_TIME),
        end_time=parse_date(catalog.EXAMPLE_HIST_INCIDENT_END_TIME),
        incident_type=catalog.EXAMPLE_HIST_INCIDENT_TYPE,
        execution_id=catalog.EXAMPLE_HIST_INCIDENT_EXECUTION_ID,
        activity_id=catalog.EXAMPLE_HIST_INCIDENT_ACTIVITY_ID,
        process_instance_id=catalog.EXAMPLE_HIST_INCIDENT_PROC_INST_ID,
        process_definition_id=catalog.EXAMPLE_HIST_INCIDENT_PROC_DEF_ID,
        cause_incident_id=catalog.EXAMPLE_HIST_INCIDENT_CAUSE_INCIDENT_ID,
        root_cause_incident_id=catalog.EXAMPLE_HIST_INCIDENT_ROOT_CAUSE_INCIDENT_ID,
        configuration=catalog.EXAMPLE_HIST_INCIDENT_CONFIGURATION,
        incident_message=catalog.EXAMPLE_HIST_INCIDENT_MESSAGE,
        open=catalog.EXAMPLE_HIST_INCIDENT_STATE_OPEN,
        deleted=catalog.EXAMPLE_HIST_INCIDENT_STATE_DELETED,
        resolved=catalog.EXAMPLE_HIST_INCIDENT_STATE_RESOLVED,
    )


def create_mock_historic_incidents() -> list[HistoricIncident]:
    return [create_mock_historic_incident()]


def create_user_operation_log_entry() -> UserOperationLogEntry:
    return UserOperationLogEntry(
        id=catalog.EXAMPLE_USER_OPERATION_LOG_ID,
        process_definition_id=catalog.EXAMPLE_PROCESS_DEFINITION_ID,
        process_definition_key=catalog.EXAMPLE_PROCESS_DEFINITION_KEY,
        process_instance_id=catalog.EXAMPLE_PROCESS_INSTANCE_ID,
        execution_id=catalog.EXAMPLE_EXECUTION_ID,
        case_definition_id=catalog.EXAMPLE_CASE_DEFINITION_ID,
        case_instance_id=catalog.EXAMPLE_CASE_INSTANCE_ID,
        case_execution_id=catalog.EXAMPLE_CASE_EXECUTION_ID,
        task_id=catalog.EXAMPLE_TASK_ID,
        user_id=catalog.EXAMPLE_USER_ID,
        timestamp=parse_date(catalog.EXAMPLE_USER_OPERATION_TIMESTAMP),
        operation_id=catalog.EXAMPLE_USER_OPERATION_ID,
        operation_type=catalog.EXAMPLE_USER_OPERATION_TYPE,
        entity_type=catalog.EXAMPLE_USER_OPERATION_ENTITY,
        property=catalog.EXAMPLE_USER_OPERATION_PROPERTY,
        org_value=catalog.EXAMPLE_USER_OPERATION_ORG_VALUE,
        new_value=catalog.EXAMPLE_USER_OPERATION_NEW_VALUE,
    )


def create_user_operation_log_entries() -> list[UserOperationLogEntry]:
    return [create_user_operation_log_entry()]

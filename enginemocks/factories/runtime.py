"""Factories for runtime entities: instances, executions, variables, jobs."""

from enginemocks import catalog
from enginemocks.builders import MockJobBuilder, MockVariableInstanceBuilder
from enginemocks.core.models import (
    CaseExecution,
    CaseInstance,
    EventSubscription,
    Execution,
    Incident,
    Job,
    JobDefinition,
    ProcessInstance,
    VariableInstance,
)
from enginemocks.core.values import TypedValue
from enginemocks.dates import parse_date

# ============================================================================
# Process instances and executions
# ============================================================================


def create_mock_instance() -> ProcessInstance:
    return ProcessInstance(
        id=catalog.EXAMPLE_PROCESS_INSTANCE_ID,
        business_key=catalog.EXAMPLE_PROCESS_INSTANCE_BUSINESS_KEY,
        case_instance_id=catalog.EXAMPLE_CASE_INSTANCE_ID,
        process_definition_id=catalog.EXAMPLE_PROCESS_DEFINITION_ID,
        process_instance_id=catalog.EXAMPLE_PROCESS_INSTANCE_ID,
        suspended=catalog.EXAMPLE_PROCESS_INSTANCE_IS_SUSPENDED,
        ended=catalog.EXAMPLE_PROCESS_INSTANCE_IS_ENDED,
    )


def create_another_mock_instance() -> ProcessInstance:
    """A second instance of the example definition with its own id.

    It is not linked to a case instance.
    """
    return ProcessInstance(
        id=catalog.ANOTHER_EXAMPLE_PROCESS_INSTANCE_ID,
        business_key=catalog.EXAMPLE_PROCESS_INSTANCE_BUSINESS_KEY,
        case_instance_id=None,
        process_definition_id=catalog.EXAMPLE_PROCESS_DEFINITION_ID,
        process_instance_id=catalog.ANOTHER_EXAMPLE_PROCESS_INSTANCE_ID,
        suspended=catalog.EXAMPLE_PROCESS_INSTANCE_IS_SUSPENDED,
        ended=catalog.EXAMPLE_PROCESS_INSTANCE_IS_ENDED,
    )


def create_another_mock_process_instance_list() -> list[ProcessInstance]:
    return [create_mock_instance(), create_another_mock_instance()]


def create_mock_execution() -> Execution:
    return Execution(
        id=catalog.EXAMPLE_EXECUTION_ID,
        process_instance_id=catalog.EXAMPLE_PROCESS_INSTANCE_ID,
        ended=catalog.EXAMPLE_EXECUTION_IS_ENDED,
    )


def create_mock_event_subscription() -> EventSubscription:
    return EventSubscription(
        id=catalog.EXAMPLE_EVENT_SUBSCRIPTION_ID,
        event_type=catalog.EXAMPLE_EVENT_SUBSCRIPTION_TYPE,
        event_name=catalog.EXAMPLE_EVENT_SUBSCRIPTION_NAME,
        execution_id=catalog.EXAMPLE_EXECUTION_ID,
        process_instance_id=catalog.EXAMPLE_PROCESS_INSTANCE_ID,
        activity_id=catalog.EXAMPLE_ACTIVITY_ID,
        created=parse_date(catalog.EXAMPLE_EVENT_SUBSCRIPTION_CREATION_DATE),
    )


# ============================================================================
# Variables
# ============================================================================


def mock_variable_instance() -> MockVariableInstanceBuilder:
    return MockVariableInstanceBuilder()


def create_mock_variable_instance(value: TypedValue | None = None) -> VariableInstance:
    """Build the example variable instance.

    Args:
        value: Typed value to use instead of the example string value.
    """
    builder = mock_variable_instance()
    if value is not None:
        builder.with_typed_value(value)
    return builder.build()


# ============================================================================
# Jobs
# ============================================================================


def mock_job() -> MockJobBuilder:
    return MockJobBuilder()


def create_mock_job() -> Job:
    return mock_job().build()


def create_mock_jobs() -> list[Job]:
    return [create_mock_job()]


def create_mock_empty_job_list() -> list[Job]:
    return []


def create_mock_job_definition() -> JobDefinition:
    return JobDefinition(
        id=catalog.EXAMPLE_JOB_DEFINITION_ID,
        process_definition_id=catalog.EXAMPLE_PROCESS_DEFINITION_ID,
        process_definition_key=catalog.EXAMPLE_PROCESS_DEFINITION_KEY,
        job_type=catalog.EXAMPLE_JOB_TYPE,
        job_configuration=catalog.EXAMPLE_JOB_CONFIG,
        activity_id=catalog.EXAMPLE_ACTIVITY_ID,
        suspended=catalog.EXAMPLE_JOB_DEFINITION_IS_SUSPENDED,
    )


def create_mock_job_definitions() -> list[JobDefinition]:
    return [create_mock_job_definition()]


# ============================================================================
# Incidents
# ============================================================================


def create_mock_incident() -> Incident:
    return Incident(
        id=catalog.EXAMPLE_INCIDENT_ID,
        incident_timestamp=parse_date(catalog.EXAMPLE_INCIDENT_TIMESTAMP),
        incident_type=catalog.EXAMPLE_INCIDENT_TYPE,
        execution_id=catalog.EXAMPLE_INCIDENT_EXECUTION_ID,
        activity_id=catalog.EXAMPLE_INCIDENT_ACTIVITY_ID,
        process_instance_id=catalog.EXAMPLE_INCIDENT_PROC_INST_ID,
        process_definition_id=catalog.EXAMPLE_INCIDENT_PROC_DEF_ID,
        cause_incident_id=catalog.EXAMPLE_INCIDENT_CAUSE_INCIDENT_ID,
        root_cause_incident_id=catalog.EXAMPLE_INCIDENT_ROOT_CAUSE_INCIDENT_ID,
        configuration=catalog.EXAMPLE_INCIDENT_CONFIGURATION,
        incident_message=catalog.EXAMPLE_INCIDENT_MESSAGE,
    )


def create_mock_incidents() -> list[Incident]:
    return [create_mock_incident()]


# ============================================================================
# Cases
# ============================================================================


def create_mock_case_instance() -> CaseInstance:
    return CaseInstance(
        id=catalog.EXAMPLE_CASE_INSTANCE_ID,
        business_key=catalog.EXAMPLE_CASE_INSTANCE_BUSINESS_KEY,
        case_definition_id=catalog.EXAMPLE_CASE_INSTANCE_CASE_DEFINITION_ID,
        active=catalog.EXAMPLE_CASE_INSTANCE_IS_ACTIVE,
        completed=catalog.EXAMPLE_CASE_INSTANCE_IS_COMPLETED,
        terminated=catalog.EXAMPLE_CASE_INSTANCE_IS_TERMINATED,
    )


def create_mock_case_instances() -> list[CaseInstance]:
    return [create_mock_case_instance()]


def create_mock_case_execution() -> CaseExecution:
    return CaseExecution(
        id=catalog.EXAMPLE_CASE_EXECUTION_ID,
        case_instance_id=catalog.EXAMPLE_CASE_EXECUTION_CASE_INSTANCE_ID,
        parent_id=catalog.EXAMPLE_CASE_EXECUTION_PARENT_ID,
        case_definition_id=catalog.EXAMPLE_CASE_EXECUTION_CASE_DEFINITION_ID,
        activity_id=catalog.EXAMPLE_CASE_EXECUTION_ACTIVITY_ID,
        activity_name=catalog.EXAMPLE_CASE_EXECUTION_ACTIVITY_NAME,
        active=catalog.EXAMPLE_CASE_EXECUTION_IS_ACTIVE,
        enabled=catalog.EXAMPLE_CASE_EXECUTION_IS_ENABLED,
        disabled=catalog.EXAMPLE_CASE_EXECUTION_IS_DISABLED,
    )


def create_mock_case_executions() -> list[CaseExecution]:
    return [create_mock_case_execution()]

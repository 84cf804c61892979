"""Factories for deployed artifacts and their statistics."""

from enginemocks import catalog
from enginemocks.builders import MockCaseDefinitionBuilder, MockProcessDefinitionBuilder
from enginemocks.core.models import (
    ActivityStatistics,
    CaseDefinition,
    Deployment,
    IncidentStatistics,
    ProcessApplicationInfo,
    ProcessDefinition,
    ProcessDefinitionStatistics,
    Resource,
)
from enginemocks.dates import parse_date


def mock_process_definition() -> MockProcessDefinitionBuilder:
    return MockProcessDefinitionBuilder()


def create_mock_definition() -> ProcessDefinition:
    return mock_process_definition().build()


def create_mock_definitions() -> list[ProcessDefinition]:
    return [create_mock_definition()]


def mock_case_definition() -> MockCaseDefinitionBuilder:
    return MockCaseDefinitionBuilder()


def create_mock_case_definition() -> CaseDefinition:
    return mock_case_definition().build()


def create_mock_case_definitions() -> list[CaseDefinition]:
    return [create_mock_case_definition()]


def create_mock_deployment() -> Deployment:
    return Deployment(
        id=catalog.EXAMPLE_DEPLOYMENT_ID,
        name=catalog.EXAMPLE_DEPLOYMENT_NAME,
        deployment_time=parse_date(catalog.EXAMPLE_DEPLOYMENT_TIME),
    )


def create_mock_deployments() -> list[Deployment]:
    return [create_mock_deployment()]


def create_mock_deployment_resource() -> Resource:
    return Resource(
        id=catalog.EXAMPLE_DEPLOYMENT_RESOURCE_ID,
        name=catalog.EXAMPLE_DEPLOYMENT_RESOURCE_NAME,
        deployment_id=catalog.EXAMPLE_DEPLOYMENT_ID,
    )


def create_mock_deployment_resources() -> list[Resource]:
    return [create_mock_deployment_resource()]


def create_mock_process_application_info() -> ProcessApplicationInfo:
    return ProcessApplicationInfo(
        name=catalog.EXAMPLE_PROCESS_APPLICATION_NAME,
        properties={
            ProcessApplicationInfo.PROP_SERVLET_CONTEXT_PATH: (
                catalog.EXAMPLE_PROCESS_APPLICATION_CONTEXT_PATH
            ),
        },
    )


# ============================================================================
# Statistics
# ============================================================================


def _incident_statistics() -> IncidentStatistics:
    return IncidentStatistics(
        incident_type=catalog.EXAMPLE_INCIDENT_TYPE,
        incident_count=catalog.EXAMPLE_INCIDENT_COUNT,
    )


def _another_incident_statistics() -> IncidentStatistics:
    return IncidentStatistics(
        incident_type=catalog.ANOTHER_EXAMPLE_INCIDENT_TYPE,
        incident_count=catalog.ANOTHER_EXAMPLE_INCIDENT_COUNT,
    )


def create_mock_process_definition_statistics() -> list[ProcessDefinitionStatistics]:
    """Two statistics rows for the example definition and its second version.

    The rows differ in id, failed jobs, instances and incident type so that
    order and distinctness are observable.
    """
    return [
        ProcessDefinitionStatistics(
            id=catalog.EXAMPLE_PROCESS_DEFINITION_ID,
            name=catalog.EXAMPLE_PROCESS_DEFINITION_NAME,
            key=catalog.EXAMPLE_PROCESS_DEFINITION_KEY,
            failed_jobs=catalog.EXAMPLE_FAILED_JOBS,
            instances=catalog.EXAMPLE_INSTANCES,
            incident_statistics=(_incident_statistics(),),
        ),
        ProcessDefinitionStatistics(
            id=catalog.ANOTHER_EXAMPLE_PROCESS_DEFINITION_ID,
            name=catalog.EXAMPLE_PROCESS_DEFINITION_NAME,
            key=catalog.EXAMPLE_PROCESS_DEFINITION_KEY,
            failed_jobs=catalog.ANOTHER_EXAMPLE_FAILED_JOBS,
            instances=catalog.ANOTHER_EXAMPLE_INSTANCES,
            incident_statistics=(_another_incident_statistics(),),
        ),
    ]


def create_mock_activity_statistics() -> list[ActivityStatistics]:
    """Two statistics rows, one per example activity."""
    return [
        ActivityStatistics(
            id=catalog.EXAMPLE_ACTIVITY_ID,
            failed_jobs=catalog.EXAMPLE_FAILED_JOBS,
            instances=catalog.EXAMPLE_INSTANCES,
            incident_statistics=(_incident_statistics(),),
        ),
        ActivityStatistics(
            id=catalog.ANOTHER_EXAMPLE_ACTIVITY_ID,
            failed_jobs=catalog.ANOTHER_EXAMPLE_FAILED_JOBS,
            instances=catalog.ANOTHER_EXAMPLE_INSTANCES,
            incident_statistics=(_another_incident_statistics(),),
        ),
    ]

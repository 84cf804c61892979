"""Factory functions for every double.

``mock_*`` functions return a builder preloaded with the example entity;
``create_mock_*`` functions return finished doubles or lists of them.
"""

from .filters import (
    create_mock_filter,
    create_mock_filter_query,
    create_mock_filters,
    mock_filter,
)
from .history import (
    create_mock_historic_activity_instance,
    create_mock_historic_activity_instances,
    create_mock_historic_activity_statistics,
    create_mock_historic_case_activity_instance,
    create_mock_historic_case_activity_instances,
    create_mock_historic_case_instance,
    create_mock_historic_case_instance_not_closed,
    create_mock_historic_case_instances,
    create_mock_historic_details,
    create_mock_historic_form_field,
    create_mock_historic_form_fields,
    create_mock_historic_incident,
    create_mock_historic_incidents,
    create_mock_historic_process_instance,
    create_mock_historic_process_instance_unfinished,
    create_mock_historic_process_instances,
    create_mock_historic_task_instance,
    create_mock_historic_task_instances,
    create_mock_historic_variable_instance,
    create_mock_historic_variable_update,
    create_mock_running_historic_activity_instance,
    create_mock_running_historic_activity_instances,
    create_mock_running_historic_case_activity_instance,
    create_mock_running_historic_case_activity_instances,
    create_mock_running_historic_case_instances,
    create_mock_running_historic_process_instances,
    create_user_operation_log_entries,
    create_user_operation_log_entry,
    mock_historic_variable_instance,
    mock_historic_variable_update,
)
from .identity import (
    create_mock_authentication,
    create_mock_authorizations,
    create_mock_global_authorization,
    create_mock_global_authorizations,
    create_mock_grant_authorization,
    create_mock_grant_authorizations,
    create_mock_group,
    create_mock_group_update,
    create_mock_groups,
    create_mock_revoke_authorization,
    create_mock_revoke_authorizations,
    create_mock_user,
    create_mock_user_update,
    create_mock_users,
)
from .params import (
    create_mock_due_date,
    create_mock_set_from_list,
)
from .repository import (
    create_mock_activity_statistics,
    create_mock_case_definition,
    create_mock_case_definitions,
    create_mock_definition,
    create_mock_definitions,
    create_mock_deployment,
    create_mock_deployment_resource,
    create_mock_deployment_resources,
    create_mock_deployments,
    create_mock_process_application_info,
    create_mock_process_definition_statistics,
    mock_case_definition,
    mock_process_definition,
)
from .runtime import (
    create_another_mock_instance,
    create_another_mock_process_instance_list,
    create_mock_case_execution,
    create_mock_case_executions,
    create_mock_case_instance,
    create_mock_case_instances,
    create_mock_empty_job_list,
    create_mock_event_subscription,
    create_mock_execution,
    create_mock_incident,
    create_mock_incidents,
    create_mock_instance,
    create_mock_job,
    create_mock_job_definition,
    create_mock_job_definitions,
    create_mock_jobs,
    create_mock_variable_instance,
    mock_job,
    mock_variable_instance,
)
from .tasks import (
    create_another_mock_candidate_group_identity_link,
    create_mock_candidate_group_identity_link,
    create_mock_form_variables,
    create_mock_start_form_data,
    create_mock_start_form_data_using_form_fields_without_form_key,
    create_mock_task,
    create_mock_task_attachment,
    create_mock_task_attachments,
    create_mock_task_comment,
    create_mock_task_comments,
    create_mock_task_form_data,
    create_mock_task_form_data_using_form_fields_without_form_key,
    create_mock_tasks,
    create_mock_user_assignee_identity_link,
    mock_task,
)

__all__ = [
    "create_another_mock_candidate_group_identity_link",
    "create_another_mock_instance",
    "create_another_mock_process_instance_list",
    "create_mock_activity_statistics",
    "create_mock_authentication",
    "create_mock_authorizations",
    "create_mock_candidate_group_identity_link",
    "create_mock_case_definition",
    "create_mock_case_definitions",
    "create_mock_case_execution",
    "create_mock_case_executions",
    "create_mock_case_instance",
    "create_mock_case_instances",
    "create_mock_definition",
    "create_mock_definitions",
    "create_mock_deployment",
    "create_mock_deployment_resource",
    "create_mock_deployment_resources",
    "create_mock_deployments",
    "create_mock_due_date",
    "create_mock_empty_job_list",
    "create_mock_event_subscription",
    "create_mock_execution",
    "create_mock_filter",
    "create_mock_filter_query",
    "create_mock_filters",
    "create_mock_form_variables",
    "create_mock_global_authorization",
    "create_mock_global_authorizations",
    "create_mock_grant_authorization",
    "create_mock_grant_authorizations",
    "create_mock_group",
    "create_mock_group_update",
    "create_mock_groups",
    "create_mock_historic_activity_instance",
    "create_mock_historic_activity_instances",
    "create_mock_historic_activity_statistics",
    "create_mock_historic_case_activity_instance",
    "create_mock_historic_case_activity_instances",
    "create_mock_historic_case_instance",
    "create_mock_historic_case_instance_not_closed",
    "create_mock_historic_case_instances",
    "create_mock_historic_details",
    "create_mock_historic_form_field",
    "create_mock_historic_form_fields",
    "create_mock_historic_incident",
    "create_mock_historic_incidents",
    "create_mock_historic_process_instance",
    "create_mock_historic_process_instance_unfinished",
    "create_mock_historic_process_instances",
    "create_mock_historic_task_instance",
    "create_mock_historic_task_instances",
    "create_mock_historic_variable_instance",
    "create_mock_historic_variable_update",
    "create_mock_incident",
    "create_mock_incidents",
    "create_mock_instance",
    "create_mock_job",
    "create_mock_job_definition",
    "create_mock_job_definitions",
    "create_mock_jobs",
    "create_mock_process_application_info",
    "create_mock_process_definition_statistics",
    "create_mock_revoke_authorization",
    "create_mock_revoke_authorizations",
    "create_mock_running_historic_activity_instance",
    "create_mock_running_historic_activity_instances",
    "create_mock_running_historic_case_activity_instance",
    "create_mock_running_historic_case_activity_instances",
    "create_mock_running_historic_case_instances",
    "create_mock_running_historic_process_instances",
    "create_mock_set_from_list",
    "create_mock_start_form_data",
    "create_mock_start_form_data_using_form_fields_without_form_key",
    "create_mock_task",
    "create_mock_task_attachment",
    "create_mock_task_attachments",
    "create_mock_task_comment",
    "create_mock_task_comments",
    "create_mock_task_form_data",
    "create_mock_task_form_data_using_form_fields_without_form_key",
    "create_mock_tasks",
    "create_mock_user",
    "create_mock_user_assignee_identity_link",
    "create_mock_user_update",
    "create_mock_users",
    "create_mock_variable_instance",
    "create_user_operation_log_entries",
    "create_user_operation_log_entry",
    "mock_case_definition",
    "mock_filter",
    "mock_historic_variable_instance",
    "mock_historic_variable_update",
    "mock_job",
    "mock_process_definition",
    "mock_task",
    "mock_variable_instance",
]

"""Unit tests for the factory functions."""

import os
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import pytest

from enginemocks import catalog, factories
from enginemocks.core.filter import ValidatingFilter, ValidationError
from enginemocks.core.history import HistoricFormField, HistoricVariableUpdate
from enginemocks.core.models import (
    ANY,
    AuthorizationType,
    IdentityLinkType,
    Permission,
    ProcessApplicationInfo,
)
from enginemocks.core.values import STRING, long_value


# ============================================================================
# Referential consistency
# ============================================================================


class TestReferentialConsistency:
    """Ids referenced by one double equal the id of the referenced double."""

    def test_task_references_instance_and_definition(self) -> None:
        task = factories.create_mock_task()

        assert task.process_instance_id == factories.create_mock_instance().id
        assert task.process_definition_id == factories.create_mock_definition().id
        assert task.case_instance_id == factories.create_mock_historic_case_instance().id

    def test_job_references_definition_and_execution(self) -> None:
        job = factories.create_mock_job()

        assert job.process_definition_id == factories.create_mock_definition().id
        assert job.process_definition_key == factories.create_mock_definition().key
        assert job.execution_id == factories.create_mock_execution().id
        assert job.job_definition_id == factories.create_mock_job_definition().id

    def test_definition_references_deployment(self) -> None:
        deployment = factories.create_mock_deployment()

        assert factories.create_mock_definition().deployment_id == deployment.id
        assert factories.create_mock_case_definition().deployment_id == deployment.id
        assert factories.create_mock_deployment_resource().deployment_id == deployment.id

    def test_task_children_reference_task(self) -> None:
        task_id = factories.create_mock_task().id

        assert factories.create_mock_task_comment().task_id == task_id
        assert factories.create_mock_task_attachment().task_id == task_id
        assert factories.create_mock_user_assignee_identity_link().task_id == task_id

    def test_historic_activity_references_runtime(self) -> None:
        activity = factories.create_mock_historic_activity_instance()

        assert activity.process_instance_id == factories.create_mock_instance().id
        assert activity.execution_id == factories.create_mock_execution().id
        assert activity.task_id == factories.create_mock_task().id

    def test_event_subscription_references_execution(self) -> None:
        subscription = factories.create_mock_event_subscription()

        assert subscription.execution_id == factories.create_mock_execution().id
        assert subscription.process_instance_id == factories.create_mock_instance().id

    def test_operation_log_references_task_and_user(self) -> None:
        entry = factories.create_user_operation_log_entry()

        assert entry.task_id == factories.create_mock_task().id
        assert entry.user_id == factories.create_mock_user().id
        assert entry.entity_type == "Task"
        assert entry.operation_type == "Claim"


# ============================================================================
# Unfinished variants
# ============================================================================


class TestUnfinishedVariants:
    def test_finished_process_instance(self) -> None:
        instance = factories.create_mock_historic_process_instance()

        assert instance.end_time == datetime(2013, 4, 23, 13, 42, 43)
        assert instance.duration_in_millis == 2000
        assert instance.start_user_id == "aStartUserId"

    def test_unfinished_process_instance(self) -> None:
        instance = factories.create_mock_historic_process_instance_unfinished()

        assert instance.end_time is None
        assert instance.duration_in_millis is None
        assert instance.start_time == datetime(2013, 4, 23, 13, 42, 43)
        assert instance.start_user_id is None

    def test_running_process_instances(self) -> None:
        instances = factories.create_mock_running_historic_process_instances()

        assert len(instances) == 1
        assert instances[0].end_time is None

    def test_not_closed_case_instance(self) -> None:
        instance = factories.create_mock_historic_case_instance_not_closed()

        assert instance.close_time is None
        assert instance.duration_in_millis is None
        assert instance.active is True
        assert instance.completed is False
        assert instance.terminated is False
        assert instance.closed is False

    def test_running_activity_instance(self) -> None:
        instance = factories.create_mock_running_historic_activity_instance()

        assert instance.end_time is None
        assert instance.duration_in_millis is None
        assert instance.start_time is not None

    def test_running_case_activity_instance(self) -> None:
        instance = factories.create_mock_running_historic_case_activity_instance()

        assert instance.end_time is None
        assert instance.duration_in_millis is None
        assert instance.active is True
        assert instance.completed is False
        assert instance.terminated is False
        assert instance.available is False

    def test_running_lists(self) -> None:
        assert factories.create_mock_running_historic_activity_instances()[0].end_time is None
        assert factories.create_mock_running_historic_case_activity_instances()[0].end_time is None
        assert factories.create_mock_running_historic_case_instances()[0].close_time is None


# ============================================================================
# Statistics
# ============================================================================


class TestStatistics:
    def test_process_definition_statistics_pair(self) -> None:
        rows = factories.create_mock_process_definition_statistics()

        assert len(rows) == 2
        assert (rows[0].id, rows[0].failed_jobs, rows[0].instances) == ("aProcDefId", 42, 123)
        assert (rows[1].id, rows[1].failed_jobs, rows[1].instances) == (
            "aProcessDefinitionId:2",
            43,
            124,
        )
        assert len(rows[0].incident_statistics) == 1
        assert len(rows[1].incident_statistics) == 1
        assert rows[0].incident_statistics[0].incident_type == "anIncidentType"
        assert rows[1].incident_statistics[0].incident_type == "anotherIncidentType"

    def test_nested_incident_statistics_are_full_doubles(self) -> None:
        rows = factories.create_mock_process_definition_statistics()

        assert rows[0].incident_statistics[0].incident_count == 1
        assert rows[1].incident_statistics[0].incident_count == 2

    def test_activity_statistics_pair(self) -> None:
        rows = factories.create_mock_activity_statistics()

        assert [row.id for row in rows] == ["anActivity", "anotherActivity"]
        assert rows[0].failed_jobs != rows[1].failed_jobs

    def test_historic_activity_statistics_pair(self) -> None:
        rows = factories.create_mock_historic_activity_statistics()

        assert [row.instances for row in rows] == [123, 127]
        assert [row.complete_scope for row in rows] == [126, 130]


# ============================================================================
# Identity
# ============================================================================


class TestAuthorizations:
    def test_authorizations_in_order(self) -> None:
        authorizations = factories.create_mock_authorizations()

        assert [a.authorization_type for a in authorizations] == [
            AuthorizationType.GLOBAL,
            AuthorizationType.GRANT,
            AuthorizationType.REVOKE,
        ]

    def test_global_authorization(self) -> None:
        authorization = factories.create_mock_global_authorization()

        assert authorization.user_id == ANY
        assert authorization.permissions == catalog.EXAMPLE_GRANT_PERMISSION_VALUES

    def test_grant_and_revoke_permissions(self) -> None:
        grant = factories.create_mock_grant_authorization()
        revoke = factories.create_mock_revoke_authorization()

        assert grant.user_id == revoke.user_id == catalog.EXAMPLE_USER_ID
        assert grant.permissions == (Permission.NONE, Permission.READ, Permission.UPDATE)
        assert revoke.permissions == (Permission.ALL, Permission.READ, Permission.UPDATE)

    def test_single_type_lists(self) -> None:
        assert len(factories.create_mock_global_authorizations()) == 1
        assert len(factories.create_mock_grant_authorizations()) == 1
        assert len(factories.create_mock_revoke_authorizations()) == 1


class TestUsersAndGroups:
    def test_group_update_has_no_type(self) -> None:
        group = factories.create_mock_group_update()

        assert group.id == factories.create_mock_group().id
        assert group.name == "group1Update"
        assert group.type is None

    def test_user_update_keeps_id_and_password(self) -> None:
        user = factories.create_mock_user_update()

        assert user.id == "userId"
        assert user.first_name == "firstNameUpdate"
        assert user.password == factories.create_mock_user().password

    def test_authentication(self) -> None:
        authentication = factories.create_mock_authentication()

        assert authentication.user_id == "userId"
        assert authentication.group_ids == ()

    def test_identity_links(self) -> None:
        assignee = factories.create_mock_user_assignee_identity_link()
        candidate = factories.create_mock_candidate_group_identity_link()
        another = factories.create_another_mock_candidate_group_identity_link()

        assert assignee.type is IdentityLinkType.ASSIGNEE
        assert assignee.group_id is None
        assert candidate.type is IdentityLinkType.CANDIDATE
        assert (candidate.group_id, another.group_id) == ("groupId1", "groupId2")


# ============================================================================
# Forms and variables
# ============================================================================


class TestForms:
    def test_task_form_data_with_properties(self) -> None:
        form = factories.create_mock_task_form_data()

        assert form.form_key == "aFormKey"
        assert form.form_fields == ()
        assert form.form_properties[0].type.name == "aFormPropertyTypeName"
        assert form.form_properties[0].required is True

    def test_task_form_data_with_fields(self) -> None:
        form = factories.create_mock_task_form_data_using_form_fields_without_form_key()

        assert form.form_key is None
        assert form.form_properties == ()
        assert form.form_fields[0].label == "aFormName"
        assert form.form_fields[0].default_value == "aValue"

    def test_start_form_data_carries_definition(self) -> None:
        definition = factories.create_mock_definition()

        form = factories.create_mock_start_form_data(definition)
        fields_form = factories.create_mock_start_form_data_using_form_fields_without_form_key(
            definition
        )

        assert form.process_definition is definition
        assert fields_form.process_definition is definition
        assert fields_form.form_key is None

    def test_form_variables(self) -> None:
        variables = factories.create_mock_form_variables()
        assert variables == {"aVariableInstanceName": catalog.EXAMPLE_PRIMITIVE_VARIABLE_VALUE}

    def test_variable_instance_with_value(self) -> None:
        variable = factories.create_mock_variable_instance(long_value(10))

        assert variable.value == 10
        assert variable.type_name == "Long"

    def test_variable_instance_default(self) -> None:
        assert factories.create_mock_variable_instance().type_name == STRING

    def test_process_application_info(self) -> None:
        info = factories.create_mock_process_application_info()
        path = info.properties[ProcessApplicationInfo.PROP_SERVLET_CONTEXT_PATH]

        assert path == "http://camunda.org/someContext"


# ============================================================================
# Lists and helpers
# ============================================================================


class TestListFactories:
    def test_historic_details_order(self) -> None:
        details = factories.create_mock_historic_details()

        assert isinstance(details[0], HistoricVariableUpdate)
        assert isinstance(details[1], HistoricFormField)

    def test_instance_pair(self) -> None:
        instances = factories.create_another_mock_process_instance_list()

        assert [i.id for i in instances] == ["aProcInstId", "anotherId"]
        assert instances[1].case_instance_id is None

    def test_empty_job_list(self) -> None:
        assert factories.create_mock_empty_job_list() == []

    @pytest.mark.parametrize(
        "factory",
        [
            factories.create_mock_tasks,
            factories.create_mock_definitions,
            factories.create_mock_case_definitions,
            factories.create_mock_deployments,
            factories.create_mock_deployment_resources,
            factories.create_mock_groups,
            factories.create_mock_users,
            factories.create_mock_jobs,
            factories.create_mock_job_definitions,
            factories.create_mock_incidents,
            factories.create_mock_case_instances,
            factories.create_mock_case_executions,
            factories.create_mock_historic_incidents,
            factories.create_mock_historic_task_instances,
            factories.create_mock_historic_form_fields,
            factories.create_user_operation_log_entries,
            factories.create_mock_task_comments,
            factories.create_mock_task_attachments,
        ],
    )
    def test_single_element_lists(self, factory) -> None:
        assert len(factory()) == 1

    def test_set_from_list(self) -> None:
        ids = factories.create_mock_set_from_list(catalog.EXAMPLE_PROCESS_INSTANCE_ID_LIST_WITH_DUP)
        assert ids == {"aProcInstId", "anotherId"}

    @pytest.mark.parametrize("date_timezone", ["naive", "utc"])
    def test_due_date_is_three_days_ahead(self, fresh_settings: None, date_timezone: str) -> None:
        with patch.dict(os.environ, {"DATE_TIMEZONE": date_timezone}):
            due = factories.create_mock_due_date()
        expected = datetime.now(due.tzinfo) + timedelta(days=3)

        assert (due.tzinfo is timezone.utc) == (date_timezone == "utc")
        assert abs(due - expected) < timedelta(minutes=1)


# ============================================================================
# Filters
# ============================================================================


class TestFilterFactories:
    def test_filter_defaults(self) -> None:
        built = factories.create_mock_filter()

        assert built.id == "aFilterId"
        assert built.resource_type == "Task"
        assert built.query == catalog.EXAMPLE_FILTER_QUERY
        assert built.properties == {"color": "#112233"}

    def test_filters_have_distinct_ids(self) -> None:
        assert [f.id for f in factories.create_mock_filters()] == ["aFilterId", "anotherFilterId"]

    @pytest.mark.parametrize(
        "mutate, message",
        [
            (lambda f: f.set_name(None), "Name must not be null"),
            (lambda f: f.set_name(""), "Name must not be empty"),
            (lambda f: f.set_query(None), "Query must not be null"),
        ],
    )
    def test_validation_scenarios(self, mutate, message: str) -> None:
        built = factories.create_mock_filter()

        assert isinstance(built, ValidatingFilter)
        with pytest.raises(ValidationError) as exc_info:
            mutate(built)
        assert exc_info.value.message == message

    def test_mock_filter_builder_entry_point(self) -> None:
        built = factories.mock_filter().with_name("custom").build()
        assert built.name == "custom"

    def test_filter_query(self) -> None:
        query = factories.create_mock_filter_query()

        assert query.count() == 2
        assert len(query.list()) == 2
        assert query.list()[0].id == "aFilterId"
        assert query.filter_by_id(catalog.NON_EXISTING_ID).single_result() is None
        assert query.filter_by_id(catalog.EXAMPLE_FILTER_ID).single_result().id == "aFilterId"

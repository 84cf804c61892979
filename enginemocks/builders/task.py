"""Builder for task doubles."""

from datetime import datetime
from typing import Any

from enginemocks import catalog
from enginemocks.core.models import DelegationState, Task
from enginemocks.dates import parse_date

from .base import MockBuilder


class MockTaskBuilder(MockBuilder[Task]):
    model = Task

    def defaults(self) -> dict[str, Any]:
        return {
            "id": catalog.EXAMPLE_TASK_ID,
            "name": catalog.EXAMPLE_TASK_NAME,
            "assignee": catalog.EXAMPLE_TASK_ASSIGNEE_NAME,
            "create_time": parse_date(catalog.EXAMPLE_TASK_CREATE_TIME),
            "due_date": parse_date(catalog.EXAMPLE_TASK_DUE_DATE),
            "follow_up_date": parse_date(catalog.EXAMPLE_FOLLOW_UP_DATE),
            "delegation_state": catalog.EXAMPLE_TASK_DELEGATION_STATE,
            "description": catalog.EXAMPLE_TASK_DESCRIPTION,
            "execution_id": catalog.EXAMPLE_TASK_EXECUTION_ID,
            "owner": catalog.EXAMPLE_TASK_OWNER,
            "parent_task_id": catalog.EXAMPLE_TASK_PARENT_TASK_ID,
            "priority": catalog.EXAMPLE_TASK_PRIORITY,
            "process_definition_id": catalog.EXAMPLE_PROCESS_DEFINITION_ID,
            "process_instance_id": catalog.EXAMPLE_PROCESS_INSTANCE_ID,
            "case_definition_id": catalog.EXAMPLE_CASE_DEFINITION_ID,
            "case_instance_id": catalog.EXAMPLE_CASE_INSTANCE_ID,
            "case_execution_id": catalog.EXAMPLE_CASE_EXECUTION_ID,
            "task_definition_key": catalog.EXAMPLE_TASK_DEFINITION_KEY,
            "form_key": catalog.EXAMPLE_FORM_KEY,
            "suspended": catalog.EXAMPLE_TASK_SUSPENSION_STATE,
        }

    def with_id(self, id: str | None) -> "MockTaskBuilder":
        return self._with("id", id)

    def with_name(self, name: str | None) -> "MockTaskBuilder":
        return self._with("name", name)

    def with_assignee(self, assignee: str | None) -> "MockTaskBuilder":
        return self._with("assignee", assignee)

    def with_create_time(self, create_time: datetime | None) -> "MockTaskBuilder":
        return self._with("create_time", create_time)

    def with_due_date(self, due_date: datetime | None) -> "MockTaskBuilder":
        return self._with("due_date", due_date)

    def with_follow_up_date(self, follow_up_date: datetime | None) -> "MockTaskBuilder":
        return self._with("follow_up_date", follow_up_date)

    def with_delegation_state(self, state: DelegationState | None) -> "MockTaskBuilder":
        return self._with("delegation_state", state)

    def with_description(self, description: str | None) -> "MockTaskBuilder":
        return self._with("description", description)

    def with_execution_id(self, execution_id: str | None) -> "MockTaskBuilder":
        return self._with("execution_id", execution_id)

    def with_owner(self, owner: str | None) -> "MockTaskBuilder":
        return self._with("owner", owner)

    def with_parent_task_id(self, parent_task_id: str | None) -> "MockTaskBuilder":
        return self._with("parent_task_id", parent_task_id)

    def with_priority(self, priority: int) -> "MockTaskBuilder":
        return self._with("priority", priority)

    def with_process_definition_id(self, definition_id: str | None) -> "MockTaskBuilder":
        return self._with("process_definition_id", definition_id)

    def with_process_instance_id(self, instance_id: str | None) -> "MockTaskBuilder":
        return self._with("process_instance_id", instance_id)

    def with_case_definition_id(self, definition_id: str | None) -> "MockTaskBuilder":
        return self._with("case_definition_id", definition_id)

    def with_case_instance_id(self, instance_id: str | None) -> "MockTaskBuilder":
        return self._with("case_instance_id", instance_id)

    def with_case_execution_id(self, execution_id: str | None) -> "MockTaskBuilder":
        return self._with("case_execution_id", execution_id)

    def with_task_definition_key(self, key: str | None) -> "MockTaskBuilder":
        return self._with("task_definition_key", key)

    def with_form_key(self, form_key: str | None) -> "MockTaskBuilder":
        return self._with("form_key", form_key)

    def with_suspended(self, suspended: bool) -> "MockTaskBuilder":
        return self._with("suspended", suspended)

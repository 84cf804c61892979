"""Builders for process and case definition doubles."""

from typing import Any

from enginemocks import catalog
from enginemocks.core.models import CaseDefinition, ProcessDefinition

from .base import MockBuilder


class MockProcessDefinitionBuilder(MockBuilder[ProcessDefinition]):
    model = ProcessDefinition

    def defaults(self) -> dict[str, Any]:
        return {
            "id": catalog.EXAMPLE_PROCESS_DEFINITION_ID,
            "key": catalog.EXAMPLE_PROCESS_DEFINITION_KEY,
            "name": catalog.EXAMPLE_PROCESS_DEFINITION_NAME,
            "category": catalog.EXAMPLE_PROCESS_DEFINITION_CATEGORY,
            "description": catalog.EXAMPLE_PROCESS_DEFINITION_DESCRIPTION,
            "version": catalog.EXAMPLE_PROCESS_DEFINITION_VERSION,
            "resource_name": catalog.EXAMPLE_PROCESS_DEFINITION_RESOURCE_NAME,
            "diagram_resource_name": catalog.EXAMPLE_PROCESS_DEFINITION_DIAGRAM_RESOURCE_NAME,
            "deployment_id": catalog.EXAMPLE_DEPLOYMENT_ID,
            "suspended": catalog.EXAMPLE_PROCESS_DEFINITION_IS_SUSPENDED,
        }

    def with_id(self, id: str | None) -> "MockProcessDefinitionBuilder":
        return self._with("id", id)

    def with_key(self, key: str | None) -> "MockProcessDefinitionBuilder":
        return self._with("key", key)

    def with_name(self, name: str | None) -> "MockProcessDefinitionBuilder":
        return self._with("name", name)

    def with_category(self, category: str | None) -> "MockProcessDefinitionBuilder":
        return self._with("category", category)

    def with_description(self, description: str | None) -> "MockProcessDefinitionBuilder":
        return self._with("description", description)

    def with_version(self, version: int) -> "MockProcessDefinitionBuilder":
        return self._with("version", version)

    def with_resource_name(self, resource_name: str | None) -> "MockProcessDefinitionBuilder":
        return self._with("resource_name", resource_name)

    def with_diagram_resource_name(self, name: str | None) -> "MockProcessDefinitionBuilder":
        """Set the diagram resource; None models a definition without a diagram."""
        return self._with("diagram_resource_name", name)

    def with_deployment_id(self, deployment_id: str | None) -> "MockProcessDefinitionBuilder":
        return self._with("deployment_id", deployment_id)

    def with_suspended(self, suspended: bool) -> "MockProcessDefinitionBuilder":
        return self._with("suspended", suspended)


class MockCaseDefinitionBuilder(MockBuilder[CaseDefinition]):
    model = CaseDefinition

    def defaults(self) -> dict[str, Any]:
        return {
            "id": catalog.EXAMPLE_CASE_DEFINITION_ID,
            "key": catalog.EXAMPLE_CASE_DEFINITION_KEY,
            "name": catalog.EXAMPLE_CASE_DEFINITION_NAME,
            "category": catalog.EXAMPLE_CASE_DEFINITION_CATEGORY,
            "description": None,
            "version": catalog.EXAMPLE_CASE_DEFINITION_VERSION,
            "resource_name": catalog.EXAMPLE_CASE_DEFINITION_RESOURCE_NAME,
            "diagram_resource_name": None,
            "deployment_id": catalog.EXAMPLE_DEPLOYMENT_ID,
        }

    def with_id(self, id: str | None) -> "MockCaseDefinitionBuilder":
        return self._with("id", id)

    def with_key(self, key: str | None) -> "MockCaseDefinitionBuilder":
        return self._with("key", key)

    def with_name(self, name: str | None) -> "MockCaseDefinitionBuilder":
        return self._with("name", name)

    def with_category(self, category: str | None) -> "MockCaseDefinitionBuilder":
        return self._with("category", category)

    def with_description(self, description: str | None) -> "MockCaseDefinitionBuilder":
        return self._with("description", description)

    def with_version(self, version: int) -> "MockCaseDefinitionBuilder":
        return self._with("version", version)

    def with_resource_name(self, resource_name: str | None) -> "MockCaseDefinitionBuilder":
        return self._with("resource_name", resource_name)

    def with_diagram_resource_name(self, name: str | None) -> "MockCaseDefinitionBuilder":
        return self._with("diagram_resource_name", name)

    def with_deployment_id(self, deployment_id: str | None) -> "MockCaseDefinitionBuilder":
        return self._with("deployment_id", deployment_id)

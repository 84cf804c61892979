"""Builder for filter doubles."""

from collections.abc import Mapping
from typing import Any

from enginemocks import catalog
from enginemocks.core.filter import Filter, ValidatingFilter
from enginemocks.core.query import TaskQuery

from .base import MockBuilder


class MockFilterBuilder(MockBuilder[Filter]):
    """Builds plain or validating filters.

    The built filter owns a copy of the property mapping, so mutating it
    never touches the catalog.
    """

    model = Filter

    def __init__(self) -> None:
        super().__init__()
        self._validating = False

    def defaults(self) -> dict[str, Any]:
        return {
            "id": catalog.EXAMPLE_FILTER_ID,
            "resource_type": catalog.EXAMPLE_FILTER_RESOURCE_TYPE,
            "name": catalog.EXAMPLE_FILTER_NAME,
            "owner": catalog.EXAMPLE_FILTER_OWNER,
            "query": catalog.EXAMPLE_FILTER_QUERY,
            "properties": catalog.EXAMPLE_FILTER_PROPERTIES,
        }

    def _model(self) -> type[Filter]:
        return ValidatingFilter if self._validating else Filter

    def _prepare(self, fields: dict[str, Any]) -> dict[str, Any]:
        properties = fields["properties"]
        fields["properties"] = dict(properties) if properties is not None else {}
        return fields

    def validating(self) -> "MockFilterBuilder":
        """Build a filter whose name and query mutators reject invalid input."""
        self._validating = True
        return self

    def with_id(self, id: str) -> "MockFilterBuilder":
        return self._with("id", id)

    def with_resource_type(self, resource_type: str) -> "MockFilterBuilder":
        return self._with("resource_type", resource_type)

    def with_name(self, name: str | None) -> "MockFilterBuilder":
        return self._with("name", name)

    def with_owner(self, owner: str | None) -> "MockFilterBuilder":
        return self._with("owner", owner)

    def with_query(self, query: TaskQuery | None) -> "MockFilterBuilder":
        return self._with("query", query)

    def with_properties(self, properties: Mapping[str, Any] | None) -> "MockFilterBuilder":
        return self._with("properties", properties)

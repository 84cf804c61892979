"""Filter doubles.

Unlike the other doubles a Filter is mutable: the API layer renames filters,
changes their owner, query and properties. ``ValidatingFilter`` additionally
rejects the inputs the engine refuses, so error translation in the API layer
can be tested without a validation engine.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, NoReturn

from .query import TaskQuery

logger = logging.getLogger(__name__)


class ValidationError(ValueError):
    """Raised when a filter mutator receives an invalid value."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@dataclass
class Filter:
    """A saved query over a resource type (e.g. tasks).

    Mutators assign unconditionally.
    """

    id: str
    resource_type: str
    name: str | None
    owner: str | None
    query: TaskQuery | None
    properties: dict[str, Any] = field(default_factory=dict)

    def set_name(self, name: str | None) -> "Filter":
        self.name = name
        return self

    def set_owner(self, owner: str | None) -> "Filter":
        self.owner = owner
        return self

    def set_query(self, query: TaskQuery | None) -> "Filter":
        self.query = query
        return self

    def set_properties(self, properties: dict[str, Any] | None) -> "Filter":
        self.properties = dict(properties) if properties is not None else {}
        return self


@dataclass
class ValidatingFilter(Filter):
    """Filter whose name and query mutators validate their input.

    A rejected call raises ValidationError and leaves the filter unchanged.
    """

    def set_name(self, name: str | None) -> "Filter":
        """Set the filter name.

        Raises:
            ValidationError: If name is None or empty.
        """
        if name is None:
            self._reject("Name must not be null")
        if name == "":
            self._reject("Name must not be empty")
        return super().set_name(name)

    def set_query(self, query: TaskQuery | None) -> "Filter":
        """Set the filter query.

        Raises:
            ValidationError: If query is None.
        """
        if query is None:
            self._reject("Query must not be null")
        return super().set_query(query)

    def _reject(self, message: str) -> NoReturn:
        logger.debug(f"Rejected mutation of filter {self.id}: {message}")
        raise ValidationError(message)

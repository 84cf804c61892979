"""Query interfaces the API layer executes against.

These abstract base classes mirror the engine's query objects. The API layer
depends on them; the fakes/ package provides in-memory implementations.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from .filter import Filter

T = TypeVar("T")


class QueryPort(ABC, Generic[T]):
    """Executes a query built up by the caller."""

    @abstractmethod
    def list(self) -> list[T]:
        """Return every matching entity in result order.

        Returns:
            List of matching entities. Empty list if nothing matches.
        """

    @abstractmethod
    def count(self) -> int:
        """Return the number of matching entities."""

    @abstractmethod
    def single_result(self) -> T | None:
        """Return the matching entity.

        Returns:
            The entity, or None if nothing matches.
        """


class FilterQueryPort(QueryPort[Filter]):
    """Query over saved filters."""

    @abstractmethod
    def filter_by_id(self, filter_id: str) -> QueryPort[Filter]:
        """Restrict the query to the filter with the given id.

        Args:
            filter_id: Id of the filter to select.

        Returns:
            A query over at most that one filter.
        """

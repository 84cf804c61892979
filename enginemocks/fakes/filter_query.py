"""Fake FilterQueryPort implementation for testing."""

import logging
from collections.abc import Sequence

from enginemocks import catalog
from enginemocks.core.filter import Filter
from enginemocks.core.ports import FilterQueryPort, QueryPort

logger = logging.getLogger(__name__)


class ScopedFilterQuery(QueryPort[Filter]):
    """A filter query narrowed to one id.

    Scoping is single-level: this query exposes no filter_by_id of its own.
    """

    def __init__(self, filters: Sequence[Filter], filter_id: str, found: bool):
        self.filter_id = filter_id
        self.found = found
        self._filters = tuple(filters) if found else ()

    def count(self) -> int:
        return len(self._filters)

    def single_result(self) -> Filter | None:
        """Return the first filter, or None when the id is unknown."""
        return self._filters[0] if self._filters else None

    def list(self) -> list[Filter]:
        return list(self._filters)


class FakeFilterQuery(FilterQueryPort):
    """In-memory filter query over a fixed list of filters.

    The backing list is fixed at construction. Scoping to ``missing_id``
    yields an empty query; scoping to any other id answers exactly like
    the unscoped query. Every filter_by_id call is recorded for assertions.
    """

    def __init__(
        self, filters: Sequence[Filter], missing_id: str = catalog.NON_EXISTING_ID
    ):
        """Initialize with the backing filters in result order."""
        self.filters: tuple[Filter, ...] = tuple(filters)
        self.missing_id = missing_id
        self.filter_by_id_calls: list[str] = []

    def count(self) -> int:
        return len(self.filters)

    def single_result(self) -> Filter | None:
        """Return the first backing filter, None if there is none."""
        return self.filters[0] if self.filters else None

    def filter_by_id(self, filter_id: str) -> QueryPort[Filter]:
        """Scope the query to one filter id.

        Returns:
            A ScopedFilterQuery; empty if filter_id is the missing id.
        """
        self.filter_by_id_calls.append(filter_id)
        found = filter_id != self.missing_id
        logger.debug(f"Scoped filter query to {filter_id!r} (found={found})")
        return ScopedFilterQuery(self.filters, filter_id, found)

    def reset(self) -> None:
        """Clear recorded calls."""
        self.filter_by_id_calls.clear()

    def list(self) -> list[Filter]:
        return list(self.filters)

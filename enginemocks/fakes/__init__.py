"""In-memory implementations of the query ports.

- FakeFilterQuery: filter query over a fixed list, with a "not found" scope
- ScopedFilterQuery: the query returned by FakeFilterQuery.filter_by_id
"""

from .filter_query import FakeFilterQuery, ScopedFilterQuery

__all__ = [
    "FakeFilterQuery",
    "ScopedFilterQuery",
]

"""Deterministic test doubles for a process engine's domain model.

The doubles stand in for tasks, instances, jobs, historic records, filters,
authorizations and statistics when testing an API layer without an engine.
Ids are shared through the example catalog, so doubles built independently
reference each other consistently.

- core/: the doubles, typed values and query ports (no dependencies)
- catalog: the example values
- builders/: fluent builders for customizable doubles
- factories/: one-call factories for every double
- fakes/: the in-memory filter query
"""

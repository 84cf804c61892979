"""Test suite for enginemocks.

1. core/: doubles, typed values, filter validation and query ports
2. fakes/: the in-memory filter query
3. top level: catalog, builders, factories, configuration and the
   pytest plugin
"""

"""Fluent builders for the customizable doubles.

- MockTaskBuilder: tasks
- MockVariableInstanceBuilder, MockHistoricVariableInstanceBuilder,
  MockHistoricVariableUpdateBuilder: variables
- MockJobBuilder: jobs
- MockProcessDefinitionBuilder, MockCaseDefinitionBuilder: definitions
- MockFilterBuilder: filters, optionally validating
"""

from .base import MockBuilder
from .definitions import MockCaseDefinitionBuilder, MockProcessDefinitionBuilder
from .filter import MockFilterBuilder
from .job import MockJobBuilder
from .task import MockTaskBuilder
from .variables import (
    MockHistoricVariableInstanceBuilder,
    MockHistoricVariableUpdateBuilder,
    MockVariableInstanceBuilder,
)

__all__ = [
    "MockBuilder",
    "MockCaseDefinitionBuilder",
    "MockFilterBuilder",
    "MockHistoricVariableInstanceBuilder",
    "MockHistoricVariableUpdateBuilder",
    "MockJobBuilder",
    "MockProcessDefinitionBuilder",
    "MockTaskBuilder",
    "MockVariableInstanceBuilder",
]

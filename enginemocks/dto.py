"""REST representation of a filter's task query.

The API layer serializes a filter's query as JSON with camelCase keys;
these pydantic models produce that shape from a ``TaskQuery``.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from enginemocks.core.query import TaskQuery, VariableCondition


class VariableQueryParameterDto(BaseModel):
    """A single variable criterion."""

    model_config = ConfigDict(frozen=True)

    name: str
    operator: str
    value: Any

    @classmethod
    def from_condition(cls, condition: VariableCondition) -> "VariableQueryParameterDto":
        return cls(name=condition.name, operator=condition.operator, value=condition.value)


class TaskQueryDto(BaseModel):
    """JSON-facing view of a TaskQuery."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    name: str | None = None
    process_variables: tuple[VariableQueryParameterDto, ...] = Field(default=())
    case_instance_variables: tuple[VariableQueryParameterDto, ...] = Field(default=())
    task_variables: tuple[VariableQueryParameterDto, ...] = Field(default=())

    @classmethod
    def from_query(cls, query: TaskQuery) -> "TaskQueryDto":
        """Build the DTO of a task query."""
        return cls(
            name=query.task_name,
            process_variables=tuple(
                VariableQueryParameterDto.from_condition(c) for c in query.process_variables
            ),
            case_instance_variables=tuple(
                VariableQueryParameterDto.from_condition(c)
                for c in query.case_instance_variables
            ),
            task_variables=tuple(
                VariableQueryParameterDto.from_condition(c) for c in query.task_variables
            ),
        )

    def to_query(self) -> TaskQuery:
        """Rebuild the task query this DTO describes."""
        return TaskQuery(
            task_name=self.name,
            process_variables=tuple(
                VariableCondition(p.name, p.operator, p.value) for p in self.process_variables
            ),
            case_instance_variables=tuple(
                VariableCondition(p.name, p.operator, p.value)
                for p in self.case_instance_variables
            ),
            task_variables=tuple(
                VariableCondition(p.name, p.operator, p.value) for p in self.task_variables
            ),
        )

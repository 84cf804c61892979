"""Builder for job doubles.

Retries and the exception message are independent: a test may build a job
with negative retries and no exception message, or the other way round.
"""

from datetime import datetime
from typing import Any

from enginemocks import catalog
from enginemocks.core.models import Job
from enginemocks.dates import parse_date

from .base import MockBuilder


class MockJobBuilder(MockBuilder[Job]):
    model = Job

    def defaults(self) -> dict[str, Any]:
        return {
            "id": catalog.EXAMPLE_JOB_ID,
            "job_definition_id": catalog.EXAMPLE_JOB_DEFINITION_ID,
            "process_instance_id": catalog.EXAMPLE_PROCESS_INSTANCE_ID,
            "execution_id": catalog.EXAMPLE_EXECUTION_ID,
            "process_definition_id": catalog.EXAMPLE_PROCESS_DEFINITION_ID,
            "process_definition_key": catalog.EXAMPLE_PROCESS_DEFINITION_KEY,
            "retries": catalog.EXAMPLE_JOB_RETRIES,
            "exception_message": catalog.EXAMPLE_JOB_NO_EXCEPTION_MESSAGE,
            "due_date": parse_date(catalog.EXAMPLE_DUE_DATE),
            "suspended": catalog.EXAMPLE_JOB_IS_SUSPENDED,
        }

    def with_id(self, id: str | None) -> "MockJobBuilder":
        return self._with("id", id)

    def with_job_definition_id(self, job_definition_id: str | None) -> "MockJobBuilder":
        return self._with("job_definition_id", job_definition_id)

    def with_process_instance_id(self, process_instance_id: str | None) -> "MockJobBuilder":
        return self._with("process_instance_id", process_instance_id)

    def with_execution_id(self, execution_id: str | None) -> "MockJobBuilder":
        return self._with("execution_id", execution_id)

    def with_process_definition_id(self, definition_id: str | None) -> "MockJobBuilder":
        return self._with("process_definition_id", definition_id)

    def with_process_definition_key(self, definition_key: str | None) -> "MockJobBuilder":
        return self._with("process_definition_key", definition_key)

    def with_retries(self, retries: int) -> "MockJobBuilder":
        return self._with("retries", retries)

    def with_exception_message(self, message: str | None) -> "MockJobBuilder":
        return self._with("exception_message", message)

    def with_due_date(self, due_date: datetime | None) -> "MockJobBuilder":
        return self._with("due_date", due_date)

    def with_suspended(self, suspended: bool) -> "MockJobBuilder":
        return self._with("suspended", suspended)

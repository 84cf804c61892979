"""Helpers for query parameters that are not entities."""

from datetime import datetime, timedelta, timezone

from enginemocks.config import get_settings


def create_mock_set_from_list(values: str) -> set[str]:
    """Split a comma separated id list into a set.

    Example:
        create_mock_set_from_list("a,b,a") == {"a", "b"}
    """
    return set(values.split(","))


def create_mock_due_date() -> datetime:
    """Return a due date three days from now."""
    if get_settings().date_timezone == "utc":
        now = datetime.now(timezone.utc)
    else:
        now = datetime.now()
    return now + timedelta(days=3)

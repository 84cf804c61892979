"""Timestamp parsing for catalog literals.

Every timestamp field of a double is produced from a catalog literal such as
"2013-01-23T13:42:42". The format is taken from Settings so an embedding test
environment can change it through the environment.
"""

from datetime import datetime, timezone

from enginemocks.config import get_settings


def parse_date(literal: str) -> datetime:
    """Parse a catalog timestamp literal.

    Raises:
        ValueError: If the literal does not match the configured format.
    """
    settings = get_settings()
    parsed = datetime.strptime(literal, settings.date_format)
    if settings.date_timezone == "utc":
        return parsed.replace(tzinfo=timezone.utc)
    return parsed

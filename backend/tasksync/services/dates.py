from datetime import datetime, timezone
from typing import Any
from dateutil import parser as dtparser


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def to_timestamp(value: Any) -> datetime:
    """
    Normalize a client-supplied date-like value to an aware UTC datetime.

    Accepts datetimes, ISO-8601 / free-form date strings and epoch
    milliseconds. Values without an offset are taken as UTC, so
    "2024-06-01" means midnight UTC. Raises ValueError when the value
    is missing or cannot be parsed.
    """
    if value is None:
        raise ValueError("date value is required")
    if isinstance(value, bool):
        raise ValueError(f"invalid date value: {value!r}")
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, (int, float)):
        try:
            dt = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError) as e:
            raise ValueError(f"epoch out of range: {value!r}") from e
    elif isinstance(value, str):
        if not value.strip():
            raise ValueError("date value is empty")
        dt = dtparser.parse(value)
    else:
        raise ValueError(f"invalid date value: {value!r}")

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)

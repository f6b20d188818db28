"""Common types and helpers shared across models."""

from collections.abc import Callable
from datetime import UTC, datetime
from typing import TypeAlias

Clock: TypeAlias = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


def to_utc(dt: datetime) -> datetime:
    """Normalize a datetime to UTC. Naive values are taken to be UTC already."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def parse_timestamp(iso_str: str) -> datetime:
    """Parse an ISO-8601 timestamp into a UTC datetime.

    Accepts the trailing "Z" the forecast service emits.
    Raises ValueError for anything else that is not ISO-8601.
    """
    if not isinstance(iso_str, str):
        raise ValueError(f"timestamp must be a string, got {type(iso_str).__name__}")
    value = iso_str.strip()
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    return to_utc(datetime.fromisoformat(value))

"""Timestamp normalization."""

from datetime import UTC, datetime


def as_utc(value: datetime) -> datetime:
    """Interpret a naive datetime as UTC; aware datetimes are returned unchanged."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value

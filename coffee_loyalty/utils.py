"""
utils.py
Identifier parsing and date helpers shared by repositories and services.
"""

from __future__ import annotations

import uuid
from datetime import date, datetime, time, timezone


def utcnow() -> datetime:
    # Keep naive UTC timestamps to match the DB column types/semantics.
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def parse_uuid(value) -> uuid.UUID | None:
    """Return the UUID for a well-formed identifier, otherwise None."""
    if isinstance(value, uuid.UUID):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return uuid.UUID(value.strip())
    except ValueError:
        return None


def is_date_only(value: str) -> bool:
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def parse_datetime(value) -> datetime | None:
    """
    Parse an ISO-8601 date or datetime string into naive UTC.
    A bare date maps to midnight at the start of that day.
    """
    if not isinstance(value, str) or not value.strip():
        return None
    value = value.strip()
    if is_date_only(value):
        d = date.fromisoformat(value)
        return datetime.combine(d, time.min)
    try:
        return to_naive_utc(datetime.fromisoformat(value))
    except ValueError:
        return None


def add_one_year(start: datetime) -> datetime:
    """
    Same calendar day next year; Feb 29 rolls over to Mar 1.
    """
    try:
        return start.replace(year=start.year + 1)
    except ValueError:
        return start.replace(year=start.year + 1, month=3, day=1)


def as_whole_number(value) -> int | None:
    """
    Return value as an int when it is a JSON number without a fractional part.
    Booleans and strings are rejected.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def as_number(value) -> int | float | None:
    """Return value when it is a JSON number; booleans and strings are rejected."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value

"""Calendar-day normalization for mood log dates."""

from datetime import date, datetime, tzinfo
from typing import Iterable, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


class ValidationError(ValueError):
    """Raised when mood input cannot be parsed or is out of range."""


def _parse_iso(value: str) -> date:
    text = value.strip()
    if not text:
        raise ValidationError("Empty date string")
    try:
        if len(text) == 10:
            return date.fromisoformat(text)
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError as e:
        raise ValidationError(f"Invalid date: {value!r}") from e


def normalize_date(value, tz: Optional[tzinfo] = None) -> date:
    """Reduce a date, datetime or ISO string to a calendar day.

    Aware datetimes are converted to ``tz`` first when one is given, so a
    timestamp is attributed to the user's local day rather than UTC's.

    Raises:
        ValidationError: If the value is not a recognizable date.
    """
    if isinstance(value, str):
        value = _parse_iso(value)

    # datetime is a date subclass, check it first
    if isinstance(value, datetime):
        if tz is not None and value.tzinfo is not None:
            value = value.astimezone(tz)
        return value.date()
    if isinstance(value, date):
        return value

    raise ValidationError(f"Unsupported date value: {value!r}")


def normalize_dates(values: Iterable, tz: Optional[tzinfo] = None) -> set[date]:
    """Normalize and dedupe a collection of date-like values."""
    return {normalize_date(v, tz) for v in values}


def get_timezone(name: str) -> ZoneInfo:
    """Resolve an IANA timezone name."""
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValidationError(f"Unknown timezone: {name}") from e


def local_today(tz_name: str = "UTC", now: Optional[datetime] = None) -> date:
    """The user's current calendar day in their timezone.

    This is the only place the wall clock is read; pass ``now`` to pin it.
    """
    tz = get_timezone(tz_name)
    current = now or datetime.now(tz)
    if current.tzinfo is None:
        return current.date()
    return current.astimezone(tz).date()

"""
Helper utilities for prioflow
"""

from datetime import date, datetime, time, timezone
from typing import Any, Optional

from prioflow.core.errors import InvalidDeadlineError


def parse_iso_datetime(value: str) -> datetime:
    """
    Parse an ISO-8601 string into a datetime.

    Accepts what ``datetime.fromisoformat`` accepts on Python 3.11+: date-only
    values ("2026-01-05"), basic and extended forms ("20260105T0930"),
    fractional seconds of any length, and offsets, including a trailing "Z".

    Raises:
        ValueError: If the string is not ISO-8601
    """
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes and convert aware ones to UTC"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_deadline(deadline: Any) -> Optional[datetime]:
    """
    Normalize a caller deadline into an aware UTC datetime.

    Args:
        deadline: datetime, date, ISO-8601 string, or None

    Returns:
        Aware UTC datetime, or None when no deadline is set

    Raises:
        InvalidDeadlineError: If the value cannot be interpreted as a point in time
    """
    if deadline is None:
        return None
    try:
        # datetime is a subclass of date, check it first
        if isinstance(deadline, datetime):
            return ensure_utc(deadline)
        if isinstance(deadline, date):
            return datetime.combine(deadline, time.min, tzinfo=timezone.utc)
        if isinstance(deadline, str):
            return ensure_utc(parse_iso_datetime(deadline))
    except (ValueError, OverflowError) as exc:
        # parses, but the UTC instant falls outside datetime's range
        raise InvalidDeadlineError(deadline) from exc
    raise InvalidDeadlineError(deadline)


def format_deadline(deadline: Any) -> str:
    """Render a caller deadline for display without altering its representation"""
    if deadline is None:
        return "-"
    if isinstance(deadline, (datetime, date)):
        return deadline.isoformat()
    return str(deadline)


__all__ = ["parse_iso_datetime", "ensure_utc", "parse_deadline", "format_deadline"]

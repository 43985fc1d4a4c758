"""
Date helpers for CMS timestamp strings.

CMS fields arrive as ISO 8601 strings ("2024-07-01T10:00:00Z",
"2024-07-01T10:00:00", "2024-07-01"). Values without an offset are
read as UTC.
"""

from __future__ import annotations

from datetime import UTC, datetime


def parse_instant(value: str | None) -> datetime | None:
    """Parse an ISO 8601 string into an aware UTC datetime, or None."""
    if not value or not isinstance(value, str):
        return None

    try:
        dt = datetime.fromisoformat(value.strip())
    except ValueError:
        return None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def to_timestamp(value: str | None) -> float | None:
    """Seconds since epoch for an ISO string, or None when unparseable."""
    dt = parse_instant(value)
    return dt.timestamp() if dt is not None else None


def format_short_date(value: str | None) -> str:
    """Card date, e.g. "Jul 1, 2024"."""
    dt = parse_instant(value)
    if dt is None:
        return ""
    return f"{dt.strftime('%b')} {dt.day}, {dt.year}"


def format_long_date(value: str | None) -> str:
    """Posted date, e.g. "July 1, 2024"."""
    dt = parse_instant(value)
    if dt is None:
        return ""
    return f"{dt.strftime('%B')} {dt.day}, {dt.year}"


def format_clock(value: str | None) -> str:
    """Hour and minute, e.g. "10:00"."""
    dt = parse_instant(value)
    if dt is None:
        return ""
    return dt.strftime("%H:%M")


def format_day(value: str | None) -> str:
    """Slash-separated day, e.g. "2024/07/01"."""
    dt = parse_instant(value)
    if dt is None:
        return ""
    return dt.strftime("%Y/%m/%d")

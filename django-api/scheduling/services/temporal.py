"""Local date-time arithmetic for session scheduling.

All values are naive wall-clock date-times. No timezone conversion happens
here: an explicit offset on input is dropped, not applied.
"""

from datetime import datetime, timedelta

from django.utils.dateparse import parse_datetime


def parse_local(value: str | None) -> datetime | None:
    """Parse a local date-time string, returning None when it is not one."""
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        parsed = parse_datetime(value.strip())
    except ValueError:
        # Well formed but out of range, e.g. month 13.
        return None
    if parsed is None:
        return None
    return parsed.replace(tzinfo=None)


def format_local(value: datetime) -> str:
    return value.isoformat(timespec="minutes")


def add_days(value: datetime, days: int) -> datetime:
    """Add calendar days, keeping the time of day."""
    # Naive datetimes add wall-clock days, so DST shifts never move the hour.
    return value + timedelta(days=days)


def compute_end(start: str | None, duration_minutes: int | None) -> str:
    """Return start + duration as "YYYY-MM-DDTHH:MM", or "" if start is invalid."""
    parsed = parse_local(start)
    if parsed is None:
        return ""
    try:
        end = parsed + timedelta(minutes=duration_minutes or 0)
    except OverflowError:
        return ""
    return format_local(end)

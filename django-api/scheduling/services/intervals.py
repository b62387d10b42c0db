"""Parsing of free-text session intervals such as "15 dias"."""

import re

DEFAULT_INTERVAL_DAYS = 7

_DAYS_PATTERN = re.compile(r"(\d+)\s*(?:dias?|days?)\b", re.IGNORECASE)


def parse_interval_days(text: str | None) -> int:
    """Return the day count of the first "<n> dia(s)/day(s)" in text, or 7."""
    if not isinstance(text, str):
        return DEFAULT_INTERVAL_DAYS
    match = _DAYS_PATTERN.search(text)
    if match is None:
        return DEFAULT_INTERVAL_DAYS
    days = int(match.group(1))
    return days if days > 0 else DEFAULT_INTERVAL_DAYS

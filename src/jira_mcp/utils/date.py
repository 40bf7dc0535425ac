"""Utility functions for date operations."""

import logging
from datetime import datetime, timezone

import dateutil.parser

logger = logging.getLogger("jira-mcp.utils.date")

DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_jira_datetime(value: str | int | None) -> datetime | None:
    """
    Parse a Jira timestamp into an aware UTC datetime.

    The input accepts:
    - None or an empty string
    - Epoch timestamps in milliseconds (an int, or a string of digits)
    - Anything `dateutil.parser` understands (Jira sends
      "2024-01-01T10:00:00.000+0000")

    Zero-valued timestamps (the epoch itself, or year 1) come back as None so
    that callers can omit them.

    Args:
        value: Timestamp as sent by Jira

    Returns:
        The timestamp in UTC, or None if absent, zero-valued or unparsable
    """
    if value is None or value == "":
        return None

    try:
        if isinstance(value, int) or str(value).isdigit():
            parsed = datetime.fromtimestamp(int(value) / 1000, tz=timezone.utc)
        else:
            parsed = dateutil.parser.parse(str(value))
    except (ValueError, TypeError, OverflowError) as e:
        logger.debug(f"Could not parse Jira timestamp '{value}': {e}")
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    parsed = parsed.astimezone(timezone.utc)

    if parsed.year <= 1 or parsed.timestamp() == 0:
        return None
    return parsed


def format_jira_datetime(value: datetime | None) -> str:
    """Render a timestamp as ``YYYY-MM-DD HH:MM:SS`` in UTC, or "" when absent."""
    if value is None:
        return ""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime(DISPLAY_FORMAT)

"""Utility functions for date operations."""

import logging
from datetime import datetime, timezone

import dateutil.parser

logger = logging.getLogger("bitbucket-v1.utils")


def parse_datetime(value: str | int | float | None) -> datetime | None:
    """
    Parse a timestamp returned by the Bitbucket v1 API.

    The value accepts:
    - None or an empty string
    - Epoch timestamp in milliseconds (number or string of digits)
    - Formats supported by `dateutil.parser`, including the v1 style
      ``2013-04-02 11:43:58+00:00``

    Naive results are assumed to be UTC.

    Args:
        value: Raw timestamp

    Returns:
        Timezone-aware datetime, or None if the value is empty or unparsable
    """
    if value is None or value == "":
        return None

    try:
        if isinstance(value, (int, float)) or str(value).isdigit():
            return datetime.fromtimestamp(int(value) / 1000, tz=timezone.utc)
        parsed = dateutil.parser.parse(str(value))
    except (ValueError, TypeError, OverflowError) as e:
        logger.debug(f"Could not parse timestamp '{value}': {str(e)}")
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed

import logging
from datetime import datetime, timezone

log = logging.getLogger(__name__)


def format_timestamp(value: datetime) -> str:
    """Render a timestamp as RFC 3339 with second precision.

    Args:
        value (datetime): The timestamp to format. Naive values are taken to be UTC,
            since SQLite drops the offset when it stores them.

    Returns:
        str: The timestamp in UTC, e.g. "2024-05-01T12:30:00Z".

    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%SZ")

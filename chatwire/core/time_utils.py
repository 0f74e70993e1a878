"""
Timezone-safe datetime utilities.

All timestamps handled by entities are timezone-aware UTC datetimes.
"""
from datetime import datetime, timezone
from typing import Optional, Union


def utc_now() -> datetime:
    """
    Return current UTC datetime with timezone info attached.

    Example:
        >>> now = utc_now()
        >>> now.tzinfo
        datetime.timezone.utc
    """
    return datetime.now(timezone.utc)


def ensure_utc(dt: datetime) -> datetime:
    """
    Convert any datetime to UTC.

    If the datetime is naive (no timezone info), it's assumed to be UTC.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def parse_timestamp(value: Union[str, datetime, int, float, None]) -> Optional[datetime]:
    """
    Parse a wire timestamp into an aware UTC datetime.

    Accepts ISO-8601 strings (a trailing "Z" is allowed), datetimes, and epoch
    milliseconds. None stays None.

    Raises:
        ValueError: If a string is not valid ISO-8601
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return ensure_utc(value)
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return ensure_utc(datetime.fromisoformat(text))


def format_timestamp(dt: Optional[datetime]) -> Optional[str]:
    """Format a datetime as an ISO-8601 UTC string, or None."""
    if dt is None:
        return None
    return ensure_utc(dt).isoformat()

from datetime import datetime, timezone
from typing import Optional, Union

from ..core.exceptions import ClockError


def ensure_utc(dt: Union[datetime, int, float]) -> datetime:
    """
    Ensures a datetime object is timezone-aware and in UTC.
    Unix timestamps are converted. Naive datetimes are assumed to be UTC.
    """
    if isinstance(dt, (int, float)):
        return datetime.fromtimestamp(dt, tz=timezone.utc)

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    else:
        dt = dt.astimezone(timezone.utc)

    return dt


def utc_now_timestamp(now: Optional[datetime] = None) -> int:
    """Returns `now` (default: the current wall clock) as Unix seconds."""
    if now is None:
        now = datetime.now(timezone.utc)
    return int(ensure_utc(now).timestamp())


def month_start_timestamp(year: int, month: int) -> int:
    """
    Returns the Unix timestamp of the first instant of (year, month) in UTC.

    Raises:
        ClockError: If the pair does not describe a valid month.
    """
    try:
        start = datetime(year, month, 1, tzinfo=timezone.utc)
    except (ValueError, OverflowError) as e:
        raise ClockError(f"Cannot build month start for {year}-{month}: {e}") from e
    return int(start.timestamp())

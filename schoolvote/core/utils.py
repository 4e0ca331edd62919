"""General utility functions."""
from datetime import datetime, timezone
from typing import Optional


def to_utc(dt: datetime) -> datetime:
    """Convert datetime to UTC timezone."""
    if dt.tzinfo is None:
        # Assume UTC if no timezone
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def is_within_window(
    start_time: Optional[datetime],
    end_time: Optional[datetime],
    now: Optional[datetime] = None,
) -> bool:
    """
    Check whether ``now`` falls inside a voting window.

    Either bound may be None, meaning the window is open on that side.
    Naive datetimes are treated as UTC.
    """
    now = to_utc(now) if now else datetime.now(timezone.utc)

    if start_time is not None and now < to_utc(start_time):
        return False
    if end_time is not None and now > to_utc(end_time):
        return False
    return True


def percentage(part: int, whole: int) -> float:
    """Return part / whole * 100, or 0.0 when whole is zero."""
    if whole <= 0:
        return 0.0
    return part * 100 / whole

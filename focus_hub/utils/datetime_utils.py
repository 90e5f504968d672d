"""
Timezone-aware datetime utilities.

The store keeps naive UTC timestamps; everything above the repositories works
with aware UTC datetimes. These helpers convert between the two and resolve
calendar days in a caller's timezone.
"""

from datetime import date, datetime, time, timedelta, timezone
from functools import lru_cache
from typing import Optional
from zoneinfo import ZoneInfo, available_timezones

from focus_hub.core.exceptions import ValidationError

# UTC timezone constant
UTC = timezone.utc


def now_utc() -> datetime:
    """
    Get current UTC datetime (timezone-aware).

    Returns:
        datetime: Current UTC time with tzinfo set to UTC
    """
    return datetime.now(UTC)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Ensure datetime is timezone-aware and in UTC.

    Args:
        dt: datetime to convert (can be None, naive, or timezone-aware)

    Returns:
        Optional[datetime]: UTC timezone-aware datetime, or None if input is None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        # Naive datetime - assume UTC
        return dt.replace(tzinfo=UTC)

    return dt.astimezone(UTC)


def to_storage(dt: Optional[datetime]) -> Optional[datetime]:
    """Convert a datetime to the naive UTC form kept in the database."""
    if dt is None:
        return None
    return ensure_utc(dt).replace(tzinfo=None)


@lru_cache(maxsize=1)
def _known_zones() -> frozenset[str]:
    return frozenset(available_timezones())


def resolve_timezone(name: str) -> ZoneInfo:
    """
    Resolve an IANA timezone name.

    Raises:
        ValidationError: If the name is not a known zone
    """
    if not name or name not in _known_zones():
        raise ValidationError("Invalid timezone")
    return ZoneInfo(name)


def local_date(dt: datetime, tz: ZoneInfo) -> date:
    """Calendar date of ``dt`` as observed in ``tz``."""
    return ensure_utc(dt).astimezone(tz).date()


def start_of_local_day(day: date, tz: ZoneInfo) -> datetime:
    """
    UTC instant of local midnight for ``day`` in ``tz``.

    Example:
        >>> start_of_local_day(date(2024, 1, 2), ZoneInfo("Asia/Dhaka"))
        datetime(2024, 1, 1, 18, 0, tzinfo=timezone.utc)
    """
    return datetime.combine(day, time.min, tzinfo=tz).astimezone(UTC)


def local_days_span(first: date, last: date, tz: ZoneInfo, padding_days: int = 1) -> tuple[datetime, datetime]:
    """
    UTC range covering local days ``first`` through ``last`` inclusive.

    The range is widened by ``padding_days`` on each side so that days made
    irregular by DST transitions are fully covered; callers filter by local
    date afterwards.
    """
    pad = timedelta(days=padding_days)
    start = start_of_local_day(first - pad, tz)
    end = start_of_local_day(last + pad + timedelta(days=1), tz)
    return start, end

"""
Rendering of listing results as a flat sequence or day buckets.
"""

from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Iterable, Sequence, TypeVar
from zoneinfo import ZoneInfo

from focus_hub.models.enums import WindowMode
from focus_hub.models.schedule import DayBucket, ScheduledItem
from focus_hub.utils.datetime_utils import ensure_utc, local_date

ItemT = TypeVar("ItemT", bound=ScheduledItem)

DATE_FORMAT = "%Y-%m-%d"


def order_flat(items: Iterable[ItemT], mode: WindowMode) -> list[ItemT]:
    """Sort by start time; ascending for ``next``, descending for ``prev``. Stable for ties."""
    return sorted(
        items,
        key=lambda item: ensure_utc(item.start_time),
        reverse=not mode.ascending,
    )


def bucket_key(item: ScheduledItem, tz: ZoneInfo) -> str:
    """Calendar date of the item's start, as seen in ``tz``."""
    return local_date(item.start_time, tz).strftime(DATE_FORMAT)


def distinct_local_dates(start_times: Iterable, tz: ZoneInfo, mode: WindowMode) -> list[date]:
    """Distinct calendar dates of ``start_times`` in ``tz``, ordered per ``mode``."""
    days = {local_date(start, tz) for start in start_times}
    return sorted(days, reverse=not mode.ascending)


def group_by_day(
    items: Iterable[ItemT],
    tz: ZoneInfo,
    mode: WindowMode,
    only_dates: Sequence[date] | None = None,
    item_model: type[ScheduledItem] = ScheduledItem,
) -> list[DayBucket[ItemT]]:
    """
    Partition items into day buckets.

    Buckets and the items inside each bucket follow the ``mode`` direction.
    When ``only_dates`` is given, items starting on other dates are dropped.
    ``item_model`` parametrizes the bucket type so subclass fields survive
    serialization.
    """
    allowed = {day.strftime(DATE_FORMAT) for day in only_dates} if only_dates is not None else None

    buckets: dict[str, list[ItemT]] = defaultdict(list)
    for item in order_flat(items, mode):
        key = bucket_key(item, tz)
        if allowed is not None and key not in allowed:
            continue
        buckets[key].append(item)

    bucket_model = DayBucket[item_model]
    return [
        bucket_model(date=key, items=buckets[key], count=len(buckets[key]))
        for key in sorted(buckets, reverse=not mode.ascending)
    ]

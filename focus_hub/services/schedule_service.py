"""
Scheduling service for classes and tasks.

Listing runs parse -> validate -> window -> count -> page -> format. Every
selector is validated before the repository is touched. Creating runs
ordering check -> overlap check -> insert, with the owner always supplied by
the caller's authenticated identity.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Generic, Optional, TypeVar
from zoneinfo import ZoneInfo

from focus_hub.core.exceptions import NotFoundError
from focus_hub.core.logger import setup_logger
from focus_hub.interfaces.scheduled_item_repository import IScheduledItemRepository
from focus_hub.models.base import PartialUpdate
from focus_hub.models.enums import ViewMode, WindowMode
from focus_hub.models.schedule import ScheduledItem, ScheduleListResponse, TimeRange
from focus_hub.services.overlap_validator import OverlapValidator, validate_ordering
from focus_hub.services.pagination import PageRequest
from focus_hub.services.time_window import WindowFilter
from focus_hub.services.view_formatter import distinct_local_dates, group_by_day
from focus_hub.utils.datetime_utils import ensure_utc, local_days_span, now_utc, resolve_timezone

logger = setup_logger(__name__)

ItemT = TypeVar("ItemT", bound=ScheduledItem)


@dataclass(frozen=True)
class ScheduleQuery:
    """Validated listing parameters."""

    mode: WindowMode
    view: ViewMode
    timezone: ZoneInfo
    page: PageRequest

    @classmethod
    def parse(
        cls,
        mode: Optional[str] = None,
        view: Optional[str] = None,
        timezone: Optional[str] = None,
        page: Optional[Any] = None,
        limit: Optional[Any] = None,
        *,
        default_timezone: str = "Asia/Dhaka",
        default_page: int = 1,
        default_limit: int = 5,
    ) -> ScheduleQuery:
        """
        Parse raw query parameters.

        Raises:
            ValidationError: For an unknown mode, view or timezone
        """
        return cls(
            mode=WindowMode.parse(mode if mode is not None else WindowMode.NEXT.value),
            view=ViewMode.parse(view if view is not None else ViewMode.FLAT.value),
            timezone=resolve_timezone(timezone if timezone is not None else default_timezone),
            page=PageRequest.from_params(
                page, limit, default_page=default_page, default_limit=default_limit
            ),
        )


class ScheduleService(Generic[ItemT]):
    """Listing, creation, update and deletion of one kind of scheduled item."""

    def __init__(
        self,
        repo: IScheduledItemRepository[ItemT],
        item_model: type[ItemT],
        label: str,
        clock: Callable[[], datetime] = now_utc,
        owner_scoped_delete: bool = True,
    ):
        self.repo = repo
        self.item_model = item_model
        self.label = label
        self.clock = clock
        self.owner_scoped_delete = owner_scoped_delete
        self.overlap_validator = OverlapValidator(repo, label=label)

    # ===========================================
    # Listing
    # ===========================================

    async def list_items(self, owner: str, query: ScheduleQuery) -> ScheduleListResponse[ItemT]:
        window = WindowFilter(owner=owner, mode=query.mode, now=self.clock())

        if query.view is ViewMode.FLAT:
            total_count, items = await self._flat_page(window, query)
        else:
            total_count, items = await self._grouped_page(window, query)

        response_model = ScheduleListResponse[self.item_model]
        return response_model(
            view=query.view,
            mode=query.mode,
            page=query.page.page,
            limit=query.page.limit,
            total_count=total_count,
            total_pages=query.page.total_pages(total_count),
            items=items,
        )

    async def _flat_page(self, window: WindowFilter, query: ScheduleQuery) -> tuple[int, list]:
        total_count = await self.repo.count(window)
        if query.page.offset >= total_count:
            return total_count, []
        items = await self.repo.list(
            window,
            ascending=query.mode.ascending,
            limit=query.page.limit,
            offset=query.page.offset,
        )
        return total_count, items

    async def _grouped_page(self, window: WindowFilter, query: ScheduleQuery) -> tuple[int, list]:
        # Pages are made of calendar days, so both the total and the slice are
        # computed over distinct local dates rather than items.
        tz = query.timezone
        start_times = await self.repo.list_start_times(window)
        dates = distinct_local_dates(start_times, tz, query.mode)
        page_dates = query.page.slice(dates)
        if not page_dates:
            return len(dates), []

        start_from, start_before = local_days_span(min(page_dates), max(page_dates), tz)
        candidates = await self.repo.list_starting_between(
            window, start_from, start_before, ascending=query.mode.ascending
        )
        buckets = group_by_day(
            candidates, tz, query.mode, only_dates=page_dates, item_model=self.item_model
        )
        return len(dates), buckets

    # ===========================================
    # Writes
    # ===========================================

    async def create_item(self, owner: str, payload: TimeRange) -> ItemT:
        """
        Raises:
            ValidationError: If start_time >= end_time
            ConflictError: If the range overlaps one of the owner's items
        """
        fields = payload.model_dump()
        fields["start_time"] = ensure_utc(payload.start_time)
        fields["end_time"] = ensure_utc(payload.end_time)

        await self.overlap_validator.ensure_available(owner, fields["start_time"], fields["end_time"])

        item = await self.repo.create(owner, fields)
        logger.info(f"Created {self.label} {item.id} for {owner}")
        return item

    async def update_item(self, owner: str, item_id: str, update: PartialUpdate) -> ItemT:
        """
        Apply a whitelisted update to an owned item.

        Time ordering is re-validated against the stored values. Overlap with
        other items is not re-checked on update.

        Raises:
            NotFoundError: If the owner has no item with this id
            ValidationError: If the resulting range is empty or inverted
        """
        changes = update.changes()
        current = await self.repo.get(owner, item_id)
        if current is None:
            raise NotFoundError(f"{self.label.capitalize()} {item_id} not found")
        if not changes:
            return current

        if "start_time" in changes or "end_time" in changes:
            start = ensure_utc(changes.get("start_time", current.start_time))
            end = ensure_utc(changes.get("end_time", current.end_time))
            validate_ordering(start, end)
            changes["start_time"] = start
            changes["end_time"] = end

        updated = await self.repo.update(owner, item_id, changes)
        if updated is None:
            raise NotFoundError(f"{self.label.capitalize()} {item_id} not found")
        return updated

    async def delete_item(self, owner: str, item_id: str) -> None:
        """
        Raises:
            NotFoundError: If nothing was deleted
        """
        scope = owner if self.owner_scoped_delete else None
        deleted = await self.repo.delete(item_id, owner=scope)
        if not deleted:
            raise NotFoundError(f"{self.label.capitalize()} {item_id} not found")
        logger.info(f"Deleted {self.label} {item_id} (requested by {owner})")

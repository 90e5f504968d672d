"""
Scheduled item repository interface.

Shared contract for classes and tasks: both are owner-scoped time ranges
listed through a ``WindowFilter``.
Implementations: SQLite (any SQLAlchemy async backend)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Generic, Optional, TypeVar

from focus_hub.models.schedule import ScheduledItem
from focus_hub.services.time_window import WindowFilter

ItemT = TypeVar("ItemT", bound=ScheduledItem)


class IScheduledItemRepository(ABC, Generic[ItemT]):
    """Abstract interface for scheduled item persistence."""

    @abstractmethod
    async def create(self, owner: str, fields: dict[str, Any]) -> ItemT:
        """
        Insert a new item.

        Args:
            owner: Authenticated caller's email
            fields: Validated column values, including start_time/end_time

        Returns:
            Created item with generated id and created_at
        """
        pass

    @abstractmethod
    async def get(self, owner: str, item_id: str) -> Optional[ItemT]:
        """Get an item by id if it belongs to ``owner``."""
        pass

    @abstractmethod
    async def update(self, owner: str, item_id: str, changes: dict[str, Any]) -> Optional[ItemT]:
        """
        Apply whitelisted changes to an owned item.

        Returns:
            Updated item, or None when no owned item matches
        """
        pass

    @abstractmethod
    async def delete(self, item_id: str, owner: Optional[str] = None) -> bool:
        """
        Delete an item by id.

        Args:
            item_id: Item id
            owner: When given, only an item owned by this email is deleted

        Returns:
            True if a row was deleted
        """
        pass

    @abstractmethod
    async def find_overlapping(
        self, owner: str, start_time: datetime, end_time: datetime
    ) -> Optional[ItemT]:
        """Return one owned item with ``start < end_time AND end > start_time``, if any."""
        pass

    @abstractmethod
    async def count(self, window: WindowFilter) -> int:
        """Count items in the window."""
        pass

    @abstractmethod
    async def list(
        self,
        window: WindowFilter,
        ascending: bool = True,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[ItemT]:
        """List items in the window ordered by start_time."""
        pass

    @abstractmethod
    async def list_start_times(self, window: WindowFilter) -> list[datetime]:
        """Start times of every item in the window (used to count calendar days)."""
        pass

    @abstractmethod
    async def list_starting_between(
        self,
        window: WindowFilter,
        start_from: datetime,
        start_before: datetime,
        ascending: bool = True,
    ) -> list[ItemT]:
        """Items in the window whose start_time lies in ``[start_from, start_before)``."""
        pass

"""
Shared shapes for scheduled items (classes and tasks) and their listings.
"""

from datetime import datetime
from typing import Generic, Optional, TypeVar, Union

from pydantic import Field

from focus_hub.models.base import CamelModel
from focus_hub.models.enums import ViewMode, WindowMode


class TimeRange(CamelModel):
    """Start/end pair of a create payload."""

    start_time: datetime = Field(..., description="Start of the half-open interval")
    end_time: datetime = Field(..., description="End of the half-open interval")


class ScheduledItem(CamelModel):
    """Fields every stored class or task has."""

    id: str
    user_email: str
    start_time: datetime
    end_time: datetime
    created_at: datetime
    updated_at: Optional[datetime] = None


ItemT = TypeVar("ItemT", bound=ScheduledItem)


class DayBucket(CamelModel, Generic[ItemT]):
    """Items starting on one calendar day in the requested timezone."""

    date: str = Field(..., description="YYYY-MM-DD")
    items: list[ItemT]
    count: int


class ScheduleListResponse(CamelModel, Generic[ItemT]):
    """One page of a class or task listing."""

    view: ViewMode
    mode: WindowMode
    page: int
    limit: int
    total_count: int
    total_pages: int
    items: Union[list[DayBucket[ItemT]], list[ItemT]]


class DeleteResult(CamelModel):
    deleted_count: int

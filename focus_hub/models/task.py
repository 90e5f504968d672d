"""
Task model definitions.

Tasks are time-boxed to-do items that share the overlap rules of classes.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from focus_hub.models.base import CamelModel, PartialUpdate
from focus_hub.models.enums import Priority
from focus_hub.models.schedule import ScheduledItem, TimeRange


class TaskFields(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=2000)
    subject: Optional[str] = Field(None, max_length=100)
    priority: Priority = Priority.MEDIUM


class TaskCreate(TaskFields, TimeRange):
    """Schema for creating a task."""

    pass


class TaskUpdate(PartialUpdate):
    """Fields a task owner may change. Unknown fields are rejected."""

    non_nullable = frozenset({"title", "priority", "start_time", "end_time"})

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=2000)
    subject: Optional[str] = Field(None, max_length=100)
    priority: Optional[Priority] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None


class TaskItem(ScheduledItem):
    """Stored task."""

    title: str
    description: Optional[str] = None
    subject: Optional[str] = None
    priority: Priority = Priority.MEDIUM

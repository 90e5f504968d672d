"""
Class (timetable entry) model definitions.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from focus_hub.models.base import CamelModel, PartialUpdate
from focus_hub.models.enums import Weekday
from focus_hub.models.schedule import ScheduledItem, TimeRange

HEX_COLOR = r"^#([0-9A-Fa-f]{6})$"


class ClassFields(CamelModel):
    """Descriptive fields of a class; not interpreted by scheduling."""

    subject: str = Field(..., min_length=1, max_length=100)
    instructor: str = Field(..., min_length=1, max_length=100)
    color: str = Field("#3b82f6", pattern=HEX_COLOR)
    day: Optional[Weekday] = Field(None, description="Day-of-week label")
    date: Optional[datetime] = Field(None, description="Calendar date the class belongs to")


class ClassCreate(ClassFields, TimeRange):
    """Schema for creating a class. Any owner field in the payload is ignored."""

    pass


class ClassUpdate(PartialUpdate):
    """Fields a class owner may change. Unknown fields are rejected."""

    non_nullable = frozenset({"subject", "instructor", "color", "start_time", "end_time"})

    subject: Optional[str] = Field(None, min_length=1, max_length=100)
    instructor: Optional[str] = Field(None, min_length=1, max_length=100)
    color: Optional[str] = Field(None, pattern=HEX_COLOR)
    day: Optional[Weekday] = None
    date: Optional[datetime] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None


class ClassItem(ScheduledItem):
    """Stored class."""

    subject: str
    instructor: str
    color: str
    day: Optional[Weekday] = None
    date: Optional[datetime] = None

"""
Enum definitions for the application.

Listing selectors arrive as free-form query strings; ``parse`` turns them into
a closed set of values or raises ``ValidationError``.
"""

from enum import Enum

from focus_hub.core.exceptions import ValidationError


class WindowMode(str, Enum):
    """Which side of "now" a listing covers, judged by an item's end time."""

    NEXT = "next"
    PREV = "prev"

    @classmethod
    def parse(cls, raw: str) -> "WindowMode":
        try:
            return cls((raw or "").strip().lower())
        except ValueError:
            raise ValidationError("Invalid mode query parameter") from None

    @property
    def ascending(self) -> bool:
        """Upcoming items read forward in time, past items backward."""
        return self is WindowMode.NEXT


class ViewMode(str, Enum):
    """How a listing is rendered."""

    FLAT = "flat"
    GROUP = "group"

    @classmethod
    def parse(cls, raw: str) -> "ViewMode":
        try:
            return cls((raw or "").strip().lower())
        except ValueError:
            raise ValidationError("Invalid view query parameter") from None


class Weekday(str, Enum):
    """Day-of-week label carried by classes."""

    SUNDAY = "Sunday"
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"


class Priority(str, Enum):
    """Task priority."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

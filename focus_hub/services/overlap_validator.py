"""Service for detecting scheduling conflicts between items of one owner."""

from __future__ import annotations

from datetime import datetime

from focus_hub.core.exceptions import ConflictError, ValidationError
from focus_hub.interfaces.scheduled_item_repository import IScheduledItemRepository
from focus_hub.utils.datetime_utils import ensure_utc


def validate_ordering(start_time: datetime, end_time: datetime) -> None:
    """Reject empty or inverted ranges."""
    if ensure_utc(start_time) >= ensure_utc(end_time):
        raise ValidationError("End time can not be before start time")


class OverlapValidator:
    """
    Checks a candidate range against the owner's stored items.

    Overlap is half-open (``start < other_end and other_start < end``) and is
    evaluated by the repository's ``find_overlapping`` query.

    The check and the insert that follows are separate store calls, so two
    concurrent creates for the same owner can both pass.
    """

    def __init__(self, repo: IScheduledItemRepository, label: str = "item"):
        self._repo = repo
        self._label = label

    async def ensure_available(self, owner: str, start_time: datetime, end_time: datetime) -> None:
        """
        Raises:
            ValidationError: If ``start_time >= end_time`` (checked first)
            ConflictError: If the range overlaps an item owned by ``owner``
        """
        validate_ordering(start_time, end_time)
        existing = await self._repo.find_overlapping(owner, start_time, end_time)
        if existing is not None:
            raise ConflictError(
                f"It overlaps with another {self._label} schedule",
                conflicting_id=existing.id,
            )

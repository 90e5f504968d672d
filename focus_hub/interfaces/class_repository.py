"""
Class repository interface.
"""

from focus_hub.interfaces.scheduled_item_repository import IScheduledItemRepository
from focus_hub.models.classes import ClassItem


class IClassRepository(IScheduledItemRepository[ClassItem]):
    """Abstract interface for class persistence."""

    pass
